"""
Shared pytest fixtures for swamp tests.
"""

import pytest

from swamp.store import TodoList


@pytest.fixture
def todo_list():
    """Create an empty TodoList."""
    return TodoList()


@pytest.fixture
def seeded(todo_list):
    """
    TodoList with two items:
    - 0: "hello world" #tag1 #tag2
    - 1: "goodbye" #tag3
    """
    todo_list.add("hello world", ["tag1", "tag2"])
    todo_list.add("goodbye", ["tag3"])
    return todo_list


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep config and error logs out of the real home directory."""
    monkeypatch.setenv("SWAMP_CONFIG", str(tmp_path / "swamp.toml"))
    monkeypatch.setenv("SWAMP_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("SWAMP_FLUSH_INTERVAL", raising=False)
    monkeypatch.delenv("SWAMP_MAX_PRECOMPUTE_LENGTH", raising=False)
    monkeypatch.delenv("SWAMP_VERBOSE", raising=False)

