"""
Todo Swamp

An in-memory todo list with fuzzy search. Items carry a description and
tags; search terms match any word or tag they are a subsequence of.

Quick Start:
    from swamp import TodoList

    todos = TodoList()
    todos.add("hello world", ["tag1", "tag2"])
    todos.search(words=["hlo"])      # -> [Item(identity=0, ...)]
    todos.mark_done(0)

CLI Usage:
    swamp run commands.txt
    echo 'search hlo #tag' | swamp

Environment Variables:
    SWAMP_CONFIG       - Config file location (default ~/.swamp/swamp.toml)
    SWAMP_VERBOSE      - Set to 1 for debug logging on stderr
    SWAMP_LOG_DIR      - Directory for swamp-errors.log
"""

from .errors import NotFoundError, ParseError, SwampError
from .fuzzy import FuzzyIndex, is_subsequence
from .parser import parse_line
from .render import render_item, render_result
from .runner import run_line, run_query, run_stream
from .search import search
from .store import TodoList
from .types import (
    AddQuery,
    Added,
    DoneQuery,
    Found,
    Item,
    Marked,
    SearchQuery,
)

__version__ = "0.1.0"
__all__ = [
    "TodoList",
    "Item",
    "FuzzyIndex",
    "is_subsequence",
    "search",
    "parse_line",
    "render_item",
    "render_result",
    "run_query",
    "run_line",
    "run_stream",
    "AddQuery",
    "DoneQuery",
    "SearchQuery",
    "Added",
    "Marked",
    "Found",
    "SwampError",
    "NotFoundError",
    "ParseError",
]
