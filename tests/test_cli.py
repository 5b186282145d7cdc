"""
Tests for the swamp command line.
"""

import io
import json

import pytest
from typer.testing import CliRunner

from swamp import cli
from swamp.cli import app

runner = CliRunner()

COMMANDS = 'add "hello world" #tag1 #tag2\nadd "goodbye" #tag3\nsearch hlo good #tag3\n'

OUTPUT = (
    '0 "hello world" #tag1\t#tag2\n'
    '1 "goodbye" #tag3\n'
    '1 "goodbye" #tag3\n'
    '1 "goodbye" #tag3\n'
    '0 "hello world" #tag1\t#tag2\n'
)


@pytest.fixture(autouse=True)
def reset_cli_state(monkeypatch):
    """--config is kept in module state across invocations."""
    monkeypatch.setattr(cli, "_config_override", None)


class TestRun:

    def test_default_reads_stdin(self):
        result = runner.invoke(app, [], input=COMMANDS)
        assert result.exit_code == 0
        assert result.stdout == OUTPUT

    def test_run_stdin(self):
        result = runner.invoke(app, ["run"], input=COMMANDS)
        assert result.exit_code == 0
        assert result.stdout == OUTPUT

    def test_run_dash(self):
        result = runner.invoke(app, ["run", "-"], input=COMMANDS)
        assert result.exit_code == 0
        assert result.stdout == OUTPUT

    def test_run_file(self, tmp_path):
        path = tmp_path / "commands.txt"
        path.write_text(COMMANDS)
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 0
        assert result.stdout == OUTPUT

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_errors_keep_going(self):
        result = runner.invoke(app, ["run"], input='done 3\nadd "x"\n')
        assert result.exit_code == 0
        assert "Error: Index does not exist: 3" in result.output
        assert '0 "x"' in result.output

    def test_config_applied(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[index]\nmax_precompute_length = 0\n")
        result = runner.invoke(app, ["--config", str(path), "run"], input=COMMANDS)
        assert result.exit_code == 0
        assert result.stdout == OUTPUT

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[swamp]\nversion = 99\n")
        result = runner.invoke(app, ["--config", str(path), "run"], input="")
        assert result.exit_code == 1
        assert "newer than supported" in result.output


class TestConfigCommand:

    def test_show_defaults(self, tmp_path):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "not found, using defaults" in result.stdout
        assert "max_precompute_length: 10" in result.stdout

    def test_json(self, tmp_path):
        result = runner.invoke(app, ["config", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["file"] == str(tmp_path / "swamp.toml")
        assert data["exists"] is False
        assert data["output"]["flush_interval"] == 1.0

    def test_init(self, tmp_path):
        result = runner.invoke(app, ["config", "--init"])
        assert result.exit_code == 0
        assert (tmp_path / "swamp.toml").exists()

        result = runner.invoke(app, ["config"])
        assert "not found" not in result.stdout

    def test_init_refuses_overwrite(self, tmp_path):
        (tmp_path / "swamp.toml").write_text("[output]\nflush_interval = 3\n")
        result = runner.invoke(app, ["config", "--init"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "flush_interval = 3" in (tmp_path / "swamp.toml").read_text()


class TestMain:
    """Tests for the main() entry point and its exit codes."""

    @pytest.fixture
    def argv(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["swamp", "run"])
        monkeypatch.setattr("sys.stdin", io.StringIO('add "x"\n'))

    def test_unexpected_error_logged(self, argv, monkeypatch, capsys, tmp_path):
        def fail(*args, **kwargs):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(cli, "run_stream", fail)
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 1

        stderr = capsys.readouterr().err
        assert "Error: disk on fire" in stderr
        log_path = tmp_path / "logs" / "swamp-errors.log"
        assert f"Details logged to {log_path}" in stderr
        text = log_path.read_text()
        assert "swamp CLI" in text
        assert "RuntimeError: disk on fire" in text

    def test_keyboard_interrupt_exits_130(self, argv, monkeypatch, tmp_path):
        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_stream", interrupt)
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 130
        assert not (tmp_path / "logs" / "swamp-errors.log").exists()

    def test_bad_config_type_is_clean_error(self, argv, capsys, tmp_path):
        (tmp_path / "swamp.toml").write_text("index = 5\n")
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 1
        assert "[index] must be a table" in capsys.readouterr().err
        assert not (tmp_path / "logs" / "swamp-errors.log").exists()

    def test_success_exits_zero(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
        assert excinfo.value.code == 0
        assert capsys.readouterr().out == '0 "x"\n'
