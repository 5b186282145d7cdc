"""
CLI interface for the todo swamp.

Usage:
    swamp < commands.txt
    swamp run commands.txt
    swamp config --init

Input lines:
    add "buy milk" #errands #shop
    done 0
    search milk #shop
"""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .config import SwampConfig, get_config_path, load_config, save_config
from .logging_config import configure_quiet_mode, enable_debug_mode, is_verbose_env
from .runner import run_stream
from .store import TodoList


# Configure quiet mode by default
# Set SWAMP_VERBOSE=1 to enable debug mode via environment
if is_verbose_env():
    enable_debug_mode()
else:
    configure_quiet_mode(quiet=True)


def _version_callback(value: bool):
    if value:
        from importlib.metadata import version
        print(f"swamp {version('todo-swamp')}")
        raise typer.Exit()


def _verbose_callback(value: bool):
    if value:
        enable_debug_mode()


# Global state for CLI options
_config_override: Optional[Path] = None


def _config_callback(value: Optional[Path]):
    global _config_override
    if value is not None:
        _config_override = value


def _get_config_override() -> Optional[Path]:
    return _config_override


app = typer.Typer(
    name="swamp",
    help="Todo list with fuzzy search over descriptions and tags.",
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode=None,
)


def _load_config() -> SwampConfig:
    """Load config, turning invalid config into a clean CLI error."""
    try:
        return load_config(_get_config_override())
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _process(source) -> None:
    config = _load_config()
    todo_list = TodoList(max_precompute_length=config.max_precompute_length)
    try:
        run_stream(
            source,
            todo_list,
            out=sys.stdout,
            err=sys.stderr,
            flush_interval=config.flush_interval,
        )
    except KeyboardInterrupt:
        # click would report this as "Aborted!" with status 1
        raise typer.Exit(130)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option(
        "--verbose", "-v",
        help="Enable debug-level logging to stderr",
        callback=_verbose_callback,
        is_eager=True,
    )] = False,
    version: Annotated[Optional[bool], typer.Option(
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    )] = None,
    config: Annotated[Optional[Path], typer.Option(
        "--config", "-c",
        envvar="SWAMP_CONFIG",
        help="Path to the config file (default: ~/.swamp/swamp.toml)",
        callback=_config_callback,
        is_eager=True,
    )] = None,
):
    """Todo list with fuzzy search over descriptions and tags."""
    # If no subcommand provided, process commands from stdin
    if ctx.invoked_subcommand is None:
        _process(sys.stdin)


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

@app.command()
def run(
    file: Annotated[Optional[Path], typer.Argument(
        help="File of commands, one per line ('-' or omitted for stdin)",
    )] = None,
):
    """
    Process commands and print one result per command.

    \b
    Examples:
        swamp run commands.txt
        echo 'add "buy milk" #shop' | swamp run
    """
    if file is None or str(file) == "-":
        _process(sys.stdin)
        return
    if not file.is_file():
        typer.echo(f"Error: File not found: {file}", err=True)
        raise typer.Exit(1)
    with open(file, encoding="utf-8") as f:
        _process(f)


@app.command()
def config(
    init: Annotated[bool, typer.Option(
        "--init",
        help="Write a config file with default values",
    )] = False,
    output_json: Annotated[bool, typer.Option(
        "--json", "-j",
        help="Output as JSON",
    )] = False,
):
    """
    Show configuration.

    \b
    Examples:
        swamp config             # Show effective config
        swamp config --init      # Create ~/.swamp/swamp.toml
    """
    if init:
        path = get_config_path(_get_config_override())
        if path.exists():
            typer.echo(f"Error: Config already exists: {path}", err=True)
            raise typer.Exit(1)
        save_config(SwampConfig(path=path))
        typer.echo(f"Created {path}")
        return

    cfg = _load_config()
    if output_json:
        result = {"file": str(cfg.path), "exists": cfg.exists(), **cfg.to_dict()}
        typer.echo(json.dumps(result, indent=2))
    else:
        status = "" if cfg.exists() else " (not found, using defaults)"
        typer.echo(f"file: {cfg.path}{status}")
        typer.echo(f"max_precompute_length: {cfg.max_precompute_length}")
        typer.echo(f"flush_interval: {cfg.flush_interval}")


# -----------------------------------------------------------------------------

def main():
    try:
        app()
    except SystemExit:
        raise  # Let typer handle exit codes
    except KeyboardInterrupt:
        raise SystemExit(130)  # Standard exit code for Ctrl+C
    except Exception as e:
        # Log full traceback to file, show clean message to user
        from .errors import log_exception
        log_path = log_exception(e, context="swamp CLI")
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Details logged to {log_path}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
