"""
Errors for the todo swamp, and error logging for the CLI.

Logs full stack traces for debugging while showing clean messages to users.
"""

import os
import traceback
from datetime import datetime, timezone
from pathlib import Path


class SwampError(Exception):
    """Base class for errors reported per request."""


class NotFoundError(SwampError, LookupError):
    """A request referenced an identity that was never assigned."""

    def __init__(self, identity: int):
        self.identity = identity
        super().__init__(f"Index does not exist: {identity}")


class ParseError(SwampError, ValueError):
    """A command line could not be turned into a request."""

    def __init__(self, message: str, line: str = ""):
        self.line = line
        super().__init__(message)


def _error_log_path() -> Path:
    """Resolve error log path, respecting SWAMP_LOG_DIR."""
    log_dir = os.environ.get("SWAMP_LOG_DIR")
    if log_dir:
        return Path(log_dir) / "swamp-errors.log"
    return Path.home() / ".swamp" / "swamp-errors.log"


def log_exception(exc: Exception, context: str = "") -> Path:
    """
    Log exception with full traceback to file.

    Args:
        exc: The exception that occurred
        context: Optional context string (e.g., command name)

    Returns:
        Path to the error log file
    """
    log_path = _error_log_path()
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(log_path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
        with os.fdopen(fd, "a") as f:
            f.write(f"\n{'='*60}\n")
            f.write(f"[{timestamp}]")
            if context:
                f.write(f" {context}")
            f.write("\n")
            f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    except OSError:
        pass  # Can't write error log; don't crash over it
    return log_path
