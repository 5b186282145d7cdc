"""
Logging configuration for swamp.

Quiet by default so that stdout carries only results and stderr only
per-request errors.
"""

import logging
import os
import sys
import warnings


def configure_quiet_mode(quiet: bool = True):
    """
    Configure logging to suppress verbose output.

    Args:
        quiet: If True, only warnings and errors from swamp are shown.
            If False, swamp logs at INFO.
    """
    swamp_logger = logging.getLogger("swamp")
    if quiet:
        warnings.filterwarnings("ignore")
        swamp_logger.setLevel(logging.WARNING)
    else:
        swamp_logger.setLevel(logging.INFO)


def enable_debug_mode():
    """Enable debug-level logging to stderr."""
    # Re-enable warnings
    warnings.filterwarnings("default")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Add stderr handler if not already present
    if not any(isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
               for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        ))
        root_logger.addHandler(handler)

    logging.getLogger("swamp").setLevel(logging.DEBUG)


def is_verbose_env() -> bool:
    """True if SWAMP_VERBOSE=1 is set."""
    return os.environ.get("SWAMP_VERBOSE") == "1"
