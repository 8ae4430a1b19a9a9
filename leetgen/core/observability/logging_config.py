"""
Logging setup for the CLI.

Called once per invocation by main.py; every module logs through
``logging.getLogger(__name__)``. The console handler writes to stderr so
it never mixes with command output. Warnings and errors show as bare
messages; --verbose and --debug add time and logger name.
LEETGEN_LOG_FILE additionally captures everything at DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LEETGEN_LOG_LEVEL"
LOG_FILE_ENV = "LEETGEN_LOG_FILE"

_FMT_PLAIN = "%(message)s"
_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def cli_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Console level: --debug, --verbose, --quiet, then LEETGEN_LOG_LEVEL, then WARNING."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    name = os.environ.get(LOG_LEVEL_ENV, "").upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def setup_logging(level: int, log_file: str | None = None) -> None:
    """Replace the root handlers with a stderr console and optional DEBUG file."""
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    fmt = _FMT_DETAILED if level <= logging.INFO else _FMT_PLAIN
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FMT_DETAILED))
        handlers.append(file_handler)

    logging.basicConfig(
        level=min(h.level for h in handlers),
        handlers=handlers,
        force=True,
    )
