"""
File writer — conflict-aware writes for generated files.

A missing file is always written. An existing file is overwritten only
when the caller assumes yes or the confirm callback agrees; a declined
overwrite is a normal outcome, not an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import click

from leetgen.core.errors import PromptFailure

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]


def prompt_overwrite(path: Path) -> bool:
    """Ask on the terminal whether to overwrite ``path``. Blocks."""
    return click.confirm(f'File "{path}" already exists, overwrite?', default=False)


def always_yes(path: Path) -> bool:
    return True


def always_no(path: Path) -> bool:
    return False


def try_write(
    path: Path,
    content: str,
    assume_yes: bool = False,
    confirm: ConfirmFn | None = None,
) -> bool:
    """Write ``content`` to ``path`` unless the user declines an overwrite.

    Args:
        path: Absolute target path.
        content: Full file content.
        assume_yes: Overwrite existing files without asking.
        confirm: Conflict strategy, called only for existing files when
            ``assume_yes`` is off. Defaults to an interactive prompt.

    Returns:
        True if the file was written, False if the overwrite was declined.

    Raises:
        PromptFailure: The confirmation could not be obtained.
        OSError: Creating directories or writing the file failed.
    """
    if path.exists() and not assume_yes:
        confirm = confirm or prompt_overwrite
        try:
            write = confirm(path)
        except (click.Abort, EOFError, OSError) as e:
            raise PromptFailure(f"cannot confirm overwrite of {path}: {e or 'aborted'}") from e
        if not write:
            logger.info("Skipped existing file: %s", path)
            return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Generated %s", path)
    return True
