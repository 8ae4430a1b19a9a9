"""
LastGenerated store — the single record leetgen keeps per project.

The record lives in .leetgen/state.json below the project root. Nothing
is ever merged into it: ``record`` builds a new State around the new
record and swaps the file in by rename, so a reader sees either the old
record or the new one.

A missing or unreadable file reads as "nothing generated yet". Two
leetgen processes recording at once are not serialized; the later
rename wins.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from leetgen.core.models.state import LastGeneratedQuestion, State

logger = logging.getLogger(__name__)

STATE_DIR = ".leetgen"
STATE_FILE = "state.json"


class StateStore:
    """Reads and replaces the LastGenerated record behind one state file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def for_project(cls, root: Path | str) -> StateStore:
        """The store under a project root."""
        return cls(Path(root).resolve() / STATE_DIR / STATE_FILE)

    def __repr__(self) -> str:
        return f"<StateStore {self.path}>"

    def load(self) -> State:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return State()
        except OSError as e:
            logger.warning("Cannot read state file %s: %s", self.path, e)
            return State()

        try:
            return State.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Ignoring unreadable state file %s (%d errors)", self.path, e.error_count())
            return State()

    def last(self) -> LastGeneratedQuestion:
        """The current record; unset when nothing has been recorded."""
        return self.load().last_generated

    def record(self, last: LastGeneratedQuestion) -> State:
        """Replace the record. Raises OSError when the file cannot be written."""
        state = State(last_generated=last)
        self._replace(state.model_dump_json(indent=2) + "\n")
        logger.info("Recorded last generated: %s (%s)", last.slug, last.gen)
        return state

    def _replace(self, content: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Same directory as the target so the rename never crosses filesystems
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".state_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
