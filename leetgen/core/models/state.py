"""
State — what leetgen remembers between runs.

Serialized to .leetgen/state.json. Holds exactly one LastGenerated
record; every dispatch that records replaces the whole state.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class LastGeneratedQuestion(BaseModel):
    """Pointer to the most recently generated problem/language pair.

    ``gen`` is the generator slug. ``lang`` is the identifier the user
    configured when generating (``py``, ``golang``); default output
    directories are keyed by it, so ``test`` needs it to find the files.
    Records written before ``lang`` existed leave it empty.
    """

    slug: str = ""
    frontend_id: str = ""
    gen: str = ""
    lang: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.slug and self.gen)


class State(BaseModel):
    """Root state model — serialized to .leetgen/state.json."""

    schema_version: int = 1
    updated_at: str = Field(default_factory=_now_iso)
    last_generated: LastGeneratedQuestion = Field(default_factory=LastGeneratedQuestion)
