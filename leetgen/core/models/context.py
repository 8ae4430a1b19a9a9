"""
GenContext — everything a generation call needs besides the problem.

Built once per CLI invocation (or per test) and passed explicitly to
the orchestrator, the generators and the file writer.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from leetgen.core.models.config import Config


class GenContext(BaseModel):
    """The generator's view of the world.

    Attributes:
        config:       Loaded configuration.
        project_root: Directory holding leetgen.yaml (or the CWD).
        assume_yes:   Overwrite existing files without asking.
        now:          Timestamp written into file headers.
    """

    config: Config = Field(default_factory=Config)
    project_root: str = "."
    assume_yes: bool = False
    now: datetime = Field(default_factory=datetime.now)

    @property
    def lang(self) -> str:
        """The configured language identifier."""
        return self.config.code.lang

    def out_dir(self, slug: str, short_name: str = "") -> Path:
        """Absolute output directory for a generator.

        Falls back to the configured language identifier when no
        per-language ``out_dir`` is set.
        """
        override = self.config.code.lang_config(slug, short_name).out_dir
        return Path(self.project_root).resolve() / (override or self.lang)
