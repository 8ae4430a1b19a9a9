"""
Config model — the contents of leetgen.yaml.

Loaded once by the config loader and threaded through every call
inside a GenContext. Nothing in the core reads configuration ambiently.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_SITE = "https://leetcode.com"
DEFAULT_FILENAME_TEMPLATE = "{id:0>4}.{slug}"


class LangConfig(BaseModel):
    """Per-language overrides, keyed by generator slug or short name."""

    filename_template: str = ""
    out_dir: str = ""


class CodeConfig(BaseModel):
    """Code generation settings."""

    lang: str = "go"
    filename_template: str = ""
    code_begin_mark: str = "@lc code=begin"
    code_end_mark: str = "@lc code=end"
    langs: dict[str, LangConfig] = Field(default_factory=dict)

    def lang_config(self, slug: str, short_name: str = "") -> LangConfig:
        """Look up the overrides for a generator, slug first."""
        if slug in self.langs:
            return self.langs[slug]
        if short_name and short_name in self.langs:
            return self.langs[short_name]
        return LangConfig()


class Config(BaseModel):
    """Root configuration — loaded from leetgen.yaml."""

    author: str = "Bob"
    site: str = DEFAULT_SITE
    # "attempted": record the last generated problem after every dispatch.
    # "written": record it only when at least one file was actually written.
    record_state: Literal["attempted", "written"] = "attempted"
    code: CodeConfig = Field(default_factory=CodeConfig)
