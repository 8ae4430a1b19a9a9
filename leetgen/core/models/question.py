"""
QuestionData — the problem metadata every generator renders from.

Fields follow LeetCode's question payload (snake_cased by the question
loader). Besides raw data the model knows how to build the canonical
URLs, render the HTML statement as plain text and resolve a filename
template.
"""

from __future__ import annotations

import html
import re

from pydantic import BaseModel, Field

from leetgen.core.errors import FilenameTemplateError
from leetgen.core.models.config import DEFAULT_SITE


class CodeSnippet(BaseModel):
    """Starter code for one language."""

    lang_slug: str
    code: str = ""
    lang: str = ""


class QuestionData(BaseModel):
    """A single coding-challenge problem."""

    title_slug: str
    question_frontend_id: str
    title: str = ""
    difficulty: str = ""
    content: str = ""
    code_snippets: list[CodeSnippet] = Field(default_factory=list)
    example_testcases: str = ""
    contest_slug: str | None = None

    # ── Identity ─────────────────────────────────────────────────

    def get_title(self) -> str:
        return self.title or self.title_slug

    def is_contest(self) -> bool:
        return bool(self.contest_slug)

    def url(self, site: str = DEFAULT_SITE) -> str:
        """Canonical problem URL."""
        return f"{site.rstrip('/')}/problems/{self.title_slug}/"

    def contest_url(self, site: str = DEFAULT_SITE) -> str:
        """Problem URL inside its contest, empty when not a contest problem."""
        if not self.is_contest():
            return ""
        return f"{site.rstrip('/')}/contest/{self.contest_slug}/problems/{self.title_slug}/"

    # ── Content ──────────────────────────────────────────────────

    def get_code_snippet(self, lang_slug: str) -> str:
        """Starter snippet for a language slug, empty if the problem has none."""
        for snippet in self.code_snippets:
            if snippet.lang_slug == lang_slug:
                return snippet.code
        return ""

    def get_formatted_content(self) -> str:
        """The problem statement as plain text."""
        return _html_to_text(self.content)

    def get_formatted_filename(self, lang_slug: str, template: str) -> str:
        """Resolve a filename template against this problem.

        Placeholders: ``{id}``, ``{slug}``, ``{title}``, ``{lang}``,
        ``{difficulty}``. Standard format specs apply, so ``{id:0>4}``
        zero-pads the frontend id.

        Raises:
            FilenameTemplateError: Unknown placeholder, bad format spec or
                an empty result.
        """
        fields = {
            "id": self.question_frontend_id,
            "slug": self.title_slug,
            "title": self.get_title(),
            "lang": lang_slug,
            "difficulty": self.difficulty.lower(),
        }
        try:
            name = template.format_map(fields)
        except KeyError as e:
            raise FilenameTemplateError(
                f"unknown placeholder {e} in filename template {template!r}"
            ) from e
        except (AttributeError, IndexError, TypeError, ValueError) as e:
            raise FilenameTemplateError(
                f"invalid filename template {template!r}: {e}"
            ) from e

        name = name.strip()
        if not name:
            raise FilenameTemplateError(
                f"filename template {template!r} resolved to an empty name"
            )
        return name


# ── HTML → text ─────────────────────────────────────────────────

_BLOCK_END = re.compile(r"</(p|pre|div|ul|ol|h\d)>", re.IGNORECASE)
_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_LIST_ITEM = re.compile(r"[ \t]*<li[^>]*>", re.IGNORECASE)
_SUPERSCRIPT = re.compile(r"<sup>(.*?)</sup>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")
_BLANK_RUN = re.compile(r"\n{3,}")


def _html_to_text(content: str) -> str:
    if not content:
        return ""
    text = _SUPERSCRIPT.sub(r"^\1", content)
    text = _LINE_BREAK.sub("\n", text)
    text = _LIST_ITEM.sub("- ", text)
    text = _BLOCK_END.sub("\n", text)
    text = _TAG.sub("", text)
    text = html.unescape(text).replace("\xa0", " ").replace("\r\n", "\n")
    lines = [line.rstrip() for line in text.split("\n")]
    return _BLANK_RUN.sub("\n\n", "\n".join(lines)).strip()
