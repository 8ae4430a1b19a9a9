"""
Generator base — the contract between the orchestrator and languages.

Every supported language is a Generator. The orchestrator only talks to
languages through this protocol: three names to identify them and
``generate()`` to render a problem into one or more FileOutputs.

Languages that can run their generated code also implement Testable.
The orchestrator queries for it with ``as_testable()``; absence simply
means the language has no support library and no test runner.

To add a language:
    1. Instantiate BaseLang (or subclass it for custom behavior)
    2. Declare its modifier chain
    3. Register it in the default registry, after any language whose
       names are a prefix of its own
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from leetgen.core.errors import CapabilityNotImplemented
from leetgen.core.models.config import DEFAULT_FILENAME_TEMPLATE
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import QuestionData
from leetgen.lang.modifiers import Modifier, add_code_mark

logger = logging.getLogger(__name__)

HEADER_TIME_FORMAT = "%Y/%m/%d %H:%M"


@dataclass
class FileOutput:
    """One rendered artifact.

    Attributes:
        path:      Relative path from the language output directory, made
                   absolute by the orchestrator.
        content:   Full file content.
        created:   Whether the file writer actually wrote it.
        generator: The generator that produced it.
    """

    path: str
    content: str
    created: bool = False
    generator: Generator | None = None


class Generator(ABC):
    """Abstract base class for all language generators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name (e.g., 'Python3', 'C++')."""

    @property
    @abstractmethod
    def short_name(self) -> str:
        """Short identifier users type (e.g., 'py', 'cpp')."""

    @property
    @abstractmethod
    def slug(self) -> str:
        """LeetCode language slug (e.g., 'python3', 'golang')."""

    @abstractmethod
    def generate(self, q: QuestionData, ctx: GenContext) -> list[FileOutput]:
        """Render the problem into file outputs with relative paths."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} slug={self.slug!r}>"


class Testable(ABC):
    """Capability of languages that can run their generated code.

    ``check_library`` must be side-effect free. ``generate_library``
    copies the static support files into the project; the bootstrap
    coordinator calls it at most once per dispatch.
    """

    @abstractmethod
    def check_library(self, ctx: GenContext) -> bool:
        """Return True if the support library is installed."""

    @abstractmethod
    def generate_library(self, ctx: GenContext) -> None:
        """Copy the support library into the project. Raises on failure."""

    def run_test(self, q: QuestionData, ctx: GenContext) -> str:
        """Run the generated code against the problem's example cases.

        Returns the test output. Raises TestRunFailure when the run fails.
        """
        raise CapabilityNotImplemented(f"{self!r} cannot run tests yet")


def as_testable(gen: Generator) -> Testable | None:
    """Return the generator's Testable view, or None if it has none."""
    return gen if isinstance(gen, Testable) else None


class BaseLang(Generator):
    """A language described by its formatting facts.

    Most languages need nothing more than these facts and the default
    modifier chain; subclasses override ``modifiers()`` or ``generate()``.
    """

    def __init__(
        self,
        name: str,
        slug: str,
        short_name: str,
        extension: str,
        line_comment: str,
        block_comment_start: str,
        block_comment_end: str,
    ):
        self._name = name
        self._slug = slug
        self._short_name = short_name
        self.extension = extension
        self.line_comment = line_comment
        self.block_comment_start = block_comment_start
        self.block_comment_end = block_comment_end

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def short_name(self) -> str:
        return self._short_name

    # ── Composition ─────────────────────────────────────────────

    def modifiers(self) -> Sequence[Modifier]:
        """The ordered modifier chain applied to the starter snippet."""
        return [add_code_mark(self.line_comment)]

    def generate_comments(self, q: QuestionData, ctx: GenContext) -> str:
        """Header: attribution, URLs and the statement in a block comment."""
        cfg = ctx.config
        lc = self.line_comment
        content = [
            f"{lc} Created by {cfg.author} at {ctx.now.strftime(HEADER_TIME_FORMAT)}",
            f"{lc} {q.url(cfg.site)}",
        ]
        if q.is_contest():
            content.append(f"{lc} {q.contest_url(cfg.site)}")
        body = f"{q.question_frontend_id}.{q.get_title()} ({q.difficulty})\n\n{q.get_formatted_content()}"
        content += [
            "",
            self.block_comment_start,
            self.escape_block_comment(body),
            self.block_comment_end,
            "",
        ]
        return "\n".join(content)

    def escape_block_comment(self, text: str) -> str:
        """Break comment delimiters in ``text`` so it cannot close the block early.

        A space goes after the first character of each delimiter:
        ``*/`` becomes ``* /`` and ``|#`` becomes ``| #``. Openers are broken
        too since some languages nest block comments.
        """
        for token in dict.fromkeys((self.block_comment_start, self.block_comment_end)):
            text = text.replace(token, f"{token[0]} {token[1:]}")
        return text

    def generate_code(self, q: QuestionData, ctx: GenContext) -> str:
        code = q.get_code_snippet(self.slug)
        for modifier in self.modifiers():
            code = modifier(code, q, ctx)
        return code

    def render(self, q: QuestionData, ctx: GenContext) -> str:
        """Full file content: header, one blank line, code, trailing newline."""
        return self.generate_comments(q, ctx) + "\n" + self.generate_code(q, ctx) + "\n"

    # ── Paths ───────────────────────────────────────────────────

    def filename_template(self, ctx: GenContext) -> str:
        """Per-language template, then the global one, then the default."""
        code_cfg = ctx.config.code
        # Most specific first: a per-language template beats the global one
        return (
            code_cfg.lang_config(self.slug, self.short_name).filename_template
            or code_cfg.filename_template
            or DEFAULT_FILENAME_TEMPLATE
        )

    def base_filename(self, q: QuestionData, ctx: GenContext) -> str:
        return q.get_formatted_filename(self.slug, self.filename_template(ctx))

    def generate(self, q: QuestionData, ctx: GenContext) -> list[FileOutput]:
        content = self.render(q, ctx)
        base = self.base_filename(q, ctx)
        logger.debug("Rendered %s for %s (%d bytes)", self.slug, q.title_slug, len(content))
        return [FileOutput(path=f"{base}.{self.extension}", content=content)]
