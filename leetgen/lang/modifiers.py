"""
Modifiers — ordered text transformations applied to a starter snippet.

A modifier is a pure function ``(code, question, ctx) -> code``. Each
generator declares its own chain as an explicit list; nothing here
assumes a global ordering. Factories return closures so per-language
tokens are bound at declaration time.
"""

from __future__ import annotations

import re
from typing import Callable

from leetgen.core.models.context import GenContext
from leetgen.core.models.question import QuestionData

Modifier = Callable[[str, QuestionData, GenContext], str]

_BLANK_RUN = re.compile(r"\n{3,}")


def add_code_mark(comment_mark: str) -> Modifier:
    """Wrap the code between line-comment begin/end markers."""

    def modifier(code: str, q: QuestionData, ctx: GenContext) -> str:
        code_cfg = ctx.config.code
        return (
            f"{comment_mark} {code_cfg.code_begin_mark}\n\n"
            f"{code}\n\n"
            f"{comment_mark} {code_cfg.code_end_mark}"
        )

    return modifier


def remove_block_comments(start: str, end: str) -> Modifier:
    """Strip ``start ... end`` block comments.

    Line comments (and therefore the code marks) are left alone, so this
    can run after ``add_code_mark``.
    """
    pattern = re.compile(re.escape(start) + r".*?" + re.escape(end) + r"[ \t]*\n?", re.DOTALL)

    def modifier(code: str, q: QuestionData, ctx: GenContext) -> str:
        return _BLANK_RUN.sub("\n\n", pattern.sub("", code))

    return modifier


def prepend(text: str) -> Modifier:
    def modifier(code: str, q: QuestionData, ctx: GenContext) -> str:
        return text + code

    return modifier


def append(text: str) -> Modifier:
    def modifier(code: str, q: QuestionData, ctx: GenContext) -> str:
        return code + text

    return modifier
