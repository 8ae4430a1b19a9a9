"""
Go generator.

LeetCode's Go snippets carry commented-out ``ListNode``/``TreeNode``
definitions. They are dropped after the code marks are in place, and
the file gets a ``package main`` clause so it compiles on its own.
"""

from __future__ import annotations

from typing import Sequence

from leetgen.lang.base import BaseLang
from leetgen.lang.modifiers import Modifier, add_code_mark, prepend, remove_block_comments


class GoLang(BaseLang):
    def __init__(self) -> None:
        super().__init__(
            name="Go",
            slug="golang",
            short_name="go",
            extension="go",
            line_comment="//",
            block_comment_start="/*",
            block_comment_end="*/",
        )

    def modifiers(self) -> Sequence[Modifier]:
        return [
            add_code_mark(self.line_comment),
            remove_block_comments(self.block_comment_start, self.block_comment_end),
            prepend("package main\n\n"),
        ]
