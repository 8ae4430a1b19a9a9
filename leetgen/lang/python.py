"""
Python3 generator — the Testable language.

Generated solutions import the ``lgsupport`` package (ListNode/TreeNode
helpers and a small example runner). ``generate_library`` copies it next
to the solutions; ``run_test`` executes a solution file, which feeds the
example test cases stored beside it through the runner.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Sequence

from leetgen.core.errors import TestRunFailure
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import QuestionData
from leetgen.lang.base import BaseLang, FileOutput, Testable
from leetgen.lang.modifiers import Modifier, add_code_mark, append, prepend

logger = logging.getLogger(__name__)

LIBRARY_NAME = "lgsupport"
LIBRARY_SOURCE = Path(__file__).parent / "library" / "python" / LIBRARY_NAME
TESTCASES_SUFFIX = ".testcases.txt"

_IMPORTS = f"from typing import *\n\nfrom {LIBRARY_NAME} import *\n\n"
_MAIN = '\n\n\nif __name__ == "__main__":\n    run(globals(), __file__)'

TEST_TIMEOUT = 60


def library_files() -> list[Path]:
    """Support files, relative to the library source directory."""
    return sorted(
        p.relative_to(LIBRARY_SOURCE)
        for p in LIBRARY_SOURCE.rglob("*.py")
        if "__pycache__" not in p.parts
    )


class Python3Lang(BaseLang, Testable):
    """Python3 solutions, runnable against the problem's examples.

    ``generate`` returns the solution file plus, when the problem has
    example test cases, a ``<name>.testcases.txt`` file beside it that
    the ``lgsupport`` runner reads.
    """

    def __init__(self) -> None:
        super().__init__(
            name="Python3",
            slug="python3",
            short_name="py",
            extension="py",
            line_comment="#",
            block_comment_start='"""',
            block_comment_end='"""',
        )

    def escape_block_comment(self, text: str) -> str:
        # The statement sits in a plain string literal
        return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')

    def modifiers(self) -> Sequence[Modifier]:
        return [
            add_code_mark(self.line_comment),
            prepend(_IMPORTS),
            append(_MAIN),
        ]

    def generate(self, q: QuestionData, ctx: GenContext) -> list[FileOutput]:
        files = super().generate(q, ctx)
        testcases = q.example_testcases.strip()
        if testcases:
            base = self.base_filename(q, ctx)
            files.append(FileOutput(path=base + TESTCASES_SUFFIX, content=testcases + "\n"))
        return files

    # ── Library ─────────────────────────────────────────────────

    def _library_dir(self, ctx: GenContext) -> Path:
        return ctx.out_dir(self.slug, self.short_name) / LIBRARY_NAME

    def check_library(self, ctx: GenContext) -> bool:
        target = self._library_dir(ctx)
        return all((target / rel).is_file() for rel in library_files())

    def generate_library(self, ctx: GenContext) -> None:
        target = self._library_dir(ctx)
        for rel in library_files():
            dest = target / rel
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(LIBRARY_SOURCE / rel, dest)
        logger.info("Installed %s support library into %s", self.name, target)

    # ── Tests ───────────────────────────────────────────────────

    def _python_cmd(self) -> str:
        """Resolve the Python interpreter command."""
        return shutil.which("python3") or sys.executable

    def run_test(self, q: QuestionData, ctx: GenContext) -> str:
        out_dir = ctx.out_dir(self.slug, self.short_name)
        solution = out_dir / f"{self.base_filename(q, ctx)}.{self.extension}"
        if not solution.is_file():
            raise TestRunFailure(f"solution file not found: {solution}")

        cmd = [self._python_cmd(), str(solution)]
        logger.info("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=out_dir,
                capture_output=True,
                text=True,
                timeout=TEST_TIMEOUT,
            )
        except subprocess.TimeoutExpired as e:
            raise TestRunFailure(f"test run timed out after {TEST_TIMEOUT}s") from e
        except OSError as e:
            raise TestRunFailure(f"cannot run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            raise TestRunFailure(result.stderr.strip() or f"Exit code {result.returncode}")
        return result.stdout
