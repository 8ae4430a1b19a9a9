"""
Shared test fixtures and configuration.
"""

import logging
from datetime import datetime
from pathlib import Path

import pytest

from leetgen.core.models.config import Config
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import CodeSnippet, QuestionData

FIXED_NOW = datetime(2024, 5, 17, 9, 30)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def question() -> QuestionData:
    """A small Two Sum problem with Python3, Go and C++ snippets."""
    return QuestionData(
        title_slug="two-sum",
        question_frontend_id="1",
        title="Two Sum",
        difficulty="Easy",
        content="<p>Return indices of the two numbers that add up to <code>target</code>.</p>",
        code_snippets=[
            CodeSnippet(
                lang_slug="python3",
                code="class Solution:\n    def twoSum(self, nums: List[int], target: int) -> List[int]:\n        ",
            ),
            CodeSnippet(
                lang_slug="golang",
                code=(
                    "/**\n"
                    " * Definition for singly-linked list.\n"
                    " * type ListNode struct {\n"
                    " *     Val int\n"
                    " *     Next *ListNode\n"
                    " * }\n"
                    " */\n"
                    "func twoSum(nums []int, target int) []int {\n    \n}"
                ),
            ),
            CodeSnippet(lang_slug="cpp", code="class Solution {\n};"),
        ],
        example_testcases="[2,7,11,15]\n9\n[3,2,4]\n6",
    )


@pytest.fixture
def config() -> Config:
    return Config.model_validate({"author": "Alice", "code": {"lang": "py"}})


@pytest.fixture
def gen_ctx(tmp_path: Path, config: Config) -> GenContext:
    """Context rooted in a temp project with a fixed timestamp."""
    return GenContext(config=config, project_root=str(tmp_path), now=FIXED_NOW)


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / ".leetgen" / "state.json"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging calls made by the CLI under test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler).__module__ == "logging":
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
