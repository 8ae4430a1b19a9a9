"""
Question file — loads a cached problem from JSON or YAML.

Accepts LeetCode's GraphQL payload as-is: camelCase keys are snake_cased,
and a top-level ``{"data": {"question": {...}}}`` envelope is unwrapped.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from leetgen.core.errors import QuestionError
from leetgen.core.models.question import QuestionData

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _normalize(value: Any) -> Any:
    if isinstance(value, dict):
        return {_snake(str(k)): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    return value


def parse_question(data: Any) -> QuestionData:
    """Validate a raw question payload.

    Raises:
        QuestionError: If the payload is not a question mapping.
    """
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"].get("question", data["data"])
    if not isinstance(data, dict):
        raise QuestionError(f"Expected a question mapping, got {type(data).__name__}")

    normalized = _normalize(data)
    # Ids arrive as numbers from hand-written YAML
    if "question_frontend_id" in normalized:
        normalized["question_frontend_id"] = str(normalized["question_frontend_id"])

    try:
        return QuestionData.model_validate(normalized)
    except Exception as e:
        raise QuestionError(f"Invalid question data: {e}") from e


def load_question(path: Path) -> QuestionData:
    """Load a cached question from a .json, .yaml or .yml file."""
    if not path.is_file():
        raise QuestionError(f"Question file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise QuestionError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise QuestionError(f"Cannot parse {path}: {e}") from e

    question = parse_question(data)
    logger.debug("Loaded question %s from %s", question.title_slug, path)
    return question
