"""
Domain models — Pydantic types for leetgen.

All models are re-exported here for convenient access:

    from leetgen.core.models import Config, GenContext, QuestionData, State
"""

from leetgen.core.models.config import CodeConfig, Config, LangConfig
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import CodeSnippet, QuestionData
from leetgen.core.models.state import LastGeneratedQuestion, State

__all__ = [
    # config.py
    "CodeConfig",
    "Config",
    "LangConfig",
    # context.py
    "GenContext",
    # question.py
    "CodeSnippet",
    "QuestionData",
    # state.py
    "LastGeneratedQuestion",
    "State",
]
