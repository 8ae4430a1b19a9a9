"""
Error taxonomy — everything the core raises derives from LeetgenError.

The core never exits the process. Errors travel back to the caller and
only the CLI decides how to report them and which exit status to use.
Write failures of a single output are the one exception: they are
logged by the orchestrator and surface as ``created = False``.
"""

from __future__ import annotations


class LeetgenError(Exception):
    """Base class for all leetgen errors."""


class LanguageUnsupported(LeetgenError):
    """No registered generator matches the configured language identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"language {identifier!r} is not supported yet, welcome to send a PR"
        )


class SnippetMissing(LeetgenError):
    """The generator resolved, but the problem has no starter snippet for it."""

    def __init__(self, lang: str, question_slug: str):
        self.lang = lang
        self.question_slug = question_slug
        super().__init__(f"no {lang} code snippet found for {question_slug}")


class CapabilityUnsupported(LeetgenError):
    """The generator variant does not provide the requested capability."""


class CapabilityNotImplemented(LeetgenError):
    """The generator declares the capability but has not implemented it."""


class BootstrapFailure(LeetgenError):
    """The support library could not be checked or installed."""


class PromptFailure(LeetgenError):
    """The interactive overwrite confirmation could not be completed."""


class FilenameTemplateError(LeetgenError):
    """A filename template cannot be resolved against the problem metadata."""


class TestRunFailure(LeetgenError):
    """Running the generated code against the example test cases failed."""

    __test__ = False  # keep pytest from collecting this class


class QuestionError(LeetgenError):
    """A cached problem file is missing or malformed."""
