"""Language generators — one per supported language.

Public re-exports for convenient access.
"""

from leetgen.lang.base import BaseLang, FileOutput, Generator, Testable, as_testable
from leetgen.lang.registry import GeneratorRegistry, default_registry

__all__ = [
    "BaseLang",
    "FileOutput",
    "Generator",
    "GeneratorRegistry",
    "Testable",
    "as_testable",
    "default_registry",
]
