"""
Generator registry — resolves a user-typed language to a generator.

Lookup is a case-insensitive prefix match against each generator's
short name and slug, scanned in registration order; the first match
wins. Registration order is therefore part of the contract: it breaks
ties when an identifier prefixes several generators (``"c"`` → C, not
C++ or C#).
"""

from __future__ import annotations

import logging

from leetgen.lang import languages
from leetgen.lang.base import Generator, as_testable
from leetgen.lang.golang import GoLang
from leetgen.lang.python import Python3Lang

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Ordered collection of generators.

    For every registered generator, resolving its own slug or
    short name returns it. ``register`` refuses a generator that would
    collide with, or be shadowed by, one registered earlier.
    """

    def __init__(self, generators: list[Generator] | None = None):
        self._generators: list[Generator] = []
        for gen in generators or []:
            self.register(gen)

    def register(self, gen: Generator) -> None:
        """Append a generator to the lookup order.

        Raises:
            ValueError: Duplicate slug/short name, or an earlier generator
                already claims this one's slug or short name as a prefix.
        """
        for existing in self._generators:
            if gen.slug == existing.slug or gen.short_name == existing.short_name:
                raise ValueError(f"Duplicate generator: {gen!r} collides with {existing!r}")
        for ident in (gen.slug, gen.short_name):
            shadow = self.resolve(ident)
            if shadow is not None:
                raise ValueError(f"{gen!r} would be shadowed by {shadow!r} for {ident!r}")
        self._generators.append(gen)
        logger.debug("Registered generator: %s", gen.slug)

    def resolve(self, identifier: str) -> Generator | None:
        """First generator whose short name or slug starts with ``identifier``."""
        ident = identifier.strip().lower()
        if not ident:
            return None
        for gen in self._generators:
            if gen.short_name.lower().startswith(ident) or gen.slug.lower().startswith(ident):
                return gen
        return None

    def get(self, slug: str) -> Generator | None:
        """Exact lookup by slug."""
        for gen in self._generators:
            if gen.slug == slug:
                return gen
        return None

    def list_generators(self) -> list[Generator]:
        return list(self._generators)

    def generator_status(self) -> list[dict[str, object]]:
        """Summary of every registered generator, in lookup order."""
        return [
            {
                "name": gen.name,
                "slug": gen.slug,
                "short_name": gen.short_name,
                "testable": as_testable(gen) is not None,
            }
            for gen in self._generators
        ]

    def __len__(self) -> int:
        return len(self._generators)


def default_registry() -> GeneratorRegistry:
    """Registry of every supported language, in lookup order."""
    return GeneratorRegistry(
        [
            languages.c,
            languages.cpp,
            languages.csharp,
            languages.java,
            languages.javascript,
            languages.typescript,
            Python3Lang(),
            GoLang(),
            languages.rust,
            languages.ruby,
            languages.swift,
            languages.kotlin,
            languages.scala,
            languages.dart,
            languages.racket,
        ]
    )
