"""
Test use case — run a generated solution against its example cases.

The language is taken from, in order: an explicit ``lang``, the
LastGenerated record when it points at the same problem, and finally
the configured language. Only Testable languages can run tests.
"""

from __future__ import annotations

import logging
from pathlib import Path

from leetgen.core.errors import CapabilityUnsupported, LanguageUnsupported
from leetgen.core.models.config import Config
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import QuestionData
from leetgen.core.persistence.state_file import StateStore
from leetgen.core.services.bootstrap import ensure_library
from leetgen.lang.base import as_testable
from leetgen.lang.registry import GeneratorRegistry, default_registry

logger = logging.getLogger(__name__)


def pick_language(
    q: QuestionData,
    ctx: GenContext,
    lang: str | None,
    registry: GeneratorRegistry,
    store: StateStore,
) -> str:
    if lang:
        return lang
    last = store.last()
    if not last.is_set or last.slug != q.title_slug:
        return ctx.lang
    # Default output directories are keyed by the identifier used at
    # generate time, not by the generator slug
    if last.lang:
        logger.debug("Using last generated language %s", last.lang)
        return last.lang
    configured = registry.resolve(ctx.lang)
    if configured is not None and configured.slug == last.gen:
        return ctx.lang
    logger.debug("Using last generated generator %s", last.gen)
    return last.gen


def run_tests(
    q: QuestionData,
    ctx: GenContext,
    lang: str | None = None,
    registry: GeneratorRegistry | None = None,
    state_path: Path | None = None,
) -> str:
    """Run the generated solution for ``q`` and return its output.

    Raises:
        LanguageUnsupported: No generator matches the language.
        CapabilityUnsupported: The language cannot run tests.
        BootstrapFailure: The support library could not be installed.
        TestRunFailure: The run itself failed.
    """
    if registry is None:
        registry = default_registry()
    store = StateStore(state_path) if state_path is not None else StateStore.for_project(ctx.project_root)

    identifier = pick_language(q, ctx, lang, registry, store)
    gen = registry.resolve(identifier)
    if gen is None:
        raise LanguageUnsupported(identifier)

    testable = as_testable(gen)
    if testable is None:
        raise CapabilityUnsupported(f"{gen.name} does not support running tests")

    # Output directories default to the language identifier, so keep it
    ctx = ctx.model_copy(update={"config": _with_lang(ctx, identifier)})

    ensure_library(gen, ctx)
    logger.info("Testing %s with %s", q.title_slug, gen.slug)
    return testable.run_test(q, ctx)


def _with_lang(ctx: GenContext, identifier: str) -> Config:
    code = ctx.config.code.model_copy(update={"lang": identifier})
    return ctx.config.model_copy(update={"code": code})
