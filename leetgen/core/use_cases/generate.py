"""
Generate use case — render a problem into the configured language.

This is the top-level orchestrator. Each step gates the next:

    1. resolve the generator for the configured language
    2. require a starter snippet for it
    3. bootstrap the support library (Testable languages only)
    4. render the file outputs
    5. write each output below <project root>/<out dir>
    6. record the LastGenerated pointer

Steps 1-4 fail the whole call before anything touches the disk. In
step 5 a failed write is logged and only that output is skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from leetgen.core.errors import LanguageUnsupported, SnippetMissing
from leetgen.core.models.context import GenContext
from leetgen.core.models.question import QuestionData
from leetgen.core.models.state import LastGeneratedQuestion
from leetgen.core.persistence.state_file import StateStore
from leetgen.core.services.bootstrap import ensure_library
from leetgen.core.services.file_writer import ConfirmFn, try_write
from leetgen.lang.base import FileOutput, Generator
from leetgen.lang.registry import GeneratorRegistry, default_registry

logger = logging.getLogger(__name__)


def resolve_generator(ctx: GenContext, registry: GeneratorRegistry | None = None) -> Generator:
    """Generator for the configured language.

    Raises:
        LanguageUnsupported: No generator matches.
    """
    if registry is None:
        registry = default_registry()
    gen = registry.resolve(ctx.lang)
    if gen is None:
        raise LanguageUnsupported(ctx.lang)
    return gen


def generate(
    q: QuestionData,
    ctx: GenContext,
    registry: GeneratorRegistry | None = None,
    confirm: ConfirmFn | None = None,
    state_path: Path | None = None,
) -> list[FileOutput]:
    """Generate, write and record the scaffold for one problem.

    Args:
        q: The problem.
        ctx: Configuration, project root and overwrite policy.
        registry: Optional generator registry (default: all languages).
        confirm: Conflict strategy for existing files (default: prompt).
        state_path: Optional override for the state file location.

    Returns:
        The outputs with absolute paths and their ``created`` flags.

    Raises:
        LanguageUnsupported, SnippetMissing, BootstrapFailure,
        FilenameTemplateError, PromptFailure.
    """
    # ── Resolve ──────────────────────────────────────────────────
    gen = resolve_generator(ctx, registry)

    if not q.get_code_snippet(gen.slug):
        raise SnippetMissing(ctx.lang, q.title_slug)

    # ── Bootstrap ────────────────────────────────────────────────
    ensure_library(gen, ctx)

    # ── Render ───────────────────────────────────────────────────
    files = gen.generate(q, ctx)

    # ── Write ────────────────────────────────────────────────────
    out_dir = ctx.out_dir(gen.slug, gen.short_name)
    for file in files:
        path = out_dir / file.path
        file.path = str(path)
        file.generator = gen
        try:
            file.created = try_write(path, file.content, assume_yes=ctx.assume_yes, confirm=confirm)
        except OSError as e:
            logger.error("Failed to write file %s: %s", path, e)
            file.created = False

    # ── Record ───────────────────────────────────────────────────
    if ctx.config.record_state == "written" and not any(f.created for f in files):
        logger.info("Nothing written for %s — last generated record unchanged", q.title_slug)
        return files

    store = StateStore(state_path) if state_path is not None else StateStore.for_project(ctx.project_root)
    store.record(
        LastGeneratedQuestion(
            slug=q.title_slug,
            frontend_id=q.question_frontend_id,
            gen=gen.slug,
            lang=ctx.lang,
        ),
    )
    return files
