"""
leetgen — CLI entrypoint.

Usage:
    python -m leetgen.main --help
    python -m leetgen.main generate two-sum.json --lang py
    python -m leetgen.main test two-sum.json
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from leetgen import __version__
from leetgen.core.observability.logging_config import LOG_FILE_ENV, cli_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="leetgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to leetgen.yaml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """leetgen — code scaffolds for coding-challenge problems."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(cli_level(debug, verbose, quiet), log_file=os.environ.get(LOG_FILE_ENV))


def _build_context(ctx: click.Context, lang: str | None = None, yes: bool = False):
    """Load the project and build the GenContext, or exit with an error."""
    from leetgen.core.config.loader import ConfigError, load_project
    from leetgen.core.models.context import GenContext

    try:
        project = load_project(ctx.obj.get("config_path"))
    except ConfigError as e:
        _fail(str(e))

    config = project.config
    if lang:
        config.code.lang = lang
    return GenContext(config=config, project_root=str(project.root), assume_yes=yes)


def _load_question(path: str):
    from leetgen.core.errors import QuestionError
    from leetgen.core.persistence.question_file import load_question

    try:
        return load_question(Path(path))
    except QuestionError as e:
        _fail(str(e))


def _fail(message: str) -> None:
    click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


# ── Generate ────────────────────────────────────────────────────


@cli.command()
@click.argument("question_file", type=click.Path(exists=False))
@click.option("--lang", "-l", default=None, help="Language (overrides code.lang).")
@click.option("--yes", "-y", is_flag=True, help="Overwrite existing files without asking.")
@click.pass_context
def generate(ctx: click.Context, question_file: str, lang: str | None, yes: bool) -> None:
    """Generate the scaffold for a cached problem file."""
    from leetgen.core.errors import LeetgenError
    from leetgen.core.use_cases.generate import generate as generate_files

    gen_ctx = _build_context(ctx, lang=lang, yes=yes)
    question = _load_question(question_file)

    try:
        files = generate_files(question, gen_ctx)
    except LeetgenError as e:
        _fail(str(e))

    if ctx.obj.get("quiet"):
        return
    for f in files:
        if f.created:
            click.secho(f"✅ {f.path}", fg="green")
        else:
            click.secho(f"⏭️  {f.path} (skipped)", fg="yellow")


# ── Test ────────────────────────────────────────────────────────


@cli.command("test")
@click.argument("question_file", type=click.Path(exists=False))
@click.option("--lang", "-l", default=None, help="Language (default: last generated).")
@click.pass_context
def test_cmd(ctx: click.Context, question_file: str, lang: str | None) -> None:
    """Run a generated solution against the problem's example cases."""
    from leetgen.core.errors import LeetgenError
    from leetgen.core.use_cases.testing import run_tests

    gen_ctx = _build_context(ctx)
    question = _load_question(question_file)

    try:
        output = run_tests(question, gen_ctx, lang=lang)
    except LeetgenError as e:
        _fail(str(e))

    click.echo(output, nl=False)


# ── Inspect ─────────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def langs(as_json: bool) -> None:
    """List supported languages in lookup order."""
    from leetgen.lang.registry import default_registry

    status = default_registry().generator_status()
    if as_json:
        click.echo(json.dumps(status, indent=2))
        return

    click.secho("🗂️  Supported languages:", fg="cyan", bold=True)
    for entry in status:
        testable = "  🧪 testable" if entry["testable"] else ""
        click.echo(f"   • {entry['name']:<11} {entry['slug']:<11} ({entry['short_name']}){testable}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def last(ctx: click.Context, as_json: bool) -> None:
    """Show the last generated problem."""
    from leetgen.core.persistence.state_file import StateStore

    gen_ctx = _build_context(ctx)
    record = StateStore.for_project(gen_ctx.project_root).last()

    if as_json:
        click.echo(json.dumps(record.model_dump(), indent=2))
        return

    if not record.is_set:
        click.secho("Nothing generated yet", fg="yellow")
        return
    click.echo(f"{record.frontend_id}.{record.slug} ({record.gen})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
