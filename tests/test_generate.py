"""
Tests for the generate use case — the dispatch orchestrator.

Covers step ordering (resolve → snippet → bootstrap → render → write →
record), failure gating and the LastGenerated record policy.
"""

import json
from pathlib import Path

import pytest

from leetgen.core.errors import (
    BootstrapFailure,
    FilenameTemplateError,
    LanguageUnsupported,
    PromptFailure,
    SnippetMissing,
)
from leetgen.core.models.config import LangConfig
from leetgen.core.models.question import CodeSnippet
from leetgen.core.persistence.state_file import StateStore
from leetgen.core.services import file_writer
from leetgen.core.services.file_writer import always_no, always_yes
from leetgen.core.use_cases.generate import generate, resolve_generator
from leetgen.lang.base import BaseLang, FileOutput, Testable
from leetgen.lang.registry import GeneratorRegistry


class RecordingTestable(BaseLang, Testable):
    """Testable language that records the order of calls it receives."""

    def __init__(self, events: list, install_fails: bool = False):
        super().__init__("Fake", "fake", "fk", "fk", "//", "/*", "*/")
        self.events = events
        self.install_fails = install_fails
        self.installed = False

    def check_library(self, ctx) -> bool:
        self.events.append("check")
        return self.installed

    def generate_library(self, ctx) -> None:
        self.events.append("install")
        if self.install_fails:
            raise RuntimeError("copy failed")
        self.installed = True

    def generate(self, q, ctx):
        self.events.append("generate")
        return super().generate(q, ctx)


class TwoFiles(BaseLang):
    """Language emitting a solution and a notes file."""

    def generate(self, q, ctx):
        files = super().generate(q, ctx)
        files.append(FileOutput(path="notes/" + files[0].path + ".md", content="notes\n"))
        return files


@pytest.fixture
def fake_question(question):
    question.code_snippets.append(CodeSnippet(lang_slug="fake", code="fake code"))
    return question


# ── Resolution ──────────────────────────────────────────────────────


class TestResolve:
    def test_resolves_configured_language(self, gen_ctx):
        assert resolve_generator(gen_ctx).slug == "python3"

    def test_empty_registry_resolves_nothing(self, gen_ctx):
        with pytest.raises(LanguageUnsupported):
            resolve_generator(gen_ctx, GeneratorRegistry())

    def test_unsupported_language(self, question, gen_ctx, state_path: Path):
        gen_ctx.config.code.lang = "cobol"
        with pytest.raises(LanguageUnsupported) as exc:
            generate(question, gen_ctx, state_path=state_path)
        assert exc.value.identifier == "cobol"
        assert "cobol" in str(exc.value)
        assert not state_path.exists()

    def test_empty_registry_is_not_replaced(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        with pytest.raises(LanguageUnsupported):
            generate(question, gen_ctx, registry=GeneratorRegistry(), state_path=state_path)
        assert list(tmp_path.iterdir()) == []

    def test_snippet_missing_writes_nothing(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        gen_ctx.config.code.lang = "rust"
        with pytest.raises(SnippetMissing, match="two-sum"):
            generate(question, gen_ctx, state_path=state_path)
        assert list(tmp_path.iterdir()) == []

    def test_snippet_missing_keeps_previous_record(self, question, gen_ctx, state_path: Path):
        generate(question, gen_ctx, state_path=state_path)
        before = state_path.read_text()

        gen_ctx.config.code.lang = "java"
        with pytest.raises(SnippetMissing):
            generate(question, gen_ctx, state_path=state_path)
        assert state_path.read_text() == before


# ── Happy path ──────────────────────────────────────────────────────


class TestGenerate:
    def test_python_scenario(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        files = generate(question, gen_ctx, state_path=state_path)

        solution = files[0]
        assert solution.path == str(tmp_path.resolve() / "py" / "0001.two-sum.py")
        assert solution.created is True
        assert solution.generator.slug == "python3"
        content = Path(solution.path).read_text()
        assert content == solution.content
        assert "# @lc code=begin" in content and "# @lc code=end" in content

        # Library bootstrapped next to the solution
        assert (tmp_path / "py" / "lgsupport" / "__init__.py").is_file()

    def test_records_last_generated(self, question, gen_ctx, state_path: Path):
        generate(question, gen_ctx, state_path=state_path)
        record = StateStore(state_path).last()
        assert record.slug == "two-sum"
        assert record.frontend_id == "1"
        assert record.gen == "python3"
        assert record.lang == "py"

    def test_default_state_path_under_project_root(self, question, gen_ctx, tmp_path: Path):
        generate(question, gen_ctx)
        data = json.loads((tmp_path / ".leetgen" / "state.json").read_text())
        assert data["last_generated"]["gen"] == "python3"

    def test_out_dir_override(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        gen_ctx.config.code.lang = "go"
        gen_ctx.config.code.langs = {"golang": LangConfig(out_dir="solutions/go")}
        files = generate(question, gen_ctx, state_path=state_path)
        assert Path(files[0].path) == tmp_path.resolve() / "solutions" / "go" / "0001.two-sum.go"

    def test_out_dir_defaults_to_identifier(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        gen_ctx.config.code.lang = "golang"
        files = generate(question, gen_ctx, state_path=state_path)
        assert Path(files[0].path).parent == tmp_path.resolve() / "golang"

    def test_template_error_writes_nothing(self, question, gen_ctx, tmp_path: Path, state_path: Path):
        gen_ctx.config.code.lang = "cpp"
        gen_ctx.config.code.filename_template = "{missing}"
        with pytest.raises(FilenameTemplateError):
            generate(question, gen_ctx, state_path=state_path)
        assert list(tmp_path.iterdir()) == []


# ── Bootstrap sequencing ────────────────────────────────────────────


class TestBootstrapSequencing:
    def test_install_before_generate(self, fake_question, gen_ctx, state_path: Path):
        events: list[str] = []
        registry = GeneratorRegistry([RecordingTestable(events)])
        gen_ctx.config.code.lang = "fake"

        files = generate(fake_question, gen_ctx, registry=registry, state_path=state_path)
        assert events == ["check", "install", "check", "generate"]
        assert events.count("install") == 1
        assert files[0].created

    def test_install_failure_aborts(self, fake_question, gen_ctx, tmp_path: Path, state_path: Path):
        events: list[str] = []
        registry = GeneratorRegistry([RecordingTestable(events, install_fails=True)])
        gen_ctx.config.code.lang = "fake"

        with pytest.raises(BootstrapFailure, match="copy failed"):
            generate(fake_question, gen_ctx, registry=registry, state_path=state_path)
        assert "generate" not in events
        assert list(tmp_path.iterdir()) == []


# ── Conflicts and partial failures ──────────────────────────────────


class TestWriteOutcomes:
    def _existing(self, question, gen_ctx, state_path):
        files = generate(question, gen_ctx, state_path=state_path)
        path = Path(files[0].path)
        path.write_text("my solution")
        return path

    def test_declined_overwrite(self, question, gen_ctx, state_path: Path):
        path = self._existing(question, gen_ctx, state_path)
        files = generate(question, gen_ctx, confirm=always_no, state_path=state_path)
        assert files[0].created is False
        assert path.read_text() == "my solution"

    def test_assume_yes(self, question, gen_ctx, state_path: Path):
        path = self._existing(question, gen_ctx, state_path)
        gen_ctx.assume_yes = True

        def explode(p):
            raise AssertionError("prompted despite assume_yes")

        files = generate(question, gen_ctx, confirm=explode, state_path=state_path)
        assert files[0].created is True
        assert path.read_text() == files[0].content

    def test_confirmed_overwrite(self, question, gen_ctx, state_path: Path):
        path = self._existing(question, gen_ctx, state_path)
        files = generate(question, gen_ctx, confirm=always_yes, state_path=state_path)
        assert files[0].created is True
        assert path.read_text() != "my solution"

    def test_prompt_failure_aborts(self, question, gen_ctx, state_path: Path):
        self._existing(question, gen_ctx, state_path)
        state_path.unlink()

        def broken(p):
            raise EOFError()

        with pytest.raises(PromptFailure):
            generate(question, gen_ctx, confirm=broken, state_path=state_path)
        assert not state_path.exists()

    def test_failed_write_does_not_stop_siblings(
        self, question, gen_ctx, tmp_path: Path, state_path: Path, monkeypatch
    ):
        registry = GeneratorRegistry([TwoFiles("C++", "cpp", "cpp", "cpp", "//", "/*", "*/")])
        gen_ctx.config.code.lang = "cpp"
        real_write = file_writer.try_write
        calls = []

        def flaky(path, content, **kw):
            calls.append(path)
            if len(calls) == 1:
                raise PermissionError("read-only")
            return real_write(path, content, **kw)

        monkeypatch.setattr("leetgen.core.use_cases.generate.try_write", flaky)
        files = generate(question, gen_ctx, registry=registry, state_path=state_path)

        assert [f.created for f in files] == [False, True]
        assert not Path(files[0].path).exists()
        assert Path(files[1].path).read_text() == "notes\n"
        assert StateStore(state_path).last().gen == "cpp"


# ── Record policy ───────────────────────────────────────────────────


class TestRecordPolicy:
    def test_attempted_records_even_when_declined(self, question, gen_ctx, state_path: Path):
        generate(question, gen_ctx, state_path=state_path)
        state_path.unlink()
        generate(question, gen_ctx, confirm=always_no, state_path=state_path)
        assert StateStore(state_path).last().slug == "two-sum"

    def test_written_skips_when_nothing_created(self, question, gen_ctx, state_path: Path):
        generate(question, gen_ctx, state_path=state_path)
        state_path.unlink()
        gen_ctx.config.record_state = "written"
        generate(question, gen_ctx, confirm=always_no, state_path=state_path)
        assert not state_path.exists()

    def test_written_records_when_created(self, question, gen_ctx, state_path: Path):
        gen_ctx.config.record_state = "written"
        generate(question, gen_ctx, state_path=state_path)
        assert StateStore(state_path).last().gen == "python3"
