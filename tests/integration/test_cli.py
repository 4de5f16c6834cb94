"""End-to-end tests for the command-line entry point."""

import sys

import pytest

from logpurge.__main__ import main
from logpurge.cli import confirm

# pylint: disable=missing-function-docstring


@pytest.fixture(name="source")
def fixture_source(tmp_path):
    path = tmp_path / "src" / "app.js"
    path.parent.mkdir()
    path.write_text("start();\nconsole.log('x');\n", encoding="utf-8")
    return path


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["logpurge", *argv])
    main()


class TestMain:
    """Running the tool through main()."""

    def test_yes_rewrites_files(self, monkeypatch, source) -> None:
        _run(monkeypatch, str(source.parent), "-y", "-j", "1")
        assert source.read_text(encoding="utf-8") == "start();\n"

    def test_dry_run_leaves_files(self, monkeypatch, source) -> None:
        _run(monkeypatch, str(source.parent), "--dry-run", "-j", "1")
        assert source.read_text(encoding="utf-8") == "start();\nconsole.log('x');\n"

    def test_confirmed_prompt_rewrites_files(self, monkeypatch, source) -> None:
        monkeypatch.setattr("builtins.input", lambda: "y")
        _run(monkeypatch, str(source.parent), "-j", "1")
        assert source.read_text(encoding="utf-8") == "start();\n"

    def test_declined_prompt_leaves_files(self, monkeypatch, source) -> None:
        monkeypatch.setattr("builtins.input", lambda: "n")
        _run(monkeypatch, str(source.parent), "-j", "1")
        assert source.read_text(encoding="utf-8") == "start();\nconsole.log('x');\n"

    def test_report_option_writes_report(self, monkeypatch, source, tmp_path) -> None:
        report = tmp_path / "report.md"
        _run(monkeypatch, str(source.parent), "--dry-run", "--report", str(report), "-j", "1")
        assert report.exists()

    def test_replace_without_literal_exits(self, monkeypatch, source) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, str(source.parent), "-m", "replace", "-y")
        assert exc_info.value.code == 2

    def test_replace_without_literal_leaves_files(self, monkeypatch, source) -> None:
        with pytest.raises(SystemExit):
            _run(monkeypatch, str(source.parent), "-m", "replace", "-y")
        assert source.read_text(encoding="utf-8") == "start();\nconsole.log('x');\n"

    def test_missing_pattern_exits(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch)
        assert exc_info.value.code == 2

    def test_unknown_mode_exits(self, monkeypatch, source) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, str(source.parent), "-m", "strip")
        assert exc_info.value.code == 2

    def test_version_exits_cleanly(self, monkeypatch) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, "--version")
        assert exc_info.value.code == 0


class TestConfirm:
    """Interactive yes/no prompt."""

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES "])
    def test_yes_answers(self, monkeypatch, answer: str) -> None:
        monkeypatch.setattr("builtins.input", lambda: answer)
        assert confirm("Proceed? ") is True

    @pytest.mark.parametrize("answer", ["", "n", "no", "yep"])
    def test_other_answers_decline(self, monkeypatch, answer: str) -> None:
        monkeypatch.setattr("builtins.input", lambda: answer)
        assert confirm("Proceed? ") is False

    def test_end_of_input_declines(self, monkeypatch) -> None:
        def raise_eof():
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)
        assert confirm("Proceed? ") is False

    def test_prompt_goes_to_stderr(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("builtins.input", lambda: "n")
        confirm("Proceed? ")
        assert "Proceed? " in capsys.readouterr().err
