"""Integration tests for the complete purge pipeline."""

import json
import time

import pytest

from logpurge.core import Config, ConfigError, RunStatus
from logpurge.processing import pipeline_helpers, run_pipeline
from logpurge.utils.constants import DEFAULT_REPORT_NAME


@pytest.fixture(name="project")
def fixture_project(tmp_path):
    """A source tree with console calls spread across folders."""
    files = {
        "src/app.js": "import api from './api';\n\nconsole.log('boot');\napi.start();\n",
        "src/api.ts": "export function start() {\n  console.info('start');\n  return 1;\n}\n",
        "src/components/view.vue": "<script>\nconsole.debug(props);\n</script>\n",
        "src/clean.js": "export const x = 1;\n",
        "src/vendor/lib.js": "console.warn('vendored');\n",
        "src/notes.txt": "console.log('not source');\n",
    }
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return tmp_path


class TestPipelineIntegration:
    """Integration tests verifying the complete pipeline behavior."""

    def test_folder_run_removes_statements(self, project):
        """A folder run rewrites every matching source file."""
        config = Config(pattern=str(project / "src"), yes=True, jobs=1)

        run_pipeline(config)

        assert (project / "src/app.js").read_text(encoding="utf-8") == (
            "import api from './api';\napi.start();\n"
        )

    def test_folder_run_skips_other_extensions(self, project):
        config = Config(pattern=str(project / "src"), yes=True, jobs=1)

        run_pipeline(config)

        assert (project / "src/notes.txt").read_text(encoding="utf-8") == (
            "console.log('not source');\n"
        )

    def test_ignore_patterns_protect_files(self, project):
        config = Config(pattern=str(project / "src"), ignore="**/vendor/**", yes=True, jobs=1)

        run_pipeline(config)

        assert (project / "src/vendor/lib.js").read_text(encoding="utf-8") == (
            "console.warn('vendored');\n"
        )

    def test_folder_run_collects_folder_stats(self, project):
        config = Config(pattern=str(project / "src"), dry_run=True, jobs=1)

        summary = run_pipeline(config)

        assert len(summary.folder_stats) == 3

    def test_glob_run_counts_changes(self, project):
        config = Config(pattern=str(project / "src/*.js"), dry_run=True, jobs=1)

        summary = run_pipeline(config)

        assert summary.total_changes == 1

    def test_comment_mode(self, project):
        config = Config(pattern=str(project / "src/api.ts"), mode="comment", yes=True, jobs=1)

        run_pipeline(config)

        assert "  // console.info('start');\n" in (project / "src/api.ts").read_text(
            encoding="utf-8"
        )

    def test_replace_mode(self, project):
        config = Config(
            pattern=str(project / "src/api.ts"),
            mode="replace",
            replace_with="logger.info(",
            yes=True,
            jobs=1,
        )

        run_pipeline(config)

        assert "  logger.info('start');\n" in (project / "src/api.ts").read_text(encoding="utf-8")

    def test_no_matching_files_is_nothing_to_do(self, project):
        config = Config(pattern=str(project / "**/*.py"), yes=True, jobs=1)

        assert run_pipeline(config).status is RunStatus.NOTHING_TO_DO

    def test_declined_confirmation_cancels(self, project):
        config = Config(pattern=str(project / "src"), jobs=1)

        summary = run_pipeline(config, ask=lambda _prompt: False)

        assert summary.status is RunStatus.CANCELLED

    def test_elapsed_time_includes_discovery(self, project, monkeypatch):
        """Timing starts before files are discovered."""

        def slow_discover(config):
            time.sleep(0.2)
            return pipeline_helpers.discover(config)

        monkeypatch.setattr("logpurge.processing.pipeline.discover", slow_discover)
        config = Config(pattern=str(project / "src"), dry_run=True, jobs=1)

        summary = run_pipeline(config)

        assert summary.elapsed_time >= 0.2

    def test_missing_pattern_is_a_config_error(self):
        with pytest.raises(ConfigError):
            run_pipeline(Config(jobs=1))

    @pytest.mark.slow
    def test_parallel_run_matches_sequential_run(self, project):
        """Worker processes produce the same outcomes, in input order."""
        sequential = run_pipeline(Config(pattern=str(project / "src"), dry_run=True, jobs=1))
        parallel = run_pipeline(Config(pattern=str(project / "src"), dry_run=True, jobs=2))

        assert parallel.outcomes == sequential.outcomes


class TestPipelineReports:
    """Report files written at the end of a run."""

    def test_markdown_report(self, project):
        report = project / "out" / "purge.md"
        config = Config(pattern=str(project / "src"), dry_run=True, report=str(report), jobs=1)

        run_pipeline(config)

        assert "## Modified Files Details" in report.read_text(encoding="utf-8")

    def test_json_report(self, project):
        report = project / "purge.json"
        config = Config(pattern=str(project / "src"), dry_run=True, report=str(report), jobs=1)

        run_pipeline(config)

        assert json.loads(report.read_text(encoding="utf-8"))["statements_changed"] == 4

    def test_default_report_name(self, project, monkeypatch):
        monkeypatch.chdir(project)
        config = Config(pattern="src", dry_run=True, report=True, jobs=1)

        run_pipeline(config)

        assert (project / DEFAULT_REPORT_NAME).exists()

    def test_cancelled_run_writes_no_report(self, project):
        report = project / "purge.md"
        config = Config(pattern=str(project / "src"), report=str(report), jobs=1)

        run_pipeline(config, ask=lambda _prompt: False)

        assert not report.exists()
