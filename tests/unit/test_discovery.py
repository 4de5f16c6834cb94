"""Unit tests for file discovery."""

import os

import pytest

from logpurge.discovery import (
    discover_files,
    expand_braces,
    group_files_by_folder,
    is_ignored,
    resolve_scan_target,
)

# pylint: disable=missing-function-docstring


@pytest.fixture(name="project")
def fixture_project(tmp_path):
    """A small source tree with code, vendored code and non-source files."""
    for relative in [
        "src/app.js",
        "src/util.ts",
        "src/view.vue",
        "src/styles.css",
        "src/nested/deep.jsx",
        "src/vendor/lib.js",
        "README.md",
    ]:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("console.log(1);\n", encoding="utf-8")
    return tmp_path


def _names(files: list[str], root) -> list[str]:
    return [os.path.relpath(f, root).replace(os.sep, "/") for f in files]


class TestResolveScanTarget:
    """Folder vs glob classification."""

    def test_existing_directory_is_a_folder_target(self, project) -> None:
        assert resolve_scan_target(str(project / "src"), ["js"]).is_folder

    def test_folder_target_synthesizes_glob(self, project) -> None:
        target = resolve_scan_target(str(project / "src"), ["js", "ts"])
        assert target.pattern.endswith("src/**/*.{js,ts}")

    def test_glob_is_not_a_folder_target(self, project) -> None:
        assert not resolve_scan_target(str(project / "src/*.js"), ["js"]).is_folder

    def test_label_is_folder_for_folder_targets(self, project) -> None:
        folder = str(project / "src")
        assert resolve_scan_target(folder, ["js"]).label == folder


class TestExpandBraces:
    """Brace alternatives in glob patterns."""

    def test_expands_alternatives(self) -> None:
        assert expand_braces("src/*.{js,ts}") == ["src/*.js", "src/*.ts"]

    def test_expands_several_groups(self) -> None:
        assert expand_braces("{a,b}/*.{x,y}") == ["a/*.x", "a/*.y", "b/*.x", "b/*.y"]

    def test_pattern_without_braces_is_unchanged(self) -> None:
        assert expand_braces("src/**/*.js") == ["src/**/*.js"]


class TestIsIgnored:
    """Ignore glob matching."""

    def test_matches_directory_glob(self) -> None:
        assert is_ignored("src/vendor/lib.js", ["**/vendor/**"])

    def test_strips_leading_dot_slash(self) -> None:
        assert is_ignored("./dist/app.js", ["dist/*"])

    def test_unmatched_path_is_kept(self) -> None:
        assert not is_ignored("src/app.js", ["**/vendor/**", "*.min.js"])

    def test_double_star_prefix_matches_top_level_folder(self) -> None:
        assert is_ignored("node_modules/lib.js", ["**/node_modules/**"])

    def test_double_star_prefix_matches_top_level_file(self) -> None:
        assert is_ignored("app.min.js", ["**/*.min.js"])

    def test_brace_alternatives_are_expanded(self) -> None:
        assert is_ignored("dist/app.js", ["**/{vendor,dist}/**"])

    def test_brace_alternatives_do_not_overmatch(self) -> None:
        assert not is_ignored("src/app.js", ["**/{vendor,dist}/**"])


class TestDiscoverFiles:
    """Listing files for a target."""

    def test_folder_scan_filters_by_extension(self, project) -> None:
        target = resolve_scan_target(str(project / "src"), ["js", "ts", "jsx", "tsx", "vue"])
        assert _names(discover_files(target), project) == [
            "src/app.js",
            "src/nested/deep.jsx",
            "src/util.ts",
            "src/vendor/lib.js",
            "src/view.vue",
        ]

    def test_folder_scan_applies_ignore(self, project) -> None:
        target = resolve_scan_target(str(project / "src"), ["js"])
        files = discover_files(target, ["**/vendor/**"])
        assert _names(files, project) == ["src/app.js"]

    def test_recursive_glob(self, project) -> None:
        target = resolve_scan_target(str(project / "src/**/*.js"), [])
        assert _names(discover_files(target), project) == ["src/app.js", "src/vendor/lib.js"]

    def test_glob_with_brace_alternatives(self, project) -> None:
        target = resolve_scan_target(str(project / "src/*.{ts,vue}"), [])
        assert _names(discover_files(target), project) == ["src/util.ts", "src/view.vue"]

    def test_glob_without_matches_is_empty(self, project) -> None:
        target = resolve_scan_target(str(project / "**/*.py"), [])
        assert discover_files(target) == []

    def test_directories_are_never_returned(self, project) -> None:
        target = resolve_scan_target(str(project / "src/*"), [])
        assert all(os.path.isfile(f) for f in discover_files(target))


@pytest.fixture(name="workspace")
def fixture_workspace(tmp_path, monkeypatch):
    """A project root used as the working directory, with dependency and build folders."""
    for relative in [
        "app.js",
        "node_modules/lib.js",
        "dist/bundle.js",
        ".next/chunk.js",
        ".cache/nested/entry.js",
        "src/.hidden.js",
    ]:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("console.log(1);\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDiscoverFromProjectRoot:
    """Scanning "." from the project root."""

    def test_top_level_ignored_folder_is_skipped(self, workspace) -> None:
        target = resolve_scan_target(".", ["js"])
        files = discover_files(target, ["**/node_modules/**", "**/dist/**"])
        assert _names(files, workspace) == ["app.js"]

    def test_brace_ignore_skips_every_alternative(self, workspace) -> None:
        target = resolve_scan_target(".", ["js"])
        files = discover_files(target, ["**/{node_modules,dist}/**"])
        assert _names(files, workspace) == ["app.js"]

    def test_hidden_folders_and_files_are_skipped(self, workspace) -> None:
        target = resolve_scan_target(".", ["js"])
        assert _names(discover_files(target), workspace) == [
            "app.js",
            "dist/bundle.js",
            "node_modules/lib.js",
        ]

    def test_glob_skips_hidden_folders(self, workspace) -> None:
        target = resolve_scan_target("**/*.js", [])
        assert ".next/chunk.js" not in _names(discover_files(target), workspace)


class TestGroupFilesByFolder:
    """Grouping by parent directory."""

    def test_groups_keep_input_order(self) -> None:
        files = ["b/one.js", "a/two.js", "b/three.js"]
        assert group_files_by_folder(files) == {
            "b": ["b/one.js", "b/three.js"],
            "a": ["a/two.js"],
        }
