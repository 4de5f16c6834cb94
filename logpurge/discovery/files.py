"""File discovery: turn a pattern or folder into an ordered list of files."""

from dataclasses import dataclass
import fnmatch
import glob
import os
from pathlib import Path, PurePath
import re

_BRACE_REGEX = re.compile(r"\{([^{}]*,[^{}]*)\}")


@dataclass(frozen=True)
class ScanTarget:
    """What the user asked to scan.

    Attributes:
        pattern: Glob pattern actually used (synthesized for folders)
        is_folder: True when the input was an existing directory
        folder_path: The directory as given, for folder targets
        extensions: Extensions scanned for folder targets
    """

    pattern: str
    is_folder: bool = False
    folder_path: str | None = None
    extensions: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.folder_path if self.is_folder and self.folder_path else self.pattern


def resolve_scan_target(pattern: str, extensions: list[str] | tuple[str, ...]) -> ScanTarget:
    """Classify ``pattern`` as a folder or a glob.

    An existing directory is scanned recursively for the given extensions and
    reported with an equivalent ``<dir>/**/*.{ext,...}`` glob.
    """
    if os.path.isdir(pattern):
        clean_path = pattern.replace("\\", "/").rstrip("/") or "/"
        glob_pattern = f"{clean_path}/**/*.{{{','.join(extensions)}}}"
        return ScanTarget(
            pattern=glob_pattern,
            is_folder=True,
            folder_path=pattern,
            extensions=tuple(extensions),
        )
    return ScanTarget(pattern=pattern)


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives, which ``glob`` does not support.

    e.g., 'src/*.{js,ts}' -> ['src/*.js', 'src/*.ts']
    """
    match = _BRACE_REGEX.search(pattern)
    if not match:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def _ignore_variants(pattern: str) -> list[str]:
    variants: list[str] = []
    for expanded in expand_braces(pattern):
        variants.append(expanded)
        # "**/" also matches zero folders
        while expanded.startswith("**/"):
            expanded = expanded[3:]
            variants.append(expanded)
    return variants


def is_ignored(path: str, ignore: list[str]) -> bool:
    """Check a path against ignore globs.

    Patterns are matched with ``fnmatch`` on the POSIX form of the path after
    brace expansion. A leading ``**/`` also matches at the top level, so
    ``**/node_modules/**`` skips ``node_modules/lib.js``.
    """
    posix = PurePath(path).as_posix()
    if posix.startswith("./"):
        posix = posix[2:]
    return any(
        fnmatch.fnmatch(posix, variant) for pat in ignore for variant in _ignore_variants(pat)
    )


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def _walk_folder(folder: str, extensions: tuple[str, ...]) -> list[str]:
    wanted = {f".{ext.lower()}" for ext in extensions}
    root = Path(folder)
    return [
        str(p)
        for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() in wanted and not _is_hidden(p, root)
    ]


def _expand_glob(pattern: str) -> list[str]:
    files: list[str] = []
    for expanded in expand_braces(pattern):
        files.extend(p for p in glob.glob(expanded, recursive=True) if os.path.isfile(p))
    return files


def discover_files(target: ScanTarget, ignore: list[str] | None = None) -> list[str]:
    """List the files a target covers, minus ignored paths.

    Args:
        target: Scan target from resolve_scan_target
        ignore: Glob patterns for paths to skip

    Returns:
        Sorted, de-duplicated file paths
    """
    if target.is_folder and target.folder_path:
        files = _walk_folder(target.folder_path, target.extensions)
    else:
        files = _expand_glob(target.pattern)

    if ignore:
        files = [f for f in files if not is_ignored(f, ignore)]

    return sorted(set(files))


def group_files_by_folder(files: list[str]) -> dict[str, list[str]]:
    """Group file paths by parent directory, keeping input order."""
    folder_groups: dict[str, list[str]] = {}
    for file in files:
        folder_groups.setdefault(os.path.dirname(file), []).append(file)
    return folder_groups
