"""Single-file transformation: match, rewrite, splice, and optionally persist."""

from dataclasses import replace
import re

from logpurge.core import FileOutcome, FileStatus, apply_rewrite
from logpurge.matching import StatementMatcher, matcher_for_mode
from logpurge.utils import replace_file_atomically

# A line holding only whitespace, with its newline (or at end of text)
_BLANK_LINE_REGEX = re.compile(r"^[ \t\r\f\v]*(?:\n|\Z)", re.MULTILINE)


def count_lines(text: str) -> int:
    return text.count("\n") + 1


def byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def remove_blank_lines(text: str) -> str:
    """Delete every whitespace-only line in ``text``.

    This applies to the whole file, so blank lines that were already present
    before any statement was removed are deleted as well.
    """
    return _BLANK_LINE_REGEX.sub("", text)


def transform_content(
    path: str,
    content: str,
    mode: str,
    replacement: str | None = None,
    matcher: StatementMatcher | None = None,
) -> tuple[FileOutcome, str]:
    """Rewrite every console statement in ``content``.

    Matches are found in a single left-to-right pass over the original text.
    The result is rebuilt by copying the text between matches verbatim and
    inserting each replacement, so offsets stay valid and rewritten text is
    never scanned again.

    Args:
        path: File path recorded on the outcome
        content: Original file content
        mode: remove, comment or replace
        replacement: Literal for replace mode
        matcher: Matcher to use instead of the mode's default

    Returns:
        Tuple of (outcome, new_content). A clean outcome returns the content
        unchanged.
    """
    if matcher is None:
        matcher = matcher_for_mode(mode)

    pieces: list[str] = []
    records = []
    cursor = 0
    for match in matcher.find_all(content):
        record = apply_rewrite(mode, match, replacement)
        pieces.append(content[cursor : match.start])
        pieces.append(record.replacement_text)
        cursor = match.end
        records.append((match, record))

    size_before = byte_size(content)
    lines_before = count_lines(content)

    if not records:
        outcome = FileOutcome(
            path=path,
            status=FileStatus.CLEAN,
            size_before=size_before,
            size_after=size_before,
            lines_before=lines_before,
            lines_after=lines_before,
        )
        return outcome, content

    pieces.append(content[cursor:])
    new_content = "".join(pieces)
    if mode == "remove":
        new_content = remove_blank_lines(new_content)

    outcome = FileOutcome(
        path=path,
        status=FileStatus.MODIFIED,
        change_count=len(records),
        records=tuple(records),
        size_before=size_before,
        size_after=byte_size(new_content),
        lines_before=lines_before,
        lines_after=count_lines(new_content),
    )
    return outcome, new_content


def read_source(path: str) -> str:
    """Read a source file as UTF-8 without translating line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def persist(path: str, new_content: str) -> None:
    """Write rewritten content back to ``path``.

    Raises:
        OSError: If the file cannot be replaced
    """
    replace_file_atomically(path, new_content)


def process_file(
    path: str,
    mode: str,
    replacement: str | None = None,
    dry_run: bool = False,
    matcher: StatementMatcher | None = None,
) -> FileOutcome:
    """Read, transform and (unless dry run) persist one file.

    I/O and decoding failures are captured on the returned outcome with
    ``status=error``; they are never raised.
    """
    try:
        content = read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        return FileOutcome(path=path, status=FileStatus.ERROR, error_message=str(e))

    outcome, new_content = transform_content(path, content, mode, replacement, matcher)

    if outcome.status is FileStatus.MODIFIED and not dry_run:
        try:
            persist(path, new_content)
        except OSError as e:
            return replace(outcome, status=FileStatus.ERROR, error_message=str(e))

    return outcome
