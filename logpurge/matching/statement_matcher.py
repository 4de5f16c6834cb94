"""Lexical rules that locate console statements in source text.

Matching is textual, not syntactic. A statement starts at ``console.`` or
``window.console.`` followed by a recognized method and an opening
parenthesis. The full-statement rule extends the match over any text that
contains no semicolon, up to the last closing parenthesis, and then takes an
optional semicolon. Arguments that themselves contain a semicolon (inside a
string or an object literal) stop the match short or prevent it entirely.

The call-head rule used for replacement matches only ``console.<method>(``
and leaves the arguments alone. ``assert``, ``dir`` and ``table`` are not
replace targets.
"""

from abc import ABC, abstractmethod
import re
from re import Pattern
from typing import Iterator

from logpurge.core.types import MatchedStatement, StatementType

STATEMENT_TYPES = tuple(t.value for t in StatementType)

REPLACEABLE_TYPES = (
    StatementType.LOG.value,
    StatementType.INFO.value,
    StatementType.WARN.value,
    StatementType.ERROR.value,
    StatementType.DEBUG.value,
)

FULL_STATEMENT_REGEX = re.compile(
    r"(?:console|window\.console)\.(" + "|".join(STATEMENT_TYPES) + r")\([^;]*\);?"
)

CALL_HEAD_REGEX = re.compile(r"console\.(" + "|".join(REPLACEABLE_TYPES) + r")\s*\(")


class StatementMatcher(ABC):
    """Finds console statements in a text buffer.

    Implementations are stateless: ``find_all`` depends only on its input, so
    it can be called repeatedly and from worker processes.
    """

    @abstractmethod
    def find_all(self, text: str) -> Iterator[MatchedStatement]:
        """Yield matches in document order, never overlapping."""


class RegexStatementMatcher(StatementMatcher):
    """Statement matcher backed by a single compiled regex.

    The regex must capture the console method name in group 1.
    """

    def __init__(self, regex: Pattern[str]):
        self.regex = regex

    def find_all(self, text: str) -> Iterator[MatchedStatement]:
        line_number = 1
        scanned = 0
        for match in self.regex.finditer(text):
            start = match.start()
            # Newlines are counted from the previous match only
            line_number += text.count("\n", scanned, start)
            scanned = start
            yield MatchedStatement(
                subtype=StatementType(match.group(1)),
                start=start,
                end=match.end(),
                text=match.group(0),
                line_number=line_number,
            )


class FullStatementMatcher(RegexStatementMatcher):
    """Matches entire statements, for remove and comment modes."""

    def __init__(self):
        super().__init__(FULL_STATEMENT_REGEX)


class CallHeadMatcher(RegexStatementMatcher):
    """Matches only ``console.<method>(``, for replace mode."""

    def __init__(self):
        super().__init__(CALL_HEAD_REGEX)


# Matcher registry, keyed by mode
_MATCHERS: dict[str, type[StatementMatcher]] = {
    "remove": FullStatementMatcher,
    "comment": FullStatementMatcher,
    "replace": CallHeadMatcher,
}


def matcher_for_mode(mode: str) -> StatementMatcher:
    """Factory function returning the matcher a mode relies on.

    Args:
        mode: remove, comment or replace

    Returns:
        Statement matcher instance

    Raises:
        ValueError: If mode is unknown
    """
    if mode not in _MATCHERS:
        available = ", ".join(_MATCHERS.keys())
        raise ValueError(f"Unknown mode '{mode}'. Available modes: {available}")
    return _MATCHERS[mode]()


def find_all(text: str, mode: str = "remove") -> Iterator[MatchedStatement]:
    """Yield the statements ``mode`` would rewrite in ``text``."""
    return matcher_for_mode(mode).find_all(text)
