"""Console statement matching for LogPurge."""

from logpurge.matching.statement_matcher import (
    CALL_HEAD_REGEX,
    FULL_STATEMENT_REGEX,
    REPLACEABLE_TYPES,
    CallHeadMatcher,
    FullStatementMatcher,
    RegexStatementMatcher,
    StatementMatcher,
    find_all,
    matcher_for_mode,
)

__all__ = [
    "CALL_HEAD_REGEX",
    "FULL_STATEMENT_REGEX",
    "REPLACEABLE_TYPES",
    "CallHeadMatcher",
    "FullStatementMatcher",
    "RegexStatementMatcher",
    "StatementMatcher",
    "find_all",
    "matcher_for_mode",
]
