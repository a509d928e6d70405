"""Shared primitives for the string utilities.

Small helpers for blank/empty detection, default substitution, substring
and pattern search, and delimiter handling. All indexes are code point
offsets into a Python ``str``.
"""

import re
from typing import Iterable, Optional, Set, Tuple


INDEX_NOT_FOUND = -1
EMPTY = ""


class InvalidArgumentError(ValueError):
    """Exception raised when an argument fails a precondition check."""
    pass


def is_true(expression: bool, message: str) -> None:
    """Check a precondition.

    Args:
        expression: Condition that must hold.
        message: Detail message for the raised error.

    Raises:
        InvalidArgumentError: If the expression is false.
    """
    if not expression:
        raise InvalidArgumentError(message)


def is_empty(text: Optional[str]) -> bool:
    """Return True if the text is None or has no characters."""
    return text is None or len(text) == 0


def is_blank(text: Optional[str]) -> bool:
    """Return True if the text is None, empty, or only whitespace."""
    if is_empty(text):
        return True
    return all(char.isspace() for char in text)


def default_string(text: Optional[str], default: str = EMPTY) -> str:
    """Return the text, or the default when the text is None."""
    return default if text is None else text


def index_of(text: Optional[str], search: Optional[str], start: int = 0) -> int:
    """Find the first occurrence of a substring at or after a position.

    Args:
        text: String to search in.
        search: Substring to search for.
        start: Position to start from. Negative values search from 0.

    Returns:
        Index of the first occurrence, or INDEX_NOT_FOUND.
    """
    if text is None or search is None:
        return INDEX_NOT_FOUND
    return text.find(search, max(start, 0))


def delimiter_set(delimiters: Optional[Iterable[str]]) -> Set[str]:
    """Build the set of delimiter code points.

    Args:
        delimiters: Delimiter characters, or None for the default.

    Returns:
        A set holding a single space when delimiters is None, otherwise
        the given characters (empty if none were given).
    """
    if delimiters is None:
        return {" "}
    return set(delimiters)


def find_from(
    pattern: "re.Pattern[str]",
    text: str,
    start: int = 0,
) -> Optional[Tuple[int, int]]:
    """Find the next pattern match at or after a position.

    ``^`` only matches at the real start of ``text``, and lookbehinds can
    see characters before ``start``.

    Args:
        pattern: Compiled pattern.
        text: String to search in.
        start: Position to start from.

    Returns:
        The (start, end) span of the match, or None.
    """
    if start > len(text):
        return None
    match = pattern.search(text, start)
    if match is None:
        return None
    return match.span()


def next_search_start(span: Tuple[int, int]) -> int:
    """Return where to resume searching after a match.

    An empty match resumes one position later so repeated searches
    always make progress.
    """
    start, end = span
    return end + 1 if end == start else end
