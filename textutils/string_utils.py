"""String utility functions for textkit.

This module provides the string transforms: abbreviation, initials,
case swapping and line wrapping. All positions and lengths are counted
in Unicode code points.
"""

import logging
import os
import re
import unicodedata
from typing import Iterable, List, Optional

from textutils.primitives import (
    EMPTY,
    INDEX_NOT_FOUND,
    default_string,
    delimiter_set,
    find_from,
    index_of,
    is_blank,
    is_empty,
    is_true,
    next_search_start,
)


logger = logging.getLogger(__name__)


def abbreviate(
    text: Optional[str],
    lower: int,
    upper: int,
    append_to_end: Optional[str],
) -> Optional[str]:
    """Abbreviate a string at the first space after a lower bound.

    Examples:
        abbreviate("hello world", 8, -1, "end") -> "hello world"
        abbreviate("hello world", 2, 9, "end") -> "helloend"

    Args:
        text: The string to abbreviate.
        lower: Position to start looking for a space.
        upper: Maximum length of the prefix kept, or -1 for no limit.
        append_to_end: String appended when the text is cut.

    Returns:
        The abbreviated string, or the text itself if None or empty.

    Raises:
        InvalidArgumentError: If upper < -1, or upper < lower and
            upper != -1.
    """
    is_true(upper >= -1, "upper value cannot be less than -1")
    is_true(upper >= lower or upper == -1, "upper value is less than lower value")
    if is_empty(text):
        return text

    length = len(text)
    lower = min(max(lower, 0), length)
    if upper == -1 or upper > length:
        upper = length

    index = index_of(text, " ", lower)
    if index == INDEX_NOT_FOUND:
        result = text[:upper]
        if upper != length:
            result += default_string(append_to_end)
        return result

    return text[:min(index, upper)] + default_string(append_to_end)


def initials(
    text: Optional[str],
    delimiters: Optional[Iterable[str]] = None,
) -> Optional[str]:
    """Extract the first character after each run of delimiters.

    The start of the string counts as a delimiter, so the first character
    is always included unless it is itself a delimiter.

    Args:
        text: The string to take initials from.
        delimiters: Delimiter characters. None means whitespace; an
            empty collection yields an empty result.

    Returns:
        String of initials, or the text itself if None or empty.
    """
    if is_empty(text):
        return text

    if delimiters is not None:
        delimiters = list(delimiters)
        if not delimiters:
            return EMPTY

    delimiter_chars = delimiter_set(delimiters)
    result: List[str] = []
    last_was_gap = True

    for char in text:
        if char in delimiter_chars or (delimiters is None and char.isspace()):
            last_was_gap = True
        elif last_was_gap:
            result.append(char)
            last_was_gap = False

    return "".join(result)


# Simple lowercase mappings that differ from the expanding full mapping.
_SIMPLE_LOWER = {
    "İ": "i",
}


def _single_code_point(mapped: str, original: str) -> str:
    # Full case mappings may expand (e.g. "ß".upper() == "SS").
    return mapped if len(mapped) == 1 else original


def _to_lower(char: str) -> str:
    if char in _SIMPLE_LOWER:
        return _SIMPLE_LOWER[char]
    return _single_code_point(char.lower(), char)


def _is_title_case(char: str) -> bool:
    return unicodedata.category(char) == "Lt"


def swap_case(text: Optional[str]) -> Optional[str]:
    """Swap the case of each character.

    Upper and title case become lower case. Lower case becomes title case
    at the start of the string or after whitespace, and upper case
    elsewhere.

    Args:
        text: The string to swap case on.

    Returns:
        The swapped string, or the text itself if None or empty.
    """
    if is_empty(text):
        return text

    result: List[str] = []
    whitespace = True

    for char in text:
        if char.isupper() or _is_title_case(char):
            new_char = _to_lower(char)
            whitespace = False
        elif char.islower():
            if whitespace:
                new_char = _single_code_point(char.title(), char)
                whitespace = False
            else:
                new_char = _single_code_point(char.upper(), char)
        else:
            whitespace = char.isspace()
            new_char = char
        result.append(new_char)

    return "".join(result)


def wrap(
    text: Optional[str],
    wrap_length: int,
    new_line_str: Optional[str] = None,
    wrap_long_words: bool = False,
    wrap_on: Optional[str] = None,
) -> Optional[str]:
    """Wrap a string so no line is longer than a given width.

    Each pass looks at a window of ``wrap_length + 1`` characters and
    breaks at the rightmost match of ``wrap_on`` inside it. The matched
    delimiter character is dropped. Delimiters at the start of a line are
    skipped.

    Args:
        text: The string to wrap.
        wrap_length: Maximum line width. Values below 1 are treated as 1.
        new_line_str: Line separator to insert (default: os.linesep).
        wrap_long_words: Split words longer than wrap_length.
        wrap_on: Regular expression to break on (default: a single space).

    Returns:
        The wrapped string, or None if text is None.

    Raises:
        re.error: If wrap_on is not a valid regular expression.
    """
    if text is None:
        return None
    if new_line_str is None:
        new_line_str = os.linesep
    if wrap_length < 1:
        wrap_length = 1
    if is_blank(wrap_on):
        wrap_on = " "

    pattern = re.compile(wrap_on)
    length = len(text)
    offset = 0
    parts: List[str] = []
    match_size = -1

    logger.debug(f"Wrapping {length} characters at width {wrap_length} on {wrap_on!r}")

    while offset < length:
        space_to_wrap_at = -1
        window = text[offset:min(offset + wrap_length + 1, length)]
        span = find_from(pattern, window)
        if span is not None:
            if span[0] == 0:
                match_size = span[1]
                if match_size != 0:
                    offset += span[1]
                    continue
                offset += 1
            space_to_wrap_at = span[0] + offset

        if length - offset <= wrap_length:
            break

        # Prefer the match closest to the wrap limit.
        while span is not None:
            span = find_from(pattern, window, next_search_start(span))
            if span is not None:
                space_to_wrap_at = span[0] + offset

        if space_to_wrap_at >= offset:
            parts.append(text[offset:space_to_wrap_at])
            parts.append(new_line_str)
            offset = space_to_wrap_at + 1
        elif wrap_long_words:
            if match_size == 0:
                offset -= 1
            parts.append(text[offset:offset + wrap_length])
            parts.append(new_line_str)
            offset += wrap_length
            match_size = -1
        else:
            span = find_from(pattern, text[offset + wrap_length:])
            if span is not None:
                match_size = span[1] - span[0]
                space_to_wrap_at = span[0] + offset + wrap_length

            if match_size == 0 and offset != 0:
                offset -= 1

            if space_to_wrap_at >= 0:
                parts.append(text[offset:space_to_wrap_at])
                parts.append(new_line_str)
                offset = space_to_wrap_at + 1
            else:
                parts.append(text[offset:])
                offset = length
                match_size = -1

    if match_size == 0 and offset < length:
        offset -= 1

    parts.append(text[offset:])
    return "".join(parts)
