# printdiff/display_width.py
"""Display width utilities for terminal rendering.

Provides display width measurement and truncation for plain strings
containing wide characters (CJK) and zero-width characters.
"""

import unicodedata

import wcwidth


def char_width(char: str) -> int:
    """Columns occupied by one character.

    Zero-width and non-printable characters take no columns; Fullwidth
    and Wide characters take two; everything else, including East Asian
    Ambiguous, takes one.
    """
    wc = wcwidth.wcwidth(char)
    if wc <= 0:
        return 0
    if unicodedata.east_asian_width(char) in ('F', 'W'):
        return 2
    return 1


def display_width(text: str) -> int:
    """Calculate the display width of a string, accounting for wide characters.

    Args:
        text: The string to measure. Must not contain escape sequences.

    Returns:
        The display width in terminal columns.
    """
    return sum(char_width(char) for char in text)


def truncate_to_width(text: str, width: int) -> str:
    """Cut text so that its display width does not exceed width.

    A wide character that would straddle the limit is dropped whole.
    """
    if width <= 0:
        return ""
    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > width:
            return text[:index]
    return text
