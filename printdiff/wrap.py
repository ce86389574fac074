# printdiff/wrap.py
"""Escape-sequence-aware line wrapping.

Text handed to the wrapper may contain color sequences ("ESC ... m")
which take space in the string but not on screen. Wrapping counts only
visible characters and never splits a sequence across two rows.
Continuation rows are indented so a wrapped row reads as one unit.
"""

from typing import List

ESC = "\x1b"
SEQUENCE_END = "m"

DEFAULT_INDENT = 4


def wrap_rows(
    text: str, width: int, indent: int = DEFAULT_INDENT, reset: str = ""
) -> List[str]:
    """Split text into physical rows no wider than width.

    The first row may use the full width; every following row is
    prefixed with `indent` spaces and holds at most `width - indent`
    visible characters. A literal newline also ends a row and is dropped
    from the output.

    Args:
        text: Input text, possibly with color sequences.
        width: Display width of the terminal.
        indent: Spaces prepended to continuation rows.
        reset: Sequence that clears all styles. When given, styles still
            open at the end of a row are closed there and re-opened after
            the indent of the next row, so every row stands alone.

    Returns:
        Rows in display order. Always at least one row.
    """
    width = max(width, 1)

    # The raw length over-estimates the visible width, so anything that
    # fits raw definitely fits on screen.
    if len(text) <= width:
        return [text]

    pad = " " * indent
    rows: List[str] = []
    # Start index in `text` of the current row
    start = 0
    # Visible characters counted into the current row
    count = 0
    limit = width
    in_sequence = False
    sequence_start = 0
    # Styles opened and not yet reset; only tracked when reset is given
    active: List[str] = []
    # Styles re-opened at the start of the current row
    carried = ""

    for i, char in enumerate(text):
        if char == ESC:
            in_sequence = True
            sequence_start = i
        elif in_sequence:
            if char == SEQUENCE_END:
                in_sequence = False
                if reset:
                    sequence = text[sequence_start:i + 1]
                    if sequence == reset:
                        active = []
                    else:
                        active.append(sequence)
        else:
            count += 1
            if char == "\n" or count == limit:
                end = i if char == "\n" else i + 1
                row = carried + text[start:end]
                if active:
                    row += reset
                if rows:
                    rows.append(pad + row)
                else:
                    rows.append(row)
                    # Continuation rows leave room for the indent
                    limit = max(width - indent, 1)
                carried = "".join(active)
                start = i + 1
                count = 0

    tail = text[start:]
    if not rows:
        rows.append(tail)
    elif has_visible_text(tail):
        rows.append(pad + carried + tail)
    elif tail and not carried:
        # Only closing sequences remain; keep them on the last row
        rows[-1] += tail

    return rows


def line_break(
    text: str, width: int, indent: int = DEFAULT_INDENT, reset: str = ""
) -> str:
    """Wrap text for display, joining the rows with newlines."""
    return "\n".join(wrap_rows(text, width, indent, reset))


def has_visible_text(text: str) -> bool:
    """Check whether text holds any character outside color sequences."""
    in_sequence = False
    for char in text:
        if char == ESC:
            in_sequence = True
        elif in_sequence:
            if char == SEQUENCE_END:
                in_sequence = False
        else:
            return True
    return False


def visible_length(text: str) -> int:
    """Count the characters of text outside color sequences."""
    count = 0
    in_sequence = False
    for char in text:
        if char == ESC:
            in_sequence = True
        elif in_sequence:
            if char == SEQUENCE_END:
                in_sequence = False
        else:
            count += 1
    return count
