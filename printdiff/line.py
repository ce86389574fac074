# printdiff/line.py
"""Single-row formatting for one logical line.

A row is a left-aligned position prefix (the 1-based line number in the
first operand, or nothing for added text) followed by the line body,
truncated to the display width and optionally wrapped in a row style.
"""

from typing import Optional

from .colors import ColorScheme
from .display_width import display_width, truncate_to_width

# Narrowest prefix column, so short line numbers still align bodies
MIN_PREFIX_WIDTH = 4

ELLIPSIS = "..."


def prefix_width_for(line_count: int, sign_width: int = 0) -> int:
    """Prefix column width for a render covering `line_count` lines.

    The widest row sign and line number plus one separating space, and
    never less than MIN_PREFIX_WIDTH.
    """
    return max(MIN_PREFIX_WIDTH, sign_width + len(str(max(line_count, 1))) + 1)


def pad_prefix(prefix: str, prefix_width: int = MIN_PREFIX_WIDTH) -> str:
    """Left-align a prefix, keeping at least one space after it."""
    return prefix.ljust(max(prefix_width, len(prefix) + 1))


def truncate_body(body: str, width: int) -> str:
    """Cut body to width columns, ending with "..." when something was cut."""
    if display_width(body) <= width:
        return body
    if width <= len(ELLIPSIS):
        return ELLIPSIS[:max(width, 0)]
    return truncate_to_width(body, width - len(ELLIPSIS)) + ELLIPSIS


def render_line(
    body: str,
    prefix: str,
    width: int,
    style: Optional[str],
    scheme: ColorScheme,
    prefix_width: int = MIN_PREFIX_WIDTH,
) -> str:
    """Format one logical line into one display row.

    Args:
        body: Plain line content.
        prefix: Position label, e.g. "12", or "" for added lines.
        width: Display width available for the whole row.
        style: Row style from the scheme, or None/"" for unstyled.
        scheme: Color scheme supplying the reset code.
        prefix_width: Minimum prefix column width for this render.

    Returns:
        The finished row.
    """
    padded = pad_prefix(prefix, prefix_width)
    row = padded + truncate_body(body, width - len(padded))
    return scheme.apply(style or "", row)
