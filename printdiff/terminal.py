# printdiff/terminal.py
"""Terminal capability detection with process-wide caching.

Only the two facts the renderer needs are detected: the display width
and whether ANSI colors should be emitted.

Usage:
    from printdiff.terminal import detect

    caps = detect()
    caps["width"]   # int, columns
    caps["colors"]  # bool
"""

import os
import shutil
import sys
from typing import Any, Dict, Optional

# Width used when stdout is not attached to a terminal
FALLBACK_WIDTH = 80

_cached: Optional[Dict[str, Any]] = None


def detect() -> Dict[str, Any]:
    """Detect terminal capabilities. Result is cached process-wide.

    Returns:
        Dict with keys: interactive, width, colors.
    """
    global _cached
    if _cached is None:
        _cached = _detect()
    return _cached


def invalidate_cache() -> None:
    """Clear the cached result. Useful for testing or after env changes."""
    global _cached
    _cached = None


def _detect() -> Dict[str, Any]:
    is_interactive = sys.stdout.isatty()
    return {
        "interactive": is_interactive,
        "width": _detect_width(),
        "colors": "NO_COLOR" not in os.environ and _supports_color(
            is_interactive, os.environ.get("TERM"), os.environ.get("COLORTERM")
        ),
    }


def _detect_width() -> int:
    """Detect the terminal width, honouring the COLUMNS override."""
    width = shutil.get_terminal_size((FALLBACK_WIDTH, 24)).columns
    return width if width > 0 else FALLBACK_WIDTH


def _supports_color(
    is_interactive: bool,
    term: Optional[str],
    colorterm: Optional[str],
) -> bool:
    """Basic ANSI colors are enough; any non-dumb terminal qualifies."""
    if not is_interactive:
        return False
    if colorterm:
        return True
    term_lower = (term or "").lower()
    return bool(term_lower) and term_lower != "dumb"
