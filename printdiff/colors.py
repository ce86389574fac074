# printdiff/colors.py
"""Color schemes for diff rendering.

A ColorScheme is the styling strategy threaded through every renderer.
Two instances exist: DEFAULT_COLOR_SCHEME emits ANSI escape codes,
NO_COLOR_SCHEME emits plain text and marks highlighted spans with
wdiff-style brackets so they stay readable without color.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorScheme:
    """Styling codes for diff rendering.

    Whole-row styles (removed, added, changed, gap) are empty strings in
    the plain scheme, which renderers treat as "no style". The plain
    scheme marks rows with a sign before the line number instead.
    """
    reset: str = "\033[0m"

    # Whole-row styles
    removed: str = "\033[31m"
    added: str = "\033[32m"
    changed: str = "\033[36m"
    gap: str = "\033[2m"

    # Row signs before the line number; color carries the meaning when set
    removed_sign: str = ""
    added_sign: str = ""
    changed_sign: str = ""

    # Inline span markers inside a changed line
    removed_open: str = "\033[31m"
    removed_close: str = "\033[0m"
    added_open: str = "\033[32m"
    added_close: str = "\033[0m"

    @property
    def sign_width(self) -> int:
        return max(len(self.removed_sign), len(self.added_sign), len(self.changed_sign))

    def apply(self, style: str, text: str) -> str:
        """Wrap text in a row style, or return it untouched for no style."""
        if not style:
            return text
        return f"{style}{text}{self.reset}"

    def removed_span(self, text: str) -> str:
        if not text:
            return ""
        return f"{self.removed_open}{text}{self.removed_close}"

    def added_span(self, text: str) -> str:
        if not text:
            return ""
        return f"{self.added_open}{text}{self.added_close}"


# Default color scheme
DEFAULT_COLOR_SCHEME = ColorScheme()

# No-color scheme for pipes, files and tests
NO_COLOR_SCHEME = ColorScheme(
    reset="",
    removed="",
    added="",
    changed="",
    gap="",
    removed_sign="-",
    added_sign="+",
    changed_sign="*",
    removed_open="[-",
    removed_close="-]",
    added_open="{+",
    added_close="+}",
)


def select_scheme(colors: bool) -> ColorScheme:
    """Pick the scheme for one render call."""
    return DEFAULT_COLOR_SCHEME if colors else NO_COLOR_SCHEME
