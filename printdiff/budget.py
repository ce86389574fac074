# printdiff/budget.py
"""Row budgets for a render.

Every row goes through BudgetEnforcer, which checks the ceilings before
appending. When a ceiling is reached a single marker row is appended in
place of the row, so the output always says that it was cut short.
"""

from typing import List, Optional

from .colors import ColorScheme
from .config import DiffConfig
from .line import render_line
from .state import RenderState

OUTPUT_TRUNCATED_MARKER = "... (diff truncated)"
LINE_TRUNCATED_MARKER = "... (line truncated)"


class BudgetEnforcer:
    """Gates row emission against the global and per-line ceilings.

    Global: once max_chunks rows exist, the next row is replaced by the
    output-truncated marker and the render halts for good. Per line:
    once a changed line has produced max_chunks_per_line rows, the next
    row is replaced by the line-truncated marker and the rest of that
    line is dropped.
    """

    def __init__(
        self,
        config: DiffConfig,
        scheme: ColorScheme,
        state: RenderState,
        prefix_width: int,
    ):
        self._config = config
        self._scheme = scheme
        self._state = state
        self._prefix_width = prefix_width
        self._line_halted = False
        self.chunks: List[str] = []

    @property
    def halted(self) -> bool:
        return self._state.halted

    def emit(self, row: str, style: Optional[str] = None) -> bool:
        """Append a row unless the global budget is spent.

        Args:
            row: Finished row.
            style: Style of the change in progress, used for the marker.

        Returns:
            True if the row was appended.
        """
        state = self._state
        if state.halted:
            return False
        if state.total_chunks >= self._config.max_chunks:
            self.chunks.append(self._marker(OUTPUT_TRUNCATED_MARKER, style))
            state.halted = True
            return False
        self.chunks.append(row)
        state.total_chunks += 1
        return True

    def begin_line(self) -> None:
        """Reset the per-line count for the next changed line."""
        self._state.line_chunks = 0
        self._line_halted = False

    def emit_line_row(self, row: str, style: Optional[str] = None) -> bool:
        """Append a row of the changed line in progress.

        Returns:
            True if the row was appended. False means the caller should
            stop producing rows for this line.
        """
        if self._state.halted or self._line_halted:
            return False
        if self._state.line_chunks >= self._config.max_chunks_per_line:
            self._line_halted = True
            self.emit(self._marker(LINE_TRUNCATED_MARKER, style), style)
            return False
        if not self.emit(row, style):
            return False
        self._state.line_chunks += 1
        return True

    def _marker(self, text: str, style: Optional[str]) -> str:
        return render_line(
            text, "", self._config.wrap_width, style, self._scheme, self._prefix_width
        )
