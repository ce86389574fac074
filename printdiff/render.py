# printdiff/render.py
"""Render loop: turns a change stream into display rows.

The stream is consumed once, in order. Each record is dispatched to the
context windows and row renderers, and every row passes through the
budget enforcer before it lands in the output.

All line and column numbers are those of the first operand: the output
shows what to do to `a` to obtain `b`.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .budget import BudgetEnforcer
from .changes import Added, ChangeRecord, Equal, Removed, Replaced
from .colors import ColorScheme, select_scheme
from .config import DiffConfig
from .context import GAP, ColumnContextWindow, LineContextWindow
from .display_width import display_width
from .errors import DiffContractError
from .line import pad_prefix, prefix_width_for, render_line
from .state import RenderState
from .wrap import wrap_rows

logger = logging.getLogger(__name__)

GAP_MARKER = "..."

NEWLINE_ADDED_MARKER = "\\ newline added at end of text"
NEWLINE_REMOVED_MARKER = "\\ newline removed at end of text"


class RenderLoop:
    """Renders one change stream against the lines of the first operand.

    A RenderLoop owns the state of a single render and is not reused.
    """

    def __init__(
        self,
        lines: Sequence[str],
        config: DiffConfig,
        scheme: Optional[ColorScheme] = None,
    ):
        self._lines = lines
        self._config = config
        self._scheme = scheme if scheme is not None else select_scheme(config.colors)
        self._prefix_width = prefix_width_for(len(lines), self._scheme.sign_width)

        self.state = RenderState()
        self._budget = BudgetEnforcer(
            config, self._scheme, self.state, self._prefix_width
        )
        self._window = LineContextWindow(len(lines), config, self.state)
        self._columns = ColumnContextWindow(config, self._scheme)
        self._changed = False

    def run(self, changes: Iterable[ChangeRecord]) -> List[str]:
        """Consume the change stream and return the rows.

        Raises:
            DiffContractError: If a record does not line up with the
                first operand.
        """
        for record in changes:
            if self.state.halted:
                break
            if isinstance(record, Equal):
                self._on_equal(record)
            elif isinstance(record, Removed):
                self._on_removed(record)
            elif isinstance(record, Added):
                self._on_added(record)
            elif isinstance(record, Replaced):
                self._on_replaced(record)
            else:
                logger.warning("Skipping unknown change record: %r", record)

        if self._changed and not self.state.halted:
            self._emit_plan(self._window.finish(), None)

        logger.debug(
            "Rendered %d rows for %d lines (truncated=%s)",
            len(self._budget.chunks), len(self._lines), self.state.halted,
        )
        return self._budget.chunks

    def run_final_newline(self, removed: bool) -> List[str]:
        """Render texts whose lines match but whose final newline differs.

        Shows the context before the end of the text and one marker row
        saying whether the newline was removed or added.
        """
        line = len(self._lines)
        style = self._scheme.changed
        if self._emit_context(line, style):
            marker = NEWLINE_REMOVED_MARKER if removed else NEWLINE_ADDED_MARKER
            self._budget.emit(self._row(marker, self._scheme.changed_sign, style), style)
        return self._budget.chunks

    # ==================== Record handlers ====================

    def _on_equal(self, record: Equal) -> None:
        end = self.state.current_line + record.count
        if record.count < 0 or end > len(self._lines):
            raise DiffContractError(
                f"unchanged run of {record.count} lines overruns the text",
                self.state.current_line,
            )
        self.state.current_line = end

    def _on_removed(self, record: Removed) -> None:
        line = self._check_position(record.line)
        style = self._scheme.removed
        self._changed = True

        if not self._emit_context(line, style):
            return
        self._budget.emit(
            self._numbered_row(line, style, self._scheme.removed_sign), style
        )
        self._window.mark_changed(line)
        self.state.current_line = line + 1

    def _on_added(self, record: Added) -> None:
        line = self.state.current_line
        style = self._scheme.added
        self._changed = True

        if not self._emit_context(line, style):
            return
        text = record.text
        if text.endswith("\n"):
            text = text[:-1]
        self._budget.emit(self._row(text, self._scheme.added_sign, style), style)
        self._window.mark_added(line)

    def _on_replaced(self, record: Replaced) -> None:
        line = self._check_position(record.line)
        old_text = self._lines[line]
        if record.old_length() != len(old_text):
            raise DiffContractError(
                f"character changes cover {record.old_length()} "
                f"of {len(old_text)} columns",
                line,
            )
        style = self._scheme.changed
        self._changed = True

        if not self._emit_context(line, style):
            return

        self._budget.begin_line()
        new_text = record.new_text(old_text)
        available = self._config.wrap_width - len(pad_prefix("", self._prefix_width))
        if display_width(old_text) <= available and display_width(new_text) <= available:
            self._emit_line_pair(line, new_text)
        else:
            self._emit_line_entries(line, record)

        self._window.mark_changed(line)
        self.state.current_line = line + 1

    # ==================== Row helpers ====================

    def _emit_line_pair(self, line: int, new_text: str) -> None:
        """Show a short changed line whole: old row, then new row."""
        scheme = self._scheme
        old_row = self._numbered_row(line, scheme.removed, scheme.removed_sign)
        if self._budget.emit_line_row(old_row, scheme.removed):
            new_row = self._row(new_text, scheme.added_sign, scheme.added)
            self._budget.emit_line_row(new_row, scheme.added)

    def _emit_line_entries(self, line: int, record: Replaced) -> None:
        """Show a long changed line as windows around its changed spans."""
        style = self._scheme.changed
        entries = self._columns.build(self._lines[line], record.changes, line)
        for index, entry in enumerate(entries):
            label = self._scheme.changed_sign + str(line + 1) if index == 0 else ""
            prefix = self._scheme.apply(style, pad_prefix(label, self._prefix_width))
            rows = wrap_rows(
                prefix + entry.display_value,
                self._config.wrap_width,
                indent=self._prefix_width,
                reset=self._scheme.reset,
            )
            for row in rows:
                if not self._budget.emit_line_row(row, style):
                    return

    def _emit_context(self, line: int, style: Optional[str]) -> bool:
        return self._emit_plan(self._window.before_change(line), style)

    def _emit_plan(self, plan: List[Optional[int]], style: Optional[str]) -> bool:
        for item in plan:
            if item is GAP:
                row = self._scheme.apply(self._scheme.gap, GAP_MARKER)
            else:
                row = self._numbered_row(item, None)
            if not self._budget.emit(row, style):
                return False
        return True

    def _numbered_row(self, line: int, style: Optional[str], sign: str = "") -> str:
        return self._row(self._lines[line], sign + str(line + 1), style)

    def _row(self, body: str, prefix: str, style: Optional[str]) -> str:
        return render_line(
            body, prefix, self._config.wrap_width, style, self._scheme,
            self._prefix_width,
        )

    def _check_position(self, line: int) -> int:
        current = self.state.current_line
        if line != current:
            raise DiffContractError(
                f"record for line {line + 1} arrived at line {current + 1}", line
            )
        if line >= len(self._lines):
            raise DiffContractError("record past the end of the text", line)
        return line


def render_changes(
    changes: Iterable[ChangeRecord],
    lines: Sequence[str],
    config: Optional[DiffConfig] = None,
    scheme: Optional[ColorScheme] = None,
) -> List[str]:
    """Render a change stream into display rows.

    Args:
        changes: Ordered change records for `lines`.
        lines: Lines of the first operand.
        config: Rendering options (defaults to DiffConfig()).
        scheme: Color scheme override; picked from config.colors if None.

    Returns:
        Rows in display order; empty when there are no changes.
    """
    return RenderLoop(lines, config or DiffConfig(), scheme).run(changes)
