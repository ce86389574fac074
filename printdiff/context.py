# printdiff/context.py
"""Context selection around changes.

LineContextWindow picks the unchanged lines shown before and after each
changed line. ColumnContextWindow does the same inside one long changed
line: it groups nearby highlighted spans into shared display entries and
keeps a little unchanged text around each group.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .changes import CharAdded, CharChange, CharEqual, CharRemoved, CharReplaced
from .colors import ColorScheme
from .config import DiffConfig
from .errors import DiffContractError
from .state import RenderState

ELLIPSIS = "..."

# Placeholder in a line plan for a gap marker row
GAP = None


class LineContextWindow:
    """Plans which unchanged lines to show around each change.

    Plans are lists of line indices in the first operand, with GAP where
    a gap marker row belongs. The window records every planned line in
    the shared RenderState so no line is planned twice.
    """

    def __init__(self, line_count: int, config: DiffConfig, state: RenderState):
        self._line_count = line_count
        self._context_lines = config.context_lines
        self._show_gaps = config.show_gaps
        self._state = state

    def before_change(self, line: int) -> List[Optional[int]]:
        """Plan the context rows owed before a change at `line`.

        Covers the previous change's post-context first, then this
        change's pre-context, with a gap marker between them when they
        do not touch.
        """
        reached = self._reached()
        plan = self._post_context(line)

        state = self._state
        start = max(line - self._context_lines, state.last_emitted_line + 1, 0)
        if self._show_gaps and start > max(reached, state.last_emitted_line) + 1:
            plan.append(GAP)
        plan.extend(self._take(start, line))
        return plan

    def mark_changed(self, line: int) -> None:
        """Record a removed or replaced row for `line`."""
        self._state.last_emitted_line = line
        self._state.pending_post_context_line = line + 1

    def mark_added(self, line: int) -> None:
        """Record added text inserted before `line`."""
        self._state.pending_post_context_line = line

    def finish(self) -> List[Optional[int]]:
        """Plan the rows owed after the last change.

        The end of the text acts as the next change: the pending
        post-context is flushed, then a gap marker follows when the last
        line was not reached.
        """
        reached = self._reached()
        plan = self._post_context(self._line_count)
        reached = max(reached, self._state.last_emitted_line)
        if self._show_gaps and reached < self._line_count - 1:
            plan.append(GAP)
        return plan

    def _reached(self) -> int:
        # Text added before line N reaches line N - 1 even when none is shown
        state = self._state
        return max(state.last_emitted_line, state.pending_post_context_line - 1)

    def _post_context(self, limit: int) -> List[Optional[int]]:
        state = self._state
        pending = state.pending_post_context_line
        if pending < 0:
            return []
        state.pending_post_context_line = -1
        start = max(pending, state.last_emitted_line + 1)
        end = min(pending + self._context_lines, limit)
        return list(self._take(start, end))

    def _take(self, start: int, end: int) -> range:
        if start < end:
            self._state.last_emitted_line = end - 1
        return range(start, end)


@dataclass
class Span:
    """One highlighted region of a changed line, in columns of the old line."""
    start: int
    end: int
    removed: str = ""
    added: str = ""


@dataclass
class ContextEntry:
    """A group of spans plus their surrounding context, built incrementally."""
    start_column: int
    end_column: int
    parts: List[str] = field(default_factory=list)

    @property
    def display_value(self) -> str:
        return "".join(self.parts)

    def append(self, text: str, end_column: int) -> None:
        self.parts.append(text)
        self.end_column = max(self.end_column, end_column)


def collect_spans(
    line: str, changes: Sequence[CharChange], line_index: int = -1
) -> List[Span]:
    """Turn a character sub-diff into spans positioned in the old line.

    Raises:
        DiffContractError: If the sub-diff does not cover the whole line.
    """
    spans: List[Span] = []
    column = 0
    for change in changes:
        if isinstance(change, CharEqual):
            column += change.length
        elif isinstance(change, CharRemoved):
            spans.append(Span(column, column + len(change.text), removed=change.text))
            column += len(change.text)
        elif isinstance(change, CharAdded):
            spans.append(Span(column, column, added=change.text))
        elif isinstance(change, CharReplaced):
            spans.append(Span(
                column, column + len(change.removed),
                removed=change.removed, added=change.added,
            ))
            column += len(change.removed)
        else:
            raise DiffContractError(
                f"unknown character change {type(change).__name__}", line_index
            )

    if column != len(line):
        raise DiffContractError(
            f"character changes cover {column} of {len(line)} columns", line_index
        )
    return spans


class ColumnContextWindow:
    """Groups the spans of one changed line into display entries.

    Spans closer than the merge distance share an entry, joined by the
    unchanged text between them. Each entry shows up to context_columns
    unchanged characters on either side, with "..." where the line
    continues beyond what is shown.
    """

    def __init__(self, config: DiffConfig, scheme: ColorScheme):
        self._context = config.context_columns
        self._max_columns = config.max_columns
        self._merge_distance = config.span_merge_distance
        self._scheme = scheme

    def build(
        self, line: str, changes: Sequence[CharChange], line_index: int = -1
    ) -> List[ContextEntry]:
        """Build the display entries for one changed line.

        Args:
            line: The line as it reads in the first operand.
            changes: Character sub-diff covering the whole line.
            line_index: Line position, used in error messages.

        Returns:
            Entries in column order.
        """
        entries: List[ContextEntry] = []
        current: Optional[ContextEntry] = None

        for span in collect_spans(line, changes, line_index):
            if current is None:
                current = self._open(line, span)
            elif span.start - current.end_column <= self._merge_distance:
                current.append(line[current.end_column:span.start], span.start)
                current.append(self._highlight(span), span.end)
            else:
                self._close(line, current)
                entries.append(current)
                current = self._open(line, span)

        if current is not None:
            self._close(line, current)
            entries.append(current)
        return entries

    def _open(self, line: str, span: Span) -> ContextEntry:
        start = max(span.start - self._context, 0)
        entry = ContextEntry(start_column=start, end_column=start)
        if start > 0:
            entry.append(ELLIPSIS, start)
        entry.append(line[start:span.start], span.start)
        entry.append(self._highlight(span), span.end)
        return entry

    def _close(self, line: str, entry: ContextEntry) -> None:
        end = min(entry.end_column + self._context, len(line))
        entry.append(line[entry.end_column:end], end)
        if end < len(line):
            entry.append(ELLIPSIS, end)

    def _highlight(self, span: Span) -> str:
        return (
            self._scheme.removed_span(self._clip(span.removed))
            + self._scheme.added_span(self._clip(span.added))
        )

    def _clip(self, text: str) -> str:
        if len(text) <= self._max_columns:
            return text
        return text[:self._max_columns] + ELLIPSIS
