# printdiff/structural.py
"""Rows for structural diffs.

Walks a DiffNode tree and emits one row per changed leaf:

    *   path = old -> new
    -   path = value
    +   path = value

Each row is wrapped to the display width on its own; there is no
context selection for structural diffs. The max_chunks budget applies
as it does to text diffs.
"""

from typing import Any, List, Optional

from .budget import BudgetEnforcer
from .colors import ColorScheme, select_scheme
from .config import DiffConfig
from .line import MIN_PREFIX_WIDTH
from .object_diff import (
    ADDED,
    OBJECT_CHANGE,
    PRIMITIVE_CHANGE,
    REMOVED,
    DiffNode,
    join_path,
)
from .state import RenderState
from .wrap import line_break


def format_value(value: Any) -> str:
    return repr(value)


class StructuralDiffWalker:
    """Formats the changed leaves of a structural diff.

    Rows go through a BudgetEnforcer, so a large structural diff is cut
    off at max_chunks with the same marker row as a text diff.
    """

    def __init__(self, config: DiffConfig, scheme: Optional[ColorScheme] = None):
        self._config = config
        self._scheme = scheme if scheme is not None else select_scheme(config.colors)

    def walk(self, node: DiffNode, path: str = "") -> List[str]:
        budget = BudgetEnforcer(
            self._config, self._scheme, RenderState(), MIN_PREFIX_WIDTH
        )
        self._walk(node, path, budget)
        return budget.chunks

    def change_row(self, old: Any, new: Any, path: str = "") -> str:
        """Row for a changed value; the path is omitted at the root."""
        scheme = self._scheme
        old_text = scheme.apply(scheme.removed, format_value(old))
        new_text = scheme.apply(scheme.added, format_value(new))
        if path:
            row = f"{scheme.apply(scheme.changed, '*   ' + path)} = {old_text} -> {new_text}"
        else:
            row = f"{scheme.apply(scheme.changed, '*')}   {old_text} -> {new_text}"
        return self._wrap(row)

    def _walk(self, node: DiffNode, path: str, budget: BudgetEnforcer) -> None:
        scheme = self._scheme
        if node.changed == OBJECT_CHANGE:
            for key, child in node.value.items():
                if budget.halted:
                    return
                self._walk(child, join_path(path, key), budget)
        elif node.changed == PRIMITIVE_CHANGE:
            budget.emit(self.change_row(node.removed, node.added, path), scheme.changed)
        elif node.changed == REMOVED:
            budget.emit(self._wrap(
                f"{scheme.apply(scheme.removed, '-   ' + path)}"
                f" = {scheme.apply(scheme.removed, format_value(node.value))}"
            ), scheme.removed)
        elif node.changed == ADDED:
            budget.emit(self._wrap(
                f"{scheme.apply(scheme.added, '+   ' + path)}"
                f" = {scheme.apply(scheme.added, format_value(node.value))}"
            ), scheme.added)

    def _wrap(self, row: str) -> str:
        return line_break(
            row, self._config.wrap_width, self._config.indent, self._scheme.reset
        )


def walk(
    node: DiffNode,
    config: Optional[DiffConfig] = None,
    scheme: Optional[ColorScheme] = None,
) -> List[str]:
    """Format a structural diff tree into rows."""
    return StructuralDiffWalker(config or DiffConfig(), scheme).walk(node)
