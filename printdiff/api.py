# printdiff/api.py
"""Entry points: diff two values and print the result.

Usage:
    from printdiff import diff, print_diff, DiffConfig

    rows = diff("a\\nb\\n", "a\\nbx\\n", DiffConfig(colors=False))
    print_diff({"a": 1}, {"a": 2})
"""

import sys
from typing import Any, List, Optional, TextIO

from .colors import ColorScheme, select_scheme
from .config import DiffConfig, default_config
from .line_diff import compute_line_changes, split_lines
from .object_diff import DEFAULT_MAX_DEPTH, diff_objects, is_structure
from .render import RenderLoop, render_changes
from .structural import StructuralDiffWalker


def diff_strings(
    a: str,
    b: str,
    config: Optional[DiffConfig] = None,
    scheme: Optional[ColorScheme] = None,
) -> List[str]:
    """Diff two texts line by line.

    Returns:
        Rows in display order; empty when the texts are equal.
    """
    if a == b:
        return []
    config = config or DiffConfig()
    old_lines = split_lines(a)
    new_lines = split_lines(b)
    if old_lines == new_lines:
        # Only the final newline differs
        return RenderLoop(old_lines, config, scheme).run_final_newline(
            removed=a.endswith("\n")
        )
    changes = compute_line_changes(old_lines, new_lines)
    return render_changes(changes, old_lines, config, scheme)


def diff_structures(
    a: Any,
    b: Any,
    config: Optional[DiffConfig] = None,
    scheme: Optional[ColorScheme] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[str]:
    """Diff two nested mappings or sequences, one row per changed leaf."""
    config = config or DiffConfig()
    tree = diff_objects(a, b, max_depth=max_depth)
    return StructuralDiffWalker(config, scheme).walk(tree)


def diff(a: Any, b: Any, config: Optional[DiffConfig] = None) -> List[str]:
    """Diff two values of any kind.

    Strings are diffed line by line, mappings and sequences structurally.
    Any other pair yields a single "old -> new" row when they differ.

    Args:
        a: First operand, the base of the comparison.
        b: Second operand.
        config: Rendering options (defaults to DiffConfig()).

    Returns:
        Rows in display order; empty when the values are equal.
    """
    config = config or DiffConfig()
    scheme = select_scheme(config.colors)

    if isinstance(a, str) and isinstance(b, str):
        return diff_strings(a, b, config, scheme)
    if is_structure(a) and is_structure(b):
        return diff_structures(a, b, config, scheme)

    walker = StructuralDiffWalker(config, scheme)
    if a is b or (type(a) is type(b) and a == b):
        return []
    return [walker.change_row(a, b)]


def print_diff(
    a: Any,
    b: Any,
    config: Optional[DiffConfig] = None,
    file: Optional[TextIO] = None,
) -> List[str]:
    """Diff two values and write the rows to `file` (default stdout).

    Without a config the terminal is inspected for width and color
    support, then PRINTDIFF_* environment overrides are applied.

    Returns:
        The rows written.
    """
    if config is None:
        config = default_config()
    rows = diff(a, b, config)
    if rows:
        out = file if file is not None else sys.stdout
        out.write("\n".join(rows) + "\n")
    return rows
