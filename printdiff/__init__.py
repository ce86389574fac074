# printdiff/__init__.py
"""Readable, bounded diffs for fixed-width terminals.

Strings are compared line by line and shown with a few unchanged lines
of context around each change; long changed lines are reduced to
windows around their changed spans. Mappings and sequences are compared
key by key. Output is a list of rows, capped by configurable budgets.

Example:
    from printdiff import diff, DiffConfig

    for row in diff(old_text, new_text, DiffConfig(wrap_width=100)):
        print(row)
"""

from .api import diff, diff_strings, diff_structures, print_diff
from .changes import (
    Added,
    ChangeRecord,
    CharAdded,
    CharChange,
    CharEqual,
    CharRemoved,
    CharReplaced,
    Equal,
    Removed,
    Replaced,
)
from .colors import ColorScheme, DEFAULT_COLOR_SCHEME, NO_COLOR_SCHEME, select_scheme
from .config import DiffConfig, default_config
from .errors import DiffContractError, PrintDiffError, StructureTooDeepError
from .line_diff import compute_char_changes, compute_line_changes, split_lines
from .object_diff import DiffNode, diff_objects
from .render import RenderLoop, render_changes
from .structural import StructuralDiffWalker
from .wrap import line_break, wrap_rows

__all__ = [
    # Entry points
    "diff",
    "diff_strings",
    "diff_structures",
    "print_diff",
    # Configuration
    "DiffConfig",
    "default_config",
    # Color schemes
    "ColorScheme",
    "DEFAULT_COLOR_SCHEME",
    "NO_COLOR_SCHEME",
    "select_scheme",
    # Change stream
    "ChangeRecord",
    "Equal",
    "Removed",
    "Added",
    "Replaced",
    "CharChange",
    "CharEqual",
    "CharRemoved",
    "CharAdded",
    "CharReplaced",
    "compute_line_changes",
    "compute_char_changes",
    "split_lines",
    # Rendering
    "RenderLoop",
    "render_changes",
    "line_break",
    "wrap_rows",
    # Structural
    "DiffNode",
    "diff_objects",
    "StructuralDiffWalker",
    # Errors
    "PrintDiffError",
    "DiffContractError",
    "StructureTooDeepError",
]
