# printdiff/object_diff.py
"""Structural diff of nested mappings and sequences.

Produces a tree of DiffNode values mirroring the operands: mapping keys
and sequence indices become string keys, leaves record what changed.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Set, Tuple

from .errors import StructureTooDeepError

logger = logging.getLogger(__name__)

EQUAL = "equal"
OBJECT_CHANGE = "object change"
PRIMITIVE_CHANGE = "primitive change"
REMOVED = "removed"
ADDED = "added"

DEFAULT_MAX_DEPTH = 200

# Keys made only of digits are shown as indices
INDEX_PATTERN = re.compile(r"^\d+$")


@dataclass
class DiffNode:
    """One node of a structural diff.

    Attributes:
        changed: One of EQUAL, OBJECT_CHANGE, PRIMITIVE_CHANGE, REMOVED, ADDED.
        value: Children by key for OBJECT_CHANGE; the value itself for
            EQUAL, REMOVED and ADDED.
        removed: Old value for PRIMITIVE_CHANGE.
        added: New value for PRIMITIVE_CHANGE.
    """
    changed: str
    value: Any = None
    removed: Any = None
    added: Any = None


def is_structure(value: Any) -> bool:
    """Mappings and non-string sequences are diffed structurally."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def join_path(path: str, key: str) -> str:
    """Append a key to a display path: `key`, `.key` or `[index]`."""
    if INDEX_PATTERN.match(key):
        return f"{path}[{key}]"
    return f"{path}.{key}" if path else key


def diff_objects(a: Any, b: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> DiffNode:
    """Diff two values structurally.

    Args:
        a: First operand.
        b: Second operand.
        max_depth: Deepest nesting level compared.

    Returns:
        Root DiffNode.

    Raises:
        StructureTooDeepError: If the operands nest deeper than max_depth.
    """
    return _diff(a, b, "", 0, max_depth, set())


def _diff(
    a: Any,
    b: Any,
    path: str,
    depth: int,
    max_depth: int,
    active: Set[Tuple[int, int]],
) -> DiffNode:
    if _same_kind_structures(a, b):
        pair = (id(a), id(b))
        if pair in active:
            # Already being compared further up this path
            logger.debug("Skipping cyclic reference at %s", path or "<root>")
            return DiffNode(EQUAL, value=a)
        if depth >= max_depth:
            raise StructureTooDeepError(path, max_depth)

        active.add(pair)
        try:
            children = _diff_children(a, b, path, depth, max_depth, active)
        finally:
            active.discard(pair)

        if all(child.changed == EQUAL for child in children.values()):
            return DiffNode(EQUAL, value=a)
        return DiffNode(OBJECT_CHANGE, value=children)

    if _same_value(a, b):
        return DiffNode(EQUAL, value=a)
    return DiffNode(PRIMITIVE_CHANGE, removed=a, added=b)


def _diff_children(
    a: Any,
    b: Any,
    path: str,
    depth: int,
    max_depth: int,
    active: Set[Tuple[int, int]],
) -> Dict[str, DiffNode]:
    new_items = dict(_items(b))
    children: Dict[str, DiffNode] = {}

    for key, old_value in _items(a):
        if key in new_items:
            children[key] = _diff(
                old_value, new_items[key], join_path(path, key),
                depth + 1, max_depth, active,
            )
        else:
            children[key] = DiffNode(REMOVED, value=old_value)

    for key, new_value in new_items.items():
        if key not in children:
            children[key] = DiffNode(ADDED, value=new_value)

    return children


def _items(value: Any) -> List[Tuple[str, Any]]:
    if isinstance(value, Mapping):
        return [(str(key), item) for key, item in value.items()]
    return [(str(index), item) for index, item in enumerate(value)]


def _same_kind_structures(a: Any, b: Any) -> bool:
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return True
    return (
        is_structure(a) and is_structure(b)
        and not isinstance(a, Mapping) and not isinstance(b, Mapping)
    )


def _same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # 1, 1.0 and True compare equal in Python but read differently
    return type(a) is type(b) and a == b
