# printdiff/changes.py
"""Change records consumed by the renderer.

Line-level records describe how operand A turns into operand B, in
increasing order of position in A. A Replaced record carries the
character-level sub-diff of its line.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class CharEqual:
    """Unchanged run of characters."""
    length: int


@dataclass(frozen=True)
class CharRemoved:
    """Characters present only in the old line."""
    text: str


@dataclass(frozen=True)
class CharAdded:
    """Characters present only in the new line."""
    text: str


@dataclass(frozen=True)
class CharReplaced:
    """Characters of the old line replaced by different ones."""
    removed: str
    added: str


CharChange = Union[CharEqual, CharRemoved, CharAdded, CharReplaced]


@dataclass(frozen=True)
class Equal:
    """A run of unchanged lines."""
    count: int = 1


@dataclass(frozen=True)
class Removed:
    """Line `line` of A does not exist in B."""
    line: int


@dataclass(frozen=True)
class Added:
    """Text inserted before the current position in A."""
    text: str


@dataclass(frozen=True)
class Replaced:
    """Line `line` of A was edited; `changes` covers the whole line."""
    line: int
    changes: Tuple[CharChange, ...] = ()

    def old_length(self) -> int:
        """Number of characters of A the sub-diff accounts for."""
        total = 0
        for change in self.changes:
            if isinstance(change, CharEqual):
                total += change.length
            elif isinstance(change, CharRemoved):
                total += len(change.text)
            elif isinstance(change, CharReplaced):
                total += len(change.removed)
        return total

    def new_text(self, old_line: str) -> str:
        """Rebuild the B side of the line from the A side and the sub-diff."""
        parts = []
        column = 0
        for change in self.changes:
            if isinstance(change, CharEqual):
                parts.append(old_line[column:column + change.length])
                column += change.length
            elif isinstance(change, CharRemoved):
                column += len(change.text)
            elif isinstance(change, CharAdded):
                parts.append(change.text)
            elif isinstance(change, CharReplaced):
                parts.append(change.added)
                column += len(change.removed)
        return "".join(parts)


ChangeRecord = Union[Equal, Removed, Added, Replaced]
