# printdiff/line_diff.py
"""Line-level and character-level diff computation.

Produces the ordered change stream the renderer consumes, using
difflib.SequenceMatcher for both granularities.
"""

import difflib
from typing import List, Sequence

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


def split_lines(text: str) -> List[str]:
    """Split text on newlines.

    A trailing newline terminates the last line instead of starting an
    empty one, so "a\\nb\\n" has two lines.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def compute_char_changes(old_line: str, new_line: str) -> List[CharChange]:
    """Find character-level differences between two lines.

    Args:
        old_line: Line from operand A.
        new_line: Line from operand B.

    Returns:
        CharChange list covering every character of old_line.
    """
    matcher = difflib.SequenceMatcher(None, old_line, new_line, autojunk=False)

    changes: List[CharChange] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            changes.append(CharEqual(i2 - i1))
        elif tag == "delete":
            changes.append(CharRemoved(old_line[i1:i2]))
        elif tag == "insert":
            changes.append(CharAdded(new_line[j1:j2]))
        else:
            changes.append(CharReplaced(old_line[i1:i2], new_line[j1:j2]))
    return changes


def compute_line_changes(
    old_lines: Sequence[str], new_lines: Sequence[str]
) -> List[ChangeRecord]:
    """Diff two line lists into an ordered change stream.

    Replace blocks pair old and new lines one to one into Replaced
    records; surplus old lines become Removed and surplus new lines
    Added, in that order.

    Args:
        old_lines: Lines of operand A.
        new_lines: Lines of operand B.

    Returns:
        Change records in increasing order of position in A.
    """
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    records: List[ChangeRecord] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            records.append(Equal(i2 - i1))
        elif tag == "delete":
            records.extend(Removed(i) for i in range(i1, i2))
        elif tag == "insert":
            records.extend(Added(new_lines[j]) for j in range(j1, j2))
        else:
            paired = min(i2 - i1, j2 - j1)
            for offset in range(paired):
                old_line = old_lines[i1 + offset]
                new_line = new_lines[j1 + offset]
                records.append(Replaced(
                    i1 + offset, tuple(compute_char_changes(old_line, new_line))
                ))
            records.extend(Removed(i) for i in range(i1 + paired, i2))
            records.extend(Added(new_lines[j]) for j in range(j1 + paired, j2))
    return records
