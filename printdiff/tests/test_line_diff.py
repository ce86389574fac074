# printdiff/tests/test_line_diff.py
"""Tests for change stream computation."""

from printdiff.changes import (
    Added,
    CharAdded,
    CharEqual,
    CharRemoved,
    CharReplaced,
    Equal,
    Removed,
    Replaced,
)
from printdiff.line_diff import compute_char_changes, compute_line_changes, split_lines


class TestSplitLines:

    def test_trailing_newline_ends_last_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_no_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_blank_last_line_kept(self):
        assert split_lines("a\n\n") == ["a", ""]

    def test_empty(self):
        assert split_lines("") == []


class TestComputeCharChanges:

    def test_insertion(self):
        assert compute_char_changes("e", "ex") == [CharEqual(1), CharAdded("x")]

    def test_replacement(self):
        assert compute_char_changes("abc", "axc") == [
            CharEqual(1), CharReplaced("b", "x"), CharEqual(1),
        ]

    def test_deletion(self):
        assert compute_char_changes("abc", "ac") == [
            CharEqual(1), CharRemoved("b"), CharEqual(1),
        ]


class TestComputeLineChanges:

    def test_removed_line(self):
        assert compute_line_changes(["a", "b", "c"], ["a", "c"]) == [
            Equal(1), Removed(1), Equal(1),
        ]

    def test_added_line(self):
        assert compute_line_changes(["a", "c"], ["a", "b", "c"]) == [
            Equal(1), Added("b"), Equal(1),
        ]

    def test_replace_block_pairs_lines(self):
        assert compute_line_changes(["a", "b"], ["x", "y", "z"]) == [
            Replaced(0, (CharReplaced("a", "x"),)),
            Replaced(1, (CharReplaced("b", "y"),)),
            Added("z"),
        ]

    def test_surplus_old_lines_removed(self):
        assert compute_line_changes(["a", "b"], ["x"]) == [
            Replaced(0, (CharReplaced("a", "x"),)),
            Removed(1),
        ]


class TestReplaced:

    def test_new_text(self):
        record = Replaced(0, (CharEqual(1), CharAdded("x")))

        assert record.new_text("e") == "ex"
        assert record.old_length() == 1

    def test_old_length_ignores_insertions(self):
        record = Replaced(0, (CharRemoved("ab"), CharAdded("xyz"), CharReplaced("c", "d")))

        assert record.old_length() == 3
        assert record.new_text("abc") == "xyzd"
