# printdiff/tests/test_object_diff.py
"""Tests for structural diff trees."""

import pytest

from printdiff.errors import StructureTooDeepError
from printdiff.object_diff import (
    ADDED,
    EQUAL,
    OBJECT_CHANGE,
    PRIMITIVE_CHANGE,
    REMOVED,
    diff_objects,
    is_structure,
    join_path,
)


class TestJoinPath:

    def test_root_key(self):
        assert join_path("", "a") == "a"

    def test_nested_key(self):
        assert join_path("a", "b") == "a.b"

    def test_index(self):
        assert join_path("a.b", "0") == "a.b[0]"
        assert join_path("", "3") == "[3]"


class TestIsStructure:

    def test_structures(self):
        assert is_structure({})
        assert is_structure([1])
        assert is_structure((1,))

    def test_strings_are_leaves(self):
        assert not is_structure("abc")
        assert not is_structure(b"abc")
        assert not is_structure(3)


class TestDiffObjects:

    def test_equal(self):
        assert diff_objects({"a": [1, 2]}, {"a": [1, 2]}).changed == EQUAL

    def test_nested_change(self):
        root = diff_objects({"a": {"b": [1, 2]}}, {"a": {"b": [1, 3]}})

        assert root.changed == OBJECT_CHANGE
        leaf = root.value["a"].value["b"].value["1"]
        assert leaf.changed == PRIMITIVE_CHANGE
        assert (leaf.removed, leaf.added) == (2, 3)
        assert root.value["a"].value["b"].value["0"].changed == EQUAL

    def test_removed_and_added_keys(self):
        root = diff_objects({"a": 1, "b": 2}, {"a": 1, "c": 3})

        assert root.value["b"].changed == REMOVED
        assert root.value["b"].value == 2
        assert root.value["c"].changed == ADDED
        assert list(root.value) == ["a", "b", "c"]

    def test_numeric_types_are_distinct(self):
        assert diff_objects(1, 1.0).changed == PRIMITIVE_CHANGE
        assert diff_objects(True, 1).changed == PRIMITIVE_CHANGE

    def test_mapping_against_sequence(self):
        assert diff_objects({"0": 1}, [1]).changed == PRIMITIVE_CHANGE

    def test_cycles_terminate(self):
        a = []
        a.append(a)
        b = []
        b.append(b)

        assert diff_objects(a, b).changed == EQUAL

    def test_depth_limit(self):
        with pytest.raises(StructureTooDeepError) as exc_info:
            diff_objects([[[[1]]]], [[[[2]]]], max_depth=2)

        assert exc_info.value.max_depth == 2
        assert exc_info.value.path == "[0][0]"

    def test_depth_within_limit(self):
        assert diff_objects([[[[1]]]], [[[[2]]]], max_depth=10).changed == OBJECT_CHANGE
