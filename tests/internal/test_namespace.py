"""Tests for the dict merge utility."""

import pytest

from restserver_sdk._internal.namespace import copy, generate_guid


class TestCopy:
    """Tests for copy() on plain mappings."""

    def test_keeps_existing_keys_without_overwrite(self):
        """Should only add keys missing from the target."""
        assert copy({"a": 1}, {"a": 2, "b": 2}) == {"a": 1, "b": 2}

    def test_overwrite_replaces_existing_keys(self):
        """Should replace existing keys when overwrite is set."""
        assert copy({"a": 1}, {"a": 2, "b": 2}, True) == {"a": 2, "b": 2}

    def test_returns_same_target(self):
        """Should mutate and return the target itself."""
        target = {"a": 1}
        assert copy(target, {"b": 2}) is target

    def test_shallow_clone_leaves_source_untouched(self):
        """Should allow cloning params without touching the original."""
        original = {"method": "users.getInfo"}
        clone = copy({}, original)
        clone["sig"] = "abc"
        assert original == {"method": "users.getInfo"}

    def test_existing_none_value_is_kept(self):
        """Should treat a key holding None as present."""
        assert copy({"a": None}, {"a": 1}) == {"a": None}


class TestCopyPath:
    """Tests for copy() with a dotted path target."""

    def test_creates_nested_containers(self):
        """Should create every missing segment under the root."""
        root: dict = {}
        result = copy("x.y", {"z": 1}, root=root)
        assert root == {"x": {"y": {"z": 1}}}
        assert result is root["x"]["y"]

    def test_preserves_siblings(self):
        """Should not disturb keys already present under the parent."""
        root = {"x": {"w": 5}}
        copy("x.y", {"z": 1}, root=root)
        assert root == {"x": {"w": 5, "y": {"z": 1}}}

    def test_empty_path_targets_root(self):
        """Should resolve an empty path to the root itself."""
        root = {"a": 1}
        assert copy("", {"b": 2}, root=root) is root
        assert root == {"a": 1, "b": 2}

    def test_empty_segments_are_skipped(self):
        """Should ignore empty segments in the path."""
        root: dict = {}
        copy(".x..y.", {"z": 1}, root=root)
        assert root == {"x": {"y": {"z": 1}}}

    def test_path_without_root_raises(self):
        """Should refuse to resolve a path without an explicit root."""
        with pytest.raises(ValueError):
            copy("x.y", {"z": 1})

    def test_path_through_scalar_raises(self):
        """Should refuse to descend into a non-mapping value."""
        with pytest.raises(ValueError):
            copy("x.y", {"z": 1}, root={"x": 3})


class TestGenerateGuid:
    """Tests for generate_guid()."""

    def test_format(self):
        """Should be an "f" followed by hex digits."""
        guid = generate_guid()
        assert guid.startswith("f")
        int(guid[1:], 16)

    def test_mostly_unique(self):
        """Should not repeat across a handful of calls."""
        assert len({generate_guid() for _ in range(50)}) == 50
