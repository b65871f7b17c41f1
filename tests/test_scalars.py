"""Tests for the scalar type map."""

import pytest

from gql_tsgen.core.scalars import (
    DEFAULT_SCALAR_TYPES,
    ScalarTypeMap,
    get_scalar_type_map,
    update_scalar_type_map,
)


class TestScalarTypeMap:
    """Tests for ScalarTypeMap."""

    def test_defaults(self):
        type_map = ScalarTypeMap()
        assert type_map.get("ID") == "string"
        assert type_map.get("String") == "string"
        assert type_map.get("Int") == "number"
        assert type_map.get("Float") == "number"
        assert type_map.get("Boolean") == "boolean"

    def test_get_missing_returns_default(self):
        type_map = ScalarTypeMap()
        assert type_map.get("Money") is None
        assert type_map.get("Money", "Money") == "Money"

    def test_update_adds_and_overwrites(self):
        type_map = ScalarTypeMap()
        type_map.update({"Date": "Date", "ID": "number"})
        assert type_map.get("Date") == "Date"
        assert type_map.get("ID") == "number"

    def test_update_never_removes(self):
        type_map = ScalarTypeMap()
        type_map.update({})
        assert dict(type_map.snapshot()) == DEFAULT_SCALAR_TYPES

    def test_overrides_in_constructor(self):
        type_map = ScalarTypeMap({"JSON": "unknown"})
        assert "JSON" in type_map
        assert "Int" in type_map

    def test_snapshot_is_read_only(self):
        snapshot = ScalarTypeMap().snapshot()
        with pytest.raises(TypeError):
            snapshot["ID"] = "number"

    def test_snapshot_is_detached(self):
        type_map = ScalarTypeMap()
        snapshot = type_map.snapshot()
        type_map.update({"Date": "Date"})
        assert "Date" not in snapshot

    def test_primitives(self):
        assert ScalarTypeMap().primitives == {"string", "number", "boolean"}

    def test_defaults_are_not_shared(self):
        first = ScalarTypeMap()
        first.update({"Date": "Date"})
        assert "Date" not in ScalarTypeMap()


class TestProcessWideMap:
    """Tests for the module-level registry API."""

    def test_get_returns_snapshot(self, fresh_scalar_map):
        snapshot = get_scalar_type_map()
        assert snapshot["Int"] == "number"
        with pytest.raises(TypeError):
            snapshot["Int"] = "string"

    def test_update_merges(self, fresh_scalar_map):
        update_scalar_type_map({"Date": "Date"})
        snapshot = get_scalar_type_map()
        assert snapshot["Date"] == "Date"
        assert snapshot["String"] == "string"
