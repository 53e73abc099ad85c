"""Tests for ValueBuilder.

Covers every TOML kind, bool/int dispatch ordering, datetime variants,
immutability of the built tree, nesting, depth limits, and TypeError on
unsupported input.
"""

from __future__ import annotations

import datetime

import pytest

from difftoml.algorithm.config import max_depth_limit
from difftoml.errors import TooDeepError
from difftoml.tree.builder import ValueBuilder
from difftoml.tree.nodes import Value, ValueKind

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> ValueBuilder:
    """A fresh ValueBuilder instance for each test."""
    return ValueBuilder()


def _nested(depth: int) -> dict[str, object]:
    """Return a document whose innermost table sits at ``depth``."""
    doc: dict[str, object] = {"leaf": 1}
    for _ in range(depth - 1):
        doc = {"child": doc}
    return doc


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class TestScalars:
    @pytest.mark.parametrize(
        ("raw", "kind"),
        [
            ("hello", ValueKind.STRING),
            (123, ValueKind.INTEGER),
            (1.23, ValueKind.FLOAT),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (datetime.datetime(1979, 5, 27, 7, 32), ValueKind.DATETIME),
            (datetime.date(1979, 5, 27), ValueKind.DATETIME),
            (datetime.time(7, 32), ValueKind.DATETIME),
        ],
    )
    def test_kind(self, builder: ValueBuilder, raw: object, kind: ValueKind) -> None:
        value = builder.build(raw)
        assert value.kind == kind
        assert value.data == raw

    def test_bool_is_not_integer(self, builder: ValueBuilder) -> None:
        # CRITICAL: bool subclasses int in Python
        assert builder.build(True).kind == ValueKind.BOOLEAN

    def test_unsupported_type_raises(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError, match="Unsupported TOML value type"):
            builder.build(None)

    def test_unsupported_nested_type_raises(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError):
            builder.build({"a": {"b": object()}})


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class TestContainers:
    def test_table(self, builder: ValueBuilder) -> None:
        value = builder.build({"name": "first", "count": 2})
        assert value.kind == ValueKind.TABLE
        assert list(value.keys()) == ["name", "count"]
        assert value.get("name") == Value(ValueKind.STRING, "first")

    def test_table_is_read_only(self, builder: ValueBuilder) -> None:
        value = builder.build({"a": 1})
        with pytest.raises(TypeError):
            value.data["b"] = Value(ValueKind.INTEGER, 2)

    def test_array_is_tuple_of_values(self, builder: ValueBuilder) -> None:
        value = builder.build([1, 2, 3])
        assert value.kind == ValueKind.ARRAY
        assert value.data == (
            Value(ValueKind.INTEGER, 1),
            Value(ValueKind.INTEGER, 2),
            Value(ValueKind.INTEGER, 3),
        )

    def test_array_of_tables(self, builder: ValueBuilder) -> None:
        value = builder.build({"servers": [{"host": "a"}, {"host": "b"}]})
        servers = value.get("servers")
        assert servers is not None
        assert [item.kind for item in servers.data] == [ValueKind.TABLE, ValueKind.TABLE]

    def test_nested_tables(self, builder: ValueBuilder) -> None:
        value = builder.build({"lvl0": {"lvl1": {"lvl2": True}}})
        lvl0 = value.get("lvl0")
        assert lvl0 is not None
        lvl1 = lvl0.get("lvl1")
        assert lvl1 is not None
        assert lvl1.get("lvl2") == Value(ValueKind.BOOLEAN, True)

    def test_empty_containers(self, builder: ValueBuilder) -> None:
        assert builder.build({}).data == {}
        assert builder.build([]).data == ()

    def test_non_string_key_raises(self, builder: ValueBuilder) -> None:
        with pytest.raises(TypeError, match="keys must be strings"):
            builder.build({1: "a"})

    def test_same_input_builds_equal_trees(self, builder: ValueBuilder) -> None:
        doc = {"a": [1, 2.5, "x"], "b": {"c": datetime.date(2020, 1, 1)}}
        assert builder.build(doc) == builder.build(doc)


# ---------------------------------------------------------------------------
# Depth limit
# ---------------------------------------------------------------------------


class TestDepthLimit:
    def test_at_limit_is_accepted(self) -> None:
        value = ValueBuilder(max_depth=3).build(_nested(3))
        assert value.is_table

    def test_beyond_limit_raises(self) -> None:
        with pytest.raises(TooDeepError) as excinfo:
            ValueBuilder(max_depth=3).build(_nested(4))
        assert excinfo.value.max_depth == 3

    def test_arrays_count_towards_depth(self) -> None:
        with pytest.raises(TooDeepError):
            ValueBuilder(max_depth=2).build({"a": [[1]]})

    def test_default_limit_rejects_very_deep_input(self) -> None:
        with pytest.raises(TooDeepError):
            ValueBuilder().build(_nested(300))

    def test_too_deep_is_a_recursion_error(self) -> None:
        with pytest.raises(RecursionError):
            ValueBuilder(max_depth=1).build(_nested(2))

    def test_deepest_allowed_limit_builds_without_overflow(self) -> None:
        limit = max_depth_limit()
        value = ValueBuilder(max_depth=limit).build(_nested(limit))
        assert value.is_table

    def test_limit_beyond_interpreter_ceiling_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_depth must be <="):
            ValueBuilder(max_depth=max_depth_limit() + 1)

    def test_limit_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            ValueBuilder(max_depth=0)
