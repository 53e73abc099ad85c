"""Tests for DiffRecord and DiffReport frozen dataclasses.

Covers:
- Record constructors set the right kind and sides
- key / value accessors
- Frozen (immutable) enforcement
- Report per-kind views keep traversal order
- has_differences ignores EQUAL records
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from difftoml.result import DiffRecord, DiffReport, RecordKind
from difftoml.tree.nodes import Value, ValueKind

ONE = Value(ValueKind.INTEGER, 1)
TWO = Value(ValueKind.INTEGER, 2)


# ---------------------------------------------------------------------------
# DiffRecord
# ---------------------------------------------------------------------------


class TestDiffRecord:
    def test_only_in_left(self) -> None:
        record = DiffRecord.only_in_left(("a", "b"), ONE)
        assert record.kind == RecordKind.ONLY_IN_LEFT
        assert record.left == ONE
        assert record.right is None
        assert record.value == ONE

    def test_only_in_right(self) -> None:
        record = DiffRecord.only_in_right(("a",), TWO)
        assert record.kind == RecordKind.ONLY_IN_RIGHT
        assert record.left is None
        assert record.value == TWO

    def test_unequal_keeps_both_sides(self) -> None:
        record = DiffRecord.unequal(("a",), ONE, TWO)
        assert (record.left, record.right) == (ONE, TWO)
        assert record.value == ONE

    def test_equal_keeps_both_sides(self) -> None:
        record = DiffRecord.equal(("a",), ONE, ONE)
        assert record.kind == RecordKind.EQUAL
        assert record.right == ONE

    def test_value_without_payload_raises(self) -> None:
        record = DiffRecord(RecordKind.ONLY_IN_LEFT, ("a",))
        with pytest.raises(ValueError, match="carries no value"):
            _ = record.value

    def test_key_is_last_segment(self) -> None:
        assert DiffRecord.only_in_left(("field1", "name"), ONE).key == "name"

    def test_is_frozen(self) -> None:
        record = DiffRecord.only_in_left(("a",), ONE)
        with pytest.raises(FrozenInstanceError):
            record.path = ("b",)  # type: ignore[misc]

    def test_equality_compares_values_structurally(self) -> None:
        assert DiffRecord.only_in_left(("a",), Value(ValueKind.INTEGER, 1)) == (
            DiffRecord.only_in_left(("a",), ONE)
        )
        assert DiffRecord.only_in_left(("a",), ONE) != DiffRecord.only_in_right(("a",), ONE)


# ---------------------------------------------------------------------------
# DiffReport
# ---------------------------------------------------------------------------


class TestDiffReport:
    @pytest.fixture
    def report(self) -> DiffReport:
        return DiffReport(
            records=(
                DiffRecord.unequal(("u1",), ONE, TWO),
                DiffRecord.only_in_left(("l1",), ONE),
                DiffRecord.equal(("e1",), ONE, ONE),
                DiffRecord.only_in_right(("r1",), TWO),
                DiffRecord.only_in_left(("l2",), TWO),
            )
        )

    def test_views_keep_order(self, report: DiffReport) -> None:
        assert [r.path for r in report.only_in_left] == [("l1",), ("l2",)]
        assert [r.path for r in report.only_in_right] == [("r1",)]
        assert [r.path for r in report.unequal] == [("u1",)]
        assert [r.path for r in report.equal] == [("e1",)]

    def test_len_and_iter(self, report: DiffReport) -> None:
        assert len(report) == 5
        assert list(report) == list(report.records)

    def test_has_differences(self, report: DiffReport) -> None:
        assert report.has_differences

    def test_only_equal_records_are_not_differences(self) -> None:
        report = DiffReport(records=(DiffRecord.equal(("a",), ONE, ONE),))
        assert not report.has_differences

    def test_empty_report(self) -> None:
        report = DiffReport()
        assert len(report) == 0
        assert not report.has_differences


def test_all_export() -> None:
    import difftoml.result as module

    assert set(module.__all__) == {"DiffRecord", "DiffReport", "KeyPath", "RecordKind"}
