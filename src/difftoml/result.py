"""DiffRecord and DiffReport dataclasses for tree-diff output.

This module provides the record type emitted by TreeDiffer and the ordered
report returned by every diff entry point.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto

from difftoml.tree.nodes import Value

__all__ = ["DiffRecord", "DiffReport", "KeyPath", "RecordKind"]

KeyPath = tuple[str, ...]


class RecordKind(StrEnum):
    """The four kinds of difference record.

    - ONLY_IN_LEFT:  key exists in the left document only.
    - ONLY_IN_RIGHT: key exists in the right document only.
    - UNEQUAL:       key exists in both with different values.
    - EQUAL:         key exists in both with equal values.
    """

    ONLY_IN_LEFT = auto()
    ONLY_IN_RIGHT = auto()
    UNEQUAL = auto()
    EQUAL = auto()


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One path-qualified difference between two documents.

    Attributes:
        kind:  Which kind of record this is (see RecordKind).
        path:  Key names from the root table down to the reported key.
        left:  Value in the left document; None for ONLY_IN_RIGHT.
        right: Value in the right document; None for ONLY_IN_LEFT.
    """

    kind: RecordKind
    path: KeyPath
    left: Value | None = None
    right: Value | None = None

    @classmethod
    def only_in_left(cls, path: KeyPath, value: Value) -> DiffRecord:
        return cls(RecordKind.ONLY_IN_LEFT, path, left=value)

    @classmethod
    def only_in_right(cls, path: KeyPath, value: Value) -> DiffRecord:
        return cls(RecordKind.ONLY_IN_RIGHT, path, right=value)

    @classmethod
    def unequal(cls, path: KeyPath, left: Value, right: Value) -> DiffRecord:
        return cls(RecordKind.UNEQUAL, path, left=left, right=right)

    @classmethod
    def equal(cls, path: KeyPath, left: Value, right: Value) -> DiffRecord:
        return cls(RecordKind.EQUAL, path, left=left, right=right)

    @property
    def key(self) -> str:
        """The bare name of the reported key (last path segment)."""
        return self.path[-1]

    @property
    def value(self) -> Value:
        """The value on the side that has it; the left value for EQUAL/UNEQUAL."""
        value = self.right if self.kind == RecordKind.ONLY_IN_RIGHT else self.left
        if value is None:
            msg = f"{self.kind} record for {list(self.path)} carries no value"
            raise ValueError(msg)
        return value


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Ordered result of a diff.

    Records appear in traversal order: depth-first, and within a table the
    left document's keys first, then keys found only on the right.

    Attributes:
        records: Every record produced, in traversal order.
    """

    records: tuple[DiffRecord, ...] = ()

    def __iter__(self) -> Iterator[DiffRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def of_kind(self, kind: RecordKind) -> tuple[DiffRecord, ...]:
        """Return the records of one kind, keeping traversal order."""
        return tuple(record for record in self.records if record.kind == kind)

    @property
    def only_in_left(self) -> tuple[DiffRecord, ...]:
        return self.of_kind(RecordKind.ONLY_IN_LEFT)

    @property
    def only_in_right(self) -> tuple[DiffRecord, ...]:
        return self.of_kind(RecordKind.ONLY_IN_RIGHT)

    @property
    def unequal(self) -> tuple[DiffRecord, ...]:
        return self.of_kind(RecordKind.UNEQUAL)

    @property
    def equal(self) -> tuple[DiffRecord, ...]:
        return self.of_kind(RecordKind.EQUAL)

    @property
    def has_differences(self) -> bool:
        """True if any record other than EQUAL was produced."""
        return any(record.kind != RecordKind.EQUAL for record in self.records)
