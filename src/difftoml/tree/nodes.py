"""Value dataclass and ValueKind StrEnum for parsed TOML documents.

A parsed document is a tree of ``Value`` nodes rooted at a TABLE.  Every
node carries its kind explicitly so that equality and rendering can dispatch
on the kind instead of on Python types (``bool`` is an ``int`` subclass, and
``datetime`` is a ``date`` subclass, so ``isinstance`` alone is ambiguous).
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["NUMERIC_KINDS", "Value", "ValueKind", "values_equal"]


class ValueKind(StrEnum):
    """Enumeration of the seven TOML value kinds.

    StrEnum values are the lowercased member names:
    - STRING   -> "string"
    - INTEGER  -> "integer"
    - FLOAT    -> "float"
    - BOOLEAN  -> "boolean"
    - DATETIME -> "datetime" : offset/local date-time, local date, local time
    - ARRAY    -> "array"
    - TABLE    -> "table"
    """

    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    DATETIME = auto()
    ARRAY = auto()
    TABLE = auto()


NUMERIC_KINDS: frozenset[ValueKind] = frozenset({ValueKind.INTEGER, ValueKind.FLOAT})


@dataclass(frozen=True, slots=True, eq=False)
class Value:
    """A node in a parsed TOML document.

    Attributes:
        kind: Which TOML kind this value is (see ValueKind).
        data: The payload.  A plain Python scalar for STRING, INTEGER, FLOAT,
              BOOLEAN and DATETIME; a ``tuple`` of Values for ARRAY; a
              read-only mapping of key to Value for TABLE.

    Equality is structural and type-strict (see ``values_equal``): ``1`` and
    ``1.0`` are different values, tables compare independent of key order.
    """

    kind: ValueKind
    data: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return values_equal(self, other)

    @property
    def is_table(self) -> bool:
        return self.kind == ValueKind.TABLE

    def keys(self) -> Iterator[str]:
        """Iterate the keys of a TABLE in document order."""
        self._require_table()
        return iter(self.data)

    def get(self, key: str) -> Value | None:
        """Return the child stored under ``key`` in a TABLE, or None."""
        self._require_table()
        child: Value | None = self.data.get(key)
        return child

    def _require_table(self) -> None:
        if self.kind != ValueKind.TABLE:
            msg = f"Expected a table value, got {self.kind}"
            raise TypeError(msg)


def values_equal(left: Value, right: Value, *, numeric: bool = False) -> bool:
    """Return True if two Values are structurally equal.

    Args:
        left, right: The values to compare.
        numeric: When True, INTEGER and FLOAT values compare by numeric value
            (``1 == 1.0``), also inside arrays and tables.  When False (the
            default) a kind mismatch is always unequal.  Booleans are never
            treated as numbers.

    NaN floats compare equal to each other so that a document always equals
    itself.
    """
    if left.kind != right.kind:
        if numeric and left.kind in NUMERIC_KINDS and right.kind in NUMERIC_KINDS:
            return bool(left.data == right.data)
        return False

    if left.kind == ValueKind.ARRAY:
        if len(left.data) != len(right.data):
            return False
        return all(
            values_equal(a, b, numeric=numeric)
            for a, b in zip(left.data, right.data, strict=True)
        )

    if left.kind == ValueKind.TABLE:
        if left.data.keys() != right.data.keys():
            return False
        return all(
            values_equal(child, right.data[key], numeric=numeric)
            for key, child in left.data.items()
        )

    if left.kind == ValueKind.FLOAT and math.isnan(left.data) and math.isnan(right.data):
        return True

    if left.kind == ValueKind.DATETIME:
        # datetime subclasses date; a local date never equals a date-time.
        # Offsets are part of the value: 07:32Z and 00:32-07:00 differ.
        if type(left.data) is not type(right.data):
            return False
        return bool(left.data.isoformat() == right.data.isoformat())

    return bool(left.data == right.data)
