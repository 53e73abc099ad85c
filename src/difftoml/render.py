"""Plain and colored text rendering of a DiffReport.

Output groups, in fixed order, each printed only when non-empty and each
preceded by a blank line:

1. entries only found in the first file
2. entries only found in the second file
3. unequal values, as ``Unequal value for key <path>`` then ``<:``/``>:`` lines
4. equal values (present only when the diff was run with include_equal)

Paths render as a JSON-like list of strings and values in TOML's own
textual form.
"""

from __future__ import annotations

import datetime
import json
import math
import re
from collections.abc import Iterator
from typing import TextIO, cast

from termcolor import colored

from difftoml.result import DiffRecord, DiffReport, KeyPath, RecordKind
from difftoml.tree.nodes import Value, ValueKind

__all__ = ["ReportRenderer", "format_path", "format_value"]

_BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")

_COLORS: dict[RecordKind, str] = {
    RecordKind.ONLY_IN_LEFT: "red",
    RecordKind.ONLY_IN_RIGHT: "green",
    RecordKind.UNEQUAL: "yellow",
    RecordKind.EQUAL: "cyan",
}


def format_path(path: KeyPath) -> str:
    """Render a key path as ``["field1", "name"]``."""
    return json.dumps(list(path), ensure_ascii=False)


def format_value(value: Value) -> str:
    """Render a Value the way it would be written in a TOML document."""
    kind = value.kind
    if kind == ValueKind.STRING:
        return _quote(value.data)
    if kind == ValueKind.BOOLEAN:
        return "true" if value.data else "false"
    if kind == ValueKind.INTEGER:
        return str(value.data)
    if kind == ValueKind.FLOAT:
        return _format_float(value.data)
    if kind == ValueKind.DATETIME:
        return _format_datetime(value.data)
    if kind == ValueKind.ARRAY:
        return "[" + ", ".join(format_value(item) for item in value.data) + "]"
    if not value.data:
        return "{}"
    pairs = ", ".join(
        f"{_format_key(key)} = {format_value(child)}" for key, child in value.data.items()
    )
    return "{ " + pairs + " }"


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _format_key(key: str) -> str:
    return key if _BARE_KEY.match(key) else _quote(key)


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return repr(number)


def _format_datetime(moment: datetime.datetime | datetime.date | datetime.time) -> str:
    text = moment.isoformat()
    if (
        isinstance(moment, datetime.datetime)
        and moment.utcoffset() == datetime.timedelta(0)
        and text.endswith("+00:00")
    ):
        return text[: -len("+00:00")] + "Z"
    return text


class ReportRenderer:
    """Turns a DiffReport into human-readable lines.

    Args:
        left_name:  Identifier of the first document, used in group headers.
        right_name: Identifier of the second document.
        color:      When True, wrap headers and markers in ANSI color codes.
    """

    def __init__(self, left_name: str, right_name: str, *, color: bool = False) -> None:
        self._left_name = left_name
        self._right_name = right_name
        self._color = color

    def render(self, report: DiffReport) -> str:
        """Return the full rendering, newline-terminated, or "" when empty."""
        return "".join(f"{line}\n" for line in self.lines(report))

    def write(self, report: DiffReport, stream: TextIO) -> None:
        for line in self.lines(report):
            stream.write(f"{line}\n")

    def lines(self, report: DiffReport) -> Iterator[str]:
        yield from self._side_group(
            report.only_in_left, RecordKind.ONLY_IN_LEFT, self._left_name
        )
        yield from self._side_group(
            report.only_in_right, RecordKind.ONLY_IN_RIGHT, self._right_name
        )
        yield from self._pair_group(report.unequal, "Unequal value for key")
        yield from self._pair_group(report.equal, "Equal value for key")

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def _side_group(
        self, records: tuple[DiffRecord, ...], kind: RecordKind, name: str
    ) -> Iterator[str]:
        if not records:
            return
        yield ""
        yield self._paint(f"Entries only found in {name}", kind)
        for record in records:
            yield f"{format_path(record.path)}: {format_value(record.value)}"

    def _pair_group(self, records: tuple[DiffRecord, ...], title: str) -> Iterator[str]:
        if not records:
            return
        yield ""
        for record in records:
            # UNEQUAL and EQUAL records always carry both sides
            left = cast(Value, record.left)
            right = cast(Value, record.right)
            yield self._paint(f"{title} {format_path(record.path)}", record.kind)
            yield f"{self._paint('<:', RecordKind.ONLY_IN_LEFT)} {format_value(left)}"
            yield f"{self._paint('>:', RecordKind.ONLY_IN_RIGHT)} {format_value(right)}"

    def _paint(self, text: str, kind: RecordKind) -> str:
        if not self._color:
            return text
        return colored(text, _COLORS[kind], force_color=True)
