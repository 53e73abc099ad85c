"""ValueBuilder: converts raw parser output into a typed Value tree.

Uses recursive dispatch to convert mappings, sequences and scalars into
``Value`` nodes.  The input is whatever a ``DocumentParser`` returns; for
the default TOML parser that is ``dict``/``list``/``str``/``int``/``float``/
``bool`` and the ``datetime`` module's ``datetime``, ``date`` and ``time``.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from difftoml.algorithm.config import DEFAULT_MAX_DEPTH, check_max_depth
from difftoml.errors import TooDeepError
from difftoml.tree.nodes import Value, ValueKind

__all__ = ["ValueBuilder"]


@dataclass
class ValueBuilder:
    """Converts a parsed document into a typed ``Value`` tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Attributes:
        max_depth: Maximum container nesting (tables and arrays) accepted.
            The root table is at depth 1.  Deeper input raises
            ``TooDeepError`` rather than exhausting the interpreter stack.
            Values outside ``1..max_depth_limit()`` raise ValueError.

    Example::
        builder = ValueBuilder()
        tree = builder.build({"name": "first", "field0": {"values": [0.12]}})
        # tree: TABLE -> {"name": STRING("first"), "field0": TABLE -> ...}
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        check_max_depth(self.max_depth)

    def build(self, raw: Any) -> Value:
        """Convert a raw parsed value to a Value tree.

        Raises:
            TypeError: If ``raw`` (or anything nested in it) is not a TOML type.
            TooDeepError: If nesting exceeds ``max_depth``.
        """
        return self._build(raw, 1)

    def _build(self, raw: Any, depth: int) -> Value:
        # CRITICAL: bool MUST be checked before int
        if isinstance(raw, bool):
            return Value(ValueKind.BOOLEAN, raw)
        if isinstance(raw, int):
            return Value(ValueKind.INTEGER, raw)
        if isinstance(raw, float):
            return Value(ValueKind.FLOAT, raw)
        if isinstance(raw, str):
            return Value(ValueKind.STRING, raw)
        if isinstance(raw, (datetime.datetime, datetime.date, datetime.time)):
            return Value(ValueKind.DATETIME, raw)

        if isinstance(raw, Mapping):
            self._check_depth(depth)
            return self._build_table(raw, depth)
        if isinstance(raw, (list, tuple)):
            self._check_depth(depth)
            return Value(
                ValueKind.ARRAY, tuple(self._build(item, depth + 1) for item in raw)
            )

        raise TypeError(f"Unsupported TOML value type: {type(raw)!r}")

    def _build_table(self, raw: Mapping[Any, Any], depth: int) -> Value:
        children: dict[str, Value] = {}
        for key, item in raw.items():
            if not isinstance(key, str):
                raise TypeError(f"Table keys must be strings, got {type(key)!r}")
            children[key] = self._build(item, depth + 1)
        return Value(ValueKind.TABLE, MappingProxyType(children))

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise TooDeepError(self.max_depth)
