"""TreeDiffer: recursive lockstep walk over two parsed documents.

Architecture:
- diff() walks both root tables together and collects DiffRecords into a
  single list, which is frozen into a DiffReport at the end.
- At each table, the left table's keys are visited first (in left order),
  then the keys found only in the right table (in right order), so every key
  of the union is visited exactly once.
- Excluded key names are skipped before anything else, at every depth.
- A key present on one side only is reported as a single record holding the
  whole subtree.  Recursion only happens when both sides hold a table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from difftoml.algorithm.config import DiffConfig, NumericPolicy
from difftoml.errors import TooDeepError
from difftoml.result import DiffRecord, DiffReport, KeyPath
from difftoml.tree.nodes import Value, values_equal

__all__ = ["TreeDiffer"]

logger = logging.getLogger(__name__)


class TreeDiffer:
    """Produces an ordered DiffReport for two TABLE-rooted Value trees.

    The differ holds no per-call state: calling ``diff()`` twice with the
    same inputs always yields equal reports.

    Example::

        from difftoml.algorithm.differ import TreeDiffer
        from difftoml.tree.builder import ValueBuilder

        builder = ValueBuilder()
        report = TreeDiffer().diff(
            builder.build({"name": "first"}), builder.build({"name": "second"})
        )
        report.unequal[0].path   # ("name",)
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, left: Value, right: Value) -> DiffReport:
        """Compare two documents and return every difference found.

        Args:
            left:  Root TABLE of the first document.
            right: Root TABLE of the second document.

        Returns:
            A ``DiffReport`` with records in traversal order.

        Raises:
            TypeError: If either root is not a TABLE.
            TooDeepError: If table nesting exceeds ``config.max_depth``.
        """
        if not left.is_table or not right.is_table:
            msg = f"Documents must be rooted at a table, got {left.kind} and {right.kind}"
            raise TypeError(msg)

        records: list[DiffRecord] = []
        self._walk_tables(left, right, (), 1, records)
        report = DiffReport(records=tuple(records))

        logger.debug(
            "diff: %d only-left, %d only-right, %d unequal, %d equal",
            len(report.only_in_left),
            len(report.only_in_right),
            len(report.unequal),
            len(report.equal),
        )
        return report

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _walk_tables(
        self,
        left: Value,
        right: Value,
        parent: KeyPath,
        depth: int,
        records: list[DiffRecord],
    ) -> None:
        """Compare two tables found at ``parent``, appending to ``records``."""
        if depth > self._config.max_depth:
            raise TooDeepError(self._config.max_depth, parent)

        for key in self._union_keys(left, right):
            if self._config.is_excluded(key):
                continue

            path = (*parent, key)
            left_value = left.get(key)
            right_value = right.get(key)

            if left_value is None:
                if right_value is not None:
                    records.append(DiffRecord.only_in_right(path, right_value))
            elif right_value is None:
                records.append(DiffRecord.only_in_left(path, left_value))
            elif left_value.is_table and right_value.is_table:
                self._walk_tables(left_value, right_value, path, depth + 1, records)
            elif self._equal(left_value, right_value):
                if self._config.include_equal:
                    records.append(DiffRecord.equal(path, left_value, right_value))
            else:
                records.append(DiffRecord.unequal(path, left_value, right_value))

    @staticmethod
    def _union_keys(left: Value, right: Value) -> Iterator[str]:
        """Yield left keys in order, then right-only keys in order."""
        yield from left.keys()
        for key in right.keys():
            if left.get(key) is None:
                yield key

    def _equal(self, left: Value, right: Value) -> bool:
        numeric = self._config.numeric_policy == NumericPolicy.NUMERIC
        return values_equal(left, right, numeric=numeric)
