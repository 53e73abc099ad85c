"""DiffConfig and NumericPolicy for tree-diff configuration.

DiffConfig is a frozen (immutable) dataclass holding the algorithm
parameters.  NumericPolicy selects how integers and floats compare.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DiffConfig",
    "NumericPolicy",
    "check_max_depth",
    "max_depth_limit",
]

# Kept well below the interpreter recursion limit: building a tree costs
# two stack frames per nesting level.
DEFAULT_MAX_DEPTH: int = 256

# Stack frames left for the callers of the recursive walks.
_RESERVED_FRAMES = 200


def max_depth_limit() -> int:
    """Return the largest ``max_depth`` the current interpreter can follow.

    Building, comparing and rendering a tree each take up to two stack frames
    per nesting level, so the ceiling is derived from
    ``sys.getrecursionlimit()``.
    """
    return max(1, (sys.getrecursionlimit() - _RESERVED_FRAMES) // 2)


def check_max_depth(max_depth: int) -> None:
    """Raise ValueError unless ``1 <= max_depth <= max_depth_limit()``."""
    if max_depth < 1:
        msg = f"max_depth must be >= 1, got {max_depth}"
        raise ValueError(msg)
    limit = max_depth_limit()
    if max_depth > limit:
        msg = f"max_depth must be <= {limit}, got {max_depth}"
        raise ValueError(msg)


class NumericPolicy(StrEnum):
    """How INTEGER and FLOAT values are compared.

    - STRICT:  Type-strict structural equality (``1 != 1.0``).
    - NUMERIC: Integers and floats compare by numeric value (``1 == 1.0``).
    """

    STRICT = auto()
    NUMERIC = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for TreeDiffer.

    Attributes:
        excluded_keys: Bare key names skipped at every nesting depth.  Any
            iterable of strings is accepted and stored as a ``frozenset``.
        include_equal: When True, keys with equal values on both sides are
            reported as EQUAL records.  Default False.
        numeric_policy: How integers and floats compare.  Default STRICT.
        max_depth: Maximum table nesting depth; the root table is depth 1.
    """

    excluded_keys: frozenset[str] = frozenset()
    include_equal: bool = False
    numeric_policy: NumericPolicy = NumericPolicy.STRICT
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.excluded_keys, str):
            msg = "excluded_keys must be a collection of key names, not a string"
            raise TypeError(msg)
        keys = frozenset(self.excluded_keys)
        for key in keys:
            if not isinstance(key, str) or not key:
                msg = f"excluded key names must be non-empty strings, got {key!r}"
                raise ValueError(msg)
        object.__setattr__(self, "excluded_keys", keys)
        object.__setattr__(self, "numeric_policy", NumericPolicy(self.numeric_policy))
        check_max_depth(self.max_depth)

    @classmethod
    def from_exclusions(
        cls,
        names: Iterable[str],
        *,
        include_equal: bool = False,
        numeric_policy: NumericPolicy = NumericPolicy.STRICT,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> DiffConfig:
        """Build a config from raw ``-x`` values.

        Each name is used verbatim, so quoted TOML keys such as ``"a,b"`` or
        ``" id"`` can be excluded too.
        """
        return cls(
            excluded_keys=frozenset(names),
            include_equal=include_equal,
            numeric_policy=numeric_policy,
            max_depth=max_depth,
        )

    def is_excluded(self, key: str) -> bool:
        return key in self.excluded_keys
