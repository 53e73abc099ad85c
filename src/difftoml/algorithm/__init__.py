"""Algorithm subpackage: diff configuration and the recursive tree differ."""

from difftoml.algorithm.config import (
    DEFAULT_MAX_DEPTH,
    DiffConfig,
    NumericPolicy,
    max_depth_limit,
)
from difftoml.algorithm.differ import TreeDiffer

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DiffConfig",
    "NumericPolicy",
    "TreeDiffer",
    "max_depth_limit",
]
