"""difftoml - display the differences between two TOML configuration files."""

from __future__ import annotations

from difftoml.algorithm.config import DiffConfig, NumericPolicy
from difftoml.api import diff, diff_documents, diff_files
from difftoml.result import DiffRecord, DiffReport, RecordKind
from difftoml.tree.nodes import Value, ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffConfig",
    "DiffRecord",
    "DiffReport",
    "NumericPolicy",
    "RecordKind",
    "Value",
    "ValueKind",
    "diff",
    "diff_documents",
    "diff_files",
]
