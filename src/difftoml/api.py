"""Public API functions for difftoml.

This module provides the three user-facing functions: diff, diff_documents
and diff_files.  Each call creates a fresh TreeDiffer so that no state is
shared between calls.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any

from difftoml.algorithm.config import DiffConfig
from difftoml.algorithm.differ import TreeDiffer
from difftoml.loader import DocumentLoader
from difftoml.protocols import DocumentParser
from difftoml.result import DiffReport
from difftoml.tree.builder import ValueBuilder
from difftoml.tree.nodes import Value

__all__ = ["diff", "diff_documents", "diff_files"]


def diff(
    left: Mapping[str, Any] | Value,
    right: Mapping[str, Any] | Value,
    excluded_keys: Iterable[str] = (),
    include_equal: bool = False,
    config: DiffConfig | None = None,
) -> DiffReport:
    """Compare two parsed documents and return an ordered DiffReport.

    Args:
        left:          First document: a parsed mapping or a TABLE ``Value``.
        right:         Second document.
        excluded_keys: Bare key names to ignore at every depth.
        include_equal: Also report keys whose values are equal.
        config:        Full configuration.  When given, ``excluded_keys`` and
                       ``include_equal`` are ignored.

    Returns:
        A ``DiffReport`` with records in traversal order.
    """
    if config is None:
        # DiffConfig normalises the iterable and rejects a bare string
        config = DiffConfig(
            excluded_keys=excluded_keys,  # type: ignore[arg-type]
            include_equal=include_equal,
        )
    builder = ValueBuilder(max_depth=config.max_depth)
    return TreeDiffer(config).diff(_as_value(left, builder), _as_value(right, builder))


def diff_documents(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
    parser: DocumentParser | None = None,
) -> DiffReport:
    """Parse two in-memory documents (TOML by default) and diff them."""
    config = config if config is not None else DiffConfig()
    loader = DocumentLoader(parser, max_cache_size=0, max_depth=config.max_depth)
    return TreeDiffer(config).diff(loader.loads(left_text), loader.loads(right_text))


def diff_files(
    left_path: str | os.PathLike[str],
    right_path: str | os.PathLike[str],
    config: DiffConfig | None = None,
    loader: DocumentLoader | None = None,
) -> DiffReport:
    """Load two documents from disk and diff them.

    Both paths are loaded before any comparison starts, so a missing or
    malformed second file fails without partial output.

    Args:
        left_path:  Path of the first document.
        right_path: Path of the second document.
        config:     Algorithm configuration.  Defaults to ``DiffConfig()``.
        loader:     Loader to read the files with; pass a long-lived one to
                    reuse its parse cache across calls.
    """
    config = config if config is not None else DiffConfig()
    if loader is None:
        loader = DocumentLoader(max_depth=config.max_depth)
    left = loader.load(left_path)
    right = loader.load(right_path)
    return TreeDiffer(config).diff(left, right)


def _as_value(document: Mapping[str, Any] | Value, builder: ValueBuilder) -> Value:
    if isinstance(document, Value):
        return document
    if not isinstance(document, Mapping):
        msg = f"Documents must be mappings, got {type(document)!r}"
        raise TypeError(msg)
    return builder.build(document)
