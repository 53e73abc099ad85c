"""DocumentLoader: reads, parses and caches documents from disk.

Parsed documents are kept in a per-instance LRU cache keyed by the resolved
path together with the file's modification time and size, so comparing one
baseline against several targets parses the baseline once, while an edited
file is always parsed again.

Example::

    from difftoml.loader import DocumentLoader

    loader = DocumentLoader()
    baseline = loader.load("prod.toml")
    again = loader.load("prod.toml")   # served from the cache
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cachetools import LRUCache

from difftoml.algorithm.config import DEFAULT_MAX_DEPTH
from difftoml.errors import (
    DocumentNotFoundError,
    DocumentParseError,
    DocumentReadError,
    InvalidDocumentError,
)
from difftoml.protocols import DocumentParser
from difftoml.tree.builder import ValueBuilder
from difftoml.tree.nodes import Value

__all__ = ["DocumentLoader", "TomlParser"]

logger = logging.getLogger(__name__)

_CacheKey = tuple[str, int, int]


class TomlParser:
    """Parses TOML text with the standard library ``tomllib``."""

    def parse(self, text: str) -> dict[str, Any]:
        return tomllib.loads(text)


class DocumentLoader:
    """Loads documents from disk into ``Value`` trees.

    Args:
        parser: A ``DocumentParser``-conformant object.  Defaults to
            ``TomlParser()`` when None.
        require_suffix: File suffix every input must carry (``".toml"`` by
            default).  None accepts any file name.
        max_cache_size: Maximum number of parsed documents held in the LRU
            cache.  0 disables caching.  Defaults to 32.
        max_depth: Maximum nesting depth passed to ``ValueBuilder``.
    """

    def __init__(
        self,
        parser: DocumentParser | None = None,
        *,
        require_suffix: str | None = ".toml",
        max_cache_size: int = 32,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_cache_size < 0:
            msg = f"max_cache_size must be >= 0, got {max_cache_size}"
            raise ValueError(msg)
        self._parser: Any = parser if parser is not None else TomlParser()
        self._require_suffix = require_suffix
        self._builder = ValueBuilder(max_depth=max_depth)
        self._cache: LRUCache[_CacheKey, Value] | None = (
            LRUCache(maxsize=max_cache_size) if max_cache_size > 0 else None
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_cache_size(self) -> int:
        return 0 if self._cache is None else int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The number of parsed documents currently cached."""
        return 0 if self._cache is None else int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: str | os.PathLike[str]) -> Value:
        """Read and parse the document at ``path``.

        Raises:
            DocumentNotFoundError: ``path`` does not exist.
            InvalidDocumentError: Wrong suffix, or the root is not a table.
            DocumentReadError: The file cannot be read as UTF-8 text.
            DocumentParseError: The text is not a well-formed document.
        """
        path = Path(path)
        if not path.exists():
            raise DocumentNotFoundError(path)
        if self._require_suffix is not None and path.suffix != self._require_suffix:
            msg = f"Path is not a {self._require_suffix.lstrip('.')} file: {path}"
            raise InvalidDocumentError(msg)

        try:
            stat = path.stat()
        except OSError as exc:
            raise DocumentReadError(path, exc.strerror or str(exc)) from exc
        key: _CacheKey = (str(path.resolve()), stat.st_mtime_ns, stat.st_size)

        if self._cache is not None and key in self._cache:
            logger.debug("cache hit for %s", path)
            return self._cache[key]

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise DocumentReadError(path, exc.strerror or str(exc)) from exc

        document = self.loads(text, path=path)
        if self._cache is not None:
            self._cache[key] = document
        logger.debug("loaded %s (%d top-level keys)", path, len(document.data))
        return document

    def loads(self, text: str, *, path: Path | None = None) -> Value:
        """Parse in-memory ``text``; ``path`` is only used in error messages."""
        try:
            raw = self._parser.parse(text)
        # tomllib recurses on nested inline arrays and tables
        except (ValueError, RecursionError) as exc:
            raise DocumentParseError(path, exc) from exc
        if not isinstance(raw, Mapping):
            source = "<string>" if path is None else str(path)
            msg = f"Document root must be a table: {source}"
            raise InvalidDocumentError(msg)
        return self._builder.build(raw)
