"""Exception hierarchy for difftoml.

Every error raised on purpose derives from ``DiffTomlError`` and also from
the closest builtin exception, so callers can catch either.
"""

from __future__ import annotations

import re
from pathlib import Path

__all__ = [
    "DiffTomlError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentReadError",
    "InvalidDocumentError",
    "TooDeepError",
]

# tomllib before 3.14 only reports the position inside the message
_POSITION = re.compile(r"\(at line (\d+), column (\d+)\)")


class DiffTomlError(Exception):
    """Base class for all difftoml errors."""


class DocumentNotFoundError(DiffTomlError, FileNotFoundError):
    """The input path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class DocumentReadError(DiffTomlError, OSError):
    """The input path exists but could not be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Error reading {path}: {reason}")


class InvalidDocumentError(DiffTomlError, ValueError):
    """The input is not something difftoml can compare."""


class DocumentParseError(DiffTomlError, ValueError):
    """The input text is not a well-formed document.

    Attributes:
        path:   Source of the text, or None for in-memory text.
        lineno: 1-based line of the syntax error, when the parser reports it.
        colno:  1-based column of the syntax error, when the parser reports it.
    """

    def __init__(self, path: Path | None, cause: Exception) -> None:
        self.path = path
        self.lineno, self.colno = _error_position(cause)
        source = "<string>" if path is None else str(path)
        super().__init__(f"Error parsing {source}: {cause}")


class TooDeepError(DiffTomlError, RecursionError):
    """Document nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, path: tuple[str, ...] = ()) -> None:
        self.max_depth = max_depth
        self.path = path
        where = f" under {list(path)}" if path else ""
        super().__init__(f"Nesting exceeds maximum depth of {max_depth}{where}")


def _error_position(cause: Exception) -> tuple[int | None, int | None]:
    lineno = getattr(cause, "lineno", None)
    colno = getattr(cause, "colno", None)
    if lineno is not None and colno is not None:
        return lineno, colno
    match = _POSITION.search(str(cause))
    if match is None:
        return None, None
    return int(match.group(1)), int(match.group(2))
