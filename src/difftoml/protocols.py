"""DocumentParser Protocol for difftoml's parser extension point.

Defines the structural interface every document parser must satisfy.
Users can plug in their own parser without inheriting from any base class;
any class with a conformant ``parse`` method passes ``isinstance`` checks.

Example::

    import json
    from difftoml.protocols import DocumentParser

    class JsonParser:
        def parse(self, text: str) -> dict:
            return json.loads(text)

    assert isinstance(JsonParser(), DocumentParser)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

__all__ = ["DocumentParser"]


@runtime_checkable
class DocumentParser(Protocol):
    """Structural protocol for document parsers.

    The ``parse`` method must:
    - Accept the full document text.
    - Return a mapping of string keys to values that ``ValueBuilder`` accepts.
    - Raise ``ValueError`` (or a subclass) on malformed input.
    """

    def parse(self, text: str) -> Mapping[str, Any]: ...
