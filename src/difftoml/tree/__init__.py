"""Tree subpackage for the typed document representation.

Re-exports the public API for the tree module:
- Value: immutable node of a parsed document
- ValueKind: StrEnum of the seven TOML value kinds
- values_equal: structural equality with an optional numeric policy
- ValueBuilder: converts raw parser output into a Value tree
"""

from difftoml.tree.builder import ValueBuilder
from difftoml.tree.nodes import Value, ValueKind, values_equal

__all__ = ["Value", "ValueBuilder", "ValueKind", "values_equal"]
