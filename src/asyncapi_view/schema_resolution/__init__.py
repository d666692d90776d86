"""Schema resolution exports."""

from .schema_models import ARRAY_MARKER, SchemaNode, SchemaRef
from .schema_tree_builder import SchemaTreeBuilder, SchemaTreeError

__all__ = [
    "ARRAY_MARKER",
    "SchemaNode",
    "SchemaRef",
    "SchemaTreeBuilder",
    "SchemaTreeError",
]
