"""Resolution of AsyncAPI documents into display-ready object graphs."""

from .document_mapping import DocumentMapper, ResolvedDocument, map_document

__all__ = ["DocumentMapper", "ResolvedDocument", "map_document"]
