"""Document mapping exports."""

from .document_mapper import DocumentMapper, DocumentMappingError, map_document
from .document_models import Components, Info, ResolvedDocument
from .document_reader import DocumentReadError, load_raw_document, parse_raw_document
from .document_serializer import document_to_dict

__all__ = [
    "Components",
    "DocumentMapper",
    "DocumentMappingError",
    "DocumentReadError",
    "Info",
    "ResolvedDocument",
    "document_to_dict",
    "load_raw_document",
    "map_document",
    "parse_raw_document",
]
