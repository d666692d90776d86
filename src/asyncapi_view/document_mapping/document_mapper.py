"""Document mapping façade."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from asyncapi_view.channel_operations import ChannelResolutionError, OperationMerger
from asyncapi_view.example_rendering import ExampleRenderingError
from asyncapi_view.frozen_values import freeze_value
from asyncapi_view.reference_resolution import DEFAULT_BASE_URL, ReferenceResolver
from asyncapi_view.schema_resolution import SchemaTreeBuilder, SchemaTreeError

from .document_models import Components, Info, ResolvedDocument

_LOGGER = logging.getLogger(__name__)


class DocumentMappingError(Exception):
    """Raised when a raw document cannot be resolved as a whole."""


class DocumentMapper:
    """Composes reference, binding, schema and operation resolution into one document."""

    def __init__(self, resolver: ReferenceResolver) -> None:
        self._schema_builder = SchemaTreeBuilder(resolver)
        self._operation_merger = OperationMerger(resolver)

    def to_resolved_document(self, raw: Mapping[str, Any]) -> ResolvedDocument:
        """Resolve the whole document or raise DocumentMappingError; never partial."""
        if not isinstance(raw, Mapping):
            raise DocumentMappingError("Document root must be an object.")
        components = _optional_mapping(raw, "components")
        try:
            channel_operations = self._operation_merger.merge(
                _optional_mapping(raw, "operations"),
                _optional_mapping(raw, "channels"),
                _optional_mapping(components, "messages"),
            )
            schemas = self._schema_builder.build_all(_optional_mapping(components, "schemas"))
        except (ChannelResolutionError, SchemaTreeError, ExampleRenderingError) as exc:
            raise DocumentMappingError(str(exc)) from exc

        document = ResolvedDocument(
            info=_map_info(raw),
            servers=freeze_value(_optional_mapping(raw, "servers") or {}),
            channel_operations=channel_operations,
            components=Components(schemas=schemas),
        )
        _LOGGER.debug(
            "Resolved document '%s' with %d channel operations and %d schemas.",
            document.info.title,
            len(channel_operations),
            len(schemas),
        )
        return document


def map_document(raw: Mapping[str, Any], base_url: str = DEFAULT_BASE_URL) -> ResolvedDocument:
    """Resolve a raw document with a resolver built for base_url."""
    return DocumentMapper(ReferenceResolver(base_url)).to_resolved_document(raw)


def _map_info(raw: Mapping[str, Any]) -> Info:
    info = _optional_mapping(raw, "info") or {}
    return Info(
        title=info.get("title"),
        version=info.get("version"),
        description=info.get("description"),
        raw_document=freeze_value(raw),
    )


def _optional_mapping(container: Mapping[str, Any] | None, key: str) -> Mapping[str, Any] | None:
    if container is None:
        return None
    value = container.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DocumentMappingError(f"Document section '{key}' must be an object.")
    return value
