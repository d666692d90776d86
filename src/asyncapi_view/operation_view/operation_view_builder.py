"""Derivation of editable operation views from the resolved document."""

from __future__ import annotations

from collections.abc import Mapping

from asyncapi_view.channel_operations import Operation
from asyncapi_view.document_mapping import ResolvedDocument
from asyncapi_view.example_rendering import Example
from asyncapi_view.schema_resolution import SchemaNode

from .view_models import OperationView


class SchemaLookupError(LookupError):
    """Raised when a message references a schema missing from the resolved document."""


def schema_identifier(ref_name: str | None) -> str:
    """Return the schema name a message reference points at (text after the last '/')."""
    if ref_name is None:
        raise SchemaLookupError("Message does not reference a schema.")
    return ref_name[ref_name.rfind("/") + 1 :]


def derive_operation_view(
    document: ResolvedDocument, channel_name: str, operation: Operation
) -> OperationView:
    """Look up payload and headers schemas and precompute editable text state."""
    schemas = document.components.schemas
    payload_identifier = schema_identifier(operation.message.payload.name)
    payload_schema = _lookup_schema(schemas, payload_identifier)
    headers_identifier = schema_identifier(operation.message.headers.name)
    headers_schema = _lookup_schema(schemas, headers_identifier)

    return OperationView(
        channel_name=channel_name,
        operation=operation,
        protocol_name=next(iter(operation.bindings)),
        schema_identifier=payload_identifier,
        schema=payload_schema,
        default_example=payload_schema.example,
        default_example_type=operation.message.name,
        example_line_count=_line_count(payload_schema.example),
        headers_schema_identifier=headers_identifier,
        headers=headers_schema,
        headers_example=headers_schema.example,
        headers_line_count=_line_count(headers_schema.example),
    )


def _lookup_schema(schemas: Mapping[str, SchemaNode], identifier: str) -> SchemaNode:
    try:
        return schemas[identifier]
    except KeyError as exc:
        raise SchemaLookupError(f"Schema '{identifier}' is not part of the document.") from exc


def _line_count(example: Example | None) -> int:
    return example.line_count if example is not None else 0
