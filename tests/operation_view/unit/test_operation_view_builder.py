"""Operation view derivation tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from asyncapi_view.document_mapping import ResolvedDocument, load_raw_document, map_document
from asyncapi_view.operation_view import (
    LineCountField,
    SchemaLookupError,
    derive_operation_view,
    schema_identifier,
)


def _document() -> ResolvedDocument:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "sample-asyncapi.json"
    return map_document(load_raw_document(sample_path))


def test_schema_identifier_strips_everything_up_to_last_segment() -> None:
    assert schema_identifier("#/components/schemas/OrderCreated") == "OrderCreated"
    assert schema_identifier("OrderCreated") == "OrderCreated"


def test_view_resolves_payload_and_headers_schemas() -> None:
    document = _document()
    channel_operation = document.channel_operations[0]

    view = derive_operation_view(document, channel_operation.name, channel_operation.operation)

    assert view.channel_name == "orders"
    assert view.protocol_name == "kafka"
    assert view.schema_identifier == "OrderCreated"
    assert view.schema is document.components.schemas["OrderCreated"]
    assert view.default_example_type == "com.example.OrderCreated"
    assert view.example_line_count == 9
    assert view.headers_schema_identifier == "SpringKafkaDefaultHeaders"
    assert view.headers_line_count == 3
    assert view.message_binding_example is None
    assert view.message_binding_example_line_count == 0


def test_view_without_examples_has_zero_line_counts() -> None:
    document = _document()
    channel_operation = document.channel_operations[2]

    view = derive_operation_view(document, channel_operation.name, channel_operation.operation)

    assert view.default_example is None
    assert view.example_line_count == 0
    assert view.headers_example is None
    assert view.headers_line_count == 0


def test_binding_example_is_built_on_request() -> None:
    document = _document()
    channel_operation = document.channel_operations[0]
    view = derive_operation_view(document, channel_operation.name, channel_operation.operation)

    with_example = view.with_binding_example()

    assert with_example.message_binding_example is not None
    assert with_example.message_binding_example.raw == {"key": "order-42"}
    assert with_example.message_binding_example_line_count == 3
    assert view.message_binding_example is None


def test_binding_example_is_absent_without_protocol_binding() -> None:
    document = _document()
    channel_operation = document.channel_operations[2]
    view = derive_operation_view(document, channel_operation.name, channel_operation.operation)

    assert view.with_binding_example().message_binding_example is None


def test_line_counts_follow_edited_text() -> None:
    document = _document()
    channel_operation = document.channel_operations[0]
    view = derive_operation_view(document, channel_operation.name, channel_operation.operation)

    edited = view.with_line_count(LineCountField.EXAMPLE, "{\n}")
    edited = edited.with_line_count(LineCountField.HEADERS, "{}")
    edited = edited.with_line_count(LineCountField.MESSAGE_BINDING_EXAMPLE, "a\nb\nc\nd")

    assert edited.example_line_count == 2
    assert edited.headers_line_count == 1
    assert edited.message_binding_example_line_count == 4


def test_missing_schema_is_a_hard_failure() -> None:
    document = map_document(
        {
            "channels": {"orders": {"bindings": {"kafka": {}}}},
            "operations": {
                "op": {
                    "action": "send",
                    "channel": {"$ref": "#/channels/orders"},
                    "messages": [{"title": "M", "payload": {"$ref": "#/components/schemas/Gone"}}],
                }
            },
        }
    )
    channel_operation = document.channel_operations[0]

    with pytest.raises(SchemaLookupError, match="Gone"):
        derive_operation_view(document, channel_operation.name, channel_operation.operation)
