"""Serialization of the resolved document into JSON-ready structures."""

from __future__ import annotations

from collections.abc import Mapping, Set
from datetime import date, time
from typing import Any

from asyncapi_view.channel_operations import ChannelOperation, Message
from asyncapi_view.example_rendering import Example
from asyncapi_view.schema_resolution import SchemaNode, SchemaRef

from .document_models import ResolvedDocument


def document_to_dict(document: ResolvedDocument, *, include_raw: bool = False) -> dict[str, Any]:
    """Render the resolved document with the rendering contract's camelCase keys."""
    info: dict[str, Any] = {
        "title": document.info.title,
        "version": document.info.version,
        "description": document.info.description,
    }
    if include_raw:
        info["asyncApiJson"] = _plain(document.info.raw_document)
    return {
        "info": info,
        "servers": _plain(document.servers),
        "channelOperations": [
            _channel_operation_to_dict(channel_operation)
            for channel_operation in document.channel_operations
        ],
        "components": {
            "schemas": {
                name: _schema_to_dict(schema)
                for name, schema in document.components.schemas.items()
            }
        },
    }


def _channel_operation_to_dict(channel_operation: ChannelOperation) -> dict[str, Any]:
    operation = channel_operation.operation
    return {
        "name": channel_operation.name,
        "description": channel_operation.description,
        "anchorIdentifier": channel_operation.anchor_identifier,
        "operation": {
            "protocol": operation.protocol,
            "operation": operation.operation.value,
            "message": _message_to_dict(operation.message),
            "bindings": _plain(operation.bindings),
        },
    }


def _message_to_dict(message: Message) -> dict[str, Any]:
    return {
        "name": message.name,
        "title": message.title,
        "description": message.description,
        "payload": _schema_ref_to_dict(message.payload),
        "headers": _schema_ref_to_dict(message.headers),
        "bindings": _plain(message.bindings),
        "rawBindings": _plain(message.raw_bindings),
    }


def _schema_ref_to_dict(schema_ref: SchemaRef) -> dict[str, Any]:
    return {
        "name": schema_ref.name,
        "title": schema_ref.title,
        "anchorUrl": schema_ref.anchor_url,
    }


def _schema_to_dict(schema: SchemaNode) -> dict[str, Any]:
    rendered: dict[str, Any] = {
        "name": schema.name,
        "title": schema.title,
        "description": schema.description,
        "refName": schema.ref_name,
        "refTitle": schema.ref_title,
        "anchorIdentifier": schema.anchor_identifier,
        "anchorUrl": schema.anchor_url,
        "type": _plain(schema.type),
        "format": schema.format,
        "enum": _plain(schema.enum),
        "required": _plain(schema.required),
        "example": _example_to_dict(schema.example),
    }
    if schema.properties is not None:
        rendered["properties"] = {
            name: _schema_to_dict(child) for name, child in schema.properties.items()
        }
    if schema.items is not None:
        rendered["items"] = _schema_to_dict(schema.items)
    return {key: value for key, value in rendered.items() if value is not None}


def _example_to_dict(example: Example | None) -> dict[str, Any] | None:
    if example is None:
        return None
    return {"value": example.text, "lineCount": example.line_count}


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(child) for key, child in value.items()}
    if isinstance(value, (list, tuple, Set)):
        return [_plain(child) for child in value]
    if isinstance(value, date | time):
        return value.isoformat()
    return value
