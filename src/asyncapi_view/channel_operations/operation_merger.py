"""Operation and channel merging service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from asyncapi_view.binding_normalization import normalize_bindings
from asyncapi_view.frozen_values import freeze_value
from asyncapi_view.reference_resolution import ReferenceResolver, resolve_ref
from asyncapi_view.schema_resolution import SchemaRef

from .operation_models import (
    CHANNEL_ANCHOR_PREFIX,
    ChannelOperation,
    Message,
    Operation,
    direction_for_action,
)

_LOGGER = logging.getLogger(__name__)

_REF_KEY = "$ref"
_ANCHOR_SEPARATOR = "-"


class ChannelResolutionError(Exception):
    """Raised when an operation cannot be tied to a channel and its protocol."""


class OperationMerger:
    """Joins raw operations, channels and messages into ordered channel operations."""

    def __init__(self, resolver: ReferenceResolver) -> None:
        self._resolver = resolver

    def merge(
        self,
        raw_operations: Mapping[str, Any] | None,
        raw_channels: Mapping[str, Any] | None,
        raw_messages: Mapping[str, Any] | None = None,
    ) -> tuple[ChannelOperation, ...]:
        """Return one ChannelOperation per (operation, message), in document order."""
        channels = raw_channels or {}
        component_messages = raw_messages or {}
        channel_operations: list[ChannelOperation] = []
        for operation_key, raw_operation in (raw_operations or {}).items():
            if not isinstance(raw_operation, Mapping):
                raise ChannelResolutionError(f"Operation '{operation_key}' must be an object.")
            channel_name = self._channel_name(operation_key, raw_operation)
            channel = channels.get(channel_name)
            if not isinstance(channel, Mapping):
                raise ChannelResolutionError(
                    f"Operation '{operation_key}' references unknown channel '{channel_name}'."
                )
            messages = [
                self._map_message(_dereference_message(raw_message, component_messages))
                for raw_message in raw_operation.get("messages") or ()
            ]
            for message in messages:
                channel_operations.append(
                    self._map_channel_operation(
                        channel_name, channel, message, raw_operation.get("action")
                    )
                )
        _LOGGER.debug("Merged %d channel operations.", len(channel_operations))
        return tuple(channel_operations)

    def _channel_name(self, operation_key: str, raw_operation: Mapping[str, Any]) -> str:
        channel_ref = raw_operation.get("channel")
        ref = channel_ref.get(_REF_KEY) if isinstance(channel_ref, Mapping) else None
        channel_name = self._resolver.resolve(ref)
        if channel_name is None:
            raise ChannelResolutionError(f"Operation '{operation_key}' has no channel reference.")
        return channel_name

    def _map_message(self, raw_message: Any) -> Message:
        if not isinstance(raw_message, Mapping):
            raise ChannelResolutionError("Operation messages must be objects.")
        raw_bindings = raw_message.get("bindings")
        return Message(
            name=raw_message.get("name"),
            title=raw_message.get("title"),
            description=raw_message.get("description"),
            payload=self._schema_ref(raw_message.get("payload")),
            headers=self._schema_ref(raw_message.get("headers")),
            bindings=normalize_bindings(raw_bindings),
            raw_bindings=freeze_value(raw_bindings),
        )

    def _schema_ref(self, raw_schema: Any) -> SchemaRef:
        ref = raw_schema.get(_REF_KEY) if isinstance(raw_schema, Mapping) else None
        return SchemaRef(
            name=ref,
            title=self._resolver.resolve(ref),
            anchor_url=self._resolver.anchor_url(ref),
        )

    def _map_channel_operation(
        self,
        channel_name: str,
        channel: Mapping[str, Any],
        message: Message,
        action: object,
    ) -> ChannelOperation:
        channel_bindings = channel.get("bindings")
        operation = Operation(
            protocol=_first_protocol(channel_name, channel_bindings),
            operation=direction_for_action(action),
            message=message,
            bindings=freeze_value(channel_bindings),
        )
        anchor_identifier = CHANNEL_ANCHOR_PREFIX + _ANCHOR_SEPARATOR.join(
            str(part)
            for part in (
                operation.protocol,
                channel_name,
                operation.operation.value,
                message.title,
            )
        )
        return ChannelOperation(
            name=channel_name,
            description=channel.get("description"),
            anchor_identifier=anchor_identifier,
            operation=operation,
        )


def _first_protocol(channel_name: str, channel_bindings: Any) -> str:
    if not isinstance(channel_bindings, Mapping) or not channel_bindings:
        raise ChannelResolutionError(f"Channel '{channel_name}' declares no protocol bindings.")
    return next(iter(channel_bindings))


def _dereference_message(raw_message: Any, component_messages: Mapping[str, Any]) -> Any:
    """Replace a bare ``$ref`` message entry by the component message it names."""
    if not isinstance(raw_message, Mapping) or set(raw_message) != {_REF_KEY}:
        return raw_message
    ref = raw_message[_REF_KEY]
    message_name = resolve_ref(ref) if isinstance(ref, str) else None
    if message_name not in component_messages:
        raise ChannelResolutionError(f"Message reference '{ref}' names no component message.")
    return component_messages[message_name]
