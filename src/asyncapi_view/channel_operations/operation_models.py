"""Channel operation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from asyncapi_view.binding_normalization import Binding
from asyncapi_view.schema_resolution import SchemaRef

CHANNEL_ANCHOR_PREFIX = "channel-"
SEND_ACTION = "send"


class OperationDirection(str, Enum):
    """Operation direction as seen by the documentation reader."""

    PUBLISH = "publish"
    SUBSCRIBE = "subscribe"


def direction_for_action(action: object) -> OperationDirection:
    """Map a document action to the reader's direction.

    The document describes the application's own perspective, so a ``send`` is
    something the reader subscribes to. Every other action value, recognized or not,
    is shown as ``publish``.
    """
    if action == SEND_ACTION:
        return OperationDirection.SUBSCRIBE
    return OperationDirection.PUBLISH


@dataclass(frozen=True)
class Message:  # pylint: disable=too-many-instance-attributes
    """Resolved message definition."""

    name: str | None
    title: str | None
    description: str | None
    payload: SchemaRef
    headers: SchemaRef
    bindings: Mapping[str, Binding]
    raw_bindings: Mapping[str, Any] | None


@dataclass(frozen=True)
class Operation:
    """One directional operation carrying exactly one message."""

    protocol: str
    operation: OperationDirection
    message: Message
    bindings: Mapping[str, Any]


@dataclass(frozen=True)
class ChannelOperation:
    """Channel record displayed for one (operation, message) pair."""

    name: str
    description: str | None
    anchor_identifier: str
    operation: Operation
