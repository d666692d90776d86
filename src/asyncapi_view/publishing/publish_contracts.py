"""Publishing contracts shared by publishers and the publish flow."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Protocol

NO_PUBLISHER_STATUS = int(HTTPStatus.NOT_FOUND)
PUBLISH_FAILED_STATUS = int(HTTPStatus.INTERNAL_SERVER_ERROR)


class PublishError(Exception):
    """Raised when an example payload could not be published."""

    def __init__(self, message: str, *, status_code: int = PUBLISH_FAILED_STATUS) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class PublishRequest:
    """Example message a user asked to publish on a channel."""

    protocol: str
    channel_name: str
    example_payload: str
    payload_type: str | None
    headers: Mapping[str, Any] | None
    bindings: Mapping[str, Any] | None


class Publisher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol implemented by every protocol-specific publisher."""

    def publish(self, request: PublishRequest) -> None: ...
