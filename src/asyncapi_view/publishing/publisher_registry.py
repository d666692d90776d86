"""Protocol-keyed publisher lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .publish_contracts import NO_PUBLISHER_STATUS, PublishError, Publisher, PublishRequest

_LOGGER = logging.getLogger(__name__)


class PublisherRegistry:
    """Dispatches publish requests to the publisher registered for their protocol."""

    def __init__(self, publishers: Mapping[str, Publisher] | None = None) -> None:
        self._publishers: dict[str, Publisher] = dict(publishers or {})

    def register(self, protocol: str, publisher: Publisher) -> None:
        self._publishers[protocol] = publisher

    @property
    def protocols(self) -> tuple[str, ...]:
        return tuple(self._publishers)

    def publish(self, request: PublishRequest) -> None:
        publisher = self._publishers.get(request.protocol)
        if publisher is None:
            raise PublishError(
                f"No publisher registered for protocol '{request.protocol}'.",
                status_code=NO_PUBLISHER_STATUS,
            )
        _LOGGER.info(
            "Publishing example payload to '%s' via %s.", request.channel_name, request.protocol
        )
        publisher.publish(request)
