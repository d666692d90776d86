"""Kafka producer wrapper service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol, cast

from confluent_kafka import KafkaException, Producer

from asyncapi_view.configuration.runtime_settings import KafkaPublishingSettings

from .publish_contracts import PublishError, PublishRequest

_KAFKA_CLIENT_LOGGER = logging.getLogger("asyncapi_view.kafka.client")
_KAFKA_CLIENT_LOGGER.addHandler(logging.NullHandler())
_KAFKA_CLIENT_LOGGER.propagate = False
_KAFKA_CLIENT_LOGGER.setLevel(logging.CRITICAL + 1)

TYPE_ID_HEADER = "__TypeId__"
KEY_BINDING = "key"


class KafkaProducerProtocol(Protocol):
    """Protocol implemented by both real and fake producers."""

    def produce(self, topic: str, **kwargs: Any) -> None: ...

    def flush(self, timeout: float) -> int: ...


class KafkaPublisher:  # pylint: disable=too-few-public-methods
    """Publishes example payloads to the Kafka topic named by the channel."""

    def __init__(
        self,
        settings: KafkaPublishingSettings,
        producer: KafkaProducerProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._producer = producer or self._create_producer()

    def publish(self, request: PublishRequest) -> None:
        delivery_errors: list[Any] = []

        def _on_delivery(error: Any, _message: Any) -> None:
            if error is not None:
                delivery_errors.append(error)

        try:
            self._producer.produce(
                request.channel_name,
                value=request.example_payload.encode("utf-8"),
                key=_message_key(request.bindings),
                headers=_message_headers(request.headers, request.payload_type),
                on_delivery=_on_delivery,
            )
            remaining = self._producer.flush(self._settings.flush_timeout_seconds)
        except (KafkaException, BufferError) as exc:
            raise PublishError(f"Kafka publish failed: {exc}") from exc
        if delivery_errors:
            raise PublishError(f"Kafka delivery failed: {delivery_errors[0]}")
        if remaining:
            raise PublishError(
                f"Kafka delivery timed out after {self._settings.flush_timeout_seconds}s."
            )

    def _create_producer(self) -> KafkaProducerProtocol:
        config: dict[str, str | int | float | bool | None] = {
            "bootstrap.servers": ",".join(self._settings.bootstrap_servers),
        }
        for key, value in self._settings.security.items():
            if isinstance(value, str | int | float | bool) or value is None:
                config[key] = value
        try:
            return cast(
                KafkaProducerProtocol,
                Producer(config, logger=_KAFKA_CLIENT_LOGGER),  # type: ignore[call-arg]
            )
        except TypeError:
            return cast(KafkaProducerProtocol, Producer(config))


def _message_key(bindings: Mapping[str, Any] | None) -> bytes | None:
    if not bindings:
        return None
    key = bindings.get(KEY_BINDING)
    if key is None:
        return None
    if isinstance(key, str):
        return key.encode("utf-8")
    return json.dumps(key).encode("utf-8")


def _message_headers(
    headers: Mapping[str, Any] | None, payload_type: str | None
) -> list[tuple[str, bytes]]:
    rendered: list[tuple[str, bytes]] = []
    for name, value in (headers or {}).items():
        text = value if isinstance(value, str) else json.dumps(value)
        rendered.append((str(name), text.encode("utf-8")))
    if payload_type:
        rendered.append((TYPE_ID_HEADER, payload_type.encode("utf-8")))
    return rendered
