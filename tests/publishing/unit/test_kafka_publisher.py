"""Kafka publisher tests."""

from __future__ import annotations

from typing import Any

import pytest
from asyncapi_view.configuration.runtime_settings import KafkaPublishingSettings
from asyncapi_view.publishing import KafkaPublisher, PublishError, PublishRequest
from confluent_kafka import KafkaException


def _settings() -> KafkaPublishingSettings:
    return KafkaPublishingSettings(
        bootstrap_servers=("localhost:9092",),
        security={},
        flush_timeout_seconds=5,
    )


def _request(**overrides: Any) -> PublishRequest:
    defaults: dict[str, Any] = {
        "protocol": "kafka",
        "channel_name": "orders",
        "example_payload": '{"orderId": "42"}',
        "payload_type": "com.example.OrderCreated",
        "headers": {"source": "ui", "attempt": 1},
        "bindings": {"key": "order-42"},
    }
    defaults.update(overrides)
    return PublishRequest(**defaults)


class FakeProducer:
    def __init__(
        self,
        *,
        delivery_error: object | None = None,
        remaining: int = 0,
        produce_error: Exception | None = None,
    ) -> None:
        self.produced: list[dict[str, Any]] = []
        self._delivery_error = delivery_error
        self._remaining = remaining
        self._produce_error = produce_error
        self._callbacks: list[Any] = []

    def produce(self, topic: str, **kwargs: Any) -> None:
        if self._produce_error is not None:
            raise self._produce_error
        self.produced.append({"topic": topic, **kwargs})
        self._callbacks.append(kwargs["on_delivery"])

    def flush(self, timeout: float) -> int:
        self.flush_timeout = timeout
        for callback in self._callbacks:
            callback(self._delivery_error, None)
        return self._remaining


def test_publish_produces_payload_to_channel_topic() -> None:
    producer = FakeProducer()

    KafkaPublisher(_settings(), producer=producer).publish(_request())

    (produced,) = producer.produced
    assert produced["topic"] == "orders"
    assert produced["value"] == b'{"orderId": "42"}'
    assert produced["key"] == b"order-42"
    assert produced["headers"] == [
        ("source", b"ui"),
        ("attempt", b"1"),
        ("__TypeId__", b"com.example.OrderCreated"),
    ]
    assert producer.flush_timeout == 5


def test_publish_without_bindings_or_headers_sends_no_key() -> None:
    producer = FakeProducer()

    KafkaPublisher(_settings(), producer=producer).publish(
        _request(headers=None, bindings=None, payload_type=None)
    )

    (produced,) = producer.produced
    assert produced["key"] is None
    assert produced["headers"] == []


def test_delivery_error_raises_publish_error() -> None:
    producer = FakeProducer(delivery_error="Broker: Unknown topic")

    with pytest.raises(PublishError, match="Unknown topic") as excinfo:
        KafkaPublisher(_settings(), producer=producer).publish(_request())

    assert excinfo.value.status_code == 500


def test_flush_timeout_raises_publish_error() -> None:
    producer = FakeProducer(remaining=1)

    with pytest.raises(PublishError, match="timed out"):
        KafkaPublisher(_settings(), producer=producer).publish(_request())


def test_kafka_exception_is_wrapped() -> None:
    producer = FakeProducer(produce_error=KafkaException("boom"))

    with pytest.raises(PublishError, match="Kafka publish failed"):
        KafkaPublisher(_settings(), producer=producer).publish(_request())
