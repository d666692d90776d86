"""Publishing exports."""

from .kafka_publisher import KafkaPublisher
from .publish_contracts import (
    NO_PUBLISHER_STATUS,
    PUBLISH_FAILED_STATUS,
    PublishError,
    Publisher,
    PublishRequest,
)
from .publisher_registry import PublisherRegistry

__all__ = [
    "KafkaPublisher",
    "NO_PUBLISHER_STATUS",
    "PUBLISH_FAILED_STATUS",
    "PublishError",
    "PublishRequest",
    "Publisher",
    "PublisherRegistry",
]
