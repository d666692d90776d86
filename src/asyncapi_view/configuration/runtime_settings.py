"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ViewerSettings:
    """Location the resolved document is rendered at, used for anchor URLs."""

    location_path: str
    location_query: str


@dataclass(frozen=True)
class NotificationSettings:
    """Display durations for publish notifications."""

    duration_ms: int
    error_duration_ms: int


@dataclass(frozen=True)
class KafkaPublishingSettings:
    """Kafka producer configuration for example publishing."""

    bootstrap_servers: tuple[str, ...]
    security: Mapping[str, object]
    flush_timeout_seconds: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    viewer: ViewerSettings
    notifications: NotificationSettings
    kafka: KafkaPublishingSettings | None
