"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    KafkaPublishingSettings,
    NotificationSettings,
    ViewerSettings,
)

DEFAULT_DURATION_MS = 3000
DEFAULT_ERROR_DURATION_MS = 4000


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given: relative anchors, no publishers."""
    return Configuration(
        path=None,
        viewer=_parse_viewer_section(None),
        notifications=_parse_notifications_section(None),
        kafka=None,
    )


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    publishing = _optional_mapping(parsed.get("publishing"), "publishing")
    kafka_section = publishing.get("kafka") if publishing is not None else None

    return Configuration(
        path=path,
        viewer=_parse_viewer_section(parsed.get("viewer")),
        notifications=_parse_notifications_section(parsed.get("notifications")),
        kafka=_parse_kafka_section(kafka_section) if kafka_section is not None else None,
    )


def _parse_viewer_section(value: Any) -> ViewerSettings:
    section = _optional_mapping(value, "viewer") or {}
    location_path = _optional_string(section.get("location_path"), "viewer.location_path")
    location_query = _optional_string(section.get("location_query"), "viewer.location_query")
    if location_query and not location_query.startswith("?"):
        raise ConfigurationError("viewer.location_query must start with '?'.")
    return ViewerSettings(
        location_path=location_path or "",
        location_query=location_query or "",
    )


def _parse_notifications_section(value: Any) -> NotificationSettings:
    section = _optional_mapping(value, "notifications") or {}
    duration_ms = _require_positive_int(
        section.get("duration_ms", DEFAULT_DURATION_MS), "notifications.duration_ms"
    )
    error_duration_ms = _require_positive_int(
        section.get("error_duration_ms", DEFAULT_ERROR_DURATION_MS),
        "notifications.error_duration_ms",
    )
    return NotificationSettings(duration_ms=duration_ms, error_duration_ms=error_duration_ms)


def _parse_kafka_section(value: Any) -> KafkaPublishingSettings:
    section = _require_mapping(value, "publishing.kafka")
    bootstrap_servers = _normalize_bootstrap_servers(section.get("bootstrap_servers"))
    security = section.get("security") or {}
    if not isinstance(security, Mapping):
        raise ConfigurationError("publishing.kafka.security must be a mapping.")
    flush_timeout_seconds = _require_positive_int(
        section.get("flush_timeout_seconds", 10), "publishing.kafka.flush_timeout_seconds"
    )
    return KafkaPublishingSettings(
        bootstrap_servers=bootstrap_servers,
        security=dict(security),
        flush_timeout_seconds=flush_timeout_seconds,
    )


def _normalize_bootstrap_servers(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("publishing.kafka.bootstrap_servers is required.")
    servers: list[str] = []
    if isinstance(value, str):
        servers = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(
                    "publishing.kafka.bootstrap_servers entries must be strings."
                )
            stripped = item.strip()
            if stripped:
                servers.append(stripped)
    else:
        raise ConfigurationError(
            "publishing.kafka.bootstrap_servers must be a string or list of strings."
        )
    if not servers:
        raise ConfigurationError(
            "publishing.kafka.bootstrap_servers must contain at least one server."
        )
    return tuple(servers)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
