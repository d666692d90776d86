"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    Configuration,
    KafkaPublishingSettings,
    NotificationSettings,
    ViewerSettings,
)

__all__ = [
    "Configuration",
    "KafkaPublishingSettings",
    "NotificationSettings",
    "ViewerSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
