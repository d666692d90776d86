"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "asyncapi-view.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Viewer configuration template for asyncapi-view.
# Every section is optional; remove <OPTIONAL> placeholders you do not need.

viewer:
  # Anchor URLs are built as location_path + location_query + "#" + name.
  location_path: "<OPTIONAL>"
  # location_query must start with "?" when set.
  location_query: "<OPTIONAL>"

notifications:
  duration_ms: 3000
  error_duration_ms: 4000

publishing:
  # Publishing is enabled per protocol; channels of other protocols report
  # that no publisher was provided.
  kafka:
    bootstrap_servers:
      - "<REQUIRED>"
    security:
      sasl.username: "<OPTIONAL>"
      sasl.password: "<OPTIONAL>"
      security.protocol: "<OPTIONAL>"
      sasl.mechanisms: "<OPTIONAL>"
    flush_timeout_seconds: 10
"""


def build_placeholder_configuration() -> str:
    """Build a YAML viewer configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
