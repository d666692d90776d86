"""Display-ready example values."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, time
from typing import Any

from asyncapi_view.frozen_values import freeze_value


class ExampleRenderingError(Exception):
    """Raised when an example value cannot be rendered as JSON text."""


def count_lines(text: str) -> int:
    """Return the number of newline-separated lines in text."""
    return len(text.split("\n"))


@dataclass(frozen=True)
class Example:
    """Example value together with its serialized text and display line count."""

    raw: Any
    text: str
    line_count: int

    @staticmethod
    def of(raw: Any) -> Example:
        frozen = freeze_value(raw)
        try:
            text = json.dumps(frozen, indent=2, ensure_ascii=False, default=_json_default)
        except (TypeError, ValueError) as exc:
            raise ExampleRenderingError(f"Example cannot be rendered as JSON: {exc}") from exc
        return Example(raw=frozen, text=text, line_count=count_lines(text))


def _json_default(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    # YAML documents load timestamps as date/datetime objects.
    if isinstance(value, date | time):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
