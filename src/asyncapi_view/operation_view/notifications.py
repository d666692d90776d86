"""Notification collaborator contract."""

from __future__ import annotations

from typing import Protocol

PUBLISHED_LABEL = "PUBLISHED"
ERROR_LABEL = "ERROR"


class Notifier(Protocol):  # pylint: disable=too-few-public-methods
    """Fire-and-forget transient notification sink."""

    def notify(self, message: str, label: str, duration_ms: int) -> None: ...
