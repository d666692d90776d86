"""User-triggered publishing of edited examples."""

from __future__ import annotations

import json
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any

from asyncapi_view.configuration.runtime_settings import NotificationSettings
from asyncapi_view.publishing import (
    NO_PUBLISHER_STATUS,
    Publisher,
    PublishError,
    PublishRequest,
)

from .notifications import ERROR_LABEL, PUBLISHED_LABEL, Notifier
from .view_models import OperationView

_LOGGER = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "Example payload is not valid"


class PublishFlow:
    """Parses edited texts, publishes them asynchronously and reports the outcome."""

    def __init__(
        self,
        publisher: Publisher,
        notifier: Notifier,
        notification_settings: NotificationSettings,
        executor: Executor | None = None,
    ) -> None:
        self._publisher = publisher
        self._notifier = notifier
        self._settings = notification_settings
        self._executor = executor or ThreadPoolExecutor(max_workers=1)

    def publish(
        self,
        view: OperationView,
        example: str,
        payload_type: str | None,
        headers: str | None = None,
        bindings: str | None = None,
    ) -> Future[None] | None:
        """Start publishing; returns None when the edited texts are not valid JSON input."""
        try:
            json.loads(example)
            headers_json = _parse_optional_json_object(headers)
            bindings_json = _parse_optional_json_object(bindings)
        except ValueError:
            self._notifier.notify(INVALID_PAYLOAD_MESSAGE, ERROR_LABEL, self._settings.duration_ms)
            return None

        request = PublishRequest(
            protocol=view.protocol_name,
            channel_name=view.channel_name,
            example_payload=example,
            payload_type=payload_type,
            headers=headers_json,
            bindings=bindings_json,
        )
        future = self._executor.submit(self._publisher.publish, request)
        future.add_done_callback(lambda done: self._report(done, request))
        return future

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def _report(self, future: Future[None], request: PublishRequest) -> None:
        error = future.exception()
        if error is None:
            self._notifier.notify(
                f"Example payload sent to: {request.channel_name}",
                PUBLISHED_LABEL,
                self._settings.duration_ms,
            )
            return

        _LOGGER.warning("Publishing to '%s' failed: %s", request.channel_name, error)
        message = "Publish failed"
        if isinstance(error, PublishError) and error.status_code == NO_PUBLISHER_STATUS:
            message += f": no publisher was provided for {request.protocol}"
        self._notifier.notify(message, ERROR_LABEL, self._settings.error_duration_ms)


def _parse_optional_json_object(text: str | None) -> dict[str, Any] | None:
    if text is None or not text.strip():
        return None
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("Expected a JSON object.")
    return parsed
