"""Concrete transport observers.

`LoggingObserver` is the default everywhere; `NullObserver` silences the
transport entirely (useful for health checks that report on their own).
"""

from __future__ import annotations

import logging

from core.domain.events import TransportEvent, TransportEventKind

_LEVELS = {
    TransportEventKind.CREDENTIALS_MISSING: logging.WARNING,
    TransportEventKind.REQUEST_STARTED: logging.DEBUG,
    TransportEventKind.RESPONSE_RECEIVED: logging.DEBUG,
    TransportEventKind.API_ERROR: logging.ERROR,
    TransportEventKind.REQUEST_FAILED: logging.ERROR,
}


class LoggingObserver:
    """Renders each event as one log record on the given logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("adapters.transport")

    def notify(self, event: TransportEvent) -> None:
        level = _LEVELS.get(event.kind, logging.INFO)
        if not self._logger.isEnabledFor(level):
            return
        if event.fields:
            details = " ".join(f"{k}={v!r}" for k, v in event.fields.items())
            self._logger.log(level, "%s (%s)", event.message, details)
        else:
            self._logger.log(level, "%s", event.message)


class NullObserver:
    def notify(self, event: TransportEvent) -> None:
        return None


def default_observer() -> LoggingObserver:
    return LoggingObserver()
