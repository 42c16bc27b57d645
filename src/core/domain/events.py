"""Structured events emitted by the transport.

Observers receive these instead of the transport writing log lines itself,
so the logging backend (or a test recorder) can be swapped freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TransportEventKind(str, Enum):
    CREDENTIALS_MISSING = "credentials_missing"
    REQUEST_STARTED = "request_started"
    RESPONSE_RECEIVED = "response_received"
    API_ERROR = "api_error"
    REQUEST_FAILED = "request_failed"


@dataclass(frozen=True)
class TransportEvent:
    kind: TransportEventKind
    message: str
    fields: dict[str, Any] = field(default_factory=dict)
