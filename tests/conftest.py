from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import CREDENTIAL_ENV_VARS, AppSettings
from core.domain.events import TransportEvent, TransportEventKind

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingObserver:
    def __init__(self) -> None:
        self.events: list[TransportEvent] = []

    def notify(self, event: TransportEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[TransportEventKind]:
        return [e.kind for e in self.events]


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, respond: Handler) -> None:
        self._respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_handler(payload: Any, status_code: int = 200) -> RecordingHandler:
    return RecordingHandler(lambda request: httpx.Response(status_code, json=payload))


def mock_client(handler: Handler, settings: AppSettings | None = None) -> httpx.AsyncClient:
    return build_async_client(settings or make_settings(), transport=httpx.MockTransport(handler))


def make_settings(**overrides: Any) -> AppSettings:
    values: dict[str, Any] = {
        "atlassian_site_name": "test-site",
        "atlassian_user_email": "test@example.com",
        "atlassian_api_token": "test-token",
    }
    values.update(overrides)
    return AppSettings(_env_file=None, **values)


def space_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "123456",
        "key": "ENG",
        "name": "Engineering",
        "type": "global",
        "status": "current",
        "authorId": "557058:abc",
        "createdAt": "2024-01-15T10:30:00.000Z",
        "homepageId": "98765",
        "description": {"plain": {"value": "Team docs", "representation": "plain"}},
        "_links": {"webui": "/spaces/ENG"},
    }
    payload.update(overrides)
    return payload


def page_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "777",
        "status": "current",
        "title": "Runbook",
        "spaceId": "123456",
        "parentId": "98765",
        "parentType": "page",
        "authorId": "557058:abc",
        "createdAt": "2024-02-01T08:00:00Z",
        "version": {
            "createdAt": "2024-03-01T09:15:00Z",
            "number": 4,
            "message": "Fix typos",
            "authorId": "557058:def",
        },
        "_links": {"webui": "/spaces/ENG/pages/777/Runbook", "tinyui": "/x/AbC"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (*CREDENTIAL_ENV_VARS, "DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
