from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ValidationError

from adapters.observers import default_observer
from adapters.transport import fetch_atlassian, get_atlassian_credentials
from core.config import AppSettings
from core.domain.credentials import AtlassianCredentials
from core.errors import AtlassianResponseError, CredentialsRequiredError
from core.interfaces.observer import TransportObserver

API_PATH = "/wiki/api/v2"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_path(resource: str, query: dict[str, str] | None = None) -> str:
    """`/wiki/api/v2/<resource>` plus `?query` when there is any."""

    path = f"{API_PATH}/{resource.lstrip('/')}"
    if query:
        path = f"{path}?{urlencode(query)}"
    return path


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise AtlassianResponseError(model.__name__, exc) from exc


class ConfluenceService:
    """Shared plumbing: settings, observer and an optional shared client."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        observer: TransportObserver | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._observer = observer or default_observer()
        self._client = client

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _require_credentials(self, action: str) -> AtlassianCredentials:
        credentials = get_atlassian_credentials(self._settings, self._observer)
        if credentials is None:
            raise CredentialsRequiredError(f"Atlassian credentials are required to {action}")
        return credentials

    async def _get(self, action: str, path: str, model: type[ModelT]) -> ModelT:
        credentials = self._require_credentials(action)
        payload = await fetch_atlassian(
            credentials,
            path,
            settings=self._settings,
            observer=self._observer,
            client=self._client,
        )
        return validate_payload(model, payload)
