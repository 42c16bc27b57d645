"""Authenticated access to the Atlassian Cloud REST API.

Two pieces:
- `get_atlassian_credentials` turns the injected settings into credentials,
  or `None` (plus one warning event) when any value is missing.
- `fetch_atlassian` issues one Basic-auth request and returns decoded JSON.

No retries: a non-2xx status raises `AtlassianApiError` on the first
response, and network errors from httpx propagate untouched.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from adapters.http_client import build_async_client
from adapters.observers import default_observer
from core.config import AppSettings
from core.domain.credentials import AtlassianCredentials
from core.domain.events import TransportEvent, TransportEventKind
from core.errors import AtlassianApiError
from core.interfaces.observer import TransportObserver

MISSING_CREDENTIALS_MESSAGE = (
    "Missing Atlassian credentials. Please set ATLASSIAN_SITE_NAME, "
    "ATLASSIAN_USER_EMAIL, and ATLASSIAN_API_TOKEN environment variables."
)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


@dataclass(frozen=True)
class RequestOptions:
    method: HttpMethod = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


def get_atlassian_credentials(
    settings: AppSettings,
    observer: TransportObserver | None = None,
) -> AtlassianCredentials | None:
    """Resolve credentials from `settings`; `None` means "feature unavailable"."""

    observer = observer or default_observer()

    site_name = (settings.atlassian_site_name or "").strip()
    user_email = (settings.atlassian_user_email or "").strip()
    api_token = (settings.atlassian_api_token or "").strip()

    if not site_name or not user_email or not api_token:
        observer.notify(
            TransportEvent(
                kind=TransportEventKind.CREDENTIALS_MISSING,
                message=MISSING_CREDENTIALS_MESSAGE,
            )
        )
        return None

    return AtlassianCredentials(
        site_name=site_name,
        user_email=user_email,
        api_token=api_token,
    )


def normalize_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def build_base_url(credentials: AtlassianCredentials) -> str:
    return f"https://{credentials.site_name}.atlassian.net"


def build_authorization_header(credentials: AtlassianCredentials) -> str:
    raw = f"{credentials.user_email}:{credentials.api_token}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def build_headers(credentials: AtlassianCredentials, overrides: dict[str, str] | None = None) -> httpx.Headers:
    """Default headers, with same-named `overrides` winning (case-insensitive)."""

    headers = httpx.Headers(
        {
            "Authorization": build_authorization_header(credentials),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
    )
    if overrides:
        headers.update(overrides)
    return headers


async def fetch_atlassian(
    credentials: AtlassianCredentials,
    path: str,
    options: RequestOptions | None = None,
    *,
    settings: AppSettings | None = None,
    observer: TransportObserver | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Call `path` on the credentials' tenant and return the decoded JSON body.

    When `client` is None a client is built from `settings` for this call
    only and closed afterwards.
    """

    options = options or RequestOptions()
    observer = observer or default_observer()

    url = f"{build_base_url(credentials)}{normalize_path(path)}"
    headers = build_headers(credentials, options.headers)
    content = json.dumps(options.body) if options.body is not None else None

    observer.notify(
        TransportEvent(
            kind=TransportEventKind.REQUEST_STARTED,
            message=f"Calling Atlassian API: {options.method} {url}",
            fields={"method": options.method, "url": url},
        )
    )

    try:
        if client is None:
            async with build_async_client(settings) as owned:
                response = await owned.request(options.method, url, headers=headers, content=content)
        else:
            response = await client.request(options.method, url, headers=headers, content=content)
    except httpx.HTTPError as exc:
        observer.notify(
            TransportEvent(
                kind=TransportEventKind.REQUEST_FAILED,
                message=f"Request failed: {exc}",
                fields={"url": url, "error": type(exc).__name__},
            )
        )
        raise

    observer.notify(
        TransportEvent(
            kind=TransportEventKind.RESPONSE_RECEIVED,
            message=f"Raw response received: {response.status_code} {response.reason_phrase}",
            fields={"url": url, "status": response.status_code},
        )
    )

    if not response.is_success:
        body = response.text
        observer.notify(
            TransportEvent(
                kind=TransportEventKind.API_ERROR,
                message=f"API error: {response.status_code} {response.reason_phrase}",
                fields={"url": url, "body": body[:500]},
            )
        )
        raise AtlassianApiError(response.status_code, response.reason_phrase, body)

    return response.json()
