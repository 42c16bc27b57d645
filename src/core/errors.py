"""Failure taxonomy shared by adapters, controllers and entry points.

Network errors are not wrapped: `httpx` exceptions reach the caller as-is,
and so does `json.JSONDecodeError` for a body that is not JSON.
"""

from __future__ import annotations

from pydantic import ValidationError


class ConfluenceMcpError(Exception):
    """Base class for errors raised by this project."""


class CredentialsRequiredError(ConfluenceMcpError):
    """An operation needed Atlassian credentials and none were configured."""


class AtlassianApiError(ConfluenceMcpError):
    """The Atlassian API answered with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        super().__init__(f"Atlassian API error: {status_code} {status_text}")
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class AtlassianResponseError(ConfluenceMcpError):
    """A decoded payload did not match the expected response schema."""

    def __init__(self, model_name: str, validation_error: ValidationError) -> None:
        count = validation_error.error_count()
        super().__init__(
            f"Unexpected Atlassian response for {model_name}: "
            f"{count} validation error{'s' if count != 1 else ''}"
        )
        self.model_name = model_name
        self.validation_error = validation_error
