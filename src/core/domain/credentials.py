"""Atlassian credentials.

Immutable once resolved; the transport never caches them, they are resolved
again from `AppSettings` on every call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AtlassianCredentials(BaseModel):
    """Site + Basic-auth pair for an Atlassian Cloud tenant."""

    model_config = ConfigDict(frozen=True)

    site_name: str = Field(
        ...,
        min_length=1,
        description="Tenant name, as in https://<site_name>.atlassian.net.",
    )
    user_email: str = Field(
        ...,
        min_length=1,
        description="Account email used as the Basic-auth user.",
    )
    api_token: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="API token used as the Basic-auth password.",
    )
