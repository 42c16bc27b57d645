"""Request parameters for the Confluence v2 endpoints.

Each field carries its wire name as `serialization_alias`; `to_query_params`
turns a model into the query dict the service appends to the path. Field
order is the order parameters appear in the query string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models import (
    BodyFormat,
    ContentStatus,
    DescriptionFormat,
    PageSortOrder,
    SpaceSortOrder,
    SpaceStatus,
    SpaceType,
)


def _query_value(value: Any) -> str | None:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        joined = ",".join(str(v) for v in value)
        return joined or None
    if isinstance(value, str):
        return value or None
    return str(value)


class QueryParams(BaseModel):
    """Base class: optional fields only, `None` means "not sent"."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_query_params(self) -> dict[str, str]:
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        out: dict[str, str] = {}
        for key, value in data.items():
            rendered = _query_value(value)
            if rendered is not None:
                out[key] = rendered
        return out


class ListSpacesParams(QueryParams):
    ids: list[str] | None = None
    keys: list[str] | None = None
    type: SpaceType | None = None
    status: SpaceStatus | None = None
    labels: list[str] | None = None
    favorited_by: str | None = Field(default=None, serialization_alias="favorited-by")
    not_favorited_by: str | None = Field(default=None, serialization_alias="not-favorited-by")
    sort: SpaceSortOrder | None = None
    description_format: DescriptionFormat | None = Field(
        default=None,
        serialization_alias="description-format",
    )
    include_icon: bool | None = Field(default=None, serialization_alias="include-icon")
    cursor: str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)


class GetSpaceByIdParams(QueryParams):
    description_format: DescriptionFormat | None = Field(
        default=None,
        serialization_alias="description-format",
    )
    include_icon: bool | None = Field(default=None, serialization_alias="include-icon")
    include_operations: bool | None = Field(default=None, serialization_alias="include-operations")
    include_properties: bool | None = Field(default=None, serialization_alias="include-properties")
    include_permissions: bool | None = Field(default=None, serialization_alias="include-permissions")
    include_role_assignments: bool | None = Field(
        default=None,
        serialization_alias="include-role-assignments",
    )
    include_labels: bool | None = Field(default=None, serialization_alias="include-labels")


class ListPagesParams(QueryParams):
    id: list[str] | None = None
    space_id: list[str] | None = Field(default=None, serialization_alias="space-id")
    parent_id: str | None = Field(default=None, serialization_alias="parent-id")
    sort: PageSortOrder | None = None
    status: list[ContentStatus] | None = None
    title: str | None = None
    body_format: BodyFormat | None = Field(default=None, serialization_alias="body-format")
    cursor: str | None = None
    limit: int | None = Field(default=None, ge=1, le=250)


class GetPageByIdParams(QueryParams):
    body_format: BodyFormat | None = Field(default=None, serialization_alias="body-format")
    get_draft: bool | None = Field(default=None, serialization_alias="get-draft")
    status: list[ContentStatus] | None = None
    version: int | None = Field(default=None, ge=0)
    include_labels: bool | None = Field(default=None, serialization_alias="include-labels")
    include_properties: bool | None = Field(default=None, serialization_alias="include-properties")
    include_operations: bool | None = Field(default=None, serialization_alias="include-operations")
    include_likes: bool | None = Field(default=None, serialization_alias="include-likes")
    include_versions: bool | None = Field(default=None, serialization_alias="include-versions")
    include_version: bool | None = Field(default=None, serialization_alias="include-version")
    include_favorited_by_current_user_status: bool | None = Field(
        default=None,
        serialization_alias="include-favorited-by-current-user-status",
    )
    include_webresources: bool | None = Field(
        default=None,
        serialization_alias="include-webresources",
    )
    include_collaborators: bool | None = Field(
        default=None,
        serialization_alias="include-collaborators",
    )
