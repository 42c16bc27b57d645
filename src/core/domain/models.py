"""Confluence v2 domain models (Pydantic v2).

Why Pydantic in the domain:
- Payloads are validated once, at the boundary, instead of probing
  optional keys all over the formatters.
- Unknown keys are ignored so new API fields don't break decoding; missing
  required keys or wrong types do.

Note:
- These models describe *what* Confluence returns, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SpaceType(str, Enum):
    GLOBAL = "global"
    PERSONAL = "personal"
    COLLABORATION = "collaboration"
    KNOWLEDGE_BASE = "knowledge_base"


class SpaceStatus(str, Enum):
    CURRENT = "current"
    ARCHIVED = "archived"


class SpaceSortOrder(str, Enum):
    ID = "id"
    ID_DESC = "-id"
    KEY = "key"
    KEY_DESC = "-key"
    NAME = "name"
    NAME_DESC = "-name"


class DescriptionFormat(str, Enum):
    PLAIN = "plain"
    VIEW = "view"


class ContentStatus(str, Enum):
    CURRENT = "current"
    TRASHED = "trashed"
    DELETED = "deleted"
    DRAFT = "draft"
    ARCHIVED = "archived"
    HISTORICAL = "historical"


class ParentContentType(str, Enum):
    PAGE = "page"
    BLOGPOST = "blogpost"


class PageSortOrder(str, Enum):
    ID = "id"
    ID_DESC = "-id"
    CREATED_DATE = "created-date"
    CREATED_DATE_DESC = "-created-date"
    MODIFIED_DATE = "modified-date"
    MODIFIED_DATE_DESC = "-modified-date"
    TITLE = "title"
    TITLE_DESC = "-title"


class BodyFormat(str, Enum):
    STORAGE = "storage"
    ATLAS_DOC_FORMAT = "atlas_doc_format"
    VIEW = "view"


class ConfluenceModel(BaseModel):
    """Base for every decoded payload: camelCase aliases, unknown keys dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------


class OptionalFieldMeta(ConfluenceModel):
    has_more: bool = Field(default=False, alias="hasMore")


class OptionalFieldLinks(ConfluenceModel):
    next: str | None = None


T = TypeVar("T")


class OptionalFieldList(ConfluenceModel, Generic[T]):
    """Collection returned for `include-*` query flags."""

    results: list[T] = Field(default_factory=list)
    meta: OptionalFieldMeta = Field(default_factory=OptionalFieldMeta)
    links: OptionalFieldLinks = Field(default_factory=OptionalFieldLinks, alias="_links")


class ListLinks(ConfluenceModel):
    next: str | None = None
    base: str | None = None


class Label(ConfluenceModel):
    id: str
    name: str
    prefix: str | None = None


class Property(ConfluenceModel):
    id: str
    key: str
    value: Any = None


class Operation(ConfluenceModel):
    operation: str
    target_type: str = Field(..., alias="targetType")


class PermissionSubject(ConfluenceModel):
    type: str
    identifier: str


class BodyType(ConfluenceModel):
    value: str
    representation: str


# ---------------------------------------------------------------------------
# Spaces
# ---------------------------------------------------------------------------


class SpaceDescription(ConfluenceModel):
    plain: BodyType | None = None
    view: BodyType | None = None


class SpaceIcon(ConfluenceModel):
    path: str | None = None
    api_download_link: str | None = Field(default=None, alias="apiDownloadLink")


class SpaceLinks(ConfluenceModel):
    webui: str
    base: str | None = None


class SpacePermissionAssignment(ConfluenceModel):
    id: str
    subject: PermissionSubject
    operation: Operation


class SpaceRoleAssignment(ConfluenceModel):
    id: str
    role: str
    subject: PermissionSubject


class Space(ConfluenceModel):
    id: str
    key: str
    name: str
    type: SpaceType
    status: SpaceStatus
    author_id: str = Field(..., alias="authorId")
    created_at: datetime = Field(..., alias="createdAt")
    homepage_id: str | None = Field(default=None, alias="homepageId")
    description: SpaceDescription | None = None
    icon: SpaceIcon | None = None
    links: SpaceLinks = Field(..., alias="_links")
    current_active_alias: str | None = Field(default=None, alias="currentActiveAlias")


class SpaceDetailed(Space):
    labels: OptionalFieldList[Label] | None = None
    properties: OptionalFieldList[Property] | None = None
    operations: OptionalFieldList[Operation] | None = None
    permissions: OptionalFieldList[SpacePermissionAssignment] | None = None
    role_assignments: OptionalFieldList[SpaceRoleAssignment] | None = Field(
        default=None,
        alias="roleAssignments",
    )


class SpacesResponse(ConfluenceModel):
    results: list[Space] = Field(default_factory=list)
    links: ListLinks = Field(default_factory=ListLinks, alias="_links")


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class Version(ConfluenceModel):
    created_at: datetime = Field(..., alias="createdAt")
    message: str | None = None
    number: int
    minor_edit: bool | None = Field(default=None, alias="minorEdit")
    author_id: str = Field(..., alias="authorId")


class BodyBulk(ConfluenceModel):
    storage: BodyType | None = None
    atlas_doc_format: BodyType | None = None
    view: BodyType | None = None


class PageLinks(ConfluenceModel):
    webui: str
    editui: str | None = None
    tinyui: str | None = None
    base: str | None = None


class Like(ConfluenceModel):
    user_id: str = Field(..., alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class Page(ConfluenceModel):
    id: str
    status: ContentStatus
    title: str
    space_id: str = Field(..., alias="spaceId")
    parent_id: str | None = Field(default=None, alias="parentId")
    parent_type: ParentContentType | None = Field(default=None, alias="parentType")
    position: int | None = None
    author_id: str = Field(..., alias="authorId")
    owner_id: str | None = Field(default=None, alias="ownerId")
    last_owner_id: str | None = Field(default=None, alias="lastOwnerId")
    created_at: datetime = Field(..., alias="createdAt")
    version: Version | None = None
    body: BodyBulk | None = None
    links: PageLinks = Field(..., alias="_links")


class PageDetailed(Page):
    labels: OptionalFieldList[Label] | None = None
    properties: OptionalFieldList[Property] | None = None
    operations: OptionalFieldList[Operation] | None = None
    likes: OptionalFieldList[Like] | None = None
    versions: OptionalFieldList[Version] | None = None
    is_favorited_by_current_user: bool | None = Field(
        default=None,
        alias="isFavoritedByCurrentUser",
    )


class PagesResponse(ConfluenceModel):
    results: list[Page] = Field(default_factory=list)
    links: ListLinks = Field(default_factory=ListLinks, alias="_links")
