"""Pages use cases, same error contract as the spaces controller."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.confluence import PagesService
from adapters.markdown import format_page_details, format_pages_list
from core.domain.models import BodyFormat, ContentStatus
from core.domain.params import GetPageByIdParams, ListPagesParams
from core.services.responses import ControllerResponse, error_response, site_base_url

logger = logging.getLogger(__name__)


@dataclass
class ListPagesOptions:
    space_id: str | None = None
    status: ContentStatus | None = None
    title: str | None = None
    limit: int | None = None


class PagesController:
    def __init__(self, service: PagesService) -> None:
        self._service = service

    def _base_url(self) -> str | None:
        return site_base_url(self._service.settings.atlassian_site_name)

    async def list(self, options: ListPagesOptions | None = None) -> ControllerResponse:
        options = options or ListPagesOptions()
        logger.debug("Listing Confluence pages (%s)", options)
        try:
            params = ListPagesParams(
                space_id=[options.space_id] if options.space_id else None,
                status=[options.status] if options.status else None,
                title=options.title,
                limit=options.limit,
            )
            pages = await self._service.list(params)
            return ControllerResponse(content=format_pages_list(pages, base_url=self._base_url()))
        except Exception as exc:
            logger.error("Error listing pages: %s", exc)
            return error_response("Error listing Confluence pages", exc)

    async def get(self, page_id: str) -> ControllerResponse:
        logger.debug("Getting Confluence page %s", page_id)
        try:
            params = GetPageByIdParams(
                body_format=BodyFormat.VIEW,
                include_labels=True,
                include_version=True,
            )
            page = await self._service.get(page_id, params)
            return ControllerResponse(content=format_page_details(page, base_url=self._base_url()))
        except Exception as exc:
            logger.error("Error getting page %s: %s", page_id, exc)
            return error_response("Error getting Confluence page", exc)
