"""Confluence pages endpoints (`/wiki/api/v2/pages`)."""

from __future__ import annotations

import logging
from urllib.parse import quote

from adapters.confluence.base import ConfluenceService, build_path
from core.domain.models import PageDetailed, PagesResponse
from core.domain.params import GetPageByIdParams, ListPagesParams

logger = logging.getLogger(__name__)


class PagesService(ConfluenceService):
    async def list(self, params: ListPagesParams | None = None) -> PagesResponse:
        params = params or ListPagesParams()
        logger.debug("Listing pages with %s", params.to_query_params())
        path = build_path("pages", params.to_query_params())
        return await self._get("list pages", path, PagesResponse)

    async def get(self, page_id: str, params: GetPageByIdParams | None = None) -> PageDetailed:
        params = params or GetPageByIdParams()
        logger.debug("Getting page %s", page_id)
        path = build_path(f"pages/{quote(page_id, safe='')}", params.to_query_params())
        return await self._get("get page details", path, PageDetailed)
