"""Confluence spaces endpoints (`/wiki/api/v2/spaces`)."""

from __future__ import annotations

import logging
from urllib.parse import quote

from adapters.confluence.base import ConfluenceService, build_path
from core.domain.models import SpaceDetailed, SpacesResponse
from core.domain.params import GetSpaceByIdParams, ListSpacesParams

logger = logging.getLogger(__name__)


class SpacesService(ConfluenceService):
    async def list(self, params: ListSpacesParams | None = None) -> SpacesResponse:
        """List spaces with optional filtering, sorting and a page cursor."""

        params = params or ListSpacesParams()
        logger.debug("Listing spaces with %s", params.to_query_params())
        path = build_path("spaces", params.to_query_params())
        return await self._get("list spaces", path, SpacesResponse)

    async def get(self, space_id: str, params: GetSpaceByIdParams | None = None) -> SpaceDetailed:
        """Fetch one space; `include_*` flags pull the optional collections."""

        params = params or GetSpaceByIdParams()
        logger.debug("Getting space %s", space_id)
        path = build_path(f"spaces/{quote(space_id, safe='')}", params.to_query_params())
        return await self._get("get space details", path, SpaceDetailed)
