"""Spaces use cases.

Every failure (missing credentials, HTTP status, network, decoding) is
caught here and turned into a single `Error ...: <message>` line, so the
outer layers never see a raw exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.confluence import SpacesService
from adapters.markdown import format_space_details, format_spaces_list
from core.domain.models import SpaceStatus, SpaceType
from core.domain.params import GetSpaceByIdParams, ListSpacesParams
from core.services.responses import ControllerResponse, error_response, site_base_url

logger = logging.getLogger(__name__)


@dataclass
class ListSpacesOptions:
    """Filters accepted by `list-spaces`; `None` leaves the API default."""

    type: SpaceType | None = None
    status: SpaceStatus | None = None
    limit: int | None = None


class SpacesController:
    def __init__(self, service: SpacesService) -> None:
        self._service = service

    def _base_url(self) -> str | None:
        return site_base_url(self._service.settings.atlassian_site_name)

    async def list(self, options: ListSpacesOptions | None = None) -> ControllerResponse:
        options = options or ListSpacesOptions()
        logger.debug("Listing Confluence spaces (%s)", options)
        try:
            params = ListSpacesParams(type=options.type, status=options.status, limit=options.limit)
            spaces = await self._service.list(params)
            return ControllerResponse(content=format_spaces_list(spaces, base_url=self._base_url()))
        except Exception as exc:
            logger.error("Error listing spaces: %s", exc)
            return error_response("Error listing Confluence spaces", exc)

    async def get(self, space_id: str) -> ControllerResponse:
        logger.debug("Getting Confluence space %s", space_id)
        try:
            space = await self._service.get(space_id, GetSpaceByIdParams(include_labels=True))
            return ControllerResponse(content=format_space_details(space, base_url=self._base_url()))
        except Exception as exc:
            logger.error("Error getting space %s: %s", space_id, exc)
            return error_response("Error getting Confluence space", exc)
