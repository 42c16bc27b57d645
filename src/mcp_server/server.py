"""FastMCP server.

Tools mirror the CLI commands and return the same markdown as a single
text block. Errors never escape a tool: they come back as an
`Error ...: <message>` text.
"""

import logging
from enum import Enum
from typing import Annotated

import httpx
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from core.config import AppSettings, missing_credentials
from core.domain.models import ContentStatus, SpaceStatus, SpaceType
from core.interfaces.observer import TransportObserver
from core.services.factory import ConfluenceControllers, build_controllers
from core.services.pages_controller import ListPagesOptions
from core.services.spaces_controller import ListSpacesOptions

logger = logging.getLogger(__name__)

SERVER_NAME = "confluence-mcp"


class McpTransport(str, Enum):
    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class ConfluenceTools:
    """Tool bodies, kept apart from registration so they can be called directly."""

    def __init__(self, controllers: ConfluenceControllers) -> None:
        self._controllers = controllers

    async def list_spaces(
        self,
        type: SpaceType | None = None,
        status: SpaceStatus | None = None,
        limit: int | None = None,
    ) -> str:
        try:
            result = await self._controllers.spaces.list(
                ListSpacesOptions(type=type, status=status, limit=limit)
            )
            return result.content
        except Exception as exc:
            logger.error("list-spaces failed: %s", exc)
            return f"Error listing Confluence spaces: {exc}"

    async def get_space(self, id: str) -> str:
        try:
            result = await self._controllers.spaces.get(id)
            return result.content
        except Exception as exc:
            logger.error("get-space failed: %s", exc)
            return f"Error getting Confluence space details: {exc}"

    async def list_pages(
        self,
        space_id: str | None = None,
        status: ContentStatus | None = None,
        title: str | None = None,
        limit: int | None = None,
    ) -> str:
        try:
            result = await self._controllers.pages.list(
                ListPagesOptions(space_id=space_id, status=status, title=title, limit=limit)
            )
            return result.content
        except Exception as exc:
            logger.error("list-pages failed: %s", exc)
            return f"Error listing Confluence pages: {exc}"

    async def get_page(self, id: str) -> str:
        try:
            result = await self._controllers.pages.get(id)
            return result.content
        except Exception as exc:
            logger.error("get-page failed: %s", exc)
            return f"Error getting Confluence page details: {exc}"


def build_server(
    settings: AppSettings,
    *,
    observer: TransportObserver | None = None,
    client: httpx.AsyncClient | None = None,
) -> FastMCP:
    tools = ConfluenceTools(build_controllers(settings, observer=observer, client=client))
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="list-spaces", description="List all available Confluence spaces")
    async def list_spaces(
        type: Annotated[SpaceType | None, Field(description="Filter spaces by type")] = None,
        status: Annotated[SpaceStatus | None, Field(description="Filter spaces by status")] = None,
        limit: Annotated[
            int | None,
            Field(ge=1, le=250, description="Limit the number of spaces returned"),
        ] = None,
    ) -> str:
        return await tools.list_spaces(type=type, status=status, limit=limit)

    @mcp.tool(name="get-space", description="Get details about a specific Confluence space")
    async def get_space(
        id: Annotated[str, Field(description="ID of the Confluence space to retrieve")],
    ) -> str:
        return await tools.get_space(id)

    @mcp.tool(name="list-pages", description="List Confluence pages, optionally within one space")
    async def list_pages(
        space_id: Annotated[str | None, Field(description="Only pages of this space ID")] = None,
        status: Annotated[ContentStatus | None, Field(description="Filter pages by status")] = None,
        title: Annotated[str | None, Field(description="Exact page title to match")] = None,
        limit: Annotated[
            int | None,
            Field(ge=1, le=250, description="Limit the number of pages returned"),
        ] = None,
    ) -> str:
        return await tools.list_pages(space_id=space_id, status=status, title=title, limit=limit)

    @mcp.tool(name="get-page", description="Get details and content of a specific Confluence page")
    async def get_page(
        id: Annotated[str, Field(description="ID of the Confluence page to retrieve")],
    ) -> str:
        return await tools.get_page(id)

    return mcp


def serve(settings: AppSettings, transport: McpTransport = McpTransport.STDIO) -> None:
    """Run the server until the client disconnects."""

    logger.info("Starting Confluence MCP server with %s transport", transport.value.upper())
    if missing_credentials(settings):
        logger.warning("Atlassian credentials are not configured; tools will return errors.")
    build_server(settings).run(transport=transport.value)

