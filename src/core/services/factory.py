from __future__ import annotations

from dataclasses import dataclass

import httpx

from adapters.confluence import PagesService, SpacesService
from core.config import AppSettings
from core.interfaces.observer import TransportObserver
from core.services.pages_controller import PagesController
from core.services.spaces_controller import SpacesController


@dataclass
class ConfluenceControllers:
    spaces: SpacesController
    pages: PagesController


def build_controllers(
    settings: AppSettings,
    *,
    observer: TransportObserver | None = None,
    client: httpx.AsyncClient | None = None,
) -> ConfluenceControllers:
    """Wire services and controllers around one settings object."""

    return ConfluenceControllers(
        spaces=SpacesController(SpacesService(settings, observer=observer, client=client)),
        pages=PagesController(PagesService(settings, observer=observer, client=client)),
    )
