"""Confluence v2 services (spaces, pages).

Each service maps typed parameters to a query string, calls
`adapters.transport.fetch_atlassian` and validates the JSON into
`core.domain.models`.
"""

from adapters.confluence.pages import PagesService
from adapters.confluence.spaces import SpacesService

__all__ = [
    "PagesService",
    "SpacesService",
]
