from __future__ import annotations

import httpx
import pytest

from adapters.confluence import PagesService, SpacesService
from adapters.confluence.base import build_path
from core.domain.models import SpaceType
from core.domain.params import GetPageByIdParams, GetSpaceByIdParams, ListPagesParams, ListSpacesParams
from core.errors import AtlassianApiError, AtlassianResponseError, CredentialsRequiredError

from conftest import RecordingHandler, json_handler, make_settings, mock_client, page_payload, space_payload


def test_build_path_only_adds_query_when_present():
    assert build_path("spaces") == "/wiki/api/v2/spaces"
    assert build_path("spaces", {"limit": "5"}) == "/wiki/api/v2/spaces?limit=5"


async def test_list_spaces_calls_v2_endpoint_and_validates(settings, observer):
    handler = json_handler({"results": [space_payload()], "_links": {"next": "/wiki/api/v2/spaces?cursor=abc"}})

    async with mock_client(handler) as client:
        service = SpacesService(settings, observer=observer, client=client)
        spaces = await service.list(ListSpacesParams(type=SpaceType.GLOBAL, ids=["1", "2"], limit=5))

    url = handler.last.url
    assert url.host == "test-site.atlassian.net"
    assert url.path == "/wiki/api/v2/spaces"
    assert dict(url.params) == {"ids": "1,2", "type": "global", "limit": "5"}
    assert spaces.results[0].key == "ENG"
    assert spaces.results[0].type is SpaceType.GLOBAL
    assert spaces.links.next == "/wiki/api/v2/spaces?cursor=abc"


async def test_get_space_requests_optional_fields(settings, observer):
    payload = space_payload(labels={"results": [{"id": "1", "name": "docs"}], "meta": {"hasMore": False}, "_links": {}})
    handler = json_handler(payload)

    async with mock_client(handler) as client:
        service = SpacesService(settings, observer=observer, client=client)
        space = await service.get("123456", GetSpaceByIdParams(include_labels=True))

    assert handler.last.url.path == "/wiki/api/v2/spaces/123456"
    assert handler.last.url.params["include-labels"] == "true"
    assert [label.name for label in space.labels.results] == ["docs"]


async def test_list_pages_maps_filters(settings, observer):
    handler = json_handler({"results": [page_payload()], "_links": {}})

    async with mock_client(handler) as client:
        service = PagesService(settings, observer=observer, client=client)
        pages = await service.list(ListPagesParams(space_id=["123456"], limit=1))

    assert handler.last.url.path == "/wiki/api/v2/pages"
    assert handler.last.url.params["space-id"] == "123456"
    assert pages.results[0].space_id == "123456"
    assert pages.results[0].version.number == 4


async def test_get_page_escapes_the_id(settings, observer):
    handler = json_handler(page_payload())

    async with mock_client(handler) as client:
        service = PagesService(settings, observer=observer, client=client)
        await service.get("a/b", GetPageByIdParams())

    assert handler.last.url.raw_path == b"/wiki/api/v2/pages/a%2Fb"


async def test_missing_credentials_raise_before_any_request(observer):
    handler = json_handler({})

    async with mock_client(handler) as client:
        service = SpacesService(make_settings(atlassian_site_name=None), observer=observer, client=client)
        with pytest.raises(CredentialsRequiredError, match="Atlassian credentials are required to list spaces"):
            await service.list()

    assert handler.requests == []


async def test_schema_violation_raises_typed_error(settings, observer):
    broken = space_payload()
    del broken["key"]
    handler = json_handler({"results": [broken], "_links": {}})

    async with mock_client(handler) as client:
        service = SpacesService(settings, observer=observer, client=client)
        with pytest.raises(AtlassianResponseError) as excinfo:
            await service.list()

    assert excinfo.value.model_name == "SpacesResponse"
    assert excinfo.value.validation_error.error_count() == 1


async def test_http_error_propagates_from_service(settings, observer):
    handler = RecordingHandler(lambda request: httpx.Response(401))

    async with mock_client(handler) as client:
        service = PagesService(settings, observer=observer, client=client)
        with pytest.raises(AtlassianApiError, match="401 Unauthorized"):
            await service.get("1")
