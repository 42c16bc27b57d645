from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.models import BodyFormat, ContentStatus, SpaceSortOrder, SpaceStatus, SpaceType
from core.domain.params import GetPageByIdParams, GetSpaceByIdParams, ListPagesParams, ListSpacesParams


def test_empty_params_produce_no_query():
    assert ListSpacesParams().to_query_params() == {}
    assert GetPageByIdParams().to_query_params() == {}


def test_list_spaces_maps_wire_names_in_declaration_order():
    params = ListSpacesParams(
        ids=["1", "2"],
        type=SpaceType.GLOBAL,
        status=SpaceStatus.CURRENT,
        favorited_by="acc-1",
        sort=SpaceSortOrder.NAME_DESC,
        include_icon=False,
        limit=25,
    )

    query = params.to_query_params()

    assert query == {
        "ids": "1,2",
        "type": "global",
        "status": "current",
        "favorited-by": "acc-1",
        "sort": "-name",
        "include-icon": "false",
        "limit": "25",
    }
    assert list(query) == ["ids", "type", "status", "favorited-by", "sort", "include-icon", "limit"]


def test_empty_lists_and_strings_are_omitted():
    params = ListSpacesParams(keys=[], labels=["team"], cursor="")

    assert params.to_query_params() == {"labels": "team"}


def test_booleans_are_stringified_lowercase():
    params = GetSpaceByIdParams(include_labels=True, include_permissions=False)

    assert params.to_query_params() == {
        "include-permissions": "false",
        "include-labels": "true",
    }


def test_page_params_join_enum_lists_and_keep_zero_version():
    params = GetPageByIdParams(
        body_format=BodyFormat.VIEW,
        status=[ContentStatus.CURRENT, ContentStatus.DRAFT],
        version=0,
        include_favorited_by_current_user_status=True,
    )

    assert params.to_query_params() == {
        "body-format": "view",
        "status": "current,draft",
        "version": "0",
        "include-favorited-by-current-user-status": "true",
    }


def test_list_pages_space_and_parent_ids():
    params = ListPagesParams(space_id=["10", "11"], parent_id="99", title="Runbook")

    assert params.to_query_params() == {"space-id": "10,11", "parent-id": "99", "title": "Runbook"}


@pytest.mark.parametrize("limit", [0, 251])
def test_limit_out_of_range_is_rejected(limit):
    with pytest.raises(ValidationError):
        ListSpacesParams(limit=limit)


def test_unknown_parameter_is_rejected():
    with pytest.raises(ValidationError):
        ListSpacesParams(colour="blue")
