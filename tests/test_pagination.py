import pytest
import respx
from httpx import Response
from harvest_api import HarvestClient
from harvest_api.models import ClientList, ClientListOptions, ListOptions
from harvest_api.pagination import (
    get_link_href,
    next_page_number,
    next_page_options,
    next_page_url,
    parse_page_from_href,
)

BASE = "https://api.harvestapp.com/v2/"


def _page(page, total_pages, *, links=True, next_page=None):
    payload = {
        "clients": [{"id": page}],
        "per_page": 1,
        "total_pages": total_pages,
        "total_entries": total_pages,
        "next_page": next_page,
        "previous_page": page - 1 if page > 1 else None,
        "page": page,
    }
    if links:
        payload["links"] = {
            "first": f"{BASE}clients?page=1&per_page=1",
            "next": (
                f"{BASE}clients?page={page + 1}&per_page=1"
                if page < total_pages
                else None
            ),
            "previous": f"{BASE}clients?page={page - 1}&per_page=1" if page > 1 else None,
            "last": f"{BASE}clients?page={total_pages}&per_page=1",
        }
    return payload


def test_parse_page_from_href():
    assert parse_page_from_href(f"{BASE}clients?page=3&per_page=100") == 3
    assert parse_page_from_href("/v2/clients?per_page=100") is None
    assert parse_page_from_href("/v2/clients?page=abc") is None
    assert parse_page_from_href(None) is None


def test_link_helpers():
    listing = ClientList.model_validate(_page(1, 2))
    assert next_page_url(listing) == f"{BASE}clients?page=2&per_page=1"
    assert get_link_href(listing, "last") == f"{BASE}clients?page=2&per_page=1"
    assert get_link_href(ClientList(), "next") is None


def test_next_page_prefers_links_then_next_page():
    assert next_page_number(ClientList.model_validate(_page(1, 3))) == 2
    assert (
        next_page_number(ClientList.model_validate(_page(1, 3, links=False, next_page=2)))
        == 2
    )
    assert next_page_number(ClientList.model_validate(_page(2, 3, links=False))) == 3


def test_last_page_has_no_next():
    assert next_page_number(ClientList.model_validate(_page(3, 3))) is None
    assert next_page_options(ClientList.model_validate(_page(3, 3)), None) is None


def test_next_page_options_keeps_filters():
    opts = ClientListOptions(is_active=True, per_page=1)
    following = next_page_options(ClientList.model_validate(_page(1, 2)), opts)
    assert isinstance(following, ClientListOptions)
    assert following.page == 2
    assert following.is_active is True
    assert opts.page is None


def test_next_page_options_without_options():
    following = next_page_options(ClientList.model_validate(_page(1, 2)), None)
    assert isinstance(following, ListOptions)
    assert (following.page, following.per_page) == (2, 1)


@pytest.mark.asyncio
async def test_walk_all_pages():
    async with respx.mock:
        route = respx.get(BASE + "clients").mock(
            side_effect=lambda request: Response(
                200, json=_page(int(request.url.params["page"]), 3)
            )
        )

        seen = []
        opts = ClientListOptions(page=1, per_page=1)
        async with HarvestClient(account_id="1") as client:
            while opts is not None:
                listing, _ = await client.clients.list(opts)
                seen.extend(c.id for c in listing.clients)
                opts = next_page_options(listing, opts)

        assert seen == [1, 2, 3]
        assert route.call_count == 3
