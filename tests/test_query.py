from datetime import datetime, timezone
from typing import Annotated, List, Optional

import httpx
import pytest
from harvest_api.errors import HarvestEncodeOptionsError
from harvest_api.models import (
    ClientListOptions,
    ListOptions,
    QueryParam,
    TimeEntryListOptions,
)
from harvest_api.query import add_options, encode_options
from harvest_api.values import Date, Time
from pydantic import ValidationError


class SearchOptions(ListOptions):
    query: Annotated[Optional[str], QueryParam("query")] = None
    date: Annotated[Optional[Date], QueryParam("date")] = None
    started: Annotated[Optional[Time], QueryParam("started")] = None
    ids: Annotated[Optional[List[int]], QueryParam("ids")] = None
    # Not bound to the query string.
    note: Optional[str] = None


def test_query_and_date_encode_to_exact_pairs():
    opts = SearchOptions(query="foo", date=Date(2019, 1, 2))
    assert add_options("search", opts) == "search?date=2019-01-02&query=foo"


def test_omitting_a_field_removes_it():
    assert add_options("search", SearchOptions(query="foo")) == "search?query=foo"
    assert add_options("search", SearchOptions(date=Date(2019, 1, 2))) == (
        "search?date=2019-01-02"
    )


def test_none_options_leave_path_unchanged():
    assert add_options("clients", None) == "clients"
    assert add_options("clients?page=3", None) == "clients?page=3"


def test_empty_options_produce_no_query():
    assert add_options("clients", ClientListOptions()) == "clients"


def test_pagination_fields_merge_into_query():
    opts = ClientListOptions(is_active=True, page=2, per_page=50)
    url = httpx.URL("https://api.harvestapp.com/v2/" + add_options("clients", opts))
    assert dict(url.params) == {"is_active": "true", "page": "2", "per_page": "50"}


def test_false_booleans_are_sent():
    opts = TimeEntryListOptions(is_running=False)
    assert add_options("time_entries", opts) == "time_entries?is_running=false"


def test_zero_and_empty_values_are_omitted():
    pairs = encode_options(SearchOptions(query="", ids=[]))
    assert pairs == []


def test_time_datetime_and_sequences():
    opts = SearchOptions(
        started=Time.of(15, 4),
        ids=[3, 1],
        note="ignored",
    )
    pairs = encode_options(opts)
    assert pairs == [("ids", "3"), ("ids", "1"), ("started", "3:04pm")]

    since = ClientListOptions(
        updated_since=datetime(2019, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    )
    url = httpx.URL("https://x.test/" + add_options("clients", since))
    assert url.params["updated_since"] == "2019-01-02T03:04:05Z"


def test_from_and_to_use_wire_names():
    opts = TimeEntryListOptions(from_=Date(2019, 1, 1), to=Date(2019, 1, 31))
    assert add_options("time_entries", opts) == (
        "time_entries?from=2019-01-01&to=2019-01-31"
    )


def test_existing_query_is_replaced():
    assert add_options("clients?page=9", ClientListOptions(page=2)) == "clients?page=2"


def test_non_model_options_are_rejected():
    with pytest.raises(HarvestEncodeOptionsError):
        add_options("clients", {"page": 1})


def test_unsupported_value_is_rejected():
    class WeirdOptions(ListOptions):
        blob: Annotated[Optional[object], QueryParam("blob")] = None

    with pytest.raises(HarvestEncodeOptionsError):
        encode_options(WeirdOptions(blob=object()))


def test_per_page_is_bounded():
    ListOptions(per_page=2000)
    with pytest.raises(ValidationError):
        ListOptions(per_page=2001)
    with pytest.raises(ValidationError):
        ListOptions(page=0)
