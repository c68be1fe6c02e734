import json
from datetime import datetime, timezone

from harvest_api.client import encode_body
from harvest_api.models import (
    Client,
    ClientCreateRequest,
    ClientList,
    Estimate,
    EstimateLineItem,
    InvoiceCreateRequest,
    InvoiceLineItemRequest,
    InvoiceLineItemsImport,
    InvoiceTimeImport,
    TimeEntry,
    User,
)
from harvest_api.stringify import stringify
from harvest_api.values import Date, Time


def test_only_present_fields_are_encoded():
    body = encode_body(ClientCreateRequest(name="Client new"))
    assert json.loads(body) == {"name": "Client new"}


def test_explicit_none_is_sent_as_null():
    body = encode_body(ClientCreateRequest(name="Client new", address=None))
    assert body == b'{"name":"Client new","address":null}'


def test_plain_containers_are_encoded():
    body = encode_body(
        {"spent_date": Date(2018, 3, 30), "project_ids": (1, 2), "notes": "Zürich"}
    )
    assert body == (
        '{"spent_date":"2018-03-30","project_ids":[1,2],"notes":"Zürich"}'.encode("utf-8")
    )


def test_html_characters_are_not_escaped():
    body = encode_body(ClientCreateRequest(name="Tom & Jerry <Ltd>", address="Zürich"))
    assert body == '{"name":"Tom & Jerry <Ltd>","address":"Zürich"}'.encode("utf-8")


def test_aliased_fields_use_wire_names():
    request = InvoiceCreateRequest(
        client_id=5,
        line_items=[InvoiceLineItemRequest(id=9, destroy=True)],
        line_items_import=InvoiceLineItemsImport(
            project_ids=[1, 2],
            time=InvoiceTimeImport(
                summary_type="task", from_=Date(2019, 1, 1), to=Date(2019, 1, 31)
            ),
        ),
    )
    assert json.loads(encode_body(request)) == {
        "client_id": 5,
        "line_items": [{"id": 9, "_destroy": True}],
        "line_items_import": {
            "project_ids": [1, 2],
            "time": {"summary_type": "task", "from": "2019-01-01", "to": "2019-01-31"},
        },
    }


def test_absent_fields_stay_absent_after_decode():
    client = Client.model_validate({"id": 1, "name": "Client 1", "currency": None})
    assert client.is_set("name")
    assert client.is_set("currency")
    assert not client.is_set("address")
    assert client.address is None


def test_unknown_fields_are_ignored():
    client = Client.model_validate({"id": 1, "brand_new_field": "x"})
    assert client.id == 1
    assert not hasattr(client, "brand_new_field")


def test_list_envelope_fields_are_preserved():
    listing = ClientList.model_validate(
        {
            "clients": [{"id": 1}, {"id": 2}],
            "per_page": 100,
            "total_pages": 1,
            "total_entries": 2,
            "next_page": None,
            "previous_page": None,
            "page": 1,
            "links": {
                "first": "https://api.harvestapp.com/v2/clients?page=1&per_page=100",
                "next": None,
                "previous": None,
                "last": "https://api.harvestapp.com/v2/clients?page=1&per_page=100",
            },
        }
    )
    assert [c.id for c in listing.clients] == [1, 2]
    assert (listing.per_page, listing.total_pages, listing.total_entries) == (100, 1, 2)
    assert listing.page == 1
    assert listing.next_page is None
    assert listing.links.first == listing.links.last


def test_time_entry_decodes_wall_clock_times():
    entry = TimeEntry.model_validate(
        {
            "id": 636718192,
            "spent_date": "2017-03-21",
            "started_time": "3:00pm",
            "ended_time": "5:30pm",
            "hours": 2.5,
            "timer_started_at": None,
            "created_at": "2017-06-27T15:50:15Z",
        }
    )
    assert entry.spent_date == Date(2017, 3, 21)
    assert entry.started_time == Time.of(15, 0)
    assert entry.ended_time == Time.of(17, 30)
    assert entry.created_at == datetime(2017, 6, 27, 15, 50, 15, tzinfo=timezone.utc)


def test_stringify_renders_present_fields_only():
    client = Client(
        id=1,
        name="Client 1",
        is_active=True,
        created_at=datetime(2018, 1, 31, 20, 34, 30, tzinfo=timezone.utc),
    )
    expected = (
        'Client{id:1, name:"Client 1", is_active:true, '
        "created_at:{2018-01-31T20:34:30Z}}"
    )
    assert stringify(client) == expected
    assert str(client) == expected
    # deterministic across calls
    assert stringify(client) == stringify(client)


def test_stringify_nests_models_lists_and_dates():
    estimate = Estimate(
        id=3,
        client=Client(id=5, name="ABC"),
        line_items=[EstimateLineItem(kind="Service", quantity=1.0)],
        creator=User(id=7),
        issue_date=Date(2017, 6, 1),
    )
    assert stringify(estimate) == (
        'Estimate{id:3, client:Client{id:5, name:"ABC"}, '
        'line_items:[EstimateLineItem{kind:"Service", quantity:1.0}], '
        "creator:User{id:7}, issue_date:{2017-06-01}}"
    )


def test_stringify_scalars():
    assert stringify(None) == "<nil>"
    assert stringify([1, "a", False]) == '[1 "a" false]'
    assert stringify(Time.of(9, 5)) == "{9:05am}"
