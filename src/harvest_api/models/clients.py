from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam


class Client(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    is_active: Optional[bool] = None
    address: Optional[str] = None
    # ISO 4217 code, e.g. "EUR".
    currency: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ClientList(Pagination):
    clients: List[Client] = []


class ClientListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ClientCreateRequest(HarvestModel):
    # Required by the API.
    name: Optional[str] = None
    is_active: Optional[bool] = None
    address: Optional[str] = None
    # Defaults to the company's currency.
    currency: Optional[str] = None


class ClientUpdateRequest(HarvestModel):
    name: Optional[str] = None
    is_active: Optional[bool] = None
    address: Optional[str] = None
    currency: Optional[str] = None


class ClientContact(HarvestModel):
    id: Optional[int] = None
    # Only id and name are populated.
    client: Optional[Client] = None
    title: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_office: Optional[str] = None
    phone_mobile: Optional[str] = None
    fax: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ClientContactList(Pagination):
    contacts: List[ClientContact] = []


class ClientContactListOptions(ListOptions):
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ClientContactCreateRequest(HarvestModel):
    # client_id and first_name are required by the API.
    client_id: Optional[int] = None
    title: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_office: Optional[str] = None
    phone_mobile: Optional[str] = None
    fax: Optional[str] = None


class ClientContactUpdateRequest(ClientContactCreateRequest):
    pass


__all__ = [
    "Client",
    "ClientList",
    "ClientListOptions",
    "ClientCreateRequest",
    "ClientUpdateRequest",
    "ClientContact",
    "ClientContactList",
    "ClientContactListOptions",
    "ClientContactCreateRequest",
    "ClientContactUpdateRequest",
]
