from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    Client,
    ClientContact,
    ClientContactCreateRequest,
    ClientContactList,
    ClientContactListOptions,
    ClientContactUpdateRequest,
    ClientCreateRequest,
    ClientList,
    ClientListOptions,
    ClientUpdateRequest,
)
from harvest_api.services.base import Service


class ClientService(Service):
    """Clients and their contacts."""

    name = "clients"

    async def list(
        self,
        options: Optional[ClientListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ClientList], httpx.Response]:
        """List clients, most recently created first."""
        return await self._get("clients", ClientList, options=options, timeout=timeout)

    async def get(
        self, client_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Client], httpx.Response]:
        return await self._get(f"clients/{client_id}", Client, timeout=timeout)

    async def create(
        self, data: ClientCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Client], httpx.Response]:
        return await self._post("clients", data, Client, timeout=timeout)

    async def update(
        self,
        client_id: int,
        data: ClientUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[Client], httpx.Response]:
        """Update a client; fields left unset are not changed."""
        return await self._patch(f"clients/{client_id}", data, Client, timeout=timeout)

    async def delete(
        self, client_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        """Delete a client. Only clients without projects, invoices or estimates can be deleted."""
        return await self._delete(f"clients/{client_id}", timeout=timeout)

    async def list_contacts(
        self,
        options: Optional[ClientContactListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ClientContactList], httpx.Response]:
        return await self._get(
            "contacts", ClientContactList, options=options, timeout=timeout
        )

    async def get_contact(
        self, contact_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ClientContact], httpx.Response]:
        return await self._get(f"contacts/{contact_id}", ClientContact, timeout=timeout)

    async def create_contact(
        self, data: ClientContactCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ClientContact], httpx.Response]:
        return await self._post("contacts", data, ClientContact, timeout=timeout)

    async def update_contact(
        self,
        contact_id: int,
        data: ClientContactUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ClientContact], httpx.Response]:
        return await self._patch(
            f"contacts/{contact_id}", data, ClientContact, timeout=timeout
        )

    async def delete_contact(
        self, contact_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"contacts/{contact_id}", timeout=timeout)
