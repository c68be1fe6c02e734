from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    Role,
    RoleCreateRequest,
    RoleList,
    RoleListOptions,
    RoleUpdateRequest,
)
from harvest_api.services.base import Service


class RoleService(Service):
    name = "roles"

    async def list(
        self,
        options: Optional[RoleListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[RoleList], httpx.Response]:
        return await self._get("roles", RoleList, options=options, timeout=timeout)

    async def get(
        self, role_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Role], httpx.Response]:
        return await self._get(f"roles/{role_id}", Role, timeout=timeout)

    async def create(
        self, data: RoleCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Role], httpx.Response]:
        return await self._post("roles", data, Role, timeout=timeout)

    async def update(
        self, role_id: int, data: RoleUpdateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Role], httpx.Response]:
        return await self._patch(f"roles/{role_id}", data, Role, timeout=timeout)

    async def delete(
        self, role_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"roles/{role_id}", timeout=timeout)
