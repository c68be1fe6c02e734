from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

if TYPE_CHECKING:
    from harvest_api.client import HarvestClient

T = TypeVar("T", bound=BaseModel)


class Service:
    """
    Base for resource services.
    A service keeps no state of its own; every call goes through the shared
    HarvestClient it was created with.
    """

    # Reported as the "service" field in request logs.
    name = ""

    def __init__(self, client: "HarvestClient"):
        self.client = client

    async def _get(
        self,
        path: str,
        model: Type[T],
        *,
        options: Optional[BaseModel] = None,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.client.get(
            path, model, options=options, timeout=timeout, service=self.name
        )

    async def _post(
        self,
        path: str,
        body: Any,
        model: Type[T],
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.client.post(
            path, body, model, timeout=timeout, service=self.name
        )

    async def _patch(
        self,
        path: str,
        body: Any,
        model: Type[T],
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[T], httpx.Response]:
        return await self.client.patch(
            path, body, model, timeout=timeout, service=self.name
        )

    async def _delete(
        self, path: str, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self.client.delete(path, timeout=timeout, service=self.name)
