from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import Retainer, RetainerList, RetainerListOptions
from harvest_api.services.base import Service


class RetainerService(Service):
    """
    Read access to retainers.
    Not attached to HarvestClient; construct it explicitly with
    ``RetainerService(client)``.
    """

    name = "retainers"

    async def list(
        self,
        options: Optional[RetainerListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[RetainerList], httpx.Response]:
        return await self._get(
            "retainers", RetainerList, options=options, timeout=timeout
        )

    async def get(
        self, retainer_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Retainer], httpx.Response]:
        return await self._get(f"retainers/{retainer_id}", Retainer, timeout=timeout)
