from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import Company
from harvest_api.services.base import Service


class CompanyService(Service):
    name = "company"

    async def get(
        self, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Company], httpx.Response]:
        """Retrieve the company for the currently authenticated user."""
        return await self._get("company", Company, timeout=timeout)
