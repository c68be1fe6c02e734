from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam


class Retainer(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class RetainerList(Pagination):
    retainers: List[Retainer] = []


class RetainerListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


__all__ = ["Retainer", "RetainerList", "RetainerListOptions"]
