from __future__ import annotations

from typing import List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination


class Role(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    user_ids: Optional[List[int]] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class RoleList(Pagination):
    roles: List[Role] = []


class RoleListOptions(ListOptions):
    pass


class RoleCreateRequest(HarvestModel):
    name: Optional[str] = None
    user_ids: Optional[List[int]] = None


class RoleUpdateRequest(RoleCreateRequest):
    pass


__all__ = [
    "Role",
    "RoleList",
    "RoleListOptions",
    "RoleCreateRequest",
    "RoleUpdateRequest",
]
