from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam


class User(HarvestModel):
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    # Embedded references (creator, time entry user) carry only id and name.
    name: Optional[str] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    timezone: Optional[str] = None
    has_access_to_all_future_projects: Optional[bool] = None
    is_contractor: Optional[bool] = None
    is_admin: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    can_see_rates: Optional[bool] = None
    can_create_projects: Optional[bool] = None
    can_create_invoices: Optional[bool] = None
    is_active: Optional[bool] = None
    # Seconds per week.
    weekly_capacity: Optional[int] = None
    default_hourly_rate: Optional[float] = None
    cost_rate: Optional[float] = None
    roles: Optional[List[str]] = None
    avatar_url: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class UserList(Pagination):
    users: List[User] = []


class UserListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class UserCreateRequest(HarvestModel):
    # first_name, last_name and email are required by the API.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    timezone: Optional[str] = None
    has_access_to_all_future_projects: Optional[bool] = None
    is_contractor: Optional[bool] = None
    is_admin: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    can_see_rates: Optional[bool] = None
    can_create_projects: Optional[bool] = None
    can_create_invoices: Optional[bool] = None
    is_active: Optional[bool] = None
    weekly_capacity: Optional[int] = None
    default_hourly_rate: Optional[float] = None
    cost_rate: Optional[float] = None
    roles: Optional[List[str]] = None


class UserUpdateRequest(UserCreateRequest):
    pass


__all__ = [
    "User",
    "UserList",
    "UserListOptions",
    "UserCreateRequest",
    "UserUpdateRequest",
]
