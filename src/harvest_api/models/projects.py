from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Date, Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client


class Project(HarvestModel):
    id: Optional[int] = None
    # Only id, name and currency are populated.
    client: Optional[Client] = None
    name: Optional[str] = None
    code: Optional[str] = None
    is_active: Optional[bool] = None
    is_billable: Optional[bool] = None
    is_fixed_fee: Optional[bool] = None
    # Project, Tasks, People or none
    bill_by: Optional[str] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None
    # project, project_cost, task, task_fees, person or none
    budget_by: Optional[str] = None
    budget_is_monthly: Optional[bool] = None
    notify_when_over_budget: Optional[bool] = None
    over_budget_notification_percentage: Optional[float] = None
    over_budget_notification_date: Optional[Date] = None
    show_budget_to_all: Optional[bool] = None
    cost_budget: Optional[float] = None
    cost_budget_include_expenses: Optional[bool] = None
    fee: Optional[float] = None
    notes: Optional[str] = None
    starts_on: Optional[Date] = None
    ends_on: Optional[Date] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ProjectList(Pagination):
    projects: List[Project] = []


class ProjectListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ProjectCreateRequest(HarvestModel):
    # client_id, name, is_billable, bill_by and budget_by are required by the API.
    client_id: Optional[int] = None
    name: Optional[str] = None
    code: Optional[str] = None
    is_active: Optional[bool] = None
    is_billable: Optional[bool] = None
    is_fixed_fee: Optional[bool] = None
    bill_by: Optional[str] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None
    budget_by: Optional[str] = None
    budget_is_monthly: Optional[bool] = None
    notify_when_over_budget: Optional[bool] = None
    over_budget_notification_percentage: Optional[float] = None
    show_budget_to_all: Optional[bool] = None
    cost_budget: Optional[float] = None
    cost_budget_include_expenses: Optional[bool] = None
    fee: Optional[float] = None
    notes: Optional[str] = None
    starts_on: Optional[Date] = None
    ends_on: Optional[Date] = None


class ProjectUpdateRequest(ProjectCreateRequest):
    pass


__all__ = [
    "Project",
    "ProjectList",
    "ProjectListOptions",
    "ProjectCreateRequest",
    "ProjectUpdateRequest",
]
