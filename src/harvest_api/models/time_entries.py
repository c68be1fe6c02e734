from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Date, Time, Timestamp
from .assignments import ProjectTaskAssignment, ProjectUserAssignment
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client
from .invoices import Invoice
from .projects import Project
from .tasks import Task
from .users import User


class ExternalReference(HarvestModel):
    """Link to an item in another service (e.g. an issue tracker)."""

    id: Optional[str] = None
    group_id: Optional[str] = None
    permalink: Optional[str] = None
    service: Optional[str] = None
    service_icon_url: Optional[str] = None


class TimeEntry(HarvestModel):
    id: Optional[int] = None
    spent_date: Optional[Date] = None
    user: Optional[User] = None
    user_assignment: Optional[ProjectUserAssignment] = None
    client: Optional[Client] = None
    project: Optional[Project] = None
    task: Optional[Task] = None
    task_assignment: Optional[ProjectTaskAssignment] = None
    external_reference: Optional[ExternalReference] = None
    invoice: Optional[Invoice] = None
    hours: Optional[float] = None
    rounded_hours: Optional[float] = None
    notes: Optional[str] = None
    is_locked: Optional[bool] = None
    locked_reason: Optional[str] = None
    is_closed: Optional[bool] = None
    is_billed: Optional[bool] = None
    timer_started_at: Optional[Timestamp] = None
    # Only set when the company tracks time with start and end times.
    started_time: Optional[Time] = None
    ended_time: Optional[Time] = None
    is_running: Optional[bool] = None
    billable: Optional[bool] = None
    budgeted: Optional[bool] = None
    billable_rate: Optional[float] = None
    cost_rate: Optional[float] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class TimeEntryList(Pagination):
    time_entries: List[TimeEntry] = []


class TimeEntryListOptions(ListOptions):
    user_id: Annotated[Optional[int], QueryParam("user_id")] = None
    client_id: Annotated[Optional[int], QueryParam("client_id")] = None
    project_id: Annotated[Optional[int], QueryParam("project_id")] = None
    task_id: Annotated[Optional[int], QueryParam("task_id")] = None
    is_billed: Annotated[Optional[bool], QueryParam("is_billed")] = None
    is_running: Annotated[Optional[bool], QueryParam("is_running")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None
    from_: Annotated[Optional[Date], QueryParam("from")] = None
    to: Annotated[Optional[Date], QueryParam("to")] = None


class TimeEntryCreateViaDuration(HarvestModel):
    """Create a time entry from a number of hours."""

    user_id: Optional[int] = None
    project_id: Optional[int] = None
    task_id: Optional[int] = None
    spent_date: Optional[Date] = None
    hours: Optional[float] = None
    notes: Optional[str] = None
    external_reference: Optional[ExternalReference] = None


class TimeEntryCreateViaStartEndTime(HarvestModel):
    """Create a time entry from start and end wall-clock times."""

    user_id: Optional[int] = None
    project_id: Optional[int] = None
    task_id: Optional[int] = None
    spent_date: Optional[Date] = None
    started_time: Optional[Time] = None
    ended_time: Optional[Time] = None
    notes: Optional[str] = None
    external_reference: Optional[ExternalReference] = None


class TimeEntryUpdateRequest(HarvestModel):
    project_id: Optional[int] = None
    task_id: Optional[int] = None
    spent_date: Optional[Date] = None
    started_time: Optional[Time] = None
    ended_time: Optional[Time] = None
    hours: Optional[float] = None
    notes: Optional[str] = None
    external_reference: Optional[ExternalReference] = None


__all__ = [
    "ExternalReference",
    "TimeEntry",
    "TimeEntryList",
    "TimeEntryListOptions",
    "TimeEntryCreateViaDuration",
    "TimeEntryCreateViaStartEndTime",
    "TimeEntryUpdateRequest",
]
