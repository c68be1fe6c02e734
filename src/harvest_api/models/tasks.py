from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam


class Task(HarvestModel):
    id: Optional[int] = None
    name: Optional[str] = None
    billable_by_default: Optional[bool] = None
    default_hourly_rate: Optional[float] = None
    # Whether the task is added to new projects automatically.
    is_default: Optional[bool] = None
    is_active: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class TaskList(Pagination):
    tasks: List[Task] = []


class TaskListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class TaskCreateRequest(HarvestModel):
    name: Optional[str] = None
    billable_by_default: Optional[bool] = None
    default_hourly_rate: Optional[float] = None
    is_default: Optional[bool] = None
    is_active: Optional[bool] = None


class TaskUpdateRequest(TaskCreateRequest):
    pass


__all__ = [
    "Task",
    "TaskList",
    "TaskListOptions",
    "TaskCreateRequest",
    "TaskUpdateRequest",
]
