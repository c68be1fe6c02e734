from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional

from ..values import Timestamp
from .base import HarvestModel, ListOptions, Pagination, QueryParam
from .clients import Client
from .projects import Project
from .tasks import Task
from .users import User


class ProjectTaskAssignment(HarvestModel):
    id: Optional[int] = None
    project: Optional[Project] = None
    task: Optional[Task] = None
    is_active: Optional[bool] = None
    billable: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ProjectTaskAssignmentList(Pagination):
    task_assignments: List[ProjectTaskAssignment] = []


class ProjectTaskAssignmentListOptions(ListOptions):
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ProjectTaskAssignmentCreateRequest(HarvestModel):
    task_id: Optional[int] = None
    is_active: Optional[bool] = None
    billable: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None


class ProjectTaskAssignmentUpdateRequest(HarvestModel):
    is_active: Optional[bool] = None
    billable: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None


class ProjectUserAssignment(HarvestModel):
    id: Optional[int] = None
    project: Optional[Project] = None
    user: Optional[User] = None
    is_active: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    use_default_rates: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class ProjectUserAssignmentList(Pagination):
    user_assignments: List[ProjectUserAssignment] = []


class ProjectUserAssignmentListOptions(ListOptions):
    user_id: Annotated[Optional[int], QueryParam("user_id")] = None
    is_active: Annotated[Optional[bool], QueryParam("is_active")] = None
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


class ProjectUserAssignmentCreateRequest(HarvestModel):
    user_id: Optional[int] = None
    is_active: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    use_default_rates: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None


class ProjectUserAssignmentUpdateRequest(HarvestModel):
    is_active: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    use_default_rates: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None


class UserProjectAssignment(HarvestModel):
    """A project the user is assigned to, as seen from the user's side."""

    id: Optional[int] = None
    is_active: Optional[bool] = None
    is_project_manager: Optional[bool] = None
    use_default_rates: Optional[bool] = None
    hourly_rate: Optional[float] = None
    budget: Optional[float] = None
    project: Optional[Project] = None
    client: Optional[Client] = None
    task_assignments: Optional[List[ProjectTaskAssignment]] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class UserProjectAssignmentList(Pagination):
    project_assignments: List[UserProjectAssignment] = []


class UserProjectAssignmentListOptions(ListOptions):
    updated_since: Annotated[Optional[datetime], QueryParam("updated_since")] = None


__all__ = [
    "ProjectTaskAssignment",
    "ProjectTaskAssignmentList",
    "ProjectTaskAssignmentListOptions",
    "ProjectTaskAssignmentCreateRequest",
    "ProjectTaskAssignmentUpdateRequest",
    "ProjectUserAssignment",
    "ProjectUserAssignmentList",
    "ProjectUserAssignmentListOptions",
    "ProjectUserAssignmentCreateRequest",
    "ProjectUserAssignmentUpdateRequest",
    "UserProjectAssignment",
    "UserProjectAssignmentList",
    "UserProjectAssignmentListOptions",
]
