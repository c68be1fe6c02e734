from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    Project,
    ProjectCreateRequest,
    ProjectList,
    ProjectListOptions,
    ProjectTaskAssignment,
    ProjectTaskAssignmentCreateRequest,
    ProjectTaskAssignmentList,
    ProjectTaskAssignmentListOptions,
    ProjectTaskAssignmentUpdateRequest,
    ProjectUpdateRequest,
    ProjectUserAssignment,
    ProjectUserAssignmentCreateRequest,
    ProjectUserAssignmentList,
    ProjectUserAssignmentListOptions,
    ProjectUserAssignmentUpdateRequest,
)
from harvest_api.services.base import Service


class ProjectService(Service):
    """Projects with their task and user assignments."""

    name = "projects"

    async def list(
        self,
        options: Optional[ProjectListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectList], httpx.Response]:
        return await self._get("projects", ProjectList, options=options, timeout=timeout)

    async def get(
        self, project_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Project], httpx.Response]:
        return await self._get(f"projects/{project_id}", Project, timeout=timeout)

    async def create(
        self, data: ProjectCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Project], httpx.Response]:
        return await self._post("projects", data, Project, timeout=timeout)

    async def update(
        self,
        project_id: int,
        data: ProjectUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[Project], httpx.Response]:
        return await self._patch(
            f"projects/{project_id}", data, Project, timeout=timeout
        )

    async def delete(
        self, project_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        """Delete a project together with its time entries and expenses."""
        return await self._delete(f"projects/{project_id}", timeout=timeout)

    # --- Task assignments ---

    async def list_task_assignments(
        self,
        project_id: int,
        options: Optional[ProjectTaskAssignmentListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectTaskAssignmentList], httpx.Response]:
        return await self._get(
            f"projects/{project_id}/task_assignments",
            ProjectTaskAssignmentList,
            options=options,
            timeout=timeout,
        )

    async def get_task_assignment(
        self, project_id: int, assignment_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ProjectTaskAssignment], httpx.Response]:
        return await self._get(
            f"projects/{project_id}/task_assignments/{assignment_id}",
            ProjectTaskAssignment,
            timeout=timeout,
        )

    async def create_task_assignment(
        self,
        project_id: int,
        data: ProjectTaskAssignmentCreateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectTaskAssignment], httpx.Response]:
        return await self._post(
            f"projects/{project_id}/task_assignments",
            data,
            ProjectTaskAssignment,
            timeout=timeout,
        )

    async def update_task_assignment(
        self,
        project_id: int,
        assignment_id: int,
        data: ProjectTaskAssignmentUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectTaskAssignment], httpx.Response]:
        return await self._patch(
            f"projects/{project_id}/task_assignments/{assignment_id}",
            data,
            ProjectTaskAssignment,
            timeout=timeout,
        )

    async def delete_task_assignment(
        self, project_id: int, assignment_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"projects/{project_id}/task_assignments/{assignment_id}", timeout=timeout
        )

    # --- User assignments ---

    async def list_user_assignments(
        self,
        project_id: int,
        options: Optional[ProjectUserAssignmentListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectUserAssignmentList], httpx.Response]:
        return await self._get(
            f"projects/{project_id}/user_assignments",
            ProjectUserAssignmentList,
            options=options,
            timeout=timeout,
        )

    async def get_user_assignment(
        self, project_id: int, assignment_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[ProjectUserAssignment], httpx.Response]:
        return await self._get(
            f"projects/{project_id}/user_assignments/{assignment_id}",
            ProjectUserAssignment,
            timeout=timeout,
        )

    async def create_user_assignment(
        self,
        project_id: int,
        data: ProjectUserAssignmentCreateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectUserAssignment], httpx.Response]:
        return await self._post(
            f"projects/{project_id}/user_assignments",
            data,
            ProjectUserAssignment,
            timeout=timeout,
        )

    async def update_user_assignment(
        self,
        project_id: int,
        assignment_id: int,
        data: ProjectUserAssignmentUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[ProjectUserAssignment], httpx.Response]:
        return await self._patch(
            f"projects/{project_id}/user_assignments/{assignment_id}",
            data,
            ProjectUserAssignment,
            timeout=timeout,
        )

    async def delete_user_assignment(
        self, project_id: int, assignment_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(
            f"projects/{project_id}/user_assignments/{assignment_id}", timeout=timeout
        )
