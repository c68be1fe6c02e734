from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    Task,
    TaskCreateRequest,
    TaskList,
    TaskListOptions,
    TaskUpdateRequest,
)
from harvest_api.services.base import Service


class TaskService(Service):
    name = "tasks"

    async def list(
        self,
        options: Optional[TaskListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[TaskList], httpx.Response]:
        return await self._get("tasks", TaskList, options=options, timeout=timeout)

    async def get(
        self, task_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Task], httpx.Response]:
        return await self._get(f"tasks/{task_id}", Task, timeout=timeout)

    async def create(
        self, data: TaskCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Task], httpx.Response]:
        return await self._post("tasks", data, Task, timeout=timeout)

    async def update(
        self, task_id: int, data: TaskUpdateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[Task], httpx.Response]:
        return await self._patch(f"tasks/{task_id}", data, Task, timeout=timeout)

    async def delete(
        self, task_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        """Delete a task. Tasks with tracked time cannot be deleted."""
        return await self._delete(f"tasks/{task_id}", timeout=timeout)
