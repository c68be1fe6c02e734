from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    User,
    UserCreateRequest,
    UserList,
    UserListOptions,
    UserProjectAssignmentList,
    UserProjectAssignmentListOptions,
    UserUpdateRequest,
)
from harvest_api.services.base import Service


class UserService(Service):
    name = "users"

    async def list(
        self,
        options: Optional[UserListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[UserList], httpx.Response]:
        return await self._get("users", UserList, options=options, timeout=timeout)

    async def get(
        self, user_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[User], httpx.Response]:
        return await self._get(f"users/{user_id}", User, timeout=timeout)

    async def current(
        self, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[User], httpx.Response]:
        """Retrieve the currently authenticated user."""
        return await self._get("users/me", User, timeout=timeout)

    async def create(
        self, data: UserCreateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[User], httpx.Response]:
        return await self._post("users", data, User, timeout=timeout)

    async def update(
        self, user_id: int, data: UserUpdateRequest, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[User], httpx.Response]:
        return await self._patch(f"users/{user_id}", data, User, timeout=timeout)

    async def delete(
        self, user_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        """Delete a user. Users with tracked time or expenses cannot be deleted."""
        return await self._delete(f"users/{user_id}", timeout=timeout)

    async def list_project_assignments(
        self,
        user_id: int,
        options: Optional[UserProjectAssignmentListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[UserProjectAssignmentList], httpx.Response]:
        return await self._get(
            f"users/{user_id}/project_assignments",
            UserProjectAssignmentList,
            options=options,
            timeout=timeout,
        )

    async def list_my_project_assignments(
        self,
        options: Optional[UserProjectAssignmentListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[UserProjectAssignmentList], httpx.Response]:
        return await self._get(
            "users/me/project_assignments",
            UserProjectAssignmentList,
            options=options,
            timeout=timeout,
        )
