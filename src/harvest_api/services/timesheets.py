from __future__ import annotations

from typing import Optional, Tuple

import httpx

from harvest_api.models import (
    TimeEntry,
    TimeEntryCreateViaDuration,
    TimeEntryCreateViaStartEndTime,
    TimeEntryList,
    TimeEntryListOptions,
    TimeEntryUpdateRequest,
)
from harvest_api.services.base import Service


class TimesheetService(Service):
    """
    Time entries.

    Whether an account tracks time as durations or as start/end times is a
    company setting; use the matching create method.
    """

    name = "timesheets"

    async def list(
        self,
        options: Optional[TimeEntryListOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[TimeEntryList], httpx.Response]:
        return await self._get(
            "time_entries", TimeEntryList, options=options, timeout=timeout
        )

    async def get(
        self, time_entry_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        return await self._get(
            f"time_entries/{time_entry_id}", TimeEntry, timeout=timeout
        )

    async def create_via_duration(
        self, data: TimeEntryCreateViaDuration, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        return await self._post("time_entries", data, TimeEntry, timeout=timeout)

    async def create_via_start_end_time(
        self, data: TimeEntryCreateViaStartEndTime, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        return await self._post("time_entries", data, TimeEntry, timeout=timeout)

    async def update(
        self,
        time_entry_id: int,
        data: TimeEntryUpdateRequest,
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        return await self._patch(
            f"time_entries/{time_entry_id}", data, TimeEntry, timeout=timeout
        )

    async def delete(
        self, time_entry_id: int, *, timeout: Optional[float] = None
    ) -> httpx.Response:
        return await self._delete(f"time_entries/{time_entry_id}", timeout=timeout)

    async def restart(
        self, time_entry_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        """Restart a stopped time entry's timer."""
        return await self._patch(
            f"time_entries/{time_entry_id}/restart", None, TimeEntry, timeout=timeout
        )

    async def stop(
        self, time_entry_id: int, *, timeout: Optional[float] = None
    ) -> Tuple[Optional[TimeEntry], httpx.Response]:
        return await self._patch(
            f"time_entries/{time_entry_id}/stop", None, TimeEntry, timeout=timeout
        )
