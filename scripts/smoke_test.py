from __future__ import annotations

import asyncio
import os
import sys
from typing import Optional

from harvest_api import (
    HarvestClient,
    HarvestClientError,
    HarvestHTTPError,
    next_page_options,
)
from harvest_api.logging import setup_logging
from harvest_api.models import ClientListOptions, TimeEntryListOptions


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val else default


def _print_step(title: str) -> None:
    print(f"\n== {title}")


def _fail(msg: str) -> int:
    print(f"FAILED: {msg}")
    return 1


async def run_smoke_test() -> int:
    # Read-only: nothing is created, updated or deleted.
    setup_logging(_env("SMOKE_TEST_LOG_LEVEL", "WARNING"))
    max_pages = int(_env("SMOKE_TEST_MAX_PAGES", "3"))

    try:
        client = HarvestClient.from_env()
    except HarvestClientError as exc:
        return _fail(str(exc))

    print("Config:")
    print(f"  base_url: {client.base_url}")
    print(f"  account_id: {client.account_id}")
    print(f"  max_pages: {max_pages}")

    async with client:
        # --- Company ---
        _print_step("Company")
        try:
            company, _ = await client.company.get()
        except HarvestHTTPError as exc:
            return _fail(f"Company lookup failed: {exc}")
        print(f"Company: {company.name} (clock={company.clock})")

        # --- Current user ---
        _print_step("Current user")
        me, _ = await client.users.current()
        if me is None or me.id is None:
            return _fail("users/me did not return an id.")
        print(f"Authenticated as {me.first_name} {me.last_name} (id={me.id})")

        # --- Clients, paged ---
        _print_step("Clients")
        opts: Optional[ClientListOptions] = ClientListOptions(per_page=100)
        seen = 0
        pages = 0
        while opts is not None and pages < max_pages:
            listing, _ = await client.clients.list(opts)
            seen += len(listing.clients)
            pages += 1
            opts = next_page_options(listing, opts)
        print(f"Fetched {seen} clients over {pages} page(s)")

        # --- Own time entries ---
        _print_step("Time entries")
        entries, _ = await client.timesheets.list(
            TimeEntryListOptions(user_id=me.id, per_page=5)
        )
        for entry in entries.time_entries:
            project = entry.project.name if entry.project else "?"
            print(f"  {entry.spent_date} {entry.hours}h {project}")
        print(f"Total entries: {entries.total_entries}")

    print("\nPASSED smoke test.")
    return 0


def main() -> None:
    exit_code = asyncio.run(run_smoke_test())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
