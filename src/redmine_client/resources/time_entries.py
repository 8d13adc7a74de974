from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateTimeEntryParams,
    ListTimeEntriesParams,
    UpdateTimeEntryParams,
)
from redmine_client.resources._payloads import body, query, segment


async def list_time_entries(
    client: RedmineClient,
    params: Optional[ListTimeEntriesParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    List time entries.

    Args:
        params: Pagination plus user_id, project_id, spent_on and the
            from/to date range (YYYY-MM-DD). Pass `from_` or "from".
    """
    return await client.request(
        "GET", "time_entries", query(ListTimeEntriesParams, params)
    )


async def get_time_entry(client: RedmineClient, time_entry_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"time_entries/{segment(time_entry_id)}")


async def create_time_entry(
    client: RedmineClient, time_entry: CreateTimeEntryParams | Mapping[str, Any]
) -> Dict[str, Any]:
    """Log time on an issue or a project (exactly one of issue_id/project_id)."""
    return await client.request(
        "POST",
        "time_entries",
        body("time_entry", CreateTimeEntryParams, time_entry),
    )


async def update_time_entry(
    client: RedmineClient,
    time_entry_id: int,
    time_entry: UpdateTimeEntryParams | Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Update a time entry.

    Fields passed explicitly as None are sent as null and clear the value
    on the server; omitted fields are left untouched. When moving the entry
    to another project, pass an issue_id from the new project or
    issue_id=None, otherwise Redmine answers "Issue is invalid".
    """
    return await client.request(
        "PUT",
        f"time_entries/{segment(time_entry_id)}",
        body("time_entry", UpdateTimeEntryParams, time_entry),
    )


async def delete_time_entry(client: RedmineClient, time_entry_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"time_entries/{segment(time_entry_id)}")
