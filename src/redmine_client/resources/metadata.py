"""
Read-only lookup endpoints: statuses, trackers, enumerations, roles,
custom fields and saved queries.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from redmine_client.client import RedmineClient
from redmine_client.models import NamedRef
from redmine_client.resources._payloads import segment

Enumeration = Literal["issue_priorities", "time_entry_activities", "document_categories"]


async def list_issue_statuses(client: RedmineClient) -> Dict[str, Any]:
    return await client.request("GET", "issue_statuses")


async def list_trackers(client: RedmineClient) -> Dict[str, Any]:
    return await client.request("GET", "trackers")


async def list_enumeration(client: RedmineClient, name: Enumeration) -> Dict[str, Any]:
    return await client.request("GET", f"enumerations/{segment(name)}")


async def list_issue_priorities(client: RedmineClient) -> Dict[str, Any]:
    return await list_enumeration(client, "issue_priorities")


async def list_time_entry_activities(client: RedmineClient) -> Dict[str, Any]:
    return await list_enumeration(client, "time_entry_activities")


async def list_document_categories(client: RedmineClient) -> Dict[str, Any]:
    return await list_enumeration(client, "document_categories")


async def list_custom_fields(client: RedmineClient) -> Dict[str, Any]:
    """All custom field definitions (admin only)."""
    return await client.request("GET", "custom_fields")


async def list_roles(client: RedmineClient) -> Dict[str, Any]:
    return await client.request("GET", "roles")


async def get_role(client: RedmineClient, role_id: int) -> Dict[str, Any]:
    """Role details, including its permissions."""
    return await client.request("GET", f"roles/{segment(role_id)}")


async def list_queries(client: RedmineClient) -> Dict[str, Any]:
    """Saved issue queries visible to the user, public and private, all projects."""
    return await client.request("GET", "queries")


def named_refs(payload: Dict[str, Any], key: str) -> List[NamedRef]:
    """
    Pick {"id", "name"} entries out of a list payload such as
    {"trackers": [...]}. Entries without an id or name are skipped.
    """
    items = payload.get(key, [])
    if not isinstance(items, list):
        raise ValueError(f"Expected '{key}' to be a list.")
    return [
        NamedRef.model_validate(item)
        for item in items
        if isinstance(item, dict) and "id" in item and "name" in item
    ]
