from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import CreateGroupParams, GetGroupParams, UpdateGroupParams
from redmine_client.resources._payloads import body, query, segment

# Group endpoints require admin privileges.


async def list_groups(client: RedmineClient) -> Dict[str, Any]:
    return await client.request("GET", "groups")


async def create_group(
    client: RedmineClient, group: CreateGroupParams | Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.request("POST", "groups", body("group", CreateGroupParams, group))


async def get_group(
    client: RedmineClient,
    group_id: int,
    params: Optional[GetGroupParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return await client.request(
        "GET", f"groups/{segment(group_id)}", query(GetGroupParams, params)
    )


async def update_group(
    client: RedmineClient, group_id: int, group: UpdateGroupParams | Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.request(
        "PUT", f"groups/{segment(group_id)}", body("group", UpdateGroupParams, group)
    )


async def delete_group(client: RedmineClient, group_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"groups/{segment(group_id)}")


async def add_user_to_group(
    client: RedmineClient, group_id: int, user_id: int
) -> Dict[str, Any]:
    return await client.request(
        "POST", f"groups/{segment(group_id)}/users", {"user_id": user_id}
    )


async def remove_user_from_group(
    client: RedmineClient, group_id: int, user_id: int
) -> Dict[str, Any]:
    return await client.request(
        "DELETE", f"groups/{segment(group_id)}/users/{segment(user_id)}"
    )
