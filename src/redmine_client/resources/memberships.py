from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    ListProjectMembersParams,
    MembershipParams,
    ProjectID,
    UpdateMembershipParams,
)
from redmine_client.resources._payloads import body, query, segment


async def list_project_members(
    client: RedmineClient,
    project_id: ProjectID,
    params: Optional[ListProjectMembersParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Paginated list of a project's memberships (users and groups)."""
    return await client.request(
        "GET",
        f"projects/{segment(project_id)}/memberships",
        query(ListProjectMembersParams, params),
    )


async def add_project_member(
    client: RedmineClient,
    project_id: ProjectID,
    membership: MembershipParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "POST",
        f"projects/{segment(project_id)}/memberships",
        body("membership", MembershipParams, membership),
    )


async def get_membership(client: RedmineClient, membership_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"memberships/{segment(membership_id)}")


async def update_membership(
    client: RedmineClient,
    membership_id: int,
    membership: UpdateMembershipParams | Mapping[str, Any],
) -> Dict[str, Any]:
    """Replace the roles of a membership. Inherited roles cannot be changed."""
    return await client.request(
        "PUT",
        f"memberships/{segment(membership_id)}",
        body("membership", UpdateMembershipParams, membership),
    )


async def delete_membership(client: RedmineClient, membership_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"memberships/{segment(membership_id)}")
