from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateProjectParams,
    GetProjectParams,
    ListProjectsParams,
    ProjectID,
    UpdateProjectParams,
)
from redmine_client.resources._payloads import body, query, segment


async def list_projects(
    client: RedmineClient,
    params: Optional[ListProjectsParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    List projects visible to the current user.

    Returns the raw Redmine payload:
        {"projects": [...], "total_count": int, "offset": int, "limit": int}
    """
    return await client.request("GET", "projects", query(ListProjectsParams, params))


async def get_project(
    client: RedmineClient,
    project_id: ProjectID,
    params: Optional[GetProjectParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Fetch a project by numeric id or identifier."""
    return await client.request(
        "GET", f"projects/{segment(project_id)}", query(GetProjectParams, params)
    )


async def create_project(
    client: RedmineClient, project: CreateProjectParams | Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.request(
        "POST", "projects", body("project", CreateProjectParams, project)
    )


async def update_project(
    client: RedmineClient,
    project_id: ProjectID,
    project: UpdateProjectParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT",
        f"projects/{segment(project_id)}",
        body("project", UpdateProjectParams, project),
    )


async def delete_project(client: RedmineClient, project_id: ProjectID) -> Dict[str, Any]:
    """Delete a project and everything in it (admin only)."""
    return await client.request("DELETE", f"projects/{segment(project_id)}")
