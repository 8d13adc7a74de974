from __future__ import annotations

from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.models import CreateVersionParams, ProjectID, UpdateVersionParams
from redmine_client.resources._payloads import body, segment


async def list_project_versions(
    client: RedmineClient, project_id: ProjectID
) -> Dict[str, Any]:
    """Versions of a project, including ones shared from other projects."""
    return await client.request("GET", f"projects/{segment(project_id)}/versions")


async def create_version(
    client: RedmineClient,
    project_id: ProjectID,
    version: CreateVersionParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "POST",
        f"projects/{segment(project_id)}/versions",
        body("version", CreateVersionParams, version),
    )


async def get_version(client: RedmineClient, version_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"versions/{segment(version_id)}")


async def update_version(
    client: RedmineClient,
    version_id: int,
    version: UpdateVersionParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT",
        f"versions/{segment(version_id)}",
        body("version", UpdateVersionParams, version),
    )


async def delete_version(client: RedmineClient, version_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"versions/{segment(version_id)}")
