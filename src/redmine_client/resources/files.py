from __future__ import annotations

from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.models import AddProjectFileParams, ProjectID
from redmine_client.resources._payloads import body, segment


async def list_project_files(
    client: RedmineClient, project_id: ProjectID
) -> Dict[str, Any]:
    return await client.request("GET", f"projects/{segment(project_id)}/files")


async def add_project_file(
    client: RedmineClient,
    project_id: ProjectID,
    file: AddProjectFileParams | Mapping[str, Any],
) -> Dict[str, Any]:
    """Publish a previously uploaded file (by token) in the project's Files tab."""
    return await client.request(
        "POST",
        f"projects/{segment(project_id)}/files",
        body("file", AddProjectFileParams, file),
    )
