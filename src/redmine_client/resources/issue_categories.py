from __future__ import annotations

from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateIssueCategoryParams,
    ProjectID,
    UpdateIssueCategoryParams,
)
from redmine_client.resources._payloads import body, segment


async def list_issue_categories(
    client: RedmineClient, project_id: ProjectID
) -> Dict[str, Any]:
    return await client.request(
        "GET", f"projects/{segment(project_id)}/issue_categories"
    )


async def create_issue_category(
    client: RedmineClient,
    project_id: ProjectID,
    issue_category: CreateIssueCategoryParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "POST",
        f"projects/{segment(project_id)}/issue_categories",
        body("issue_category", CreateIssueCategoryParams, issue_category),
    )


async def get_issue_category(
    client: RedmineClient, issue_category_id: int
) -> Dict[str, Any]:
    return await client.request("GET", f"issue_categories/{segment(issue_category_id)}")


async def update_issue_category(
    client: RedmineClient,
    issue_category_id: int,
    issue_category: UpdateIssueCategoryParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT",
        f"issue_categories/{segment(issue_category_id)}",
        body("issue_category", UpdateIssueCategoryParams, issue_category),
    )


async def delete_issue_category(
    client: RedmineClient, issue_category_id: int
) -> Dict[str, Any]:
    return await client.request(
        "DELETE", f"issue_categories/{segment(issue_category_id)}"
    )
