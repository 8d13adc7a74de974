from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateIssueParams,
    GetIssueParams,
    ListIssuesParams,
    UpdateIssueParams,
)
from redmine_client.resources._payloads import body, query, segment


async def list_issues(
    client: RedmineClient,
    params: Optional[ListIssuesParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    List issues. Without a status_id filter Redmine only returns open issues.

    List filters such as issue_id=[1, 2] or include=["relations"] are sent
    comma-joined (issue_id=1,2).
    """
    return await client.request("GET", "issues", query(ListIssuesParams, params))


async def get_issue(
    client: RedmineClient,
    issue_id: int,
    params: Optional[GetIssueParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return await client.request(
        "GET", f"issues/{segment(issue_id)}", query(GetIssueParams, params)
    )


async def create_issue(
    client: RedmineClient, issue: CreateIssueParams | Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Create an issue.

    Attach files by first calling attachments.upload_file and passing the
    returned token in `uploads`.
    """
    return await client.request("POST", "issues", body("issue", CreateIssueParams, issue))


async def update_issue(
    client: RedmineClient,
    issue_id: int,
    issue: UpdateIssueParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT", f"issues/{segment(issue_id)}", body("issue", UpdateIssueParams, issue)
    )


async def delete_issue(client: RedmineClient, issue_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"issues/{segment(issue_id)}")


async def add_watcher(
    client: RedmineClient, issue_id: int, user_id: int
) -> Dict[str, Any]:
    return await client.request(
        "POST", f"issues/{segment(issue_id)}/watchers", {"user_id": user_id}
    )


async def remove_watcher(
    client: RedmineClient, issue_id: int, user_id: int
) -> Dict[str, Any]:
    return await client.request(
        "DELETE", f"issues/{segment(issue_id)}/watchers/{segment(user_id)}"
    )
