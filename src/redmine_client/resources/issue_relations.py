from __future__ import annotations

from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.models import CreateIssueRelationParams
from redmine_client.resources._payloads import body, segment


async def list_issue_relations(client: RedmineClient, issue_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"issues/{segment(issue_id)}/relations")


async def create_issue_relation(
    client: RedmineClient,
    issue_id: int,
    relation: CreateIssueRelationParams | Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Relate `issue_id` to relation.issue_to_id.

    relation_type defaults to "relates" on the server; delay (days) only
    applies to precedes/follows.
    """
    return await client.request(
        "POST",
        f"issues/{segment(issue_id)}/relations",
        body("relation", CreateIssueRelationParams, relation),
    )


async def get_issue_relation(client: RedmineClient, relation_id: int) -> Dict[str, Any]:
    return await client.request("GET", f"relations/{segment(relation_id)}")


async def delete_issue_relation(
    client: RedmineClient, relation_id: int
) -> Dict[str, Any]:
    return await client.request("DELETE", f"relations/{segment(relation_id)}")
