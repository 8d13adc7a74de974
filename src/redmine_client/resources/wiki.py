from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import GetWikiPageParams, ProjectID, WikiPageParams
from redmine_client.resources._payloads import body, query, segment


def _page_path(project_id: ProjectID, title: str) -> str:
    return f"projects/{segment(project_id)}/wiki/{segment(title)}"


async def list_wiki_pages(client: RedmineClient, project_id: ProjectID) -> Dict[str, Any]:
    return await client.request("GET", f"projects/{segment(project_id)}/wiki/index")


async def get_wiki_page(
    client: RedmineClient,
    project_id: ProjectID,
    title: str,
    params: Optional[GetWikiPageParams | Mapping[str, Any]] = None,
    version: Optional[int] = None,
) -> Dict[str, Any]:
    """Fetch a wiki page, or one of its old versions when `version` is given."""
    path = _page_path(project_id, title)
    if version:
        path = f"{path}/{segment(version)}"
    return await client.request("GET", path, query(GetWikiPageParams, params))


async def create_or_update_wiki_page(
    client: RedmineClient,
    project_id: ProjectID,
    title: str,
    page: WikiPageParams | Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Create or update a wiki page.

    `text` is always required; resend the current text to keep it. Passing
    `version` makes the update fail with a conflict if the page changed
    since that version was read.
    """
    return await client.request(
        "PUT", _page_path(project_id, title), body("wiki_page", WikiPageParams, page)
    )


async def delete_wiki_page(
    client: RedmineClient, project_id: ProjectID, title: str
) -> Dict[str, Any]:
    """Delete a page with its attachments and history; child pages become roots."""
    return await client.request("DELETE", _page_path(project_id, title))
