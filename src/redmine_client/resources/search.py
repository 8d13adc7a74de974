from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import SearchParams
from redmine_client.resources._payloads import query


async def search(
    client: RedmineClient,
    q: str,
    params: Optional[SearchParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Full-text search across issues, wiki pages, news, etc.

    Returns {"results": [...], "total_count": int, "offset": int, "limit": int}.
    """
    q = (q or "").strip()
    if not q:
        raise ValueError("q must be a non-empty search string.")
    return await client.request("GET", "search", query(SearchParams, params, q=q))
