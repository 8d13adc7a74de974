from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateNewsParams,
    GetNewsParams,
    ListNewsParams,
    ProjectID,
    UpdateNewsParams,
)
from redmine_client.resources._payloads import body, query, segment


async def list_all_news(
    client: RedmineClient,
    params: Optional[ListNewsParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return await client.request("GET", "news", query(ListNewsParams, params))


async def list_project_news(
    client: RedmineClient,
    project_id: ProjectID,
    params: Optional[ListNewsParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return await client.request(
        "GET", f"projects/{segment(project_id)}/news", query(ListNewsParams, params)
    )


async def get_news(
    client: RedmineClient,
    news_id: int,
    params: Optional[GetNewsParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    return await client.request(
        "GET", f"news/{segment(news_id)}", query(GetNewsParams, params)
    )


async def create_news(
    client: RedmineClient,
    project_id: ProjectID,
    news: CreateNewsParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "POST",
        f"projects/{segment(project_id)}/news",
        body("news", CreateNewsParams, news),
    )


async def update_news(
    client: RedmineClient, news_id: int, news: UpdateNewsParams | Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.request(
        "PUT", f"news/{segment(news_id)}", body("news", UpdateNewsParams, news)
    )


async def delete_news(client: RedmineClient, news_id: int) -> Dict[str, Any]:
    return await client.request("DELETE", f"news/{segment(news_id)}")
