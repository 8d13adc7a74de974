from __future__ import annotations

from typing import Any, Dict, Mapping

from redmine_client.client import RedmineClient
from redmine_client.models import UpdateMyAccountParams
from redmine_client.resources._payloads import body


async def get_my_account(client: RedmineClient) -> Dict[str, Any]:
    return await client.request("GET", "my/account")


async def update_my_account(
    client: RedmineClient, user: UpdateMyAccountParams | Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.request(
        "PUT", "my/account", body("user", UpdateMyAccountParams, user)
    )
