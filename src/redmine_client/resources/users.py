from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from redmine_client.client import RedmineClient
from redmine_client.models import (
    CreateUserParams,
    GetUserParams,
    ListUsersParams,
    UpdateUserParams,
    UserID,
)
from redmine_client.resources._payloads import body, query, segment


async def list_users(
    client: RedmineClient,
    params: Optional[ListUsersParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """List users (admin only). status: 1 active, 2 registered, 3 locked."""
    return await client.request("GET", "users", query(ListUsersParams, params))


async def create_user(
    client: RedmineClient,
    user: CreateUserParams | Mapping[str, Any],
    send_information: bool = False,
) -> Dict[str, Any]:
    """
    Create a user (admin only).

    Args:
        user: Account fields; password may be omitted with generate_password.
        send_information: Email the account details to the new user.
    """
    payload = body("user", CreateUserParams, user)
    payload["send_information"] = send_information
    return await client.request("POST", "users", payload)


async def get_user(
    client: RedmineClient,
    user_id: UserID,
    params: Optional[GetUserParams | Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Fetch a user. Pass "current" for the account whose credentials are in use.
    Visible fields depend on the privileges of the caller.
    """
    return await client.request(
        "GET", f"users/{segment(user_id)}", query(GetUserParams, params)
    )


async def update_user(
    client: RedmineClient,
    user_id: UserID,
    user: UpdateUserParams | Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.request(
        "PUT", f"users/{segment(user_id)}", body("user", UpdateUserParams, user)
    )


async def delete_user(client: RedmineClient, user_id: UserID) -> Dict[str, Any]:
    return await client.request("DELETE", f"users/{segment(user_id)}")
