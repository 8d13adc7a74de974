import json
from pathlib import Path

import pytest
import respx
from httpx import Response
from redmine_client.client import RedmineClient
from redmine_client.core.errors import RedmineClientError
from redmine_client.resources import (
    attachments,
    files,
    groups,
    metadata,
    my_account,
    search,
    users,
    wiki,
)

BASE = "https://mock-redmine.com"


@pytest.fixture
def client():
    return RedmineClient(base_url=BASE, api_key="mock-key")


@pytest.mark.asyncio
@respx.mock
async def test_upload_file_from_path(client, tmp_path: Path):
    f = tmp_path / "notes.txt"
    f.write_bytes(b"hello")
    route = respx.post(f"{BASE}/uploads.json").mock(
        return_value=Response(201, json={"upload": {"id": 5, "token": "5.tok"}})
    )

    async with client:
        token = await attachments.upload_file(client, f)

    assert token.token == "5.tok"
    req = route.calls[0].request
    assert req.content == b"hello"
    assert req.headers["Content-Type"] == "application/octet-stream"


@pytest.mark.asyncio
async def test_upload_missing_file_raises(client, tmp_path: Path):
    with pytest.raises(RedmineClientError):
        await attachments.upload_file(client, tmp_path / "nope.bin")


@pytest.mark.asyncio
@respx.mock
async def test_add_project_file(client):
    route = respx.post(f"{BASE}/projects/demo/files.json").mock(
        return_value=Response(204)
    )

    async with client:
        await files.add_project_file(
            client, "demo", {"token": "5.tok", "filename": "notes.txt"}
        )

    assert json.loads(route.calls[0].request.content) == {
        "file": {"token": "5.tok", "filename": "notes.txt"}
    }


@pytest.mark.asyncio
@respx.mock
async def test_create_user_sends_information_flag(client):
    route = respx.post(f"{BASE}/users.json").mock(
        return_value=Response(201, json={"user": {"id": 12}})
    )

    async with client:
        await users.create_user(
            client,
            {
                "login": "jdoe",
                "password": "secret123",
                "firstname": "John",
                "lastname": "Doe",
                "mail": "jdoe@example.org",
            },
            send_information=True,
        )

    sent = json.loads(route.calls[0].request.content)
    assert sent["send_information"] is True
    assert sent["user"]["login"] == "jdoe"


@pytest.mark.asyncio
@respx.mock
async def test_get_current_user(client):
    route = respx.get(f"{BASE}/users/current.json").mock(
        return_value=Response(200, json={"user": {"id": 1}})
    )

    async with client:
        data = await users.get_user(client, "current", {"include": ["memberships", "groups"]})

    assert data["user"]["id"] == 1
    assert route.calls[0].request.url.params["include"] == "memberships,groups"


@pytest.mark.asyncio
@respx.mock
async def test_wiki_page_title_is_escaped(client):
    route = respx.route(method="PUT", host="mock-redmine.com").mock(
        return_value=Response(204)
    )

    async with client:
        await wiki.create_or_update_wiki_page(
            client, "demo", "Start Page", {"text": "h1. Hello", "version": 3}
        )

    req = route.calls[0].request
    assert req.url.raw_path == b"/projects/demo/wiki/Start%20Page.json"
    assert json.loads(req.content) == {"wiki_page": {"text": "h1. Hello", "version": 3}}


@pytest.mark.asyncio
@respx.mock
async def test_wiki_page_old_version(client):
    route = respx.get(f"{BASE}/projects/demo/wiki/Home/2.json").mock(
        return_value=Response(200, json={"wiki_page": {"version": 2}})
    )

    async with client:
        data = await wiki.get_wiki_page(client, "demo", "Home", version=2)

    assert data["wiki_page"]["version"] == 2
    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_group_membership(client):
    add = respx.post(f"{BASE}/groups/4/users.json").mock(return_value=Response(204))
    remove = respx.delete(f"{BASE}/groups/4/users/9.json").mock(
        return_value=Response(204)
    )

    async with client:
        await groups.add_user_to_group(client, 4, 9)
        await groups.remove_user_from_group(client, 4, 9)

    assert json.loads(add.calls[0].request.content) == {"user_id": 9}
    assert remove.called


@pytest.mark.asyncio
@respx.mock
async def test_search_sends_query_and_filters(client):
    route = respx.get(f"{BASE}/search.json").mock(
        return_value=Response(200, json={"results": [], "total_count": 0})
    )

    async with client:
        await search.search(client, "printer", {"limit": 10, "titles_only": True})

    params = route.calls[0].request.url.params
    assert params["q"] == "printer"
    assert params["limit"] == "10"
    assert params["titles_only"] == "true"


@pytest.mark.asyncio
async def test_search_requires_query(client):
    with pytest.raises(ValueError):
        await search.search(client, "   ")


@pytest.mark.asyncio
@respx.mock
async def test_enumerations_and_named_refs(client):
    respx.get(f"{BASE}/enumerations/issue_priorities.json").mock(
        return_value=Response(
            200,
            json={
                "issue_priorities": [
                    {"id": 1, "name": "Low", "is_default": False},
                    {"id": 2, "name": "Normal", "is_default": True},
                    {"name": "broken"},
                ]
            },
        )
    )

    async with client:
        payload = await metadata.list_issue_priorities(client)

    refs = metadata.named_refs(payload, "issue_priorities")
    assert [(r.id, r.name) for r in refs] == [(1, "Low"), (2, "Normal")]


@pytest.mark.asyncio
@respx.mock
async def test_update_my_account(client):
    route = respx.put(f"{BASE}/my/account.json").mock(return_value=Response(204))

    async with client:
        await my_account.update_my_account(client, {"firstname": "Ada"})

    assert json.loads(route.calls[0].request.content) == {"user": {"firstname": "Ada"}}
