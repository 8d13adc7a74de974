import json

import pytest
import respx
from httpx import Response
from redmine_client.client import RedmineClient
from redmine_client.core.errors import RedmineModelValidationError
from redmine_client.models import CreateProjectParams
from redmine_client.resources import memberships, projects

BASE = "https://mock-redmine.com"


@pytest.fixture
def client():
    return RedmineClient(base_url=BASE, api_key="mock-key")


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_joins_include(client):
    route = respx.get(f"{BASE}/projects.json").mock(
        return_value=Response(200, json={"projects": [], "total_count": 0})
    )

    async with client:
        await projects.list_projects(
            client, {"limit": 25, "include": ["trackers", "enabled_modules"]}
        )

    params = route.calls[0].request.url.params
    assert params["limit"] == "25"
    assert params["include"] == "trackers,enabled_modules"


@pytest.mark.asyncio
@respx.mock
async def test_create_project_wraps_payload(client):
    route = respx.post(f"{BASE}/projects.json").mock(
        return_value=Response(201, json={"project": {"id": 9}})
    )

    async with client:
        data = await projects.create_project(
            client,
            CreateProjectParams(name="Demo", identifier="demo", tracker_ids=[1, 2]),
        )

    assert data["project"]["id"] == 9
    assert json.loads(route.calls[0].request.content) == {
        "project": {"name": "Demo", "identifier": "demo", "tracker_ids": [1, 2]}
    }


@pytest.mark.asyncio
async def test_create_project_rejects_unknown_module(client):
    with pytest.raises(RedmineModelValidationError):
        await projects.create_project(
            client,
            {"name": "Demo", "identifier": "demo", "enabled_module_names": ["chat"]},
        )


@pytest.mark.asyncio
@respx.mock
async def test_get_project_by_identifier(client):
    route = respx.get(f"{BASE}/projects/demo.json").mock(
        return_value=Response(200, json={"project": {"id": 9, "identifier": "demo"}})
    )

    async with client:
        data = await projects.get_project(
            client, "demo", {"include": ["time_entry_activities"]}
        )

    assert data["project"]["identifier"] == "demo"
    assert route.calls[0].request.url.params["include"] == "time_entry_activities"


@pytest.mark.asyncio
@respx.mock
async def test_update_and_delete_project(client):
    put = respx.put(f"{BASE}/projects/9.json").mock(return_value=Response(204))
    delete = respx.delete(f"{BASE}/projects/9.json").mock(return_value=Response(204))

    async with client:
        assert await projects.update_project(client, 9, {"name": "Renamed"}) == {}
        assert await projects.delete_project(client, 9) == {}

    assert json.loads(put.calls[0].request.content) == {"project": {"name": "Renamed"}}
    assert delete.called


@pytest.mark.asyncio
@respx.mock
async def test_membership_roundtrip(client):
    add = respx.post(f"{BASE}/projects/demo/memberships.json").mock(
        return_value=Response(201, json={"membership": {"id": 30}})
    )
    listing = respx.get(f"{BASE}/projects/demo/memberships.json").mock(
        return_value=Response(200, json={"memberships": [], "total_count": 0})
    )
    update = respx.put(f"{BASE}/memberships/30.json").mock(return_value=Response(204))

    async with client:
        await memberships.add_project_member(
            client, "demo", {"user_id": 5, "role_ids": [3, 4]}
        )
        await memberships.list_project_members(client, "demo", {"offset": 25})
        await memberships.update_membership(client, 30, {"role_ids": [4]})

    assert json.loads(add.calls[0].request.content) == {
        "membership": {"user_id": 5, "role_ids": [3, 4]}
    }
    assert listing.calls[0].request.url.params["offset"] == "25"
    assert json.loads(update.calls[0].request.content) == {
        "membership": {"role_ids": [4]}
    }
