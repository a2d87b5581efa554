"""Tests for the fine-grained authorization service.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import json

import httpx
import pytest
from workos_sdk import WorkOSClient
from workos_sdk.models import CheckWarrant, Resource, ResourceRef, Subject, WriteWarrantOptions
from workos_sdk.models.fga_models import (
    deserialize_check_warrant,
    deserialize_write_warrant_options,
    serialize_check_warrant,
    serialize_write_warrant_options,
)

REPORT = ResourceRef(resource_type="report", resource_id="avo-report")
USER = Subject(resource_type="user", resource_id="user_01H")


@pytest.fixture
def check() -> CheckWarrant:
    """A viewer check on a report."""
    return CheckWarrant(resource=REPORT, relation="viewer", subject=USER)


def test_check_warrant_wire_form(check: CheckWarrant) -> None:
    """The resource reference is flattened into the check."""
    wire = serialize_check_warrant(check)

    assert wire == {
        "resource_type": "report",
        "resource_id": "avo-report",
        "relation": "viewer",
        "subject": {"resource_type": "user", "resource_id": "user_01H"},
    }
    assert deserialize_check_warrant(wire) == check


def test_write_warrant_wire_form() -> None:
    """Write options keep op and policy only when set."""
    options = WriteWarrantOptions(
        op="delete",
        resource=REPORT,
        relation="editor",
        subject=Subject(resource_type="team", resource_id="eng", relation="member"),
    )

    wire = serialize_write_warrant_options(options)

    assert wire["op"] == "delete"
    assert "policy" not in wire
    assert wire["subject"]["relation"] == "member"
    assert deserialize_write_warrant_options(wire) == options


async def test_check_sends_warrant_token(
    client: WorkOSClient, mock_responses, check: CheckWarrant
) -> None:
    """Checks carry the consistency token and report authorization."""
    route = mock_responses.post("/fga/v1/check").mock(
        return_value=httpx.Response(
            200, json={"result": "authorized", "is_implicit": False, "warrant_token": "wt_2"}
        )
    )

    result = await client.fga.check([check], op="any_of", warrant_token="wt_1")

    request = route.calls.last.request
    assert request.headers["Warrant-Token"] == "wt_1"
    body = json.loads(request.content)
    assert body["op"] == "any_of"
    assert body["checks"][0]["resource_id"] == "avo-report"
    assert result.is_authorized()


async def test_check_batch(client: WorkOSClient, mock_responses, check: CheckWarrant) -> None:
    """Batch checks return one result per check."""
    route = mock_responses.post("/fga/v1/check").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"result": "authorized", "is_implicit": True},
                {"result": "not_authorized", "is_implicit": False},
            ],
        )
    )

    results = await client.fga.check_batch([check, check])

    assert json.loads(route.calls.last.request.content)["op"] == "batch"
    assert [r.is_authorized() for r in results] == [True, False]


async def test_resources_crud(client: WorkOSClient, mock_responses) -> None:
    """Resources are addressed by type and ID."""
    resource = {"resource_type": "report", "resource_id": "avo-report", "meta": {"title": "Q1"}}
    create = mock_responses.post("/fga/v1/resources").mock(
        return_value=httpx.Response(200, json=resource)
    )
    mock_responses.get("/fga/v1/resources/report/avo-report").mock(
        return_value=httpx.Response(200, json=resource)
    )
    update = mock_responses.put("/fga/v1/resources/report/avo-report").mock(
        return_value=httpx.Response(200, json={**resource, "meta": {"title": "Q2"}})
    )
    delete = mock_responses.delete("/fga/v1/resources/report/avo-report").mock(
        return_value=httpx.Response(200)
    )

    created = await client.fga.create_resource("report", "avo-report", meta={"title": "Q1"})
    fetched = await client.fga.get_resource("report", "avo-report")
    updated = await client.fga.update_resource("report", "avo-report", meta={"title": "Q2"})
    await client.fga.delete_resource("report", "avo-report")

    assert json.loads(create.calls.last.request.content) == resource
    assert fetched == created
    assert json.loads(update.calls.last.request.content) == {"meta": {"title": "Q2"}}
    assert updated.meta == {"title": "Q2"}
    assert delete.called


async def test_batch_write_resources(client: WorkOSClient, mock_responses) -> None:
    """Batched resources come back under ``data``."""
    written = [
        {"resource_type": "report", "resource_id": "a"},
        {"resource_type": "report", "resource_id": "b"},
    ]
    route = mock_responses.post("/fga/v1/resources/batch").mock(
        return_value=httpx.Response(200, json={"data": written})
    )

    result = await client.fga.batch_write_resources(
        "create", [Resource.model_validate(item) for item in written]
    )

    assert json.loads(route.calls.last.request.content) == {"op": "create", "resources": written}
    assert [r.resource_id for r in result] == ["a", "b"]


async def test_write_warrants(client: WorkOSClient, mock_responses) -> None:
    """Single and batch writes both return a warrant token."""
    route = mock_responses.post("/fga/v1/warrants").mock(
        return_value=httpx.Response(200, json={"warrant_token": "wt_3"})
    )
    warrant = WriteWarrantOptions(op="create", resource=REPORT, relation="viewer", subject=USER)

    single = await client.fga.write_warrant(warrant)
    batch = await client.fga.batch_write_warrants([warrant, warrant])

    assert single.warrant_token == "wt_3"
    assert batch.warrant_token == "wt_3"
    assert isinstance(json.loads(route.calls.last.request.content), list)


async def test_batch_write_warrants_rejects_empty(
    client: WorkOSClient, mock_responses
) -> None:
    """An empty batch never reaches the API."""
    with pytest.raises(ValueError, match="warrants"):
        await client.fga.batch_write_warrants([])

    assert not mock_responses.calls


async def test_list_warrants_filters(client: WorkOSClient, mock_responses, list_body) -> None:
    """Warrant filters and the consistency token are sent on every page."""
    warrant = {
        "resource_type": "report",
        "resource_id": "avo-report",
        "relation": "viewer",
        "subject": {"resource_type": "user", "resource_id": "user_01H"},
    }
    route = mock_responses.get("/fga/v1/warrants").mock(
        return_value=httpx.Response(200, json=list_body([warrant]))
    )

    warrants = await client.fga.list_warrants(
        resource_type="report", subject_id="user_01H", warrant_token="wt_1"
    )

    request = route.calls.last.request
    assert request.url.params["resource_type"] == "report"
    assert request.url.params["subject_id"] == "user_01H"
    assert request.headers["Warrant-Token"] == "wt_1"
    assert warrants.data[0].subject.resource_id == "user_01H"


async def test_query_encodes_context(client: WorkOSClient, mock_responses, list_body) -> None:
    """Query context travels as a JSON string."""
    route = mock_responses.get("/fga/v1/query").mock(
        return_value=httpx.Response(
            200,
            json=list_body(
                [
                    {
                        "resource_type": "report",
                        "resource_id": "avo-report",
                        "relation": "viewer",
                        "warrant": {
                            "resource_type": "report",
                            "resource_id": "avo-report",
                            "relation": "viewer",
                            "subject": {"resource_type": "user", "resource_id": "user_01H"},
                        },
                    }
                ]
            ),
        )
    )

    results = await client.fga.query(
        "select viewer of type user for report:avo-report",
        context={"tenant": "foo"},
    )

    params = route.calls.last.request.url.params
    assert json.loads(params["context"]) == {"tenant": "foo"}
    assert params["q"].startswith("select viewer")
    assert results.data[0].warrant.relation == "viewer"
