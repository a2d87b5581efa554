"""Tests for the audit logs and events services.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest
from workos_sdk import WorkOSClient
from workos_sdk.models import (
    AuditLogActor,
    AuditLogContext,
    AuditLogEvent,
    AuditLogSchemaActor,
    AuditLogSchemaTarget,
    AuditLogTarget,
)
from workos_sdk.models.audit_log_models import (
    CreateAuditLogSchemaOptions,
    deserialize_audit_log_schema,
    serialize_create_schema_options,
)

TIMESTAMP = "2024-01-01T00:00:00.000Z"

OCCURRED_AT = datetime(2024, 1, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def audit_event() -> AuditLogEvent:
    """A sign-in event."""
    return AuditLogEvent(
        action="user.signed_in",
        occurred_at=OCCURRED_AT,
        actor=AuditLogActor(id="user_01H", type="user", name="Jon"),
        targets=[AuditLogTarget(id="team_01H", type="team")],
        context=AuditLogContext(location="1.1.1.1", user_agent="Chrome/104.0.0"),
        metadata={"successful": True},
    )


async def test_create_event(
    client: WorkOSClient, mock_responses, audit_event: AuditLogEvent
) -> None:
    """Events are posted with their organization and an idempotency key."""
    route = mock_responses.post("/audit_logs/events").mock(
        return_value=httpx.Response(201, json={"success": True})
    )

    result = await client.audit_logs.create_event(
        "org_01H", audit_event, idempotency_key="evt-1"
    )

    request = route.calls.last.request
    body = json.loads(request.content)
    assert result is None
    assert request.headers["Idempotency-Key"] == "evt-1"
    assert body["organization_id"] == "org_01H"
    assert body["event"]["occurred_at"] == "2024-01-01T12:30:00+00:00"
    assert body["event"]["actor"] == {"id": "user_01H", "type": "user", "name": "Jon"}
    assert "version" not in body["event"]


async def test_exports(client: WorkOSClient, mock_responses) -> None:
    """Exports are created with an ISO date range and polled by ID."""
    export = {
        "object": "audit_log_export",
        "id": "audit_log_export_01H",
        "state": "pending",
        "url": None,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }
    create = mock_responses.post("/audit_logs/exports").mock(
        return_value=httpx.Response(201, json=export)
    )
    mock_responses.get("/audit_logs/exports/audit_log_export_01H").mock(
        return_value=httpx.Response(
            200, json={**export, "state": "ready", "url": "https://exports.test/1.csv"}
        )
    )

    created = await client.audit_logs.create_export(
        "org_01H",
        OCCURRED_AT,
        datetime(2024, 2, 1, tzinfo=timezone.utc),
        actions=["user.signed_in"],
    )
    ready = await client.audit_logs.get_export(created.id)

    body = json.loads(create.calls.last.request.content)
    assert body == {
        "organization_id": "org_01H",
        "range_start": "2024-01-01T12:30:00+00:00",
        "range_end": "2024-02-01T00:00:00+00:00",
        "actions": ["user.signed_in"],
    }
    assert created.state == "pending"
    assert ready.url == "https://exports.test/1.csv"


def test_schema_metadata_wire_form() -> None:
    """Metadata maps become JSON-schema objects and back."""
    options = CreateAuditLogSchemaOptions(
        action="user.viewed_invoice",
        targets=[AuditLogSchemaTarget(type="invoice", metadata={"cost": "number"})],
        actor=AuditLogSchemaActor(metadata={"role": "string"}),
        metadata={"invoice_id": "string"},
    )

    wire = serialize_create_schema_options(options)

    assert wire == {
        "actor": {
            "metadata": {"type": "object", "properties": {"role": {"type": "string"}}}
        },
        "targets": [
            {
                "type": "invoice",
                "metadata": {
                    "type": "object",
                    "properties": {"cost": {"type": "number"}},
                },
            }
        ],
        "metadata": {"type": "object", "properties": {"invoice_id": {"type": "string"}}},
    }
    schema = deserialize_audit_log_schema({**wire, "version": 1, "created_at": TIMESTAMP})
    assert schema.targets == options.targets
    assert schema.actor == options.actor
    assert schema.metadata == options.metadata


async def test_create_schema(client: WorkOSClient, mock_responses) -> None:
    """Schemas are posted under their action."""
    route = mock_responses.post("/audit_logs/actions/user.signed_in/schemas").mock(
        return_value=httpx.Response(
            201,
            json={
                "object": "audit_log_schema",
                "version": 2,
                "targets": [{"type": "team"}],
                "actor": {"metadata": {"type": "object", "properties": {}}},
                "created_at": TIMESTAMP,
            },
        )
    )

    schema = await client.audit_logs.create_schema(
        "user.signed_in", [AuditLogSchemaTarget(type="team")]
    )

    assert json.loads(route.calls.last.request.content)["targets"] == [{"type": "team"}]
    assert schema.version == 2
    assert schema.actor is not None
    assert schema.actor.metadata == {}
    assert schema.metadata is None


async def test_list_events(client: WorkOSClient, mock_responses, list_body) -> None:
    """Event types repeat in the query and no default order is sent."""
    route = mock_responses.get("/events").mock(
        return_value=httpx.Response(
            200,
            json=list_body(
                [
                    {
                        "object": "event",
                        "id": "event_01H",
                        "event": "dsync.user.created",
                        "data": {"id": "directory_user_01H"},
                        "created_at": TIMESTAMP,
                    }
                ]
            ),
        )
    )

    events = await client.events.list_events(
        ["dsync.user.created", "dsync.user.deleted"],
        range_start=OCCURRED_AT,
        organization_id="org_01H",
    )

    params = route.calls.last.request.url.params
    assert params.get_list("events") == ["dsync.user.created", "dsync.user.deleted"]
    assert params["range_start"] == "2024-01-01T12:30:00+00:00"
    assert "order" not in params
    assert events.data[0].data == {"id": "directory_user_01H"}
