"""Audit log models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, field_serializer

from .common import WorkOSModel

MetadataType = Literal["boolean", "number", "string"]


class AuditLogActor(WorkOSModel):
    """Who performed an audited action."""

    id: str
    type: str
    name: str | None = None
    metadata: dict[str, Any] | None = None


class AuditLogTarget(WorkOSModel):
    """What an audited action was performed on."""

    id: str
    type: str
    name: str | None = None
    metadata: dict[str, Any] | None = None


class AuditLogContext(WorkOSModel):
    """Where an audited action came from."""

    location: str
    user_agent: str | None = None


class AuditLogEvent(WorkOSModel):
    """An audit log event as sent to the API."""

    action: str
    occurred_at: datetime
    actor: AuditLogActor
    targets: list[AuditLogTarget]
    context: AuditLogContext
    version: int | None = None
    metadata: dict[str, Any] | None = None

    @field_serializer("occurred_at")
    def _serialize_occurred_at(self, value: datetime) -> str:
        return value.isoformat()


AuditLogExportState = Literal["error", "pending", "ready"]


class AuditLogExport(WorkOSModel):
    """Audit log export model. ``url`` is set once the export is ready."""

    object: Literal["audit_log_export"] = "audit_log_export"
    id: str
    state: AuditLogExportState
    url: str | None = None
    created_at: str
    updated_at: str


class CreateExportOptions(WorkOSModel):
    """Create export request model."""

    organization_id: str
    range_start: datetime
    range_end: datetime
    actions: list[str] | None = None
    actor_names: list[str] | None = None
    actor_ids: list[str] | None = None
    targets: list[str] | None = None

    @field_serializer("range_start", "range_end")
    def _serialize_range(self, value: datetime) -> str:
        return value.isoformat()


class AuditLogSchemaActor(WorkOSModel):
    """Actor part of an audit log schema."""

    metadata: dict[str, MetadataType] = Field(default_factory=dict)


class AuditLogSchemaTarget(WorkOSModel):
    """Target part of an audit log schema."""

    type: str
    metadata: dict[str, MetadataType] | None = None


class AuditLogSchema(WorkOSModel):
    """Audit log schema with metadata given as field-to-type maps."""

    object: Literal["audit_log_schema"] = "audit_log_schema"
    version: int
    targets: list[AuditLogSchemaTarget]
    actor: AuditLogSchemaActor | None = None
    metadata: dict[str, MetadataType] | None = None
    created_at: str


class CreateAuditLogSchemaOptions(WorkOSModel):
    """Create schema request model."""

    action: str
    targets: list[AuditLogSchemaTarget]
    actor: AuditLogSchemaActor | None = None
    metadata: dict[str, MetadataType] | None = None


def serialize_metadata_schema(
    metadata: dict[str, MetadataType] | None,
) -> dict[str, Any]:
    """Expand a field-to-type map into a JSON-schema object."""
    return {
        "type": "object",
        "properties": {key: {"type": value} for key, value in (metadata or {}).items()},
    }


def deserialize_metadata_schema(
    schema: dict[str, Any] | None,
) -> dict[str, MetadataType] | None:
    """Collapse a JSON-schema object back into a field-to-type map."""
    if schema is None:
        return None
    return {
        key: value["type"]
        for key, value in (schema.get("properties") or {}).items()
    }


def serialize_create_schema_options(
    options: CreateAuditLogSchemaOptions,
) -> dict[str, Any]:
    """Render a schema definition for the wire."""
    payload: dict[str, Any] = {
        "actor": {
            "metadata": serialize_metadata_schema(
                options.actor.metadata if options.actor else None
            )
        },
        "targets": [],
    }
    for target in options.targets:
        item: dict[str, Any] = {"type": target.type}
        if target.metadata is not None:
            item["metadata"] = serialize_metadata_schema(target.metadata)
        payload["targets"].append(item)
    if options.metadata is not None:
        payload["metadata"] = serialize_metadata_schema(options.metadata)
    return payload


def deserialize_audit_log_schema(data: dict[str, Any]) -> AuditLogSchema:
    """Read a wire schema back into an AuditLogSchema."""
    actor = data.get("actor")
    return AuditLogSchema(
        version=data["version"],
        targets=[
            AuditLogSchemaTarget(
                type=target["type"],
                metadata=deserialize_metadata_schema(target.get("metadata")),
            )
            for target in data.get("targets") or []
        ],
        actor=(
            AuditLogSchemaActor(
                metadata=deserialize_metadata_schema(actor.get("metadata")) or {}
            )
            if actor
            else None
        ),
        metadata=deserialize_metadata_schema(data.get("metadata")),
        created_at=data["created_at"],
    )
