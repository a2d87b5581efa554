"""Audit logs service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from datetime import datetime

from ._base import BaseClient, RequestConfig
from ._serializers import deserialize, serialize
from .models.audit_log_models import (
    AuditLogEvent,
    AuditLogExport,
    AuditLogSchema,
    AuditLogSchemaActor,
    AuditLogSchemaTarget,
    CreateAuditLogSchemaOptions,
    CreateExportOptions,
    MetadataType,
    deserialize_audit_log_schema,
    serialize_create_schema_options,
)


class AuditLogsService:
    """Service for audit log operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize audit logs service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def create_event(
        self,
        organization_id: str,
        event: AuditLogEvent,
        *,
        idempotency_key: str | None = None,
    ) -> None:
        """Record an audit log event for an organization.

        Args:
            organization_id: Organization the event belongs to
            event: The event to record
            idempotency_key: Key that makes retried submissions safe

        """
        config = RequestConfig(
            json_data={"organization_id": organization_id, "event": serialize(event)},
            idempotency_key=idempotency_key,
        )
        await self._client.request("POST", "/audit_logs/events", config=config)

    async def create_export(
        self,
        organization_id: str,
        range_start: datetime,
        range_end: datetime,
        *,
        actions: list[str] | None = None,
        actor_names: list[str] | None = None,
        actor_ids: list[str] | None = None,
        targets: list[str] | None = None,
    ) -> AuditLogExport:
        """Start an export of an organization's audit log events.

        Returns:
            The pending export.

        """
        options = CreateExportOptions(
            organization_id=organization_id,
            range_start=range_start,
            range_end=range_end,
            actions=actions,
            actor_names=actor_names,
            actor_ids=actor_ids,
            targets=targets,
        )
        data = await self._client.request(
            "POST", "/audit_logs/exports", config=RequestConfig(json_data=serialize(options))
        )
        return deserialize(AuditLogExport, data)

    async def get_export(self, audit_log_export_id: str) -> AuditLogExport:
        """Get an audit log export by ID."""
        data = await self._client.request(
            "GET", f"/audit_logs/exports/{audit_log_export_id}"
        )
        return deserialize(AuditLogExport, data)

    async def create_schema(
        self,
        action: str,
        targets: list[AuditLogSchemaTarget],
        *,
        actor: AuditLogSchemaActor | None = None,
        metadata: dict[str, MetadataType] | None = None,
        idempotency_key: str | None = None,
    ) -> AuditLogSchema:
        """Define the schema of an audit log action.

        Args:
            action: Action name, e.g. ``user.logged_in``
            targets: Target types with optional metadata types
            actor: Actor metadata types
            metadata: Event metadata types
            idempotency_key: Key that makes retried submissions safe

        Returns:
            The created schema version.

        """
        options = CreateAuditLogSchemaOptions(
            action=action, targets=targets, actor=actor, metadata=metadata
        )
        config = RequestConfig(
            json_data=serialize_create_schema_options(options),
            idempotency_key=idempotency_key,
        )
        data = await self._client.request(
            "POST", f"/audit_logs/actions/{options.action}/schemas", config=config
        )
        return deserialize_audit_log_schema(data)
