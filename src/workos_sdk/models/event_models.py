"""Event models shared by the events API and webhooks.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_serializer

from .common import WorkOSModel


class Event(WorkOSModel):
    """An event, such as ``dsync.user.created``, with its raw payload."""

    object: str | None = None
    id: str
    event: str
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: str


class ListEventsOptions(WorkOSModel):
    """List events options model."""

    events: list[str]
    range_start: datetime | None = None
    range_end: datetime | None = None
    organization_id: str | None = None
    limit: int | None = None
    after: str | None = None

    @field_serializer("range_start", "range_end")
    def _serialize_range(self, value: datetime | None) -> str | None:
        return value.isoformat() if value else None
