"""Events service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from datetime import datetime

from ._base import BaseClient
from ._pagination import AutoPaginatable, fetch_list
from ._serializers import deserializer_for
from .models.event_models import Event, ListEventsOptions


class EventsService:
    """Service for reading the event stream."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize events service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def list_events(
        self,
        events: list[str],
        *,
        range_start: datetime | None = None,
        range_end: datetime | None = None,
        organization_id: str | None = None,
        limit: int | None = None,
        after: str | None = None,
    ) -> AutoPaginatable[Event]:
        """Get a page of events of the given types.

        Args:
            events: Event types to include, e.g. ``["dsync.user.created"]``
            range_start: Oldest event time to include
            range_end: Newest event time to include
            organization_id: Only events of this organization
            limit: Maximum number of events per page
            after: Cursor for the next page

        Returns:
            The first page of events, able to fetch the rest.

        """
        options = ListEventsOptions(
            events=events,
            range_start=range_start,
            range_end=range_end,
            organization_id=organization_id,
            limit=limit,
            after=after,
        )
        return await fetch_list(
            self._client,
            "/events",
            deserializer_for(Event),
            options,
            default_order=None,
        )
