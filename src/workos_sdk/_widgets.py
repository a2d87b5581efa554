"""Widgets service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from ._serializers import serialize
from .models.passwordless_models import GetWidgetTokenOptions, WidgetScope


class WidgetsService:
    """Service for widget tokens."""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def get_token(
        self,
        organization_id: str,
        user_id: str,
        scopes: list[WidgetScope],
    ) -> str:
        """Get a token that authorizes a widget for a user."""
        options = GetWidgetTokenOptions(
            organization_id=organization_id, user_id=user_id, scopes=scopes
        )
        data = await self._client.request(
            "POST",
            "/widgets/token",
            config=RequestConfig(json_data=serialize(options)),
        )
        return data["token"]
