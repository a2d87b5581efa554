"""Admin Portal service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from ._serializers import serialize
from .models.passwordless_models import GeneratePortalLinkOptions, PortalLinkIntent


class PortalService:
    """Service for Admin Portal links."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize portal service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def generate_link(
        self,
        intent: PortalLinkIntent,
        organization: str,
        *,
        return_url: str | None = None,
        success_url: str | None = None,
    ) -> str:
        """Generate a short-lived Admin Portal link for an organization.

        Returns:
            The portal URL.

        """
        options = GeneratePortalLinkOptions(
            intent=intent,
            organization=organization,
            return_url=return_url,
            success_url=success_url,
        )
        data = await self._client.request(
            "POST",
            "/portal/generate_link",
            config=RequestConfig(json_data=serialize(options)),
        )
        return data["link"]
