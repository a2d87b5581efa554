"""Passwordless authentication service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from ._serializers import deserialize, serialize
from .models.passwordless_models import (
    CreatePasswordlessSessionOptions,
    PasswordlessSession,
    PasswordlessSessionType,
)


class PasswordlessService:
    """Service for magic link sessions."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize passwordless service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def create_session(
        self,
        email: str,
        *,
        type: PasswordlessSessionType = "MagicLink",  # noqa: A002
        redirect_uri: str | None = None,
        state: str | None = None,
        connection: str | None = None,
        expires_in: int | None = None,
    ) -> PasswordlessSession:
        """Create a passwordless session for an email address.

        Args:
            email: Address the magic link is for
            type: Session type, only ``MagicLink`` is supported
            redirect_uri: Where the link sends the user after authenticating
            state: Opaque value echoed back on redirect
            connection: Connection to authenticate through
            expires_in: Link lifetime in seconds

        Returns:
            The session, including the link.

        """
        options = CreatePasswordlessSessionOptions(
            email=email,
            type=type,
            redirect_uri=redirect_uri,
            state=state,
            connection=connection,
            expires_in=expires_in,
        )
        data = await self._client.request(
            "POST",
            "/passwordless/sessions",
            config=RequestConfig(json_data=serialize(options)),
        )
        return deserialize(PasswordlessSession, data)

    async def send_session(self, session_id: str) -> bool:
        """Email the magic link of a session to its address.

        Returns:
            True once the API accepted the request.

        """
        await self._client.request(
            "POST", f"/passwordless/sessions/{session_id}/send"
        )
        return True
