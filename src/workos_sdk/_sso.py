"""Single Sign-On service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from ._base import BaseClient, RequestConfig
from ._pagination import AutoPaginatable, fetch_list
from ._serializers import deserialize, deserializer_for, serialize
from .models.common import Order
from .models.sso_models import (
    AuthorizationUrlOptions,
    Connection,
    ListConnectionsOptions,
    Profile,
    ProfileAndToken,
)


def to_query_string(params: dict[str, Any]) -> str:
    """Encode query parameters with sorted keys, skipping empty values.

    Returns:
        The URL-encoded query string.

    """
    return urlencode(
        [(key, params[key]) for key in sorted(params) if params[key]]
    )


class SSOService:
    """Service for Single Sign-On operations."""

    def __init__(
        self,
        client: BaseClient,
        api_key: str,
        client_id: str | None = None,
    ) -> None:
        """Initialize SSO service.

        Args:
            client: The base HTTP client
            api_key: API key, used as the client secret in token exchanges
            client_id: WorkOS client ID

        """
        self._client = client
        self._api_key = api_key
        self._client_id = client_id

    def get_authorization_url(
        self,
        redirect_uri: str,
        *,
        connection: str | None = None,
        organization: str | None = None,
        provider: str | None = None,
        state: str | None = None,
        domain_hint: str | None = None,
        login_hint: str | None = None,
    ) -> str:
        """Build the URL that starts an SSO sign-in.

        Args:
            redirect_uri: Where WorkOS sends the user back with a code
            connection: Connection ID to sign in with
            organization: Organization ID whose connection should be used
            provider: OAuth provider such as ``GoogleOAuth``
            state: Opaque value echoed back on the redirect
            domain_hint: Domain pre-selected on the IdP
            login_hint: Email pre-filled on the IdP

        Returns:
            The authorization URL.

        Raises:
            ValueError: If no connection, organization or provider is given.

        """
        if not (connection or organization or provider):
            msg = (
                "Incomplete arguments. Need to specify either a 'connection', "
                "'organization', or 'provider'."
            )
            raise ValueError(msg)

        options = AuthorizationUrlOptions(
            redirect_uri=redirect_uri,
            connection=connection,
            organization=organization,
            provider=provider,
            state=state,
            domain_hint=domain_hint,
            login_hint=login_hint,
        )
        query = to_query_string(
            {
                **serialize(options),
                "client_id": self._client_id,
                "response_type": "code",
            }
        )
        return f"{self._client.url_for('/sso/authorize')}?{query}"

    async def get_profile_and_token(self, code: str) -> ProfileAndToken:
        """Exchange an authorization code for a profile and access token."""
        form = {
            "client_id": self._client_id or "",
            "client_secret": self._api_key,
            "grant_type": "authorization_code",
            "code": code,
        }
        config = RequestConfig(form_data=form)
        data = await self._client.request("POST", "/sso/token", config=config)
        return deserialize(ProfileAndToken, data)

    async def get_profile(self, access_token: str) -> Profile:
        """Get the profile belonging to an SSO access token."""
        config = RequestConfig(access_token=access_token)
        data = await self._client.request("GET", "/sso/profile", config=config)
        return deserialize(Profile, data)

    async def list_connections(
        self,
        *,
        connection_type: str | None = None,
        domain: str | None = None,
        organization_id: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Connection]:
        """Get a paginated list of SSO connections."""
        options = ListConnectionsOptions(
            connection_type=connection_type,
            domain=domain,
            organization_id=organization_id,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client, "/connections", deserializer_for(Connection), options
        )

    async def get_connection(self, connection_id: str) -> Connection:
        """Get an SSO connection by ID."""
        data = await self._client.request("GET", f"/connections/{connection_id}")
        return deserialize(Connection, data)

    async def delete_connection(self, connection_id: str) -> None:
        """Delete an SSO connection."""
        await self._client.request("DELETE", f"/connections/{connection_id}")
