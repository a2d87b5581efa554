"""WorkOS client using service composition.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import os
from typing import Self

import httpx

from ._audit_logs import AuditLogsService
from ._base import HEADER_AUTHORIZATION, VERSION, BaseClient
from ._directory_sync import DirectorySyncService
from ._events import EventsService
from ._fga import FGAService
from ._mfa import MFAService
from ._organization_domains import OrganizationDomainsService
from ._organizations import OrganizationsService
from ._passwordless import PasswordlessService
from ._portal import PortalService
from ._sso import SSOService
from ._user_management import UserManagementService
from ._webhooks import WebhooksService
from ._widgets import WidgetsService
from .exceptions import NoApiKeyProvidedError

DEFAULT_HOSTNAME = "api.workos.com"


class WorkOSClient:
    """WorkOS API client. Each API area is exposed as a service attribute."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client_id: str | None = None,
        api_hostname: str | None = None,
        https: bool = True,
        port: int | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        app_info: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize WorkOS client.

        Args:
            api_key: Secret API key, defaults to ``WORKOS_API_KEY``
            client_id: Client ID, defaults to ``WORKOS_CLIENT_ID``
            api_hostname: API host, defaults to ``api.workos.com``
            https: Use https for the API base URL
            port: Optional API port
            timeout: Request timeout in seconds
            headers: Extra headers sent with every request
            app_info: ``{"name": ..., "version": ...}`` appended to the User-Agent
            transport: Optional httpx transport override

        Raises:
            NoApiKeyProvidedError: If no API key is given or set in the environment

        """
        api_key = api_key or os.environ.get("WORKOS_API_KEY")
        if not api_key:
            raise NoApiKeyProvidedError
        self.api_key = api_key
        self.client_id = client_id or os.environ.get("WORKOS_CLIENT_ID")

        scheme = "https" if https else "http"
        host = api_hostname or DEFAULT_HOSTNAME
        self.base_url = f"{scheme}://{host}" + (f":{port}" if port else "")

        user_agent = f"workos-python/{VERSION}/httpx"
        if app_info:
            user_agent += f" {app_info['name']}: {app_info['version']}"

        self._client = BaseClient(
            self.base_url,
            headers={
                **(headers or {}),
                HEADER_AUTHORIZATION: f"Bearer {api_key}",
                "User-Agent": user_agent,
            },
            timeout=timeout,
            transport=transport,
        )

        # Initialize service clients
        self.organizations = OrganizationsService(self._client)
        self.organization_domains = OrganizationDomainsService(self._client)
        self.sso = SSOService(self._client, api_key, self.client_id)
        self.directory_sync = DirectorySyncService(self._client)
        self.mfa = MFAService(self._client)
        self.fga = FGAService(self._client)
        self.audit_logs = AuditLogsService(self._client)
        self.events = EventsService(self._client)
        self.webhooks = WebhooksService()
        self.passwordless = PasswordlessService(self._client)
        self.portal = PortalService(self._client)
        self.widgets = WidgetsService(self._client)
        self.user_management = UserManagementService(
            self._client, api_key, self.client_id
        )

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type if an exception occurred
            exc_val: Exception value if an exception occurred
            exc_tb: Exception traceback if an exception occurred

        """
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        """Close the client and clean up resources."""
        await self._client.close()
