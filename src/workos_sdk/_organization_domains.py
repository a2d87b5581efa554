"""Organization domains service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from ._serializers import deserialize, serialize
from .models.organization_models import (
    CreateOrganizationDomainOptions,
    OrganizationDomain,
)


class OrganizationDomainsService:
    """Service for organization domain operations."""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def get(self, domain_id: str) -> OrganizationDomain:
        """Get an organization domain by ID."""
        data = await self._client.request("GET", f"/organization_domains/{domain_id}")
        return deserialize(OrganizationDomain, data)

    async def verify(self, domain_id: str) -> OrganizationDomain:
        """Start verification of an organization domain."""
        data = await self._client.request(
            "POST", f"/organization_domains/{domain_id}/verify"
        )
        return deserialize(OrganizationDomain, data)

    async def create(self, domain: str, organization_id: str) -> OrganizationDomain:
        """Add a domain to an organization."""
        options = CreateOrganizationDomainOptions(
            domain=domain, organization_id=organization_id
        )
        config = RequestConfig(json_data=serialize(options))
        data = await self._client.request(
            "POST", "/organization_domains", config=config
        )
        return deserialize(OrganizationDomain, data)

    async def delete(self, domain_id: str) -> None:
        """Remove a domain from its organization."""
        await self._client.request("DELETE", f"/organization_domains/{domain_id}")
