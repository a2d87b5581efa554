"""Organizations service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from typing import Any

from ._base import BaseClient, RequestConfig
from ._pagination import AutoPaginatable, fetch_list
from ._serializers import deserialize, deserializer_for, serialize
from .models.common import Order
from .models.organization_models import (
    CreateOrganizationOptions,
    DomainData,
    ListOrganizationsOptions,
    Organization,
    RoleList,
    UpdateOrganizationOptions,
)


class OrganizationsService:
    """Service for organization operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize organizations service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def list_organizations(
        self,
        *,
        domains: list[str] | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Organization]:
        """Get a paginated list of organizations.

        Args:
            domains: Only return organizations with one of these domains
            limit: Maximum number of organizations per page
            before: Cursor for the previous page
            after: Cursor for the next page
            order: Sort order by creation time

        Returns:
            The first page of organizations, able to fetch the rest.

        """
        options = ListOrganizationsOptions(
            domains=domains, limit=limit, before=before, after=after, order=order
        )
        return await fetch_list(
            self._client,
            "/organizations",
            deserializer_for(Organization),
            options,
        )

    async def create_organization(
        self,
        name: str,
        *,
        domain_data: list[DomainData | dict[str, Any]] | None = None,
        external_id: str | None = None,
        metadata: dict[str, str] | None = None,
        idempotency_key: str | None = None,
    ) -> Organization:
        """Create a new organization.

        Args:
            name: Organization name
            domain_data: Domains to attach, each with its verification state
            external_id: Identifier from the caller's own system
            metadata: Free-form string metadata
            idempotency_key: Key making retried creations safe

        Returns:
            The created organization.

        """
        options = CreateOrganizationOptions.model_validate(
            {
                "name": name,
                "domain_data": domain_data,
                "external_id": external_id,
                "metadata": metadata,
            }
        )
        config = RequestConfig(
            json_data=serialize(options), idempotency_key=idempotency_key
        )
        data = await self._client.request("POST", "/organizations", config=config)
        return deserialize(Organization, data)

    async def get_organization(self, organization_id: str) -> Organization:
        """Get an organization by ID."""
        data = await self._client.request("GET", f"/organizations/{organization_id}")
        return deserialize(Organization, data)

    async def get_organization_by_external_id(self, external_id: str) -> Organization:
        """Get an organization by the caller's external ID."""
        data = await self._client.request(
            "GET", f"/organizations/external_id/{external_id}"
        )
        return deserialize(Organization, data)

    async def update_organization(
        self,
        organization: str,
        *,
        name: str | None = None,
        domain_data: list[DomainData | dict[str, Any]] | None = None,
        stripe_customer_id: str | None = None,
        external_id: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> Organization:
        """Update an organization.

        Args:
            organization: Organization ID
            name: New name
            domain_data: Replacement domain list
            stripe_customer_id: Stripe customer to link
            external_id: New external ID
            metadata: Replacement metadata

        Returns:
            The updated organization.

        """
        options = UpdateOrganizationOptions.model_validate(
            {
                "organization": organization,
                "name": name,
                "domain_data": domain_data,
                "stripe_customer_id": stripe_customer_id,
                "external_id": external_id,
                "metadata": metadata,
            }
        )
        config = RequestConfig(json_data=serialize(options))
        data = await self._client.request(
            "PUT", f"/organizations/{options.organization}", config=config
        )
        return deserialize(Organization, data)

    async def delete_organization(self, organization_id: str) -> None:
        """Delete an organization."""
        await self._client.request("DELETE", f"/organizations/{organization_id}")

    async def list_organization_roles(self, organization_id: str) -> RoleList:
        """List the roles available to an organization.

        Returns:
            Environment and organization roles.

        """
        data = await self._client.request(
            "GET", f"/organizations/{organization_id}/roles"
        )
        return deserialize(RoleList, data)
