"""Organization and organization domain models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Literal

from pydantic import Field

from .common import PaginationOptions, WorkOSModel

DomainState = Literal["failed", "legacy_verified", "pending", "unverified", "verified"]
DomainVerificationStrategy = Literal["dns", "manual"]


class OrganizationDomain(WorkOSModel):
    """Organization domain model."""

    object: Literal["organization_domain"] = "organization_domain"
    id: str
    domain: str
    organization_id: str | None = None
    state: DomainState | None = None
    verification_strategy: DomainVerificationStrategy | None = None
    verification_token: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Organization(WorkOSModel):
    """Organization model."""

    object: Literal["organization"] = "organization"
    id: str
    name: str
    allow_profiles_outside_organization: bool = False
    domains: list[OrganizationDomain] = Field(default_factory=list)
    stripe_customer_id: str | None = None
    external_id: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: str
    updated_at: str


class DomainData(WorkOSModel):
    """Domain entry sent when creating or updating an organization."""

    domain: str
    state: Literal["pending", "verified"]


class ListOrganizationsOptions(PaginationOptions):
    """List organizations options model."""

    domains: list[str] | None = None


class CreateOrganizationOptions(WorkOSModel):
    """Create organization request model."""

    name: str
    domain_data: list[DomainData] | None = None
    external_id: str | None = None
    metadata: dict[str, str] | None = None


class UpdateOrganizationOptions(WorkOSModel):
    """Update organization request model.

    ``organization`` is the id of the organization and travels in the path.
    """

    organization: str = Field(exclude=True)
    name: str | None = None
    domain_data: list[DomainData] | None = None
    stripe_customer_id: str | None = None
    external_id: str | None = None
    metadata: dict[str, str] | None = None


class CreateOrganizationDomainOptions(WorkOSModel):
    """Create organization domain request model."""

    domain: str
    organization_id: str


class Role(WorkOSModel):
    """Role model."""

    object: Literal["role"] = "role"
    id: str
    name: str
    slug: str
    description: str | None = None
    permissions: list[str] = Field(default_factory=list)
    type: Literal["EnvironmentRole", "OrganizationRole"]
    created_at: str
    updated_at: str


class RoleList(WorkOSModel):
    """Roles of an organization."""

    object: Literal["list"] = "list"
    data: list[Role] = Field(default_factory=list)
