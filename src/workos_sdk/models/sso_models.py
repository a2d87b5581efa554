"""SSO models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Literal

from pydantic import Field

from .common import PaginationOptions, WorkOSModel

ConnectionState = Literal["active", "deleting", "inactive", "validating"]


class ConnectionDomain(WorkOSModel):
    """Domain attached to an SSO connection."""

    object: Literal["connection_domain"] = "connection_domain"
    id: str
    domain: str


class Connection(WorkOSModel):
    """SSO connection model."""

    object: Literal["connection"] = "connection"
    id: str
    organization_id: str | None = None
    name: str
    connection_type: str
    state: ConnectionState
    domains: list[ConnectionDomain] = Field(default_factory=list)
    created_at: str
    updated_at: str


class Profile(WorkOSModel):
    """Profile of a user who signed in through SSO."""

    object: Literal["profile"] = "profile"
    id: str
    idp_id: str
    organization_id: str | None = None
    connection_id: str
    connection_type: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: dict[str, str] | None = None
    groups: list[str] | None = None
    raw_attributes: dict[str, Any] = Field(default_factory=dict)


class ProfileAndToken(WorkOSModel):
    """Access token and profile returned by the token exchange."""

    access_token: str
    profile: Profile


class ListConnectionsOptions(PaginationOptions):
    """List connections options model."""

    connection_type: str | None = None
    domain: str | None = None
    organization_id: str | None = None


class AuthorizationUrlOptions(WorkOSModel):
    """Query parameters of the SSO authorize URL."""

    redirect_uri: str
    connection: str | None = None
    organization: str | None = None
    provider: str | None = None
    state: str | None = None
    domain_hint: str | None = None
    login_hint: str | None = None
