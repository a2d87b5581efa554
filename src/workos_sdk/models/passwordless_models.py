"""Passwordless, portal and widget models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Literal

from .common import WorkOSModel

PasswordlessSessionType = Literal["MagicLink"]

PortalLinkIntent = Literal[
    "audit_logs",
    "certificate_renewal",
    "domain_verification",
    "dsync",
    "log_streams",
    "sso",
]

WidgetScope = Literal["widgets:users-table:manage"]


class PasswordlessSession(WorkOSModel):
    """Passwordless session model carrying the magic link."""

    object: Literal["passwordless_session"] = "passwordless_session"
    id: str
    email: str
    expires_at: str
    link: str


class CreatePasswordlessSessionOptions(WorkOSModel):
    """Create passwordless session request model."""

    email: str
    type: PasswordlessSessionType = "MagicLink"
    redirect_uri: str | None = None
    state: str | None = None
    connection: str | None = None
    expires_in: int | None = None


class GeneratePortalLinkOptions(WorkOSModel):
    """Generate portal link request model."""

    intent: PortalLinkIntent
    organization: str
    return_url: str | None = None
    success_url: str | None = None


class GetWidgetTokenOptions(WorkOSModel):
    """Widget token request model."""

    organization_id: str
    user_id: str
    scopes: list[WidgetScope]
