"""User management models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Literal

from pydantic import Field

from .common import PaginationOptions, WorkOSModel
from .mfa_models import Challenge, Factor

PasswordHashType = Literal["bcrypt", "firebase-scrypt", "md5", "pbkdf2", "ssha"]
OrganizationMembershipStatus = Literal["active", "inactive", "pending"]
InvitationState = Literal["accepted", "expired", "pending", "revoked"]
AuthenticationMethod = Literal[
    "AppleOAuth",
    "EmailVerification",
    "GitHubOAuth",
    "GoogleOAuth",
    "Impersonation",
    "MagicAuth",
    "MicrosoftOAuth",
    "MigratedSession",
    "Passkey",
    "Password",
    "SSO",
]

# Failure reasons of session cookie authentication and refresh.
NO_SESSION_COOKIE_PROVIDED = "no_session_cookie_provided"
INVALID_SESSION_COOKIE = "invalid_session_cookie"
INVALID_JWT = "invalid_jwt"
INVALID_GRANT = "invalid_grant"
MFA_ENROLLMENT = "mfa_enrollment"
SSO_REQUIRED = "sso_required"

REFRESH_FAILURE_REASONS = frozenset({INVALID_GRANT, MFA_ENROLLMENT, SSO_REQUIRED})


class User(WorkOSModel):
    """User model."""

    object: Literal["user"] = "user"
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    email_verified: bool = False
    profile_picture_url: str | None = None
    last_sign_in_at: str | None = None
    external_id: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: str
    updated_at: str


class Impersonator(WorkOSModel):
    """Admin impersonating the user of a session."""

    email: str
    reason: str | None = None


class AuthenticationResponse(WorkOSModel):
    """Result of any ``authenticate_with_*`` call.

    ``sealed_session`` is filled in locally when sealing was requested.
    """

    user: User
    organization_id: str | None = None
    access_token: str
    refresh_token: str
    impersonator: Impersonator | None = None
    authentication_method: AuthenticationMethod | None = None
    sealed_session: str | None = None


class SessionOptions(WorkOSModel):
    """Whether and how to seal the session of an authentication response."""

    seal_session: bool = False
    cookie_password: str | None = None


class Identity(WorkOSModel):
    """External identity linked to a user."""

    idp_id: str
    type: Literal["OAuth"] = "OAuth"
    provider: str


class EmailVerification(WorkOSModel):
    """Email verification model."""

    object: Literal["email_verification"] = "email_verification"
    id: str
    user_id: str
    email: str
    expires_at: str
    code: str
    created_at: str
    updated_at: str


class MagicAuth(WorkOSModel):
    """Magic auth code model."""

    object: Literal["magic_auth"] = "magic_auth"
    id: str
    user_id: str
    email: str
    expires_at: str
    code: str
    created_at: str
    updated_at: str


class PasswordReset(WorkOSModel):
    """Password reset model."""

    object: Literal["password_reset"] = "password_reset"
    id: str
    user_id: str
    email: str
    password_reset_token: str
    password_reset_url: str
    expires_at: str
    created_at: str


class RoleSlug(WorkOSModel):
    """Role reference by slug."""

    slug: str


class OrganizationMembership(WorkOSModel):
    """Organization membership model."""

    object: Literal["organization_membership"] = "organization_membership"
    id: str
    user_id: str
    organization_id: str
    organization_name: str | None = None
    role: RoleSlug | None = None
    status: OrganizationMembershipStatus
    created_at: str
    updated_at: str


class Invitation(WorkOSModel):
    """Invitation model. ``token`` and the accept URL identify the invitation."""

    object: Literal["invitation"] = "invitation"
    id: str
    email: str
    state: InvitationState
    accepted_at: str | None = None
    revoked_at: str | None = None
    expires_at: str
    token: str
    accept_invitation_url: str
    organization_id: str | None = None
    inviter_user_id: str | None = None
    created_at: str
    updated_at: str


class AuthenticationFactorEnrollment(WorkOSModel):
    """Factor enrolled for a user, with the challenge to verify it."""

    authentication_factor: Factor
    authentication_challenge: Challenge


class AccessTokenClaims(WorkOSModel):
    """Claims WorkOS puts into session access tokens."""

    sid: str
    org_id: str | None = None
    role: str | None = None
    permissions: list[str] | None = None
    entitlements: list[str] | None = None


class SessionCookieData(WorkOSModel):
    """What a sealed session cookie holds."""

    access_token: str
    refresh_token: str | None = None
    user: User | None = None
    organization_id: str | None = None
    impersonator: Impersonator | None = None


class AuthenticateWithSessionCookieResponse(WorkOSModel):
    """Outcome of authenticating a sealed session cookie.

    On failure only ``reason`` is set.
    """

    authenticated: bool
    reason: str | None = None
    session_id: str | None = None
    organization_id: str | None = None
    role: str | None = None
    permissions: list[str] | None = None
    entitlements: list[str] | None = None
    user: User | None = None
    impersonator: Impersonator | None = None
    access_token: str | None = None


class RefreshSessionResponse(WorkOSModel):
    """Outcome of refreshing a sealed session."""

    authenticated: bool
    reason: str | None = None
    sealed_session: str | None = None
    session: AuthenticationResponse | None = None
    session_id: str | None = None
    organization_id: str | None = None
    role: str | None = None
    permissions: list[str] | None = None
    entitlements: list[str] | None = None
    user: User | None = None
    impersonator: Impersonator | None = None


class ListUsersOptions(PaginationOptions):
    """List users options model."""

    email: str | None = None
    organization_id: str | None = None


class ListOrganizationMembershipsOptions(PaginationOptions):
    """List organization memberships options model."""

    organization_id: str | None = None
    user_id: str | None = None
    statuses: list[OrganizationMembershipStatus] | None = None


class ListInvitationsOptions(PaginationOptions):
    """List invitations options model."""

    organization_id: str | None = None
    email: str | None = None


class CreateUserOptions(WorkOSModel):
    """Create user request model."""

    email: str
    password: str | None = None
    password_hash: str | None = None
    password_hash_type: PasswordHashType | None = None
    first_name: str | None = None
    last_name: str | None = None
    email_verified: bool | None = None
    external_id: str | None = None
    metadata: dict[str, str] | None = None


class UpdateUserOptions(WorkOSModel):
    """Update user request model."""

    user_id: str = Field(exclude=True)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email_verified: bool | None = None
    password: str | None = None
    password_hash: str | None = None
    password_hash_type: PasswordHashType | None = None
    external_id: str | None = None
    metadata: dict[str, str] | None = None


class SendInvitationOptions(WorkOSModel):
    """Send invitation request model."""

    email: str
    organization_id: str | None = None
    expires_in_days: int | None = None
    inviter_user_id: str | None = None
    role_slug: str | None = None


class UserManagementAuthorizationUrlOptions(WorkOSModel):
    """Query parameters of the AuthKit authorization URL."""

    redirect_uri: str
    connection_id: str | None = None
    organization_id: str | None = None
    provider: str | None = None
    state: str | None = None
    domain_hint: str | None = None
    login_hint: str | None = None
    screen_hint: Literal["sign-in", "sign-up"] | None = None
    code_challenge: str | None = None
    code_challenge_method: Literal["S256"] | None = None
    context: str | None = None


def serialize_session_cookie_data(data: SessionCookieData) -> dict[str, Any]:
    """Render session cookie contents as a JSON-ready dict."""
    return data.model_dump(mode="json", exclude_none=True)
