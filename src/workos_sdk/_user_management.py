"""User management service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import jwt

from ._base import BaseClient, RequestConfig
from ._pagination import AutoPaginatable, fetch_list
from ._sealing import Password, seal_data
from ._serializers import deserialize, deserializer_for, serialize
from ._sso import to_query_string
from .models.common import Order
from .models.mfa_models import Factor
from .models.user_management_models import (
    AccessTokenClaims,
    AuthenticateWithSessionCookieResponse,
    AuthenticationFactorEnrollment,
    AuthenticationResponse,
    CreateUserOptions,
    EmailVerification,
    Identity,
    Invitation,
    ListInvitationsOptions,
    ListOrganizationMembershipsOptions,
    ListUsersOptions,
    MagicAuth,
    OrganizationMembership,
    OrganizationMembershipStatus,
    PasswordHashType,
    PasswordReset,
    SendInvitationOptions,
    SessionCookieData,
    SessionOptions,
    UpdateUserOptions,
    User,
    UserManagementAuthorizationUrlOptions,
    serialize_session_cookie_data,
)

if TYPE_CHECKING:
    from ._session import Session

logger = logging.getLogger(__name__)

USERS_PATH = "/user_management/users"
MEMBERSHIPS_PATH = "/user_management/organization_memberships"
INVITATIONS_PATH = "/user_management/invitations"

GRANT_AUTHORIZATION_CODE = "authorization_code"
GRANT_PASSWORD = "password"  # noqa: S105
GRANT_REFRESH_TOKEN = "refresh_token"  # noqa: S105
GRANT_MAGIC_AUTH = "urn:workos:oauth:grant-type:magic-auth:code"
GRANT_TOTP = "urn:workos:oauth:grant-type:mfa-totp"
GRANT_EMAIL_VERIFICATION = "urn:workos:oauth:grant-type:email-verification:code"
GRANT_ORGANIZATION_SELECTION = "urn:workos:oauth:grant-type:organization-selection"

JWT_ALGORITHMS = ["RS256"]


def decode_access_token(access_token: str) -> AccessTokenClaims:
    """Read the claims of an access token without verifying it."""
    claims = jwt.decode(access_token, options={"verify_signature": False})
    return AccessTokenClaims.model_validate(claims)


class UserManagementService:
    """Service for AuthKit users, authentication and sessions."""

    def __init__(
        self,
        client: BaseClient,
        api_key: str,
        client_id: str | None = None,
    ) -> None:
        """Initialize user management service.

        Args:
            client: The base HTTP client
            api_key: API key, sent as the client secret when authenticating
            client_id: WorkOS client ID, needed for authentication and JWKS

        """
        self._client = client
        self._api_key = api_key
        self.client_id = client_id
        self._jwks: jwt.PyJWKSet | None = None

    # Users

    async def get_user(self, user_id: str) -> User:
        """Get a user by ID."""
        data = await self._client.request("GET", f"{USERS_PATH}/{user_id}")
        return deserialize(User, data)

    async def get_user_by_external_id(self, external_id: str) -> User:
        """Get a user by the ID your application assigned."""
        data = await self._client.request(
            "GET", f"{USERS_PATH}/external_id/{external_id}"
        )
        return deserialize(User, data)

    async def list_users(
        self,
        *,
        email: str | None = None,
        organization_id: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[User]:
        """Get a paginated list of users."""
        options = ListUsersOptions(
            email=email,
            organization_id=organization_id,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(self._client, USERS_PATH, deserializer_for(User), options)

    async def create_user(
        self,
        email: str,
        *,
        password: str | None = None,
        password_hash: str | None = None,
        password_hash_type: PasswordHashType | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        email_verified: bool | None = None,
        external_id: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> User:
        """Create a user."""
        options = CreateUserOptions(
            email=email,
            password=password,
            password_hash=password_hash,
            password_hash_type=password_hash_type,
            first_name=first_name,
            last_name=last_name,
            email_verified=email_verified,
            external_id=external_id,
            metadata=metadata,
        )
        data = await self._client.request(
            "POST", USERS_PATH, config=RequestConfig(json_data=serialize(options))
        )
        return deserialize(User, data)

    async def update_user(self, user_id: str, **fields: Any) -> User:
        """Update a user.

        Args:
            user_id: User ID
            **fields: Any field of :class:`UpdateUserOptions`

        Returns:
            The updated user.

        """
        options = UpdateUserOptions(user_id=user_id, **fields)
        data = await self._client.request(
            "PUT",
            f"{USERS_PATH}/{options.user_id}",
            config=RequestConfig(json_data=serialize(options)),
        )
        return deserialize(User, data)

    async def delete_user(self, user_id: str) -> None:
        """Delete a user."""
        await self._client.request("DELETE", f"{USERS_PATH}/{user_id}")

    async def get_user_identities(self, user_id: str) -> list[Identity]:
        """Get the external identities linked to a user."""
        if not user_id:
            raise ValueError("Incomplete arguments. Need to specify 'user_id'.")
        data = await self._client.request("GET", f"{USERS_PATH}/{user_id}/identities")
        return [deserialize(Identity, item) for item in data or []]

    # Authentication

    async def _authenticate(
        self,
        grant_type: str,
        payload: dict[str, Any],
        session: SessionOptions | None,
    ) -> AuthenticationResponse:
        body = {
            "client_id": self.client_id,
            "client_secret": self._api_key,
            "grant_type": grant_type,
            **{key: value for key, value in payload.items() if value is not None},
        }
        data = await self._client.request(
            "POST", "/user_management/authenticate", config=RequestConfig(json_data=body)
        )
        response = deserialize(AuthenticationResponse, data)

        if session and session.seal_session:
            response.sealed_session = self._seal_authentication_response(
                response, session.cookie_password
            )
        return response

    @staticmethod
    def _seal_authentication_response(
        response: AuthenticationResponse,
        cookie_password: str | None,
    ) -> str:
        if not cookie_password:
            raise ValueError("Cookie password is required")

        claims = decode_access_token(response.access_token)
        cookie = SessionCookieData(
            organization_id=claims.org_id,
            user=response.user,
            access_token=response.access_token,
            refresh_token=response.refresh_token,
            impersonator=response.impersonator,
        )
        return seal_data(serialize_session_cookie_data(cookie), cookie_password)

    async def authenticate_with_password(
        self,
        email: str,
        password: str,
        *,
        invitation_token: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Authenticate a user with email and password."""
        return await self._authenticate(
            GRANT_PASSWORD,
            {
                "email": email,
                "password": password,
                "invitation_token": invitation_token,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_code(
        self,
        code: str,
        *,
        code_verifier: str | None = None,
        invitation_token: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Exchange an AuthKit authorization code for a session."""
        return await self._authenticate(
            GRANT_AUTHORIZATION_CODE,
            {
                "code": code,
                "code_verifier": code_verifier,
                "invitation_token": invitation_token,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_refresh_token(
        self,
        refresh_token: str,
        *,
        organization_id: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Use a refresh token to get new tokens, optionally for another organization."""
        return await self._authenticate(
            GRANT_REFRESH_TOKEN,
            {
                "refresh_token": refresh_token,
                "organization_id": organization_id,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_magic_auth(
        self,
        code: str,
        email: str,
        *,
        invitation_token: str | None = None,
        link_authorization_code: str | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Authenticate a user with a magic auth code."""
        return await self._authenticate(
            GRANT_MAGIC_AUTH,
            {
                "code": code,
                "email": email,
                "invitation_token": invitation_token,
                "link_authorization_code": link_authorization_code,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_totp(
        self,
        code: str,
        authentication_challenge_id: str,
        pending_authentication_token: str,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Complete an authentication that requires a TOTP code."""
        return await self._authenticate(
            GRANT_TOTP,
            {
                "code": code,
                "authentication_challenge_id": authentication_challenge_id,
                "pending_authentication_token": pending_authentication_token,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_email_verification(
        self,
        code: str,
        pending_authentication_token: str,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Complete an authentication that requires email verification."""
        return await self._authenticate(
            GRANT_EMAIL_VERIFICATION,
            {
                "code": code,
                "pending_authentication_token": pending_authentication_token,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    async def authenticate_with_organization_selection(
        self,
        organization_id: str,
        pending_authentication_token: str,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
        session: SessionOptions | None = None,
    ) -> AuthenticationResponse:
        """Complete an authentication by choosing one of the user's organizations."""
        return await self._authenticate(
            GRANT_ORGANIZATION_SELECTION,
            {
                "organization_id": organization_id,
                "pending_authentication_token": pending_authentication_token,
                "ip_address": ip_address,
                "user_agent": user_agent,
            },
            session,
        )

    # Sessions

    def get_jwks_url(self, client_id: str | None = None) -> str:
        """Return the URL of the JWKS that signs this client's access tokens."""
        client_id = client_id or self.client_id
        if not client_id:
            raise ValueError("client_id must be a valid client_id")
        return self._client.url_for(f"/sso/jwks/{client_id}")

    async def get_jwks(self, refresh: bool = False) -> jwt.PyJWKSet:
        """Fetch the signing keys, reusing them until a refresh is requested."""
        if self._jwks is None or refresh:
            if not self.client_id:
                raise ValueError("Must provide client_id to initialize JWKS")
            data = await self._client.request("GET", f"/sso/jwks/{self.client_id}")
            self._jwks = jwt.PyJWKSet.from_dict(data or {})
        return self._jwks

    async def is_valid_jwt(self, access_token: str) -> bool:
        """Verify an access token's signature and expiry against the JWKS.

        A ``kid`` missing from the cached keys triggers one refetch, so rotated
        signing keys are picked up.
        """
        try:
            kid = jwt.get_unverified_header(access_token).get("kid")
            jwks = await self.get_jwks()
            if kid is not None and not any(key.key_id == kid for key in jwks.keys):
                jwks = await self.get_jwks(refresh=True)
        except jwt.PyJWTError as e:
            logger.debug("Access token failed verification: %s", e)
            return False

        for key in jwks.keys:
            if kid is not None and key.key_id != kid:
                continue
            try:
                jwt.decode(
                    access_token,
                    key.key,
                    algorithms=JWT_ALGORITHMS,
                    options={"verify_aud": False},
                )
                return True
            except jwt.PyJWTError as e:
                logger.debug("Access token failed verification: %s", e)
        return False

    def load_sealed_session(
        self,
        session_data: str,
        cookie_password: Password | None = None,
    ) -> Session:
        """Wrap a sealed session cookie for authentication and refresh."""
        from ._session import Session

        return Session(
            self,
            session_data,
            cookie_password or os.environ.get("WORKOS_COOKIE_PASSWORD", ""),
        )

    async def authenticate_with_session_cookie(
        self,
        session_data: str | None,
        cookie_password: Password | None = None,
    ) -> AuthenticateWithSessionCookieResponse:
        """Authenticate a sealed session cookie in one call."""
        return await self.load_sealed_session(
            session_data or "", cookie_password
        ).authenticate()

    async def revoke_session(self, session_id: str) -> None:
        """Revoke a session so its refresh token stops working."""
        await self._client.request(
            "POST",
            "/user_management/sessions/revoke",
            config=RequestConfig(json_data={"session_id": session_id}),
        )

    def get_authorization_url(
        self,
        redirect_uri: str,
        *,
        provider: str | None = None,
        connection_id: str | None = None,
        organization_id: str | None = None,
        state: str | None = None,
        domain_hint: str | None = None,
        login_hint: str | None = None,
        screen_hint: str | None = None,
        code_challenge: str | None = None,
        code_challenge_method: str | None = None,
        context: str | None = None,
    ) -> str:
        """Build the URL that starts an AuthKit sign-in.

        Raises:
            ValueError: If no provider, connection or organization is given, or
                ``screen_hint`` is used with a provider other than ``authkit``.

        """
        if not (provider or connection_id or organization_id):
            raise ValueError(
                "Incomplete arguments. Need to specify either a 'connection_id', "
                "'organization_id', or 'provider'."
            )
        if screen_hint and provider != "authkit":
            raise ValueError("'screen_hint' is only supported for 'authkit' provider")
        if context:
            logger.warning(
                "WorkOS: `context` is deprecated. It is no longer necessary "
                "when getting the authorization URL."
            )

        options = UserManagementAuthorizationUrlOptions(
            redirect_uri=redirect_uri,
            provider=provider,
            connection_id=connection_id,
            organization_id=organization_id,
            state=state,
            domain_hint=domain_hint,
            login_hint=login_hint,
            screen_hint=screen_hint,
            code_challenge=code_challenge,
            code_challenge_method=code_challenge_method,
            context=context,
        )
        query = to_query_string(
            {
                **serialize(options),
                "client_id": self.client_id,
                "response_type": "code",
            }
        )
        return f"{self._client.url_for('/user_management/authorize')}?{query}"

    def get_logout_url(self, session_id: str, return_to: str | None = None) -> str:
        """Return the URL that ends a session and optionally redirects."""
        if not session_id:
            raise ValueError("Incomplete arguments. Need to specify 'session_id'.")
        params = {"session_id": session_id}
        if return_to:
            params["return_to"] = return_to
        return (
            f"{self._client.url_for('/user_management/sessions/logout')}"
            f"?{urlencode(params)}"
        )

    # Email verification, magic auth and password reset

    async def get_email_verification(self, email_verification_id: str) -> EmailVerification:
        """Get an email verification by ID."""
        data = await self._client.request(
            "GET", f"/user_management/email_verification/{email_verification_id}"
        )
        return deserialize(EmailVerification, data)

    async def send_verification_email(self, user_id: str) -> User:
        """Send a verification code to a user's email address."""
        data = await self._client.request(
            "POST",
            f"{USERS_PATH}/{user_id}/email_verification/send",
            config=RequestConfig(json_data={}),
        )
        return deserialize(User, data["user"])

    async def verify_email(self, user_id: str, code: str) -> User:
        """Confirm a user's email address with the code sent to it."""
        data = await self._client.request(
            "POST",
            f"{USERS_PATH}/{user_id}/email_verification/confirm",
            config=RequestConfig(json_data={"code": code}),
        )
        return deserialize(User, data["user"])

    async def get_magic_auth(self, magic_auth_id: str) -> MagicAuth:
        """Get a magic auth code by ID."""
        data = await self._client.request(
            "GET", f"/user_management/magic_auth/{magic_auth_id}"
        )
        return deserialize(MagicAuth, data)

    async def create_magic_auth(
        self, email: str, *, invitation_token: str | None = None
    ) -> MagicAuth:
        """Create a one-time magic auth code and email it."""
        payload = {"email": email}
        if invitation_token:
            payload["invitation_token"] = invitation_token
        data = await self._client.request(
            "POST", "/user_management/magic_auth", config=RequestConfig(json_data=payload)
        )
        return deserialize(MagicAuth, data)

    async def send_magic_auth_code(self, email: str) -> None:
        """Email a magic auth code. Deprecated in favor of create_magic_auth."""
        logger.warning(
            "WorkOS: `send_magic_auth_code` is deprecated. Use `create_magic_auth`."
        )
        await self._client.request(
            "POST",
            "/user_management/magic_auth/send",
            config=RequestConfig(json_data={"email": email}),
        )

    async def get_password_reset(self, password_reset_id: str) -> PasswordReset:
        """Get a password reset by ID."""
        data = await self._client.request(
            "GET", f"/user_management/password_reset/{password_reset_id}"
        )
        return deserialize(PasswordReset, data)

    async def create_password_reset(self, email: str) -> PasswordReset:
        """Create a password reset token for a user."""
        data = await self._client.request(
            "POST",
            "/user_management/password_reset",
            config=RequestConfig(json_data={"email": email}),
        )
        return deserialize(PasswordReset, data)

    async def send_password_reset_email(self, email: str, password_reset_url: str) -> None:
        """Email a password reset link. Deprecated in favor of create_password_reset."""
        logger.warning(
            "WorkOS: `send_password_reset_email` is deprecated. "
            "Use `create_password_reset`."
        )
        await self._client.request(
            "POST",
            "/user_management/password_reset/send",
            config=RequestConfig(
                json_data={"email": email, "password_reset_url": password_reset_url}
            ),
        )

    async def reset_password(self, token: str, new_password: str) -> User:
        """Set a new password with a password reset token."""
        data = await self._client.request(
            "POST",
            "/user_management/password_reset/confirm",
            config=RequestConfig(json_data={"token": token, "new_password": new_password}),
        )
        return deserialize(User, data["user"])

    # Auth factors

    async def enroll_auth_factor(
        self,
        user_id: str,
        *,
        totp_issuer: str | None = None,
        totp_user: str | None = None,
        totp_secret: str | None = None,
    ) -> AuthenticationFactorEnrollment:
        """Enroll a TOTP factor for a user."""
        payload: dict[str, Any] = {"type": "totp"}
        for key, value in (
            ("totp_issuer", totp_issuer),
            ("totp_user", totp_user),
            ("totp_secret", totp_secret),
        ):
            if value is not None:
                payload[key] = value
        data = await self._client.request(
            "POST",
            f"{USERS_PATH}/{user_id}/auth_factors",
            config=RequestConfig(json_data=payload),
        )
        return deserialize(AuthenticationFactorEnrollment, data)

    async def list_auth_factors(
        self,
        user_id: str,
        *,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Factor]:
        """Get a paginated list of a user's authentication factors."""
        return await fetch_list(
            self._client,
            f"{USERS_PATH}/{user_id}/auth_factors",
            deserializer_for(Factor),
            {"limit": limit, "before": before, "after": after, "order": order},
        )

    # Organization memberships

    async def get_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        """Get an organization membership by ID."""
        data = await self._client.request(
            "GET", f"{MEMBERSHIPS_PATH}/{organization_membership_id}"
        )
        return deserialize(OrganizationMembership, data)

    async def list_organization_memberships(
        self,
        *,
        organization_id: str | None = None,
        user_id: str | None = None,
        statuses: list[OrganizationMembershipStatus] | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[OrganizationMembership]:
        """Get a paginated list of memberships of an organization or a user."""
        options = ListOrganizationMembershipsOptions(
            organization_id=organization_id,
            user_id=user_id,
            statuses=statuses,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        params = serialize(options)
        if options.statuses:
            params["statuses"] = ",".join(options.statuses)
        return await fetch_list(
            self._client,
            MEMBERSHIPS_PATH,
            deserializer_for(OrganizationMembership),
            params,
        )

    async def create_organization_membership(
        self,
        user_id: str,
        organization_id: str,
        *,
        role_slug: str | None = None,
    ) -> OrganizationMembership:
        """Add a user to an organization."""
        payload = {"user_id": user_id, "organization_id": organization_id}
        if role_slug:
            payload["role_slug"] = role_slug
        data = await self._client.request(
            "POST", MEMBERSHIPS_PATH, config=RequestConfig(json_data=payload)
        )
        return deserialize(OrganizationMembership, data)

    async def update_organization_membership(
        self,
        organization_membership_id: str,
        *,
        role_slug: str | None = None,
    ) -> OrganizationMembership:
        """Change the role of a membership."""
        payload = {"role_slug": role_slug} if role_slug else {}
        data = await self._client.request(
            "PUT",
            f"{MEMBERSHIPS_PATH}/{organization_membership_id}",
            config=RequestConfig(json_data=payload),
        )
        return deserialize(OrganizationMembership, data)

    async def delete_organization_membership(self, organization_membership_id: str) -> None:
        """Remove a user from an organization."""
        await self._client.request(
            "DELETE", f"{MEMBERSHIPS_PATH}/{organization_membership_id}"
        )

    async def deactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        """Deactivate a membership without deleting it."""
        data = await self._client.request(
            "PUT",
            f"{MEMBERSHIPS_PATH}/{organization_membership_id}/deactivate",
            config=RequestConfig(json_data={}),
        )
        return deserialize(OrganizationMembership, data)

    async def reactivate_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        """Reactivate a deactivated membership."""
        data = await self._client.request(
            "PUT",
            f"{MEMBERSHIPS_PATH}/{organization_membership_id}/reactivate",
            config=RequestConfig(json_data={}),
        )
        return deserialize(OrganizationMembership, data)

    # Invitations

    async def get_invitation(self, invitation_id: str) -> Invitation:
        """Get an invitation by ID."""
        data = await self._client.request("GET", f"{INVITATIONS_PATH}/{invitation_id}")
        return deserialize(Invitation, data)

    async def find_invitation_by_token(self, invitation_token: str) -> Invitation:
        """Get an invitation by its token."""
        data = await self._client.request(
            "GET", f"{INVITATIONS_PATH}/by_token/{invitation_token}"
        )
        return deserialize(Invitation, data)

    async def list_invitations(
        self,
        *,
        organization_id: str | None = None,
        email: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Invitation]:
        """Get a paginated list of invitations."""
        options = ListInvitationsOptions(
            organization_id=organization_id,
            email=email,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client, INVITATIONS_PATH, deserializer_for(Invitation), options
        )

    async def send_invitation(
        self,
        email: str,
        *,
        organization_id: str | None = None,
        expires_in_days: int | None = None,
        inviter_user_id: str | None = None,
        role_slug: str | None = None,
    ) -> Invitation:
        """Invite someone by email, optionally into an organization."""
        options = SendInvitationOptions(
            email=email,
            organization_id=organization_id,
            expires_in_days=expires_in_days,
            inviter_user_id=inviter_user_id,
            role_slug=role_slug,
        )
        data = await self._client.request(
            "POST", INVITATIONS_PATH, config=RequestConfig(json_data=serialize(options))
        )
        return deserialize(Invitation, data)

    async def accept_invitation(self, invitation_id: str) -> Invitation:
        """Accept a pending invitation."""
        data = await self._client.request(
            "POST", f"{INVITATIONS_PATH}/{invitation_id}/accept"
        )
        return deserialize(Invitation, data)

    async def revoke_invitation(self, invitation_id: str) -> Invitation:
        """Revoke a pending invitation."""
        data = await self._client.request(
            "POST", f"{INVITATIONS_PATH}/{invitation_id}/revoke"
        )
        return deserialize(Invitation, data)
