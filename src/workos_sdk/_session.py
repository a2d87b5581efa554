"""Sealed AuthKit sessions.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import logging

import jwt
from pydantic import ValidationError

from ._sealing import Password, resolve_password, unseal_data
from ._user_management import UserManagementService, decode_access_token
from .exceptions import OAuthError
from .models.user_management_models import (
    INVALID_JWT,
    INVALID_SESSION_COOKIE,
    NO_SESSION_COOKIE_PROVIDED,
    REFRESH_FAILURE_REASONS,
    AuthenticateWithSessionCookieResponse,
    RefreshSessionResponse,
    SessionCookieData,
    SessionOptions,
)

logger = logging.getLogger(__name__)


class Session:
    """A sealed session cookie that can be authenticated and refreshed.

    After a successful :meth:`refresh`, :attr:`session_data` holds the newly
    sealed cookie value.
    """

    def __init__(
        self,
        user_management: UserManagementService,
        session_data: str,
        cookie_password: Password,
    ) -> None:
        if not cookie_password:
            raise ValueError("cookie_password is required")

        self.user_management = user_management
        self.session_data = session_data
        self.cookie_password = cookie_password

    def _unseal(self) -> SessionCookieData | None:
        try:
            return SessionCookieData.model_validate(
                unseal_data(self.session_data, self.cookie_password)
            )
        except (ValueError, ValidationError) as e:
            logger.debug("Could not unseal session cookie: %s", e)
            return None

    async def authenticate(self) -> AuthenticateWithSessionCookieResponse:
        """Check the cookie and its access token.

        Returns:
            The session claims, or ``authenticated=False`` with a reason.

        """
        if not self.session_data:
            return AuthenticateWithSessionCookieResponse(
                authenticated=False, reason=NO_SESSION_COOKIE_PROVIDED
            )

        session = self._unseal()
        if session is None or not session.access_token:
            return AuthenticateWithSessionCookieResponse(
                authenticated=False, reason=INVALID_SESSION_COOKIE
            )

        if not await self.user_management.is_valid_jwt(session.access_token):
            return AuthenticateWithSessionCookieResponse(
                authenticated=False, reason=INVALID_JWT
            )

        claims = decode_access_token(session.access_token)
        return AuthenticateWithSessionCookieResponse(
            authenticated=True,
            session_id=claims.sid,
            organization_id=claims.org_id,
            role=claims.role,
            permissions=claims.permissions,
            entitlements=claims.entitlements,
            user=session.user,
            impersonator=session.impersonator,
            access_token=session.access_token,
        )

    async def refresh(
        self,
        *,
        cookie_password: str | None = None,
        organization_id: str | None = None,
    ) -> RefreshSessionResponse:
        """Trade the refresh token for new tokens and reseal the cookie.

        Args:
            cookie_password: New password to seal the refreshed cookie with
            organization_id: Switch the session to this organization

        Returns:
            The refreshed session, or ``authenticated=False`` with a reason.

        Raises:
            OAuthError: For OAuth errors other than the known refresh failures

        """
        session = self._unseal() if self.session_data else None
        if session is None or not session.refresh_token or not session.user:
            return RefreshSessionResponse(
                authenticated=False, reason=INVALID_SESSION_COOKIE
            )

        try:
            current_org_id = decode_access_token(session.access_token).org_id
        except (jwt.PyJWTError, ValidationError):
            current_org_id = session.organization_id

        password = cookie_password or self.cookie_password
        try:
            response = await self.user_management.authenticate_with_refresh_token(
                session.refresh_token,
                organization_id=organization_id or current_org_id,
                session=SessionOptions(
                    seal_session=True, cookie_password=resolve_password(password)
                ),
            )
        except OAuthError as e:
            if e.error in REFRESH_FAILURE_REASONS:
                return RefreshSessionResponse(authenticated=False, reason=e.error)
            raise

        if cookie_password:
            self.cookie_password = cookie_password
        self.session_data = response.sealed_session or ""

        claims = decode_access_token(response.access_token)
        return RefreshSessionResponse(
            authenticated=True,
            sealed_session=response.sealed_session,
            session=response,
            session_id=claims.sid,
            organization_id=claims.org_id,
            role=claims.role,
            permissions=claims.permissions,
            entitlements=claims.entitlements,
            user=session.user,
            impersonator=session.impersonator,
        )

    async def get_logout_url(self, return_to: str | None = None) -> str:
        """Return the logout URL of this session.

        Raises:
            ValueError: If the session does not authenticate

        """
        result = await self.authenticate()
        if not result.authenticated or not result.session_id:
            raise ValueError(
                f"Failed to extract session ID for logout URL: {result.reason}"
            )
        return self.user_management.get_logout_url(result.session_id, return_to)
