"""FastAPI integration for WorkOS sealed sessions."""

from __future__ import annotations

import copy
import os
from typing import Any, Callable

from fastapi import Depends, HTTPException, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from .._sealing import Password
from ..client import WorkOSClient
from ..models import AuthenticateWithSessionCookieResponse
from ._cookies import (
    APP_SESSION_COOKIE,
    WORKOS_SESSION_COOKIE,
    CookieSettings,
    dump_session,
    load_session,
)


def _cookie_password(cookie_password: Password | None) -> Password:
    password = cookie_password or os.environ.get("WORKOS_COOKIE_PASSWORD")
    if not password:
        raise ValueError("Cookie password is required")
    return password


def _set_cookie(response: Response, cookie: CookieSettings, value: str) -> None:
    response.set_cookie(
        cookie.name,
        value,
        max_age=cookie.max_age,
        path=cookie.path,
        secure=cookie.secure,
        httponly=cookie.httponly,
        samesite=cookie.samesite,
    )


def _delete_cookie(response: Response, cookie: CookieSettings) -> None:
    response.delete_cookie(
        cookie.name,
        path=cookie.path,
        secure=cookie.secure,
        httponly=cookie.httponly,
        samesite=cookie.samesite,
    )


class WorkOSSessionMiddleware(BaseHTTPMiddleware):
    """Keeps a sealed session dict in a cookie.

    Handlers read and change ``request.state.session``. The cookie is only
    rewritten when the dict changed; an emptied dict deletes the cookie.
    """

    def __init__(
        self,
        app: ASGIApp,
        cookie_password: Password | None = None,
        cookie: CookieSettings = APP_SESSION_COOKIE,
    ) -> None:
        super().__init__(app)
        self.cookie_password = _cookie_password(cookie_password)
        self.cookie = cookie

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        raw = request.cookies.get(self.cookie.name)
        session = load_session(raw, self.cookie_password)
        request.state.session = session
        snapshot = copy.deepcopy(session)

        response = await call_next(request)

        if request.state.session != snapshot:
            if request.state.session:
                _set_cookie(
                    response,
                    self.cookie,
                    dump_session(request.state.session, self.cookie_password),
                )
            elif raw:
                _delete_cookie(response, self.cookie)
        return response


class WorkOSFastAPI:
    """FastAPI dependencies that authenticate the WorkOS session cookie."""

    def __init__(
        self,
        client: WorkOSClient,
        cookie_password: Password | None = None,
        cookie: CookieSettings = WORKOS_SESSION_COOKIE,
    ):
        self.client = client
        self.cookie_password = _cookie_password(cookie_password)
        self.cookie = cookie

    async def authenticate(self, request: Request) -> AuthenticateWithSessionCookieResponse:
        """Authenticate the session cookie of a request."""
        return await self.client.user_management.authenticate_with_session_cookie(
            request.cookies.get(self.cookie.name), self.cookie_password
        )

    def set_session_cookie(self, response: Response, sealed_session: str) -> None:
        """Store a sealed session, e.g. after ``authenticate_with_code``."""
        _set_cookie(response, self.cookie, sealed_session)

    def clear_session_cookie(self, response: Response) -> None:
        """Remove the session cookie, e.g. on logout."""
        _delete_cookie(response, self.cookie)

    def get_session(self) -> Callable:
        """Get the authenticated session as a FastAPI dependency."""
        async def _get_session(request: Request) -> AuthenticateWithSessionCookieResponse:
            result = await self.authenticate(request)
            if not result.authenticated:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail=f"Authentication failed: {result.reason}",
                )
            return result
        return _get_session

    def require_session(self) -> Callable:
        """Require an authenticated session dependency."""
        return self.get_session()

    def require_role(self, required_role: str) -> Callable:
        """Require a specific organization role dependency."""
        async def _require_role(
            session: Any = Depends(self.get_session()),
        ) -> AuthenticateWithSessionCookieResponse:
            if session.role != required_role:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Role '{required_role}' required",
                )
            return session
        return _require_role

    def require_permission(self, permission: str) -> Callable:
        """Require a specific permission dependency."""
        async def _require_permission(
            session: Any = Depends(self.get_session()),
        ) -> AuthenticateWithSessionCookieResponse:
            if permission not in (session.permissions or []):
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Permission '{permission}' required",
                )
            return session
        return _require_permission


# Convenience functions
def require_session(workos: WorkOSFastAPI) -> Callable:
    """Convenience function for requiring an authenticated session."""
    return workos.require_session()


def require_role(workos: WorkOSFastAPI, role: str) -> Callable:
    """Convenience function for requiring a specific role."""
    return workos.require_role(role)


def require_permission(workos: WorkOSFastAPI, permission: str) -> Callable:
    """Convenience function for requiring a specific permission."""
    return workos.require_permission(permission)
