"""Flask integration for WorkOS sealed sessions."""

from __future__ import annotations

import copy
import functools
import os
from typing import Any, Callable, Optional

try:
    from flask import Flask, Response, g, jsonify, request
    FLASK_AVAILABLE = True
except ImportError:
    FLASK_AVAILABLE = False

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


class WorkOSFlask:
    """Flask integration for WorkOS sessions.

    Registers hooks that expose a sealed cookie session as
    ``g.workos_session`` and write it back when a view changed it.
    """

    def __init__(
        self,
        client: WorkOSClient,
        app: Optional["Flask"] = None,
        *,
        cookie_password: Password | None = None,
        session_cookie: CookieSettings = APP_SESSION_COOKIE,
        auth_cookie: CookieSettings = WORKOS_SESSION_COOKIE,
    ):
        if not FLASK_AVAILABLE:
            raise ImportError("Flask is not installed. Install it with: pip install flask")

        password = cookie_password or os.environ.get("WORKOS_COOKIE_PASSWORD")
        if not password:
            raise ValueError("Cookie password is required")

        self.client = client
        self.cookie_password = password
        self.session_cookie = session_cookie
        self.auth_cookie = auth_cookie
        if app is not None:
            self.init_app(app)

    def init_app(self, app: "Flask") -> None:
        """Register the session hooks on an application."""
        app.before_request(self._load_session)
        app.after_request(self._save_session)

    def _load_session(self) -> None:
        session = load_session(
            request.cookies.get(self.session_cookie.name), self.cookie_password
        )
        g.workos_session = session
        g._workos_session_snapshot = copy.deepcopy(session)

    def _save_session(self, response: "Response") -> "Response":
        session = g.get("workos_session")
        if session is None or session == g.get("_workos_session_snapshot"):
            return response

        cookie = self.session_cookie
        if session:
            self._set_cookie(response, cookie, dump_session(session, self.cookie_password))
        else:
            response.delete_cookie(
                cookie.name,
                path=cookie.path,
                secure=cookie.secure,
                httponly=cookie.httponly,
                samesite=cookie.samesite,
            )
        return response

    @staticmethod
    def _set_cookie(response: "Response", cookie: CookieSettings, value: str) -> None:
        response.set_cookie(
            cookie.name,
            value,
            max_age=cookie.max_age,
            path=cookie.path,
            secure=cookie.secure,
            httponly=cookie.httponly,
            samesite=cookie.samesite,
        )

    def set_session_cookie(self, response: "Response", sealed_session: str) -> None:
        """Store a sealed WorkOS session, e.g. after ``authenticate_with_code``."""
        self._set_cookie(response, self.auth_cookie, sealed_session)

    async def authenticate(self) -> AuthenticateWithSessionCookieResponse:
        """Authenticate the WorkOS session cookie of the current request."""
        return await self.client.user_management.authenticate_with_session_cookie(
            request.cookies.get(self.auth_cookie.name), self.cookie_password
        )

    def _handle_auth_error(self, message: str, status_code: int = 401):
        """Handle authentication errors."""
        return jsonify({"error": message}), status_code


def get_current_session() -> Optional[AuthenticateWithSessionCookieResponse]:
    """Get the authenticated WorkOS session from Flask's g object."""
    return getattr(g, "workos_auth", None)


def session_required(workos: WorkOSFlask):
    """Decorator to require an authenticated WorkOS session."""
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        async def decorated_function(*args: Any, **kwargs: Any) -> Any:
            result = await workos.authenticate()
            if not result.authenticated:
                return workos._handle_auth_error(f"Authentication failed: {result.reason}")

            g.workos_auth = result
            return await f(*args, **kwargs)

        return decorated_function
    return decorator


def role_required(workos: WorkOSFlask, required_role: str):
    """Decorator to require a specific organization role."""
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        @session_required(workos)
        async def decorated_function(*args: Any, **kwargs: Any) -> Any:
            session = get_current_session()
            if not session or session.role != required_role:
                return workos._handle_auth_error(
                    f"Role '{required_role}' required", 403
                )
            return await f(*args, **kwargs)

        return decorated_function
    return decorator


def permission_required(workos: WorkOSFlask, permission: str):
    """Decorator to require a specific permission."""
    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        @session_required(workos)
        async def decorated_function(*args: Any, **kwargs: Any) -> Any:
            session = get_current_session()
            if not session or permission not in (session.permissions or []):
                return workos._handle_auth_error(
                    f"Permission '{permission}' required", 403
                )
            return await f(*args, **kwargs)

        return decorated_function
    return decorator
