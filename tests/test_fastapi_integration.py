"""Tests for the FastAPI integration.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from fastapi import Depends, FastAPI, Request, Response
from fastapi.testclient import TestClient
from workos_sdk import WorkOSClient
from workos_sdk.integrations.fastapi import (
    WorkOSFastAPI,
    WorkOSSessionMiddleware,
    require_permission,
    require_role,
    require_session,
)


@pytest.fixture
def workos_client(api_key: str, client_id: str):
    """WorkOS client used from the app's own event loop."""
    client = WorkOSClient(api_key, client_id=client_id, api_hostname="api.workos.test")
    yield client
    asyncio.run(client.close())


@pytest.fixture
def app(workos_client: WorkOSClient, cookie_password: str) -> FastAPI:
    """Application with the session middleware and protected routes."""
    app = FastAPI()
    app.add_middleware(WorkOSSessionMiddleware, cookie_password=cookie_password)
    workos = WorkOSFastAPI(workos_client, cookie_password)

    @app.get("/session")
    async def read_session(request: Request) -> dict[str, Any]:
        return request.state.session

    @app.post("/session")
    async def write_session(request: Request) -> dict[str, Any]:
        request.state.session["cart"] = ["sku_1"]
        return request.state.session

    @app.post("/session/cart")
    async def add_to_cart(request: Request) -> dict[str, Any]:
        request.state.session["cart"].append("sku_2")
        return request.state.session

    @app.delete("/session")
    async def clear_session(request: Request) -> dict[str, Any]:
        request.state.session.clear()
        return {}

    @app.get("/me")
    async def me(session=Depends(require_session(workos))) -> dict[str, Any]:
        return {"user": session.user.id, "org": session.organization_id}

    @app.get("/members")
    async def members(session=Depends(require_role(workos, "member"))) -> dict[str, Any]:
        return {"role": session.role}

    @app.get("/admin")
    async def admin(session=Depends(require_role(workos, "admin"))) -> dict[str, Any]:
        return {"role": session.role}

    @app.get("/posts")
    async def posts(
        session=Depends(require_permission(workos, "posts:read")),
    ) -> dict[str, Any]:
        return {"permissions": session.permissions}

    @app.post("/logout")
    async def logout(response: Response) -> dict[str, Any]:
        workos.clear_session_cookie(response)
        return {}

    return app


def _cookie(value: str) -> dict[str, str]:
    return {"Cookie": f"wos-session={value}"}


def test_session_middleware_round_trip(app: FastAPI) -> None:
    """Changes to the request session persist in the sealed cookie."""
    with TestClient(app, base_url="https://testserver") as http:
        assert http.get("/session").json() == {}

        written = http.post("/session")
        assert "session=" in written.headers["set-cookie"]

        read = http.get("/session")
        assert read.json() == {"cart": ["sku_1"]}
        assert "set-cookie" not in read.headers

        cleared = http.delete("/session")
        assert "Max-Age=0" in cleared.headers["set-cookie"]
        assert http.get("/session").json() == {}


def test_nested_session_change_is_saved(app: FastAPI) -> None:
    """Mutating a list inside the session re-seals the cookie."""
    with TestClient(app, base_url="https://testserver") as http:
        http.post("/session")

        appended = http.post("/session/cart")
        assert "session=" in appended.headers["set-cookie"]

        assert http.get("/session").json() == {"cart": ["sku_1", "sku_2"]}


def test_unreadable_session_cookie_is_ignored(app: FastAPI) -> None:
    """A cookie sealed with another password reads as an empty session."""
    with TestClient(app) as http:
        response = http.get("/session", headers={"Cookie": "session=garbage"})

    assert response.json() == {}


def test_require_session(app: FastAPI, sealed_cookie, jwks_route) -> None:
    """A valid WorkOS session cookie reaches the route."""
    with TestClient(app) as http:
        response = http.get("/me", headers=_cookie(sealed_cookie()))

    assert response.status_code == 200
    assert response.json() == {"user": "user_01H", "org": "org_01H"}


def test_missing_session_is_unauthorized(app: FastAPI) -> None:
    """Requests without a WorkOS session get a 401 with the reason."""
    with TestClient(app) as http:
        response = http.get("/me")

    assert response.status_code == 401
    assert "no_session_cookie_provided" in response.json()["detail"]


def test_roles_and_permissions(app: FastAPI, sealed_cookie, jwks_route) -> None:
    """Role and permission dependencies check the access token claims."""
    headers = _cookie(sealed_cookie())

    with TestClient(app) as http:
        assert http.get("/members", headers=headers).json() == {"role": "member"}
        assert http.get("/admin", headers=headers).status_code == 403
        assert http.get("/posts", headers=headers).json() == {
            "permissions": ["posts:read"]
        }


def test_logout_clears_cookie(app: FastAPI) -> None:
    """Logging out expires the WorkOS session cookie."""
    with TestClient(app) as http:
        response = http.post("/logout")

    assert "wos-session=" in response.headers["set-cookie"]
    assert "Max-Age=0" in response.headers["set-cookie"]


def test_cookie_password_is_required(
    workos_client: WorkOSClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without a password from arguments or environment setup fails."""
    monkeypatch.delenv("WORKOS_COOKIE_PASSWORD", raising=False)

    with pytest.raises(ValueError, match="Cookie password"):
        WorkOSFastAPI(workos_client)
