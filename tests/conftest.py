"""Test configuration and common utilities.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING, Any

import httpx
import jwt
import pytest
import respx
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm
from workos_sdk import WorkOSClient, seal_data

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

TIMESTAMP = "2024-01-01T00:00:00.000Z"
JWT_KEY_ID = "sso_oidc_key_pair_test"


@pytest.fixture
def base_url() -> str:
    """Return base URL for the mocked API.

    Returns:
        str: The base URL for testing.

    """
    return "https://api.workos.test"


@pytest.fixture
def api_key() -> str:
    """Return test API key.

    Returns:
        str: The API key for testing.

    """
    return "sk_test_Sz3IQjepeSWaI4cMS4ms4sMuU"


@pytest.fixture
def client_id() -> str:
    """Return test client ID."""
    return "client_01HXYZ"


@pytest.fixture
def cookie_password() -> str:
    """Return a cookie password of at least 32 characters."""
    return "alongcookiesecretmadefortestingsessions"


@pytest.fixture
async def client(
    api_key: str,
    client_id: str,
) -> AsyncGenerator[WorkOSClient, None]:
    """Create test client.

    Yields:
        WorkOSClient: Configured test client.

    """
    async with WorkOSClient(
        api_key,
        client_id=client_id,
        api_hostname="api.workos.test",
        timeout=5.0,
    ) as client:
        yield client


@pytest.fixture
def mock_responses(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock HTTP responses.

    Yields:
        The mock router for HTTP requests against the test API.

    """
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """RSA key that signs test access tokens."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def jwks(rsa_private_key: rsa.RSAPrivateKey) -> dict[str, Any]:
    """JWKS document holding the public half of the test key."""
    jwk = json.loads(RSAAlgorithm.to_jwk(rsa_private_key.public_key()))
    jwk.update({"kid": JWT_KEY_ID, "alg": "RS256", "use": "sig"})
    return {"keys": [jwk]}


@pytest.fixture
def make_access_token(rsa_private_key: rsa.RSAPrivateKey):
    """Return a factory for signed access tokens."""

    def _make(**claims: Any) -> str:
        now = int(time.time())
        payload = {
            "sid": "session_01H",
            "org_id": "org_01H",
            "role": "member",
            "permissions": ["posts:read"],
            "iat": now,
            "exp": now + 300,
            **claims,
        }
        return jwt.encode(
            payload, rsa_private_key, algorithm="RS256", headers={"kid": JWT_KEY_ID}
        )

    return _make


@pytest.fixture
def sample_user_data() -> dict[str, Any]:
    """Sample user data for testing.

    Returns:
        dict[str, Any]: Sample user data.

    """
    return {
        "object": "user",
        "id": "user_01H",
        "email": "marcelina@example.com",
        "first_name": "Marcelina",
        "last_name": "Davis",
        "email_verified": True,
        "profile_picture_url": None,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


@pytest.fixture
def sample_organization_data() -> dict[str, Any]:
    """Sample organization data for testing."""
    return {
        "object": "organization",
        "id": "org_01H",
        "name": "Foo Corp",
        "allow_profiles_outside_organization": False,
        "domains": [
            {
                "object": "organization_domain",
                "id": "org_domain_01H",
                "domain": "foo-corp.com",
                "organization_id": "org_01H",
                "state": "verified",
                "verification_strategy": "dns",
            }
        ],
        "external_id": "ext_1",
        "metadata": {"tier": "gold"},
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


@pytest.fixture
def list_body():
    """Return a helper that wraps items into a list response body."""

    def _wrap(data: list[dict[str, Any]], after: str | None = None) -> dict[str, Any]:
        return {
            "object": "list",
            "data": data,
            "list_metadata": {"before": None, "after": after},
        }

    return _wrap


@pytest.fixture
def jwks_route(mock_responses: respx.MockRouter, jwks: dict[str, Any], client_id: str):
    """Serve the signing keys of the test client."""
    return mock_responses.get(f"/sso/jwks/{client_id}").mock(
        return_value=httpx.Response(200, json=jwks)
    )


@pytest.fixture
def sealed_cookie(make_access_token, sample_user_data, cookie_password: str):
    """Return a factory for sealed session cookies."""

    def _seal(**overrides: Any) -> str:
        data = {
            "access_token": make_access_token(),
            "refresh_token": "refresh_1",
            "user": sample_user_data,
            "organization_id": "org_01H",
            **overrides,
        }
        return seal_data(data, cookie_password)

    return _seal
