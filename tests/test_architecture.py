"""Basic tests for WorkOS client architecture.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

import logging

import pytest
from workos_sdk.client import WorkOSClient
from workos_sdk.exceptions import NoApiKeyProvidedError

# Create a module-level logger
logger = logging.getLogger(__name__)

SERVICES = (
    "organizations",
    "organization_domains",
    "sso",
    "directory_sync",
    "mfa",
    "fga",
    "audit_logs",
    "events",
    "webhooks",
    "passwordless",
    "portal",
    "widgets",
    "user_management",
)


def test_client_initialization() -> None:
    """Test client initialization with proper service composition.

    Raises:
        AssertionError: If any required service or base client is missing.
        TypeError: If client internal structure is invalid.

    """
    client = WorkOSClient("sk_test_123")

    # Verify services are initialized
    for service in SERVICES:
        if not hasattr(client, service):
            msg = f"Client missing '{service}' service"
            raise AssertionError(msg)

    # Verify base client is created
    if not hasattr(client, "_client"):
        msg = "Client missing '_client' attribute"
        raise TypeError(msg)


async def test_client_context_manager() -> None:
    """Test client works as async context manager.

    Raises:
        AssertionError: If client missing required services.

    """
    async with WorkOSClient("sk_test_123") as client:
        if not hasattr(client, "organizations"):
            msg = "Client missing 'organizations' service in context manager"
            raise AssertionError(msg)


def test_services_share_one_http_client() -> None:
    """Every HTTP-backed service talks through the client's single BaseClient."""
    client = WorkOSClient("sk_test_123")

    for service in SERVICES:
        if service == "webhooks":
            continue
        if getattr(client, service)._client is not client._client:
            msg = f"Service '{service}' does not share the base client"
            raise AssertionError(msg)


def test_missing_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Construction without any API key fails before a request is made."""
    monkeypatch.delenv("WORKOS_API_KEY", raising=False)

    with pytest.raises(NoApiKeyProvidedError):
        WorkOSClient()


def test_api_key_and_client_id_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """API key and client ID fall back to the environment."""
    monkeypatch.setenv("WORKOS_API_KEY", "sk_test_env")
    monkeypatch.setenv("WORKOS_CLIENT_ID", "client_env")

    client = WorkOSClient()

    assert client.api_key == "sk_test_env"
    assert client.client_id == "client_env"
    assert client.user_management.client_id == "client_env"
    logger.info("Environment configuration picked up")


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({}, "https://api.workos.com"),
        ({"api_hostname": "localhost", "https": False, "port": 7000}, "http://localhost:7000"),
    ],
)
def test_base_url(kwargs: dict, expected: str) -> None:
    """Base URL is built from hostname, scheme and port."""
    client = WorkOSClient("sk_test_123", **kwargs)

    assert client.base_url == expected
