"""Conftest for live API integration tests."""

import os

import pytest
from workos_sdk import WorkOSClient


@pytest.fixture
async def integration_client():
    """Create a client for integration tests against the live API."""
    api_key = os.environ.get("WORKOS_API_KEY")
    if not api_key:
        pytest.skip("WORKOS_API_KEY is not set")

    async with WorkOSClient(
        api_key,
        client_id=os.environ.get("WORKOS_CLIENT_ID"),
        timeout=10.0,
    ) as client:
        yield client
