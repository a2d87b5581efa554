"""Read-only checks against the live WorkOS API.

They only run with ``WORKOS_API_KEY`` set and never create data.
"""

import pytest
from workos_sdk.exceptions import NotFoundError, UnauthorizedError
from workos_sdk.models import Organization


@pytest.mark.integration
async def test_list_organizations(integration_client):
    """The key can list organizations and walk one page."""
    organizations = await integration_client.organizations.list_organizations(limit=5)

    assert len(organizations.data) <= 5
    assert all(isinstance(org, Organization) for org in organizations.data)
    print(f"✅ Listed {len(organizations.data)} organizations")


@pytest.mark.integration
async def test_unknown_organization_is_not_found(integration_client):
    """Unknown IDs map to NotFoundError with the path."""
    with pytest.raises(NotFoundError) as exc_info:
        await integration_client.organizations.get_organization(
            "org_01AAAAAAAAAAAAAAAAAAAAAAAA"
        )

    assert exc_info.value.path.endswith("org_01AAAAAAAAAAAAAAAAAAAAAAAA")


@pytest.mark.integration
async def test_invalid_key_is_unauthorized(integration_client):
    """A made up key maps to UnauthorizedError."""
    from workos_sdk import WorkOSClient

    async with WorkOSClient("sk_test_invalid") as client:
        with pytest.raises(UnauthorizedError):
            await client.organizations.list_organizations(limit=1)


@pytest.mark.integration
async def test_list_connections(integration_client):
    """Connections can be listed with a limit."""
    connections = await integration_client.sso.list_connections(limit=1)

    assert len(connections.data) <= 1
