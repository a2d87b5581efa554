"""Example usage of the WorkOS Python SDK."""
# Copyright (c) 2025 WorkOS SDK. All rights reserved.

import asyncio
import logging
from datetime import datetime, timezone

from workos_sdk import WorkOSClient
from workos_sdk.exceptions import NotFoundError, UnauthorizedError, WorkOSError
from workos_sdk.models import (
    AuditLogActor,
    AuditLogContext,
    AuditLogEvent,
    AuditLogTarget,
    CheckWarrant,
    ResourceRef,
    Subject,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main() -> None:
    """Execute main example function."""
    # Reads WORKOS_API_KEY and WORKOS_CLIENT_ID from the environment
    client = WorkOSClient()

    try:
        # Example 1: Organizations
        logger.info("=== Organizations Example ===")

        organization = await client.organizations.create_organization(
            "Foo Corp",
            domain_data=[{"domain": "foo-corp.com", "state": "pending"}],
            idempotency_key="example-foo-corp",
        )
        logger.info("Created organization %s (%s)", organization.name, organization.id)

        # Walk every page of organizations
        organizations = await client.organizations.list_organizations(limit=10)
        async for org in organizations:
            logger.info("Organization: %s", org.name)

        # Example 2: SSO authorization URL
        logger.info("=== SSO Example ===")

        url = client.sso.get_authorization_url(
            "https://example.com/callback",
            organization=organization.id,
            state="random-state-123",
        )
        logger.info("SSO Authorization URL: %s", url)

        # Example 3: AuthKit authorization URL
        logger.info("=== AuthKit Example ===")

        url = client.user_management.get_authorization_url(
            "https://example.com/callback", provider="authkit", screen_hint="sign-up"
        )
        logger.info("AuthKit Authorization URL: %s", url)

        # Example 4: Fine-grained authorization
        logger.info("=== FGA Example ===")

        result = await client.fga.check(
            [
                CheckWarrant(
                    resource=ResourceRef(resource_type="report", resource_id="q1"),
                    relation="viewer",
                    subject=Subject(resource_type="user", resource_id="user_01H"),
                )
            ]
        )
        logger.info("Authorized: %s", result.is_authorized())

        # Example 5: Audit logs
        logger.info("=== Audit Logs Example ===")

        await client.audit_logs.create_event(
            organization.id,
            AuditLogEvent(
                action="user.signed_in",
                occurred_at=datetime.now(timezone.utc),
                actor=AuditLogActor(id="user_01H", type="user"),
                targets=[AuditLogTarget(id="team_01H", type="team")],
                context=AuditLogContext(location="127.0.0.1"),
            ),
        )
        logger.info("Audit log event recorded")

        # Example 6: Admin Portal
        logger.info("=== Admin Portal Example ===")

        link = await client.portal.generate_link("sso", organization.id)
        logger.info("Portal link: %s", link)

        # Example 7: Cleanup
        await client.organizations.delete_organization(organization.id)
        logger.info("Deleted organization %s", organization.id)

    except UnauthorizedError:
        logger.exception("The API key was rejected")
    except NotFoundError as e:
        logger.exception("Not found: %s (request %s)", e.path, e.request_id)
    except WorkOSError as e:
        logger.exception("API error: %s (Status: %s)", e.message, e.status_code)
    finally:
        # Always close the client
        await client.close()


async def context_manager_example() -> None:
    """Use context manager example (recommended approach)."""
    logger.info("=== Context Manager Example ===")

    try:
        async with WorkOSClient() as client:
            directories = await client.directory_sync.list_directories(limit=5)
            for directory in directories.data:
                logger.info("Directory: %s (%s)", directory.name, directory.state)

            # Client is automatically closed when exiting the context

    except WorkOSError:
        logger.exception("API error occurred")


async def concurrent_requests_example() -> None:
    """Demonstrate making concurrent requests."""
    logger.info("=== Concurrent Requests Example ===")

    async with WorkOSClient() as client:
        tasks = [
            client.organizations.list_organizations(limit=1),
            client.sso.list_connections(limit=1),
            client.directory_sync.list_directories(limit=1),
        ]

        results = await asyncio.gather(*tasks, return_exceptions=True)

        for i, result in enumerate(results):
            if isinstance(result, Exception):
                logger.error("Task %s failed: %s", i, result)
            else:
                logger.info("Task %s returned %s items", i, len(result.data))


if __name__ == "__main__":
    # Run the main example
    asyncio.run(main())

    # Run context manager example
    asyncio.run(context_manager_example())

    # Run concurrent requests example
    asyncio.run(concurrent_requests_example())
