"""Directory Sync service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient
from ._pagination import AutoPaginatable, fetch_list
from ._serializers import deserialize, deserializer_for
from .models.common import Order
from .models.directory_sync_models import (
    Directory,
    DirectoryGroup,
    DirectoryUser,
    ListDirectoriesOptions,
    ListDirectoryGroupsOptions,
    ListDirectoryUsersOptions,
)


class DirectorySyncService:
    """Service for Directory Sync operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize Directory Sync service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def list_directories(
        self,
        *,
        domain: str | None = None,
        organization_id: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Directory]:
        """Get a paginated list of directories."""
        options = ListDirectoriesOptions(
            domain=domain,
            organization_id=organization_id,
            search=search,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client, "/directories", deserializer_for(Directory), options
        )

    async def get_directory(self, directory_id: str) -> Directory:
        """Get a directory by ID."""
        data = await self._client.request("GET", f"/directories/{directory_id}")
        return deserialize(Directory, data)

    async def delete_directory(self, directory_id: str) -> None:
        """Delete a directory."""
        await self._client.request("DELETE", f"/directories/{directory_id}")

    async def list_groups(
        self,
        *,
        directory: str | None = None,
        user: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[DirectoryGroup]:
        """Get a paginated list of groups in a directory or of a user.

        Args:
            directory: Directory ID
            user: Directory user ID
            limit: Maximum number of groups per page
            before: Cursor for the previous page
            after: Cursor for the next page
            order: Sort order by creation time

        Returns:
            The first page of groups, able to fetch the rest.

        """
        options = ListDirectoryGroupsOptions(
            directory=directory,
            user=user,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client,
            "/directory_groups",
            deserializer_for(DirectoryGroup),
            options,
        )

    async def get_group(self, group_id: str) -> DirectoryGroup:
        """Get a directory group by ID."""
        data = await self._client.request("GET", f"/directory_groups/{group_id}")
        return deserialize(DirectoryGroup, data)

    async def list_users(
        self,
        *,
        directory: str | None = None,
        group: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[DirectoryUser]:
        """Get a paginated list of users in a directory or a group.

        Args:
            directory: Directory ID
            group: Directory group ID
            limit: Maximum number of users per page
            before: Cursor for the previous page
            after: Cursor for the next page
            order: Sort order by creation time

        Returns:
            The first page of users, able to fetch the rest.

        """
        options = ListDirectoryUsersOptions(
            directory=directory,
            group=group,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client,
            "/directory_users",
            deserializer_for(DirectoryUser),
            options,
        )

    async def get_user(self, user_id: str) -> DirectoryUser:
        """Get a directory user by ID, including their groups."""
        data = await self._client.request("GET", f"/directory_users/{user_id}")
        return deserialize(DirectoryUser, data)
