"""Fine-grained authorization service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import json
from typing import Any

from ._base import BaseClient, RequestConfig
from ._pagination import AutoPaginatable, fetch_list
from ._serializers import deserialize, deserializer_for, serialize
from .models.common import Order
from .models.fga_models import (
    BatchWriteResourcesOptions,
    CheckOp,
    CheckOptions,
    CheckResult,
    CheckWarrant,
    ListResourcesOptions,
    ListWarrantsOptions,
    QueryOptions,
    QueryResult,
    Resource,
    Warrant,
    WarrantOp,
    WarrantToken,
    WriteWarrantOptions,
    serialize_check_options,
    serialize_write_warrant_options,
)

RESOURCES_PATH = "/fga/v1/resources"
WARRANTS_PATH = "/fga/v1/warrants"


class FGAService:
    """Service for fine-grained authorization operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize FGA service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def check(
        self,
        checks: list[CheckWarrant],
        *,
        op: CheckOp | None = None,
        debug: bool | None = None,
        warrant_token: str | None = None,
    ) -> CheckResult:
        """Check whether subjects hold relations on resources.

        Args:
            checks: Relations to check
            op: How multiple checks combine, ``all_of`` or ``any_of``
            debug: Ask the API for debug information
            warrant_token: Consistency token from a previous write

        Returns:
            The combined check result.

        """
        options = CheckOptions(checks=checks, op=op, debug=debug)
        config = RequestConfig(
            json_data=serialize_check_options(options), warrant_token=warrant_token
        )
        data = await self._client.request("POST", "/fga/v1/check", config=config)
        return deserialize(CheckResult, data)

    async def check_batch(
        self,
        checks: list[CheckWarrant],
        *,
        debug: bool | None = None,
        warrant_token: str | None = None,
    ) -> list[CheckResult]:
        """Run several independent checks in one request.

        Returns:
            One result per check, in order.

        """
        options = CheckOptions(checks=checks, op="batch", debug=debug)
        config = RequestConfig(
            json_data=serialize_check_options(options), warrant_token=warrant_token
        )
        data = await self._client.request("POST", "/fga/v1/check", config=config)
        return [deserialize(CheckResult, item) for item in data or []]

    async def create_resource(
        self,
        resource_type: str,
        resource_id: str | None = None,
        *,
        meta: dict[str, Any] | None = None,
    ) -> Resource:
        """Create a resource. The API assigns an ID when none is given."""
        payload: dict[str, Any] = {"resource_type": resource_type}
        if resource_id:
            payload["resource_id"] = resource_id
        if meta is not None:
            payload["meta"] = meta
        data = await self._client.request(
            "POST", RESOURCES_PATH, config=RequestConfig(json_data=payload)
        )
        return deserialize(Resource, data)

    async def get_resource(self, resource_type: str, resource_id: str) -> Resource:
        """Get a resource by type and ID."""
        data = await self._client.request(
            "GET", f"{RESOURCES_PATH}/{resource_type}/{resource_id}"
        )
        return deserialize(Resource, data)

    async def update_resource(
        self,
        resource_type: str,
        resource_id: str,
        *,
        meta: dict[str, Any] | None = None,
    ) -> Resource:
        """Replace the metadata of a resource."""
        config = RequestConfig(json_data={"meta": meta})
        data = await self._client.request(
            "PUT", f"{RESOURCES_PATH}/{resource_type}/{resource_id}", config=config
        )
        return deserialize(Resource, data)

    async def delete_resource(self, resource_type: str, resource_id: str) -> None:
        """Delete a resource."""
        await self._client.request(
            "DELETE", f"{RESOURCES_PATH}/{resource_type}/{resource_id}"
        )

    async def list_resources(
        self,
        *,
        resource_type: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
    ) -> AutoPaginatable[Resource]:
        """Get a paginated list of resources."""
        options = ListResourcesOptions(
            resource_type=resource_type,
            search=search,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client, RESOURCES_PATH, deserializer_for(Resource), options
        )

    async def batch_write_resources(
        self,
        op: WarrantOp,
        resources: list[Resource],
    ) -> list[Resource]:
        """Create or delete many resources at once.

        Returns:
            The resources the API reports as written.

        """
        options = BatchWriteResourcesOptions(op=op, resources=resources)
        data = await self._client.request(
            "POST",
            f"{RESOURCES_PATH}/batch",
            config=RequestConfig(json_data=serialize(options)),
        )
        return [deserialize(Resource, item) for item in (data or {}).get("data", [])]

    async def write_warrant(self, warrant: WriteWarrantOptions) -> WarrantToken:
        """Create or delete a single warrant.

        Returns:
            A token to pass to later reads for consistency.

        """
        config = RequestConfig(json_data=serialize_write_warrant_options(warrant))
        data = await self._client.request("POST", WARRANTS_PATH, config=config)
        return deserialize(WarrantToken, data)

    async def batch_write_warrants(
        self, warrants: list[WriteWarrantOptions]
    ) -> WarrantToken:
        """Create or delete several warrants in one request."""
        if not warrants:
            raise ValueError("'warrants' must not be empty")
        config = RequestConfig(
            json_data=[serialize_write_warrant_options(w) for w in warrants]
        )
        data = await self._client.request("POST", WARRANTS_PATH, config=config)
        return deserialize(WarrantToken, data)

    async def list_warrants(
        self,
        *,
        resource_type: str | None = None,
        resource_id: str | None = None,
        relation: str | None = None,
        subject_type: str | None = None,
        subject_id: str | None = None,
        subject_relation: str | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
        warrant_token: str | None = None,
    ) -> AutoPaginatable[Warrant]:
        """Get a paginated list of warrants matching the given filters."""
        options = ListWarrantsOptions(
            resource_type=resource_type,
            resource_id=resource_id,
            relation=relation,
            subject_type=subject_type,
            subject_id=subject_id,
            subject_relation=subject_relation,
            limit=limit,
            before=before,
            after=after,
            order=order,
        )
        return await fetch_list(
            self._client,
            WARRANTS_PATH,
            deserializer_for(Warrant),
            options,
            warrant_token=warrant_token,
        )

    async def query(
        self,
        q: str,
        *,
        context: dict[str, Any] | None = None,
        limit: int | None = None,
        before: str | None = None,
        after: str | None = None,
        order: Order | None = None,
        warrant_token: str | None = None,
    ) -> AutoPaginatable[QueryResult]:
        """Run an FGA query such as ``select member of type user for team:1``.

        Args:
            q: Query text
            context: Policy context, sent JSON-encoded
            limit: Maximum number of results per page
            before: Cursor for the previous page
            after: Cursor for the next page
            order: Sort order
            warrant_token: Consistency token from a previous write

        Returns:
            The first page of results, able to fetch the rest.

        """
        options = QueryOptions(
            q=q, context=context, limit=limit, before=before, after=after, order=order
        )
        params = serialize(options)
        if options.context is not None:
            params["context"] = json.dumps(options.context)
        return await fetch_list(
            self._client,
            "/fga/v1/query",
            deserializer_for(QueryResult),
            params,
            warrant_token=warrant_token,
        )
