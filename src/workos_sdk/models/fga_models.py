"""Fine-grained authorization (FGA) models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Literal

from pydantic import Field

from .common import PaginationOptions, WorkOSModel

CheckOp = Literal["all_of", "any_of", "batch"]
WarrantOp = Literal["create", "delete"]

CHECK_RESULT_AUTHORIZED = "authorized"
CHECK_RESULT_NOT_AUTHORIZED = "not_authorized"


class ResourceRef(WorkOSModel):
    """Reference to a resource by type and id."""

    resource_type: str
    resource_id: str


class Subject(WorkOSModel):
    """Subject of a warrant, optionally narrowed to a relation."""

    resource_type: str
    resource_id: str
    relation: str | None = None


class Resource(WorkOSModel):
    """FGA resource model."""

    resource_type: str
    resource_id: str
    meta: dict[str, Any] | None = None


class Warrant(WorkOSModel):
    """FGA warrant model."""

    resource_type: str
    resource_id: str
    relation: str
    subject: Subject
    policy: str | None = None


class WarrantToken(WorkOSModel):
    """Consistency token returned after writing warrants."""

    warrant_token: str


class CheckWarrant(WorkOSModel):
    """One relation to check."""

    resource: ResourceRef
    relation: str
    subject: Subject
    context: dict[str, Any] | None = None


class CheckOptions(WorkOSModel):
    """Check request model."""

    checks: list[CheckWarrant]
    op: CheckOp | None = None
    debug: bool | None = None


class CheckResult(WorkOSModel):
    """Result of an FGA check."""

    result: str
    is_implicit: bool = False
    warrant_token: str | None = None
    debug_info: dict[str, Any] | None = None

    def is_authorized(self) -> bool:
        """Return whether the check passed."""
        return self.result == CHECK_RESULT_AUTHORIZED


class WriteWarrantOptions(WorkOSModel):
    """Write warrant request model."""

    op: WarrantOp | None = None
    resource: ResourceRef
    relation: str
    subject: Subject
    policy: str | None = None


class ListResourcesOptions(PaginationOptions):
    """List resources options model."""

    resource_type: str | None = None
    search: str | None = None


class ListWarrantsOptions(PaginationOptions):
    """List warrants options model."""

    resource_type: str | None = None
    resource_id: str | None = None
    relation: str | None = None
    subject_type: str | None = None
    subject_id: str | None = None
    subject_relation: str | None = None


class QueryOptions(PaginationOptions):
    """Query request model."""

    q: str
    context: dict[str, Any] | None = None


class QueryResult(WorkOSModel):
    """One result row of an FGA query."""

    resource_type: str
    resource_id: str
    relation: str
    warrant: Warrant
    is_implicit: bool = False
    meta: dict[str, Any] | None = None


class BatchWriteResourcesOptions(WorkOSModel):
    """Batch create or delete of resources."""

    op: WarrantOp
    resources: list[Resource] = Field(default_factory=list)


def serialize_check_warrant(check: CheckWarrant) -> dict[str, Any]:
    """Flatten a check's resource reference for the wire."""
    payload: dict[str, Any] = {
        "resource_type": check.resource.resource_type,
        "resource_id": check.resource.resource_id,
        "relation": check.relation,
        "subject": check.subject.model_dump(exclude_none=True),
    }
    if check.context is not None:
        payload["context"] = check.context
    return payload


def deserialize_check_warrant(data: dict[str, Any]) -> CheckWarrant:
    """Read a wire check back into a CheckWarrant."""
    return CheckWarrant(
        resource=ResourceRef(
            resource_type=data["resource_type"], resource_id=data["resource_id"]
        ),
        relation=data["relation"],
        subject=Subject.model_validate(data["subject"]),
        context=data.get("context"),
    )


def serialize_check_options(options: CheckOptions) -> dict[str, Any]:
    """Render check options for the wire."""
    payload: dict[str, Any] = {
        "checks": [serialize_check_warrant(check) for check in options.checks],
    }
    if options.op is not None:
        payload["op"] = options.op
    if options.debug is not None:
        payload["debug"] = options.debug
    return payload


def serialize_write_warrant_options(options: WriteWarrantOptions) -> dict[str, Any]:
    """Flatten a warrant write for the wire."""
    payload: dict[str, Any] = {
        "resource_type": options.resource.resource_type,
        "resource_id": options.resource.resource_id,
        "relation": options.relation,
        "subject": options.subject.model_dump(exclude_none=True),
    }
    if options.op is not None:
        payload["op"] = options.op
    if options.policy is not None:
        payload["policy"] = options.policy
    return payload


def deserialize_write_warrant_options(data: dict[str, Any]) -> WriteWarrantOptions:
    """Read a wire warrant write back into WriteWarrantOptions."""
    return WriteWarrantOptions(
        op=data.get("op"),
        resource=ResourceRef(
            resource_type=data["resource_type"], resource_id=data["resource_id"]
        ),
        relation=data["relation"],
        subject=Subject.model_validate(data["subject"]),
        policy=data.get("policy"),
    )
