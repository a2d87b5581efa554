"""Shared models for WorkOS resources.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

Order = Literal["asc", "desc", "normal"]


class WorkOSModel(BaseModel):
    """Base model for every WorkOS request and response shape."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ListMetadata(WorkOSModel):
    """Cursor metadata returned alongside a list."""

    before: str | None = None
    after: str | None = None


class ListResponse(WorkOSModel, Generic[T]):
    """A single page of a list endpoint."""

    object: Literal["list"] = "list"
    data: list[T] = Field(default_factory=list)
    list_metadata: ListMetadata = Field(default_factory=ListMetadata)


class PaginationOptions(WorkOSModel):
    """Cursor pagination options accepted by every list endpoint."""

    limit: int | None = None
    before: str | None = None
    after: str | None = None
    order: Order | None = None


class DeletedResponse(WorkOSModel):
    """Generic acknowledgement body."""

    success: bool = True
    details: dict[str, Any] | None = None
