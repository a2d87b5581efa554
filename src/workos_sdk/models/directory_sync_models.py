"""Directory Sync models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Literal

from pydantic import Field, model_validator

from .common import PaginationOptions, WorkOSModel

DirectoryState = Literal[
    "active", "deleting", "inactive", "invalid_credentials", "validating"
]


class Directory(WorkOSModel):
    """Directory model."""

    object: Literal["directory"] = "directory"
    id: str
    domain: str | None = None
    external_key: str | None = None
    name: str
    organization_id: str | None = None
    state: DirectoryState
    type: str
    created_at: str
    updated_at: str


class DirectoryGroup(WorkOSModel):
    """Directory group model."""

    object: Literal["directory_group"] = "directory_group"
    id: str
    idp_id: str
    directory_id: str
    organization_id: str | None = None
    name: str
    raw_attributes: dict[str, Any] = Field(default_factory=dict)
    created_at: str
    updated_at: str


class DirectoryUserEmail(WorkOSModel):
    """Email address of a directory user."""

    primary: bool | None = None
    type: str | None = None
    value: str | None = None


class DirectoryUser(WorkOSModel):
    """Directory user model, including the groups the user belongs to."""

    object: Literal["directory_user"] = "directory_user"
    id: str
    idp_id: str
    directory_id: str
    organization_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    emails: list[DirectoryUserEmail] = Field(default_factory=list)
    username: str | None = None
    job_title: str | None = None
    state: Literal["active", "inactive", "suspended"]
    role: dict[str, str] | None = None
    raw_attributes: dict[str, Any] = Field(default_factory=dict)
    custom_attributes: dict[str, Any] = Field(default_factory=dict)
    groups: list[DirectoryGroup] = Field(default_factory=list)
    created_at: str
    updated_at: str

    def primary_email(self) -> str | None:
        """Return the user's primary email address, if any."""
        for email in self.emails:
            if email.primary:
                return email.value
        return None


class ListDirectoriesOptions(PaginationOptions):
    """List directories options model."""

    domain: str | None = None
    organization_id: str | None = None
    search: str | None = None


class ListDirectoryGroupsOptions(PaginationOptions):
    """List directory groups options model. Needs a directory or a user."""

    directory: str | None = None
    user: str | None = None

    @model_validator(mode="after")
    def _require_filter(self) -> "ListDirectoryGroupsOptions":
        if not (self.directory or self.user):
            raise ValueError("Either 'directory' or 'user' must be specified")
        return self


class ListDirectoryUsersOptions(PaginationOptions):
    """List directory users options model. Needs a directory or a group."""

    directory: str | None = None
    group: str | None = None

    @model_validator(mode="after")
    def _require_filter(self) -> "ListDirectoryUsersOptions":
        if not (self.directory or self.group):
            raise ValueError("Either 'directory' or 'group' must be specified")
        return self
