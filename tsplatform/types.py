"""Type definitions for the platform SDK.

Pydantic models mirroring the platform's JSON records. Attributes are
snake_case; the wire format is camelCase via aliases.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Base for records fetched from the API (read-only once parsed)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MemberRole(str, Enum):
    """Role of a user on a resource."""

    MEMBER = "member"
    OWNER = "owner"


class RetentionRule(_Record):
    """When data in a bucket expires."""

    type: str = "expire"
    every_seconds: int = Field(alias="everySeconds", ge=0)


class Organization(_Record):
    """Organization information."""

    id: str = Field(min_length=1)
    name: str
    description: str | None = None
    links: dict[str, str] = Field(default_factory=dict)


class User(_Record):
    """User information."""

    id: str = Field(min_length=1)
    name: str
    status: str | None = None
    links: dict[str, str] = Field(default_factory=dict)


class Bucket(_Record):
    """Bucket information."""

    id: str = Field(min_length=1)
    name: str
    org_id: str = Field(alias="orgID")
    organization_name: str | None = Field(default=None, alias="organization")
    description: str | None = None
    rp: str | None = None
    retention_rules: list[RetentionRule] = Field(default_factory=list, alias="retentionRules")
    links: dict[str, str] = Field(default_factory=dict)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class Label(_Record):
    """Label information.

    Properties are free-form string pairs, e.g. ``{"color": "green"}``.
    """

    id: str = Field(min_length=1)
    name: str
    org_id: str | None = Field(default=None, alias="orgID")
    properties: dict[str, str] = Field(default_factory=dict)


class ResourceMember(_Record):
    """A user granted a role on a resource."""

    user_id: str = Field(alias="userID", min_length=1)
    user_name: str | None = Field(default=None, alias="userName")
    role: MemberRole


class OperationLogEntry(_Record):
    """One audit-log entry (e.g. "Bucket Created")."""

    description: str
    time: datetime | None = None
    user_id: str | None = Field(default=None, alias="userID")
    links: dict[str, str] = Field(default_factory=dict)


# Internal request models (not exported)


class _CreateBucketRequest(BaseModel):
    """Internal: Create bucket request body."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    org_id: str = Field(alias="orgID")
    description: str | None = None
    retention_rules: list[RetentionRule] = Field(default_factory=list, alias="retentionRules")


class _UpdateBucketRequest(BaseModel):
    """Internal: Update bucket request body."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str | None = None
    retention_rules: list[RetentionRule] = Field(default_factory=list, alias="retentionRules")


class _CreateLabelRequest(BaseModel):
    """Internal: Create label request body."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    org_id: str | None = Field(default=None, alias="orgID")
    properties: dict[str, str] = Field(default_factory=dict)
