"""Time-series platform Python SDK.

An async client for the platform's /api/v2 HTTP API - buckets, retention
rules, labels, resource members/owners and paginated operation logs.
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from tsplatform.buckets import BucketManager
from tsplatform.client import PlatformClient
from tsplatform.errors import (
    ConflictError,
    ForbiddenError,
    InternalServerError,
    InvalidRequestError,
    NotFoundError,
    PlatformError,
    TooManyRequestsError,
    UnauthorizedError,
    UnavailableError,
    UnprocessableEntityError,
)
from tsplatform.labels import LabelManager
from tsplatform.organizations import OrganizationManager
from tsplatform.pagination import FindOptions, Page, iter_pages
from tsplatform.types import (
    Bucket,
    Label,
    MemberRole,
    OperationLogEntry,
    Organization,
    ResourceMember,
    RetentionRule,
    User,
)
from tsplatform.users import UserManager

__all__ = [
    # Client
    "PlatformClient",
    "BucketManager",
    "OrganizationManager",
    "UserManager",
    "LabelManager",
    # Pagination
    "FindOptions",
    "Page",
    "iter_pages",
    # Types
    "Bucket",
    "RetentionRule",
    "Organization",
    "User",
    "Label",
    "MemberRole",
    "ResourceMember",
    "OperationLogEntry",
    # Errors
    "PlatformError",
    "InvalidRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "TooManyRequestsError",
    "InternalServerError",
    "UnavailableError",
]

try:
    __version__ = _pkg_version("tsplatform-sdk")
except PackageNotFoundError:
    __version__ = "unknown"
