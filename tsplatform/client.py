"""PlatformClient - main entry point for the platform SDK."""

from __future__ import annotations

import os
from types import TracebackType

from tsplatform._http import HTTPClient
from tsplatform.buckets import BucketManager
from tsplatform.labels import LabelManager
from tsplatform.organizations import OrganizationManager
from tsplatform.users import UserManager

_NOT_INITIALIZED = "PlatformClient not initialized. Use 'async with' context."


class PlatformClient:
    """Main client for the platform API.

    Use as an async context manager to ensure proper cleanup.

    Example:
        async with PlatformClient(
            url="http://localhost:9999",
            token="my-token",
        ) as client:
            org = await client.organizations.create("my-org")
            bucket = await client.buckets.create("sensors", org)
            page = await client.buckets.find_logs(bucket, FindOptions(limit=5))
    """

    def __init__(
        self,
        url: str | None = None,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        org: str | None = None,
    ) -> None:
        """Initialize platform client.

        Args:
            url: Platform base URL. Falls back to PLATFORM_URL env var.
            token: API token. Falls back to PLATFORM_TOKEN env var.
            timeout: Default request timeout in seconds. Falls back to PLATFORM_TIMEOUT env var.
            org: Default organization name. Falls back to PLATFORM_ORG env var.

        Raises:
            ValueError: If url or token not provided and not in env.
        """
        self._url = url or os.environ.get("PLATFORM_URL")
        self._token = token or os.environ.get("PLATFORM_TOKEN")

        if not self._url:
            raise ValueError("url required (or set PLATFORM_URL env var)")
        if not self._token:
            raise ValueError("token required (or set PLATFORM_TOKEN env var)")

        timeout_str = os.environ.get("PLATFORM_TIMEOUT")
        if timeout_str and timeout == 30.0:  # Only if default
            timeout = float(timeout_str)

        self._timeout = timeout
        self._org = org or os.environ.get("PLATFORM_ORG")
        self._http: HTTPClient | None = None

        self._buckets: BucketManager | None = None
        self._organizations: OrganizationManager | None = None
        self._users: UserManager | None = None
        self._labels: LabelManager | None = None

    async def __aenter__(self) -> PlatformClient:
        """Enter async context, initializing HTTP client."""
        self._http = HTTPClient(
            base_url=self._url,
            token=self._token,
            timeout=self._timeout,
        )
        await self._http.__aenter__()
        self._buckets = BucketManager(self._http)
        self._organizations = OrganizationManager(self._http)
        self._users = UserManager(self._http)
        self._labels = LabelManager(self._http)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context, closing HTTP client."""
        if self._http:
            await self._http.__aexit__(exc_type, exc_val, exc_tb)
            self._http = None
            self._buckets = None
            self._organizations = None
            self._users = None
            self._labels = None

    @property
    def org(self) -> str | None:
        """Default organization name, if configured."""
        return self._org

    @property
    def http(self) -> HTTPClient:
        """Get the HTTP client."""
        if self._http is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._http

    @property
    def buckets(self) -> BucketManager:
        """Bucket API."""
        if self._buckets is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._buckets

    @property
    def organizations(self) -> OrganizationManager:
        """Organization API."""
        if self._organizations is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._organizations

    @property
    def users(self) -> UserManager:
        """User API."""
        if self._users is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._users

    @property
    def labels(self) -> LabelManager:
        """Label API."""
        if self._labels is None:
            raise RuntimeError(_NOT_INITIALIZED)
        return self._labels

