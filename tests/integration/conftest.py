"""Integration tests configuration for the platform SDK.

Prerequisites:
- A platform instance answering GET /health
- PLATFORM_URL / PLATFORM_TOKEN pointing at it (defaults suit a local
  onboarding with token "my-token")
- PLATFORM_ORG naming the onboarded organization, which owns "my-bucket"

Every test is skipped when the platform is not reachable.
"""

from __future__ import annotations

import os
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
import pytest

from tsplatform import Bucket, FindOptions, Organization, PlatformClient, RetentionRule

# =============================================================================
# CONFIGURATION
# =============================================================================

PLATFORM_URL = os.environ.get("PLATFORM_URL", "http://127.0.0.1:9999")
PLATFORM_TOKEN = os.environ.get("PLATFORM_TOKEN", "my-token")
PLATFORM_ORG = os.environ.get("PLATFORM_ORG", "my-org")

# Resources created by the suite end with this suffix so leftovers can be swept.
IT_SUFFIX = "-IT"
SWEEP_PAGE_SIZE = 20


# =============================================================================
# ENVIRONMENT CHECKS
# =============================================================================


def _check_platform() -> bool:
    try:
        return httpx.get(f"{PLATFORM_URL}/health", timeout=2.0).status_code == 200
    except httpx.HTTPError:
        return False


integration_marks = [
    pytest.mark.integration,
    pytest.mark.skipif(not _check_platform(), reason="Platform not running"),
]


# =============================================================================
# HELPERS
# =============================================================================


def generate_name(prefix: str) -> str:
    """Unique resource name carrying the cleanup suffix."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}{IT_SUFFIX}"


def retention_rule() -> RetentionRule:
    return RetentionRule(type="expire", every_seconds=3600)


@asynccontextmanager
async def platform_client() -> AsyncGenerator[PlatformClient, None]:
    async with PlatformClient(url=PLATFORM_URL, token=PLATFORM_TOKEN, org=PLATFORM_ORG) as client:
        yield client


@asynccontextmanager
async def create_organization(
    client: PlatformClient,
    prefix: str = "Org",
) -> AsyncGenerator[Organization, None]:
    """Create an organization with auto-cleanup (its buckets go with it)."""
    org = await client.organizations.create(generate_name(prefix))
    try:
        yield org
    finally:
        await client.organizations.delete(org)


async def sweep_buckets(client: PlatformClient) -> None:
    """Delete buckets left behind by earlier runs."""
    # collect first; deleting while paging would shift the offsets
    leftovers = [
        bucket
        async for page in client.buckets.iter_buckets(FindOptions(limit=SWEEP_PAGE_SIZE))
        for bucket in page.items
        if bucket.name.endswith(IT_SUFFIX)
    ]
    for bucket in leftovers:
        await client.buckets.delete(bucket)


async def find_my_org(client: PlatformClient) -> Organization:
    for org in await client.organizations.find_all():
        if org.name == client.org:
            return org
    pytest.skip(f"organization {client.org!r} not found")


async def create_bucket(client: PlatformClient, org: Organization, prefix: str = "robot sensor") -> Bucket:
    return await client.buckets.create(generate_name(prefix), org, retention_rules=retention_rule())
