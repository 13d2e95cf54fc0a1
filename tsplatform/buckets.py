"""Bucket manager for the platform SDK."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Sequence

from tsplatform.pagination import FindOptions, Page, iter_pages
from tsplatform.resources import Identified, ResourceManager, id_of
from tsplatform.types import (
    Bucket,
    RetentionRule,
    _CreateBucketRequest,
    _UpdateBucketRequest,
)

logger = logging.getLogger("tsplatform")


class BucketManager(ResourceManager):
    """Bucket management API.

    Buckets are named, retention-scoped data containers owned by an
    organization. Labels, members, owners and the operation log of a
    bucket are reached through the inherited ResourceManager methods.
    """

    collection = "buckets"

    async def create(
        self,
        name: str,
        org: Identified,
        *,
        retention_rules: RetentionRule | Sequence[RetentionRule] | None = None,
        description: str | None = None,
    ) -> Bucket:
        """Create a bucket.

        Args:
            name: Bucket name, unique within the organization
            org: Owning organization record or id
            retention_rules: One rule or several; None keeps data forever
            description: Optional description

        Returns:
            The created Bucket

        Raises:
            ConflictError: If the organization already has a bucket with this name
        """
        if retention_rules is None:
            rules: list[RetentionRule] = []
        elif isinstance(retention_rules, RetentionRule):
            rules = [retention_rules]
        else:
            rules = list(retention_rules)

        body = _CreateBucketRequest(
            name=name,
            org_id=id_of(org),
            description=description,
            retention_rules=rules,
        ).model_dump(by_alias=True, exclude_none=True)

        response = await self._http.post(self._base_path, json=body)
        bucket = Bucket.model_validate(response)
        logger.debug("Created bucket %s (%s)", bucket.id, bucket.name)
        return bucket

    async def find_by_id(self, bucket_id: str) -> Bucket | None:
        """Get a bucket by ID, or None if it doesn't exist."""
        response = await self._get_or_none(self._item_path(bucket_id))
        if response is None:
            return None
        return Bucket.model_validate(response)

    async def find_by_name(self, name: str) -> Bucket | None:
        """Get a bucket by name, or None if no bucket has this name."""
        response = await self._get_or_none(self._base_path, params={"name": name})
        if response is None:
            return None
        buckets = response.get("buckets", [])
        if not buckets:
            return None
        return Bucket.model_validate(buckets[0])

    async def find_buckets(self, options: FindOptions | None = None) -> Page[Bucket]:
        """List one page of buckets.

        Args:
            options: Paging and ordering; defaults to no limit

        Returns:
            Page of buckets; ``next_page()`` gives the following options
        """
        options = options or FindOptions()
        response = await self._http.get(self._base_path, params=options.to_params())
        return Page[Bucket](
            items=[Bucket.model_validate(e) for e in response.get("buckets", [])],
            options=options,
            links=response.get("links", {}),
        )

    def iter_buckets(self, options: FindOptions | None = None) -> AsyncIterator[Page[Bucket]]:
        """Walk all bucket pages in order, starting at ``options``."""
        return iter_pages(self.find_buckets, options)

    async def find_by_organization(self, org: Identified) -> list[Bucket]:
        """List all buckets of an organization."""
        response = await self._http.get(self._base_path, params={"orgID": id_of(org)})
        return [Bucket.model_validate(e) for e in response.get("buckets", [])]

    async def update(self, bucket: Bucket) -> Bucket:
        """Update a bucket's name, description and retention rules.

        Pass a modified copy, e.g. ``bucket.model_copy(update={"name": "new"})``.

        Returns:
            The updated Bucket as stored by the platform

        Raises:
            NotFoundError: If the bucket doesn't exist
        """
        body = _UpdateBucketRequest(
            name=bucket.name,
            description=bucket.description,
            retention_rules=bucket.retention_rules,
        ).model_dump(by_alias=True, exclude_none=True)

        response = await self._http.patch(self._item_path(bucket), json=body)
        return Bucket.model_validate(response)

    async def delete(self, bucket: Identified) -> None:
        """Delete a bucket.

        Raises:
            NotFoundError: If the bucket doesn't exist
        """
        await self._http.delete(self._item_path(bucket))
        logger.debug("Deleted bucket %s", id_of(bucket))
