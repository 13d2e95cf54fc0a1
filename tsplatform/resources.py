"""Shared sub-collections of platform resources.

Buckets and organizations expose the same labels, members, owners and
operation-log endpoints under their own path.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union

from tsplatform.errors import NotFoundError
from tsplatform.pagination import FindOptions, Page
from tsplatform.types import (
    Bucket,
    Label,
    OperationLogEntry,
    Organization,
    ResourceMember,
    User,
)

if TYPE_CHECKING:
    from tsplatform._http import HTTPClient

logger = logging.getLogger("tsplatform")

Identified = Union[str, Bucket, Organization, User, Label, ResourceMember]


def id_of(value: Identified) -> str:
    """Return the id of a record, or the value itself when it already is one.

    A ResourceMember names its user.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, ResourceMember):
        return value.user_id
    return value.id


class BaseManager:
    """Base class for API managers.

    Each manager wraps the HTTP calls of one collection endpoint.
    """

    collection: str = ""

    def __init__(self, http: HTTPClient) -> None:
        """Initialize manager.

        Args:
            http: HTTP client for making requests
        """
        self._http = http

    @property
    def _base_path(self) -> str:
        """Base path for this collection's endpoints."""
        return f"/{self.collection}"

    def _item_path(self, value: Identified) -> str:
        return f"{self._base_path}/{id_of(value)}"

    async def _get_or_none(self, path: str, **kwargs: Any) -> dict[str, Any] | None:
        """GET a single record; None when the API answers 404."""
        try:
            return await self._http.get(path, **kwargs)
        except NotFoundError:
            logger.debug("Not found: %s", path)
            return None


class ResourceManager(BaseManager):
    """Manager for resources that carry labels, members, owners and logs."""

    # Labels

    async def get_labels(self, resource: Identified) -> list[Label]:
        """List labels attached to a resource."""
        response = await self._http.get(f"{self._item_path(resource)}/labels")
        return [Label.model_validate(e) for e in response.get("labels", [])]

    async def add_label(self, label: Identified, resource: Identified) -> Label:
        """Attach an existing label to a resource.

        Returns:
            The attached label as reported by the API
        """
        response = await self._http.post(
            f"{self._item_path(resource)}/labels",
            json={"labelID": id_of(label)},
        )
        return Label.model_validate(response.get("label", response))

    async def delete_label(self, label: Identified, resource: Identified) -> None:
        """Detach a label from a resource."""
        await self._http.delete(f"{self._item_path(resource)}/labels/{id_of(label)}")

    # Members and owners

    async def _get_users(self, resource: Identified, kind: str) -> list[ResourceMember]:
        response = await self._http.get(f"{self._item_path(resource)}/{kind}")
        return [ResourceMember.model_validate(e) for e in response.get("users", [])]

    async def _add_user(self, user: Identified, resource: Identified, kind: str) -> ResourceMember:
        body: dict[str, str] = {"id": id_of(user)}
        if isinstance(user, User):
            body["name"] = user.name
        elif isinstance(user, ResourceMember) and user.user_name:
            body["name"] = user.user_name
        response = await self._http.post(f"{self._item_path(resource)}/{kind}", json=body)
        return ResourceMember.model_validate(response)

    async def get_members(self, resource: Identified) -> list[ResourceMember]:
        """List members of a resource."""
        return await self._get_users(resource, "members")

    async def add_member(self, user: Identified, resource: Identified) -> ResourceMember:
        """Grant a user the member role on a resource."""
        return await self._add_user(user, resource, "members")

    async def delete_member(self, user: Identified, resource: Identified) -> None:
        """Revoke a user's member role on a resource."""
        await self._http.delete(f"{self._item_path(resource)}/members/{id_of(user)}")

    async def get_owners(self, resource: Identified) -> list[ResourceMember]:
        """List owners of a resource."""
        return await self._get_users(resource, "owners")

    async def add_owner(self, user: Identified, resource: Identified) -> ResourceMember:
        """Grant a user the owner role on a resource."""
        return await self._add_user(user, resource, "owners")

    async def delete_owner(self, user: Identified, resource: Identified) -> None:
        """Revoke a user's owner role on a resource."""
        await self._http.delete(f"{self._item_path(resource)}/owners/{id_of(user)}")

    # Operation logs

    async def find_logs(
        self,
        resource: Identified,
        options: FindOptions | None = None,
    ) -> Page[OperationLogEntry]:
        """Get one page of a resource's operation log.

        A resource that does not exist has an empty log.

        Args:
            resource: Resource record or id
            options: Paging and ordering; defaults to newest-first, no limit

        Returns:
            Page of log entries; ``next_page()`` gives the following options
        """
        options = options or FindOptions()
        try:
            response = await self._http.get(
                f"{self._item_path(resource)}/logs",
                params=options.to_params(),
            )
        except NotFoundError:
            return Page[OperationLogEntry].empty(options)

        return Page[OperationLogEntry](
            items=[OperationLogEntry.model_validate(e) for e in response.get("logs", [])],
            options=options,
            links=response.get("links", {}),
        )
