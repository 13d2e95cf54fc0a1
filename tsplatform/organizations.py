"""Organization manager for the platform SDK."""

from __future__ import annotations

from tsplatform.resources import Identified, ResourceManager
from tsplatform.types import Organization


class OrganizationManager(ResourceManager):
    """Organization management API.

    Organizations own buckets and labels; they also carry members, owners,
    labels and an operation log of their own.
    """

    collection = "orgs"

    async def create(self, name: str, *, description: str | None = None) -> Organization:
        """Create an organization."""
        body: dict = {"name": name}
        if description is not None:
            body["description"] = description

        response = await self._http.post(self._base_path, json=body)
        return Organization.model_validate(response)

    async def find_by_id(self, org_id: str) -> Organization | None:
        """Get an organization by ID, or None if it doesn't exist."""
        response = await self._get_or_none(self._item_path(org_id))
        if response is None:
            return None
        return Organization.model_validate(response)

    async def find_all(self) -> list[Organization]:
        """List all organizations visible to the token."""
        response = await self._http.get(self._base_path)
        return [Organization.model_validate(e) for e in response.get("orgs", [])]

    async def delete(self, org: Identified) -> None:
        """Delete an organization and everything it owns."""
        await self._http.delete(self._item_path(org))
