"""Label manager for the platform SDK."""

from __future__ import annotations

from tsplatform.resources import BaseManager, Identified, id_of
from tsplatform.types import Label, _CreateLabelRequest


class LabelManager(BaseManager):
    """Label management API.

    Labels are created once and then attached to resources through
    ``BucketManager.add_label`` / ``OrganizationManager.add_label``.
    """

    collection = "labels"

    async def create(
        self,
        name: str,
        properties: dict[str, str] | None = None,
        *,
        org: Identified | None = None,
    ) -> Label:
        """Create a label.

        Args:
            name: Label name
            properties: Free-form string pairs, e.g. {"color": "green"}
            org: Owning organization record or id

        Returns:
            The created Label
        """
        body = _CreateLabelRequest(
            name=name,
            org_id=id_of(org) if org is not None else None,
            properties=properties or {},
        ).model_dump(by_alias=True, exclude_none=True)

        response = await self._http.post(self._base_path, json=body)
        return Label.model_validate(response.get("label", response))

    async def find_by_id(self, label_id: str) -> Label | None:
        """Get a label by ID, or None if it doesn't exist."""
        response = await self._get_or_none(self._item_path(label_id))
        if response is None:
            return None
        return Label.model_validate(response.get("label", response))

    async def find_all(self) -> list[Label]:
        response = await self._http.get(self._base_path)
        return [Label.model_validate(e) for e in response.get("labels", [])]

    async def update(self, label: Label) -> Label:
        """Update a label's name and properties.

        Pass a modified copy, e.g. ``label.model_copy(update={"name": "new"})``.
        """
        response = await self._http.patch(
            self._item_path(label),
            json={"name": label.name, "properties": label.properties},
        )
        return Label.model_validate(response.get("label", response))

    async def delete(self, label: Identified) -> None:
        await self._http.delete(self._item_path(label))
