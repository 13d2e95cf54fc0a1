"""User manager for the platform SDK."""

from __future__ import annotations

from tsplatform.resources import BaseManager, Identified
from tsplatform.types import User


class UserManager(BaseManager):
    """User management API."""

    collection = "users"

    async def create(self, name: str) -> User:
        response = await self._http.post(self._base_path, json={"name": name})
        return User.model_validate(response)

    async def find_by_id(self, user_id: str) -> User | None:
        """Get a user by ID, or None if it doesn't exist."""
        response = await self._get_or_none(self._item_path(user_id))
        if response is None:
            return None
        return User.model_validate(response)

    async def find_all(self) -> list[User]:
        response = await self._http.get(self._base_path)
        return [User.model_validate(e) for e in response.get("users", [])]

    async def me(self) -> User:
        """The user the token belongs to."""
        response = await self._http.get("/me")
        return User.model_validate(response)

    async def delete(self, user: Identified) -> None:
        await self._http.delete(self._item_path(user))
