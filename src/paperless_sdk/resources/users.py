"""``/api/users/`` endpoints."""

from __future__ import annotations

from typing import Any

from paperless_sdk.paths import build_path
from paperless_sdk.resources._base import CrudResource


class UsersResource(CrudResource):
    collection_path = "/api/users/"

    async def deactivate_totp(self, id: int, body: Any = None) -> Any:
        """Turn off TOTP for a user, e.g. after they lost their device."""
        url = build_path("/api/users/{id}/deactivate_totp/", {"id": id})
        return await self._http.post(url, body)
