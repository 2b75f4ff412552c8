"""Token endpoints."""

from __future__ import annotations

from paperless_sdk.resources._base import Resource
from paperless_sdk.types import TokenRequest, TokenResponse


class AuthResource(Resource):
    async def login(self, body: TokenRequest) -> TokenResponse:
        """Exchange a username and password for an API token.

        The returned token is not applied to the client; pass it to
        ``set_token`` to use it.
        """
        return await self._http.post("/api/token/", body)

    async def regenerate_profile_token(self) -> str:
        """Rotate the calling user's own API token and return the new one."""
        return await self._http.post("/api/profile/generate_auth_token/")
