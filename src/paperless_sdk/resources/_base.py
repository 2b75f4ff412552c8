"""Shared behavior of the paginated CRUD resources."""

from __future__ import annotations

import builtins
from collections.abc import AsyncIterator
from typing import Any

from paperless_sdk.http import HttpClient
from paperless_sdk.paths import build_path
from paperless_sdk.types import PaginatedResponse, Query


class Resource:
    """Binds one API resource family to the shared transport."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http


class CrudResource(Resource):
    """Collection/detail endpoints that follow the standard REST layout.

    Subclasses set ``collection_path`` (e.g. ``/api/tags/``);
    ``detail_path`` is derived from it.
    """

    collection_path: str = ""

    @property
    def detail_path(self) -> str:
        return self.collection_path + "{id}/"

    def _detail_url(self, id: int) -> str:
        return build_path(self.detail_path, {"id": id})

    async def list(self, query: Query | None = None) -> PaginatedResponse:
        """Return one page of results."""
        return await self._http.get(self.collection_path, params=query)

    def iterate(self, query: Query | None = None) -> AsyncIterator[Any]:
        """Lazily yield every item, fetching pages as they are consumed."""
        return self._http.iterate_paginated(self.collection_path, params=query)

    async def list_all(self, query: Query | None = None) -> builtins.list[Any]:
        """Fetch every item by walking through all pages."""
        return await self._http.list_all(self.collection_path, params=query)

    async def retrieve(self, id: int) -> Any:
        return await self._http.get(self._detail_url(id))

    async def create(self, body: Any) -> Any:
        return await self._http.post(self.collection_path, body)

    async def update(self, id: int, body: Any) -> Any:
        """Replace the object with *body* (PUT)."""
        return await self._http.put(self._detail_url(id), body)

    async def partial_update(self, id: int, body: Any) -> Any:
        """Change only the fields present in *body* (PATCH)."""
        return await self._http.patch(self._detail_url(id), body)

    async def remove(self, id: int) -> None:
        await self._http.delete(self._detail_url(id))
