"""``/api/tasks/`` endpoints.

Unlike the other collections, the task list is a plain JSON array.
"""

from __future__ import annotations

import builtins
from typing import Any

from paperless_sdk.resources._base import Resource
from paperless_sdk.types import Query, Task


class TasksResource(Resource):
    async def list(self, query: Query | None = None) -> builtins.list[Task]:
        """Return tasks, optionally filtered (e.g. ``{"status": "FAILURE"}``)."""
        return await self._http.get("/api/tasks/", params=query)

    async def retrieve(self, id: int, query: Query | None = None) -> Task:
        return await self._http.get(f"/api/tasks/{id}/", params=query)

    async def acknowledge(self, body: Any, query: Query | None = None) -> Any:
        """Mark tasks as seen, e.g. ``{"tasks": [1, 2]}``."""
        return await self._http.post("/api/tasks/acknowledge/", body, params=query)

    async def run(self, body: Any, query: Query | None = None) -> Task:
        """Start a background job on the server and return the new task."""
        return await self._http.post("/api/tasks/run/", body, params=query)
