"""``/api/tags/`` endpoints."""

from __future__ import annotations

from paperless_sdk.resources._base import CrudResource


class TagsResource(CrudResource):
    collection_path = "/api/tags/"
