"""``/api/correspondents/`` endpoints."""

from __future__ import annotations

from paperless_sdk.resources._base import CrudResource


class CorrespondentsResource(CrudResource):
    collection_path = "/api/correspondents/"
