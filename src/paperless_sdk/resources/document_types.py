"""``/api/document_types/`` endpoints."""

from __future__ import annotations

from paperless_sdk.resources._base import CrudResource


class DocumentTypesResource(CrudResource):
    collection_path = "/api/document_types/"
