"""``/api/documents/`` endpoints, including upload and download."""

from __future__ import annotations

import datetime as dt
import os
from collections.abc import AsyncIterator, Iterable
from pathlib import Path
from typing import IO, Any, Literal, Union

from paperless_sdk.paths import build_path, stringify
from paperless_sdk.resources._base import CrudResource
from paperless_sdk.types import Document, HistoryEntry, Note, Query

UploadFile = Union[bytes, IO[bytes], str, os.PathLike, tuple]

DEFAULT_UPLOAD_FILENAME = "document"


def _file_part(document: UploadFile, filename: str | None) -> tuple:
    """Turn the accepted file inputs into an httpx ``files`` entry."""
    if isinstance(document, tuple):
        return document
    if isinstance(document, (str, os.PathLike)):
        path = Path(document)
        return (filename or path.name, path.read_bytes())
    if filename is None:
        name = getattr(document, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) else DEFAULT_UPLOAD_FILENAME
    return (filename, document)


def build_upload_form(
    document: UploadFile,
    *,
    filename: str | None = None,
    title: str | None = None,
    correspondent: int | None = None,
    document_type: int | None = None,
    storage_path: int | None = None,
    tags: Iterable[int] | None = None,
    archive_serial_number: int | None = None,
    custom_fields: Iterable[int] | None = None,
    from_webui: bool | None = None,
    created: str | dt.date | None = None,
) -> tuple[dict[str, Any], dict[str, tuple]]:
    """Build the ``(data, files)`` pair for ``post_document``.

    Unset fields are left out of the form entirely; ``tags`` and
    ``custom_fields`` become one repeated field per value.
    """
    data: dict[str, Any] = {}
    if title:
        data["title"] = title
    if correspondent is not None:
        data["correspondent"] = stringify(correspondent)
    if document_type is not None:
        data["document_type"] = stringify(document_type)
    if storage_path is not None:
        data["storage_path"] = stringify(storage_path)
    if tags:
        data["tags"] = [stringify(tag) for tag in tags]
    if archive_serial_number is not None:
        data["archive_serial_number"] = stringify(archive_serial_number)
    if custom_fields:
        data["custom_fields"] = [stringify(field) for field in custom_fields]
    if from_webui is not None:
        data["from_webui"] = stringify(from_webui)
    if created:
        data["created"] = created.isoformat() if isinstance(created, dt.date) else created

    files = {"document": _file_part(document, filename)}
    return data, files


class DocumentsResource(CrudResource):
    collection_path = "/api/documents/"

    async def retrieve(self, id: int, query: Query | None = None) -> Document:
        """Return full details for a single document.

        *query* may restrict the returned fields, e.g. ``{"fields": ["title"]}``.
        """
        return await self._http.get(self._detail_url(id), params=query)

    async def upload(self, document: UploadFile, **fields: Any) -> str:
        """Upload a new file for consumption and return the task id.

        *document* may be raw bytes, a binary file object, a filesystem
        path, or an httpx ``(filename, content[, content_type])`` tuple.
        Metadata keywords are those of :func:`build_upload_form`.

        The document itself only exists once the returned task has
        finished; poll it through ``tasks.list({"task_id": ...})``.
        """
        data, files = build_upload_form(document, **fields)
        return await self._http.post(
            "/api/documents/post_document/", data=data, files=files
        )

    async def download(
        self,
        id: int,
        *,
        original: bool | None = None,
        response_type: Literal["bytes", "stream"] = "bytes",
    ) -> bytes | AsyncIterator[bytes]:
        """Download a document's file.

        By default the server returns the archived version. Pass
        ``original=True`` to get the original upload. With
        ``response_type="stream"`` an async iterator of byte chunks is
        returned instead of the whole file.
        """
        url = build_path("/api/documents/{id}/download/", {"id": id})
        params = None if original is None else {"original": original}
        return await self._http.get(url, params=params, response_type=response_type)

    async def history(self, id: int, query: Query | None = None) -> list[HistoryEntry]:
        """Return the audit log entries of a document."""
        url = build_path("/api/documents/{id}/history/", {"id": id})
        return await self._http.get(url, params=query)

    async def notes(self, id: int, query: Query | None = None) -> list[Note]:
        url = build_path("/api/documents/{id}/notes/", {"id": id})
        return await self._http.get(url, params=query)

    async def add_note(self, id: int, body: Any) -> list[Note]:
        """Add a note (``{"note": "..."}``) and return the document's notes."""
        url = build_path("/api/documents/{id}/notes/", {"id": id})
        return await self._http.post(url, body)

    async def remove_note(self, id: int, note_id: int) -> list[Note]:
        # The API takes the note id as a query parameter on the collection.
        url = build_path("/api/documents/{id}/notes/", {"id": id})
        return await self._http.delete(url, params={"id": note_id})

    async def send_by_email(self, id: int, body: Any) -> Any:
        """Have the server mail the document, e.g. ``{"addresses": ..., "subject": ...}``."""
        url = build_path("/api/documents/{id}/email/", {"id": id})
        return await self._http.post(url, body)

    async def selection_data(self, body: Any) -> Any:
        """Return the tags/correspondents/types in use by a set of documents."""
        return await self._http.post("/api/documents/selection_data/", body)
