"""Response and request shapes of the Paperless-ngx REST API.

These mirror the server's OpenAPI schema loosely. They are typing aids
only; nothing here validates what the server sends back.
"""

from __future__ import annotations

from typing import Any, TypedDict

Query = dict[str, Any]


class PaginatedResponse(TypedDict, total=False):
    count: int
    next: str | None
    previous: str | None
    results: list[Any]
    # documents only: ids of every match across all pages
    all: list[int]


class Tag(TypedDict, total=False):
    id: int
    slug: str
    name: str
    color: str
    text_color: str
    match: str
    matching_algorithm: int
    is_insensitive: bool
    is_inbox_tag: bool
    document_count: int
    owner: int | None
    user_can_change: bool


class Correspondent(TypedDict, total=False):
    id: int
    slug: str
    name: str
    match: str
    matching_algorithm: int
    is_insensitive: bool
    document_count: int
    last_correspondence: str | None
    owner: int | None
    user_can_change: bool


class DocumentType(TypedDict, total=False):
    id: int
    slug: str
    name: str
    match: str
    matching_algorithm: int
    is_insensitive: bool
    document_count: int
    owner: int | None
    user_can_change: bool


class Note(TypedDict, total=False):
    id: int
    note: str
    created: str
    user: Any


class CustomFieldInstance(TypedDict, total=False):
    field: int
    value: Any


class Document(TypedDict, total=False):
    id: int
    title: str
    content: str
    correspondent: int | None
    document_type: int | None
    storage_path: int | None
    tags: list[int]
    created: str
    created_date: str
    modified: str
    added: str
    archive_serial_number: int | None
    original_file_name: str | None
    archived_file_name: str | None
    owner: int | None
    user_can_change: bool
    is_shared_by_requester: bool
    notes: list[Note]
    custom_fields: list[CustomFieldInstance]
    page_count: int | None
    mime_type: str


class HistoryEntry(TypedDict, total=False):
    id: int
    timestamp: str
    action: str
    changes: dict[str, Any]
    actor: Any


class Task(TypedDict, total=False):
    id: int
    task_id: str
    task_file_name: str | None
    task_name: str
    date_created: str
    date_done: str | None
    type: str
    status: str
    result: str | None
    acknowledged: bool
    related_document: str | None
    owner: int | None


class User(TypedDict, total=False):
    id: int
    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    date_joined: str
    is_staff: bool
    is_active: bool
    is_superuser: bool
    groups: list[int]
    user_permissions: list[str]
    inherited_permissions: list[str]
    is_mfa_enabled: bool


class TokenRequest(TypedDict):
    username: str
    password: str


class TokenResponse(TypedDict):
    token: str
