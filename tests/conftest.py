"""Shared pytest fixtures for paperless-sdk tests."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator
from typing import Any

import pytest

from paperless_sdk.client import PaperlessClient
from paperless_sdk.http import HttpClient

BASE_URL = "http://paperless.test:8000"
TOKEN = "secret"

PAPERLESS_ENV_VARS = (
    "PAPERLESS_BASE_URL",
    "PAPERLESS_URL",
    "PAPERLESS_TOKEN",
    "PAPERLESS_API_TOKEN",
    "PAPERLESS_TOKEN_PREFIX",
    "PAPERLESS_AUTH_HEADER",
)


def page(results: list[Any], next_url: str | None = None, count: int | None = None) -> dict[str, Any]:
    """Build a paginated envelope."""
    return {
        "count": len(results) if count is None else count,
        "next": next_url,
        "previous": None,
        "results": results,
    }


@pytest.fixture
def clean_paperless_env() -> Iterator[None]:
    """Hide PAPERLESS_* variables, including ones a .env file sets during the test."""
    saved = {name: os.environ.pop(name) for name in PAPERLESS_ENV_VARS if name in os.environ}
    yield
    for name in PAPERLESS_ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


@pytest.fixture
async def http() -> AsyncGenerator[HttpClient, None]:
    """Transport with a token and the default prefix."""
    async with HttpClient(BASE_URL, token=TOKEN) as client:
        yield client


@pytest.fixture
async def anonymous_http() -> AsyncGenerator[HttpClient, None]:
    """Transport without any token."""
    async with HttpClient(BASE_URL) as client:
        yield client


@pytest.fixture
async def client() -> AsyncGenerator[PaperlessClient, None]:
    async with PaperlessClient(BASE_URL, token=TOKEN) as c:
        yield c


@pytest.fixture
def sample_document() -> dict[str, Any]:
    return {
        "id": 42,
        "title": "Invoice 2024-03",
        "content": "Total: 12.00 EUR",
        "correspondent": 3,
        "document_type": 2,
        "storage_path": None,
        "tags": [1, 5],
        "created": "2024-03-15",
        "archive_serial_number": None,
        "notes": [],
        "custom_fields": [],
    }

