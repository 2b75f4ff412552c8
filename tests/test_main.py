"""Unit tests for the ``python -m paperless_sdk`` entry point."""

from __future__ import annotations

import httpx
import pytest
import respx

from paperless_sdk.__main__ import check_connection, main
from paperless_sdk.config import ClientConfig

from conftest import BASE_URL, page

LISTED_PATHS = {
    "documents": "/api/documents/",
    "tags": "/api/tags/",
    "correspondents": "/api/correspondents/",
    "document_types": "/api/document_types/",
}


@pytest.mark.respx(base_url=BASE_URL)
class TestCheckConnection:
    async def test_counts(self, respx_mock: respx.MockRouter):
        for i, path in enumerate(LISTED_PATHS.values(), start=1):
            respx_mock.get(path).mock(return_value=httpx.Response(200, json=page([{"id": 1}], count=i * 10)))

        counts = await check_connection(ClientConfig(base_url=BASE_URL, token="t"))
        assert counts == {"documents": 10, "tags": 20, "correspondents": 30, "document_types": 40}
        assert respx_mock.calls.last.request.url.query == b"page_size=1"


@pytest.mark.usefixtures("clean_paperless_env")
class TestMain:
    def test_missing_configuration_exits(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_api_error_exits(self, monkeypatch):
        monkeypatch.setenv("PAPERLESS_URL", BASE_URL)
        monkeypatch.setenv("PAPERLESS_TOKEN", "bad")
        with respx.mock(base_url=BASE_URL) as router:
            router.get("/api/documents/").mock(return_value=httpx.Response(401, json={"detail": "Invalid token."}))
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_success(self, monkeypatch):
        monkeypatch.setenv("PAPERLESS_URL", BASE_URL)
        with respx.mock(base_url=BASE_URL) as router:
            for path in LISTED_PATHS.values():
                router.get(path).mock(return_value=httpx.Response(200, json=page([])))
            main()
