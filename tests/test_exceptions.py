"""Unit tests for error normalization."""

from __future__ import annotations

import httpx
import pytest

from paperless_sdk.exceptions import (
    PaperlessApiError,
    PaperlessAuthError,
    PaperlessConnectionError,
    PaperlessError,
)

URL = "http://paperless.test:8000/api/documents/1/"


def _status_error(status: int, **response_kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("get", URL)
    response = httpx.Response(status, request=request, **response_kwargs)
    return httpx.HTTPStatusError("failed", request=request, response=response)


class TestFromStatusError:
    def test_extracts_response_details(self):
        original = _status_error(500, json={"detail": "Boom"}, headers={"X-Trace": "abc"})
        err = PaperlessApiError.from_exception(original)

        assert type(err) is PaperlessApiError
        assert err.status == 500
        assert err.url == URL
        assert err.method == "GET"
        assert err.data == {"detail": "Boom"}
        assert err.headers["x-trace"] == "abc"
        assert err.cause is original
        assert err.__cause__ is original

    def test_text_body(self):
        err = PaperlessApiError.from_exception(_status_error(502, text="Bad Gateway"))
        assert err.data == "Bad Gateway"

    def test_empty_body(self):
        err = PaperlessApiError.from_exception(_status_error(404))
        assert err.status == 404
        assert err.data is None

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_statuses(self, status):
        err = PaperlessApiError.from_exception(_status_error(status, json={"detail": "no"}))
        assert isinstance(err, PaperlessAuthError)
        assert err.status == status

    def test_str_includes_request_line(self):
        err = PaperlessApiError.from_exception(_status_error(500))
        assert str(err) == f"Request failed with status code 500 (GET {URL} -> 500)"


class TestFromRequestError:
    def test_connect_error(self):
        request = httpx.Request("POST", URL)
        original = httpx.ConnectError("Connection refused", request=request)
        err = PaperlessApiError.from_exception(original)

        assert isinstance(err, PaperlessConnectionError)
        assert err.status is None
        assert err.url == URL
        assert err.method == "POST"
        assert err.cause is original

    def test_timeout(self):
        request = httpx.Request("GET", URL)
        err = PaperlessApiError.from_exception(httpx.ReadTimeout("slow", request=request))
        assert isinstance(err, PaperlessConnectionError)
        assert "timed out" in str(err)

    def test_without_request(self):
        err = PaperlessApiError.from_exception(httpx.ConnectError("boom"))
        assert isinstance(err, PaperlessConnectionError)
        assert err.url is None
        assert err.method is None


class TestFromOther:
    def test_passthrough(self):
        original = PaperlessApiError("already normalized", status=418)
        assert PaperlessApiError.from_exception(original) is original

    def test_generic_exception(self):
        original = ValueError("Expecting value")
        err = PaperlessApiError.from_exception(original)
        assert err.message == "Expecting value"
        assert err.status is None
        assert err.cause is original

    def test_non_exception_value(self):
        err = PaperlessApiError.from_exception({"weird": True})
        assert err.message == "Unknown Paperless API error"
        assert err.data == {"weird": True}
        assert err.cause is None

    def test_hierarchy(self):
        assert issubclass(PaperlessApiError, PaperlessError)
        assert issubclass(PaperlessAuthError, PaperlessApiError)
        assert issubclass(PaperlessConnectionError, PaperlessApiError)
