"""Exception hierarchy for paperless-sdk."""

from __future__ import annotations

import json
from typing import Any

import httpx


class PaperlessError(Exception):
    """Base exception for all paperless-sdk errors."""


class ConfigurationError(PaperlessError, ValueError):
    """Raised when the client cannot be configured (e.g. no base URL)."""


class PathParameterError(PaperlessError, ValueError):
    """Raised when a URL template cannot be filled in."""

    def __init__(self, message: str, name: str) -> None:
        self.name = name
        super().__init__(message)


class MissingPathParameterError(PathParameterError):
    """A ``{placeholder}`` in a URL template has no matching parameter."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing path parameter: {name}", name)


class NullPathParameterError(PathParameterError):
    """A path parameter was supplied but its value is ``None``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Path parameter '{name}' is null", name)


class PaperlessApiError(PaperlessError):
    """Normalized failure of a call to the Paperless-ngx API.

    Every error raised by the transport has this shape, whatever its
    origin: an error status from the server, a network failure, or an
    unexpected exception while decoding the response.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        url: str | None = None,
        method: str | None = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url
        self.method = method
        self.data = data
        self.headers = headers
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.message} ({self.method} {self.url} -> {self.status})"
        return self.message

    @classmethod
    def from_exception(cls, error: object) -> PaperlessApiError:
        """Coerce anything raised during a request into a PaperlessApiError.

        Never raises.
        """
        if isinstance(error, PaperlessApiError):
            return error
        if isinstance(error, httpx.HTTPStatusError):
            return _from_status_error(error)
        if isinstance(error, httpx.RequestError):
            return _from_request_error(error)
        if isinstance(error, BaseException):
            return cls(str(error) or type(error).__name__, cause=error)
        return cls("Unknown Paperless API error", data=error)


class PaperlessAuthError(PaperlessApiError):
    """Raised when the API rejects the credentials (401/403)."""


class PaperlessConnectionError(PaperlessApiError):
    """Raised when the Paperless-ngx instance cannot be reached."""


def _response_data(response: httpx.Response) -> Any:
    """Decode an error body, preferring JSON."""
    try:
        content = response.content
    except httpx.ResponseNotRead:
        return None
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return response.text


def _from_status_error(error: httpx.HTTPStatusError) -> PaperlessApiError:
    response = error.response
    status = response.status_code
    if status == 401:
        exc_cls: type[PaperlessApiError] = PaperlessAuthError
        message = "Invalid or expired API token"
    elif status == 403:
        exc_cls = PaperlessAuthError
        message = "Insufficient permissions"
    else:
        exc_cls = PaperlessApiError
        message = f"Request failed with status code {status}"

    return exc_cls(
        message,
        status=status,
        url=str(error.request.url),
        method=error.request.method.upper(),
        data=_response_data(response),
        headers=dict(response.headers),
        cause=error,
    )


def _from_request_error(error: httpx.RequestError) -> PaperlessApiError:
    # .request raises RuntimeError when the exception was built without one
    try:
        request: httpx.Request | None = error.request
    except RuntimeError:
        request = None

    url = str(request.url) if request is not None else None
    method = request.method.upper() if request is not None else None

    if isinstance(error, httpx.TimeoutException):
        message = f"Request to {url} timed out" if url else "Request timed out"
    else:
        message = str(error) or f"Cannot connect to {url}"

    exc_cls = (
        PaperlessConnectionError
        if isinstance(error, httpx.TransportError)
        else PaperlessApiError
    )
    return exc_cls(
        message,
        url=url,
        method=method,
        cause=error,
    )
