"""Asynchronous HTTP transport shared by every Paperless-ngx resource."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, AsyncIterator, Generator, Mapping
from typing import Any, Literal
from urllib.parse import quote

import httpx

from paperless_sdk.exceptions import PaperlessApiError
from paperless_sdk.paths import stringify

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "paperless-sdk"
DEFAULT_HEADER_NAME = "Authorization"
DEFAULT_TOKEN_PREFIX = "Token"

ResponseType = Literal["json", "bytes", "text", "stream"]

_UNSET: Any = object()


def serialize_query(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters the way the Paperless-ngx filters expect.

    List values become one comma-joined value (``id__in=1,2,3``) instead
    of repeated keys. ``None`` values are dropped.
    """
    if not params:
        return ""

    parts: list[str] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items = [quote(stringify(v), safe="") for v in value if v is not None]
            parts.append(f"{key}={','.join(items)}")
        else:
            parts.append(f"{key}={quote(stringify(value), safe='')}")
    return "&".join(parts)


def _with_query(url: str, params: Mapping[str, Any] | None) -> str:
    query = serialize_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


class TokenAuth(httpx.Auth):
    """Adds the transport's current token to each outgoing request.

    The token is read when the request is sent, so ``set_token`` takes
    effect on the next call. A header the caller set explicitly wins.
    """

    def __init__(self, transport: HttpClient) -> None:
        self._transport = transport

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        header_value = self._transport.auth_header_value()
        header_name = self._transport.header_name
        if header_value is not None and header_name not in request.headers:
            request.headers[header_name] = header_value
        yield request


class HttpClient:
    """Thin wrapper around ``httpx.AsyncClient`` with Paperless-ngx defaults.

    Usage::

        async with HttpClient("http://localhost:8000", token="abc") as http:
            tags = await http.list_all("/api/tags/")
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        token_prefix: str | None = None,
        header_name: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        client_options: Mapping[str, Any] | None = None,
    ) -> None:
        self.base_url = base_url
        self.token = token or None
        if token_prefix is None and self.token:
            token_prefix = DEFAULT_TOKEN_PREFIX
        self.token_prefix = token_prefix
        self.header_name = header_name or DEFAULT_HEADER_NAME

        options = dict(client_options or {})
        headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
            **dict(options.pop("headers", None) or {}),
        }
        options.setdefault("timeout", timeout)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            auth=TokenAuth(self),
            **options,
        )

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # -- Authentication -------------------------------------------------------

    def set_token(self, token: str | None, *, prefix: str | None = _UNSET) -> None:
        """Replace the token used for subsequent requests.

        The prefix is only changed when *prefix* is passed; ``None``
        removes it so the bare token is sent.
        """
        self.token = token or None
        if prefix is not _UNSET:
            self.token_prefix = prefix or None

    def clear_token(self) -> None:
        """Stop sending an auth header on future requests."""
        self.token = None

    def auth_header_value(self) -> str | None:
        if not self.token:
            return None
        if self.token_prefix:
            return f"{self.token_prefix} {self.token}"
        return self.token

    # -- Requests -------------------------------------------------------------

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
        headers: Mapping[str, str] | None = None,
        response_type: ResponseType = "json",
    ) -> Any:
        """Send one request and return only the decoded response body.

        Raises:
            PaperlessApiError: On any non-2xx status or request failure.
        """
        stream = response_type == "stream"
        try:
            request = self._client.build_request(
                method,
                _with_query(url, params),
                json=json,
                data=data,
                files=files,
                headers=headers,
            )
            logger.debug("%s %s", request.method, request.url)
            response = await self._client.send(request, stream=stream)
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError:
                if stream:
                    await response.aread()
                    await response.aclose()
                raise

            if stream:
                return _iter_stream(response)
            return _decode_body(response, response_type)
        except PaperlessApiError:
            raise
        except Exception as exc:
            raise PaperlessApiError.from_exception(exc) from exc

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("POST", url, json=json, **kwargs)

    async def put(self, url: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PUT", url, json=json, **kwargs)

    async def patch(self, url: str, json: Any = None, **kwargs: Any) -> Any:
        return await self.request("PATCH", url, json=json, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", url, **kwargs)

    # -- Pagination -----------------------------------------------------------

    async def iterate_paginated(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        method: str = "GET",
        **kwargs: Any,
    ) -> AsyncGenerator[Any, None]:
        """Yield every item of a paginated endpoint, one page at a time.

        The next page is only requested once the current page's items
        have been consumed. ``next`` URLs already carry the query, so
        *params* only applies to the first request.
        """
        next_url: str | None = url
        next_params = params
        while next_url:
            page = await self.request(method, next_url, params=next_params, **kwargs)
            for item in page.get("results") or []:
                yield item
            next_url = page.get("next")
            next_params = None
            if next_url:
                logger.debug("Following pagination to %s", next_url)

    async def list_all(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[Any]:
        """Follow pagination and return all results."""
        return [item async for item in self.iterate_paginated(url, params=params, **kwargs)]


def _decode_body(response: httpx.Response, response_type: ResponseType) -> Any:
    if response_type == "bytes":
        return response.content
    if response_type == "text":
        return response.text
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    return response.text


async def _iter_stream(response: httpx.Response) -> AsyncIterator[bytes]:
    try:
        async for chunk in response.aiter_bytes():
            yield chunk
    except httpx.HTTPError as exc:
        raise PaperlessApiError.from_exception(exc) from exc
    finally:
        await response.aclose()
