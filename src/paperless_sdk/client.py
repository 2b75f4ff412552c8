"""High-level asynchronous client for the Paperless-ngx REST API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from paperless_sdk.config import ClientConfig, DotenvOption
from paperless_sdk.http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, HttpClient
from paperless_sdk.resources import (
    AuthResource,
    CorrespondentsResource,
    DocumentsResource,
    DocumentTypesResource,
    TagsResource,
    TasksResource,
    UsersResource,
)


class PaperlessClient:
    """Every Paperless-ngx resource behind one object and one connection.

    All resources share the same :class:`HttpClient`, so ``set_token``
    and ``clear_token`` apply to all of them at once.

    Usage::

        async with PaperlessClient("http://localhost:8000", token="abc") as client:
            tags = await client.tags.list_all()
            async for doc in client.documents.iterate({"tags__id__all": [1, 2]}):
                ...
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
        self.http = HttpClient(
            base_url,
            token=token,
            token_prefix=token_prefix,
            header_name=header_name,
            timeout=timeout,
            user_agent=user_agent,
            client_options=client_options,
        )
        self.documents = DocumentsResource(self.http)
        self.document_types = DocumentTypesResource(self.http)
        self.correspondents = CorrespondentsResource(self.http)
        self.tags = TagsResource(self.http)
        self.tasks = TasksResource(self.http)
        self.users = UsersResource(self.http)
        self.auth = AuthResource(self.http)

    @classmethod
    def from_config(cls, config: ClientConfig) -> PaperlessClient:
        return cls(
            config.base_url,
            token=config.token,
            token_prefix=config.token_prefix,
            header_name=config.header_name,
            timeout=config.timeout,
            user_agent=config.user_agent,
            client_options=config.client_options,
        )

    @classmethod
    def from_env(cls, dotenv: DotenvOption = True, **defaults: Any) -> PaperlessClient:
        """Create a client from ``PAPERLESS_*`` environment variables.

        Raises:
            ConfigurationError: If no base URL is configured.
        """
        return cls.from_config(ClientConfig.from_env(dotenv, **defaults))

    async def __aenter__(self) -> PaperlessClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    def set_token(self, token: str | None, **kwargs: Any) -> None:
        """Change the token for every resource. See :meth:`HttpClient.set_token`."""
        self.http.set_token(token, **kwargs)

    def clear_token(self) -> None:
        self.http.clear_token()
