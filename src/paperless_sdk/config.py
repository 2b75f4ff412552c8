"""Client configuration and environment loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from paperless_sdk.exceptions import ConfigurationError
from paperless_sdk.http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

BASE_URL_VARS = ("PAPERLESS_BASE_URL", "PAPERLESS_URL")
TOKEN_VARS = ("PAPERLESS_TOKEN", "PAPERLESS_API_TOKEN")
TOKEN_PREFIX_VAR = "PAPERLESS_TOKEN_PREFIX"
AUTH_HEADER_VAR = "PAPERLESS_AUTH_HEADER"

DotenvOption = bool | str | os.PathLike


def _first_env(*names: str) -> str | None:
    """Return the first non-empty value among *names*."""
    for name in names:
        value = os.environ.get(name, "")
        if value:
            return value
    return None


def load_paperless_env(dotenv: DotenvOption = True) -> dict[str, str | None]:
    """Read the Paperless connection settings from the environment.

    With *dotenv* true, a ``.env`` file found from the working directory
    upwards is loaded first; a path loads that file instead. Variables
    already set in the process environment are never overridden.
    """
    if dotenv:
        path = find_dotenv(usecwd=True) if dotenv is True else Path(dotenv)
        if path:
            logger.debug("Loading environment from %s", path)
            load_dotenv(path, override=False)

    return {
        "base_url": _first_env(*BASE_URL_VARS),
        "token": _first_env(*TOKEN_VARS),
        "token_prefix": _first_env(TOKEN_PREFIX_VAR),
        "header_name": _first_env(AUTH_HEADER_VAR),
    }


@dataclass
class ClientConfig:
    """Connection settings for a :class:`~paperless_sdk.client.PaperlessClient`."""

    base_url: str
    token: str | None = None
    token_prefix: str | None = None
    header_name: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    client_options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, dotenv: DotenvOption = True, **defaults: Any) -> ClientConfig:
        """Build configuration from environment variables.

        Environment values take precedence over *defaults*, which accept
        any field of this class.

        Raises:
            ConfigurationError: If no base URL is set anywhere.
        """
        env = load_paperless_env(dotenv)
        merged = dict(defaults)
        for key, value in env.items():
            if value is not None:
                merged[key] = value

        if not merged.get("base_url"):
            raise ConfigurationError(
                "Paperless base URL is required. "
                "Set PAPERLESS_BASE_URL or provide base_url."
            )
        return cls(**merged)
