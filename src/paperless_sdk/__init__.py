"""Asynchronous client for the Paperless-ngx REST API."""

from paperless_sdk.client import PaperlessClient
from paperless_sdk.config import ClientConfig, load_paperless_env
from paperless_sdk.exceptions import (
    ConfigurationError,
    MissingPathParameterError,
    NullPathParameterError,
    PaperlessApiError,
    PaperlessAuthError,
    PaperlessConnectionError,
    PaperlessError,
    PathParameterError,
)
from paperless_sdk.http import HttpClient, serialize_query
from paperless_sdk.paths import build_path

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "HttpClient",
    "MissingPathParameterError",
    "NullPathParameterError",
    "PaperlessApiError",
    "PaperlessAuthError",
    "PaperlessClient",
    "PaperlessConnectionError",
    "PaperlessError",
    "PathParameterError",
    "build_path",
    "load_paperless_env",
    "serialize_query",
]
