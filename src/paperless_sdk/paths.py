"""URL template helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import quote

from paperless_sdk.exceptions import (
    MissingPathParameterError,
    NullPathParameterError,
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

PathParams = Mapping[str, "str | int | float | bool | None"]


def stringify(value: object) -> str:
    """Render a scalar the way the API expects it on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(template: str, params: PathParams | None = None) -> str:
    """Fill ``{name}`` placeholders in *template* with URL-encoded values.

    >>> build_path("/api/documents/{id}/", {"id": 42})
    '/api/documents/42/'

    Raises:
        MissingPathParameterError: A placeholder has no entry in *params*.
        NullPathParameterError: A placeholder's value is ``None``.
    """
    if params is None:
        missing = _PLACEHOLDER.search(template)
        if missing:
            raise MissingPathParameterError(missing.group(1))
        return template

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in params:
            raise MissingPathParameterError(key)
        value = params[key]
        if value is None:
            raise NullPathParameterError(key)
        return quote(stringify(value), safe="")

    return _PLACEHOLDER.sub(_substitute, template)
