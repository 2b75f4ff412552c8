"""Entry point for ``python -m paperless_sdk``.

Connects with the ``PAPERLESS_*`` environment settings and reports what
a few read-only endpoints return. Useful to check a URL/token pair.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from paperless_sdk.client import PaperlessClient
from paperless_sdk.config import ClientConfig
from paperless_sdk.exceptions import ConfigurationError, PaperlessApiError

logger = logging.getLogger(__name__)


async def check_connection(config: ClientConfig) -> dict[str, int]:
    """Count the objects of each listable resource on the server."""
    counts: dict[str, int] = {}
    async with PaperlessClient.from_config(config) as client:
        for name, resource in (
            ("documents", client.documents),
            ("tags", client.tags),
            ("correspondents", client.correspondents),
            ("document_types", client.document_types),
        ):
            page = await resource.list({"page_size": 1})
            counts[name] = page.get("count", 0)
            logger.info("%s: %d", name, counts[name])
    return counts


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    try:
        config = ClientConfig.from_env()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        sys.exit(1)

    logger.info("Checking %s", config.base_url)
    try:
        asyncio.run(check_connection(config))
    except PaperlessApiError as exc:
        logger.error("API error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
