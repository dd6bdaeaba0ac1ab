from __future__ import annotations

from typing import AsyncGenerator, Mapping

import httpx

from libsearch.services.catalog.fetcher import catalog_client
from libsearch.services.catalog.registry import CatalogService, get_registry


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    # One client per inbound request; closed once the response is built
    async with catalog_client() as client:
        yield client


def get_catalog_registry() -> Mapping[str, CatalogService]:
    return get_registry()
