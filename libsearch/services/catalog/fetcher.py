from __future__ import annotations

import logging
from urllib.parse import quote_plus

import httpx

from libsearch.core.config import settings
from libsearch.services.catalog.errors import FetchError
from libsearch.services.catalog.registry import CatalogService
from libsearch.services.catalog.types import Target

logger = logging.getLogger(__name__)


def build_target_url(service: CatalogService, domain: str, query: str) -> str:
    base = service.url_template.format(domain=domain)
    sep = "&" if "?" in base else "?"
    return f"{base}{sep}query={quote_plus(query)}"


def build_targets(service: CatalogService, query: str) -> list[Target]:
    return [
        Target(provider=service.key, domain=domain, url=build_target_url(service, domain, query))
        for domain in service.domains
    ]


def catalog_client(**kwargs) -> httpx.AsyncClient:
    """Client for outbound catalog requests.

    Catalog sites serve different (or no) markup to non-browser clients, so
    every request carries a browser User-Agent.
    """
    kwargs.setdefault("timeout", float(settings.fetch_timeout_secs))
    kwargs.setdefault("follow_redirects", True)
    kwargs.setdefault("headers", {"User-Agent": settings.user_agent})
    return httpx.AsyncClient(**kwargs)


async def fetch_body(client: httpx.AsyncClient, url: str) -> bytes:
    logger.info("Making GET request", extra={"url": url})
    try:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.content
    except httpx.HTTPError as exc:
        raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc
