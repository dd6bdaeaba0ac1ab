import json

import httpx
import pytest
from fastapi.testclient import TestClient

from libsearch.api.deps import get_catalog_registry, get_http_client
from libsearch.main import app
from libsearch.services.catalog.registry import build_registry

DOMAINS = ["lib1", "lib2", "lib3", "lib4", "lib5"]


def overdrive_page(tenant, items):
    """A trimmed-down OverDrive search page with embedded results."""
    return (
        "<html><head><meta charset='utf-8'></head><body><script>\n"
        f"window.OverDrive.mediaItems = {json.dumps(items)};\n"
        f"window.OverDrive.tenant = '{tenant}';\n"
        "</script></body></html>"
    )


EMPTY_PAGE = "<html><body><p>We couldn't find any matches.</p></body></html>"


def domain_of(request: httpx.Request) -> str:
    return request.url.host.split(".", 1)[0]


class FakeCatalogs:
    """Serves canned pages per library domain and records every request."""

    def __init__(self):
        self.pages: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self.pages.get(domain_of(request), EMPTY_PAGE)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, httpx.Response):
            return page
        return httpx.Response(200, text=page)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture()
def registry():
    return build_registry(overdrive_domains=DOMAINS)


@pytest.fixture()
def catalogs():
    return FakeCatalogs()


@pytest.fixture()
def client(catalogs, registry):
    async def override_get_http_client():
        async with httpx.AsyncClient(transport=catalogs.transport()) as c:
            yield c

    app.dependency_overrides[get_http_client] = override_get_http_client
    app.dependency_overrides[get_catalog_registry] = lambda: registry
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
