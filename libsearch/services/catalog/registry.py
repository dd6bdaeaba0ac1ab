from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from libsearch.core.config import settings

OVERDRIVE = "overdrive"
CLOUDLIBRARY = "cloudlibrary"


@dataclass(frozen=True)
class CatalogService:
    """A catalog provider: where to search and how to read its result pages."""

    key: str
    name: str
    url_template: str
    domains: tuple[str, ...]
    data_pattern: re.Pattern[str] | None = None
    identifier_pattern: re.Pattern[str] | None = None


DEFAULT_SERVICES: tuple[CatalogService, ...] = (
    CatalogService(
        key=OVERDRIVE,
        name="Overdrive",
        url_template="https://{domain}.overdrive.com/search",
        domains=("lapl", "nypl", "erl", "portphillip", "boroondara", "baysidelibrary"),
        # Search pages assign the result set to a JS global on a single line
        data_pattern=re.compile(r"window\.OverDrive\.mediaItems = (.*);"),
        identifier_pattern=re.compile(
            r"""window\.OverDrive\.tenant\s*=\s*['"]?([^'";\s]+)['"]?\s*;"""
        ),
    ),
    CatalogService(
        key=CLOUDLIBRARY,
        name="Cloud Library",
        url_template=(
            "https://ebook.yourcloudlibrary.com/uisvc/{domain}/Search/CatalogSearch"
            "?media=all&src=lib"
        ),
        domains=("melbourne", "hobsonsbay", "yarra"),
    ),
)


def build_registry(
    services: tuple[CatalogService, ...] = DEFAULT_SERVICES,
    *,
    overdrive_domains: list[str] | None = None,
) -> Mapping[str, CatalogService]:
    table: dict[str, CatalogService] = {}
    for service in services:
        if service.key == OVERDRIVE and overdrive_domains:
            service = replace(service, domains=tuple(overdrive_domains))
        table[service.key] = service
    return MappingProxyType(table)


@lru_cache
def get_registry() -> Mapping[str, CatalogService]:
    """Process-wide, read-only provider table built once from settings."""
    return build_registry(overdrive_domains=settings.overdrive_domains)
