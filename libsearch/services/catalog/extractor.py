from __future__ import annotations

import json
import logging
from typing import Any

from bs4 import UnicodeDammit

from libsearch.services.catalog.errors import ExtractionError
from libsearch.services.catalog.registry import CatalogService
from libsearch.services.catalog.types import ExtractedRecord

logger = logging.getLogger(__name__)


def decode_body(body: bytes) -> str:
    # Catalog pages do not always declare their charset in headers
    return UnicodeDammit(body, is_html=True).unicode_markup or ""


def _parse_data(literal: str, *, service: CatalogService) -> Any:
    try:
        return json.loads(literal)
    except json.JSONDecodeError as exc:
        # Keep the record; an empty payload still tells the caller the library answered
        logger.warning(
            "Embedded catalog data is not valid JSON",
            extra={"provider": service.key, "error": str(exc)},
        )
        return {}


def extract(body: bytes, service: CatalogService) -> ExtractedRecord | None:
    """Pull the embedded result set and library id out of a catalog page.

    Returns ``None`` when the page carries no result data at all (no hits, or
    a page of a different shape). Raises :class:`ExtractionError` when data is
    present but the library identifier is not.
    """
    if service.data_pattern is None:
        raise ExtractionError(f"no data pattern configured for {service.key}")

    html = decode_body(body)

    match = service.data_pattern.search(html)
    if match is None:
        logger.debug("No embedded catalog data found", extra={"provider": service.key})
        return None

    data = _parse_data(match.group(1), service=service)

    ident = service.identifier_pattern.search(html) if service.identifier_pattern else None
    if ident is None:
        raise ExtractionError(f"catalog data found without a library identifier ({service.key})")

    return ExtractedRecord(library=ident.group(1), data=data)
