from __future__ import annotations

import asyncio
import logging
import time

import httpx

from libsearch.services.catalog.errors import ExtractionError, FetchError
from libsearch.services.catalog.extractor import extract
from libsearch.services.catalog.fetcher import fetch_body
from libsearch.services.catalog.registry import CatalogService
from libsearch.services.catalog.types import ExtractedRecord, Target

logger = logging.getLogger(__name__)

WorkerResult = ExtractedRecord | None


async def run_target(
    client: httpx.AsyncClient,
    target: Target,
    service: CatalogService,
    results: asyncio.Queue[WorkerResult],
) -> None:
    """Fetch and extract one target, then put exactly one result on ``results``.

    Failures are logged here and reported as ``None``; nothing but the result
    leaves this function. The put happens even if the task is cancelled.
    """
    started = time.perf_counter()
    record: WorkerResult = None
    log_extra = {"provider": target.provider, "domain": target.domain}
    try:
        body = await fetch_body(client, target.url)
        record = extract(body, service)
        if record is not None:
            logger.info("Found %s results", service.name, extra=log_extra)
    except FetchError as exc:
        logger.warning("Catalog request failed: %s", exc.reason, extra={**log_extra, "url": exc.url})
    except ExtractionError as exc:
        logger.warning("Catalog page unusable: %s", exc, extra=log_extra)
    except Exception:
        logger.exception("Unexpected error searching catalog", extra=log_extra)
    finally:
        results.put_nowait(record)
        logger.info(
            "Request completed",
            extra={**log_extra, "duration_ms": round((time.perf_counter() - started) * 1000, 1)},
        )
