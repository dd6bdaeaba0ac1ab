from __future__ import annotations

import asyncio
import logging
import time
from typing import Mapping

import httpx

from libsearch.services.catalog.errors import ValidationError
from libsearch.services.catalog.fetcher import build_targets
from libsearch.services.catalog.registry import OVERDRIVE, CatalogService
from libsearch.services.catalog.types import SearchResponse
from libsearch.services.catalog.worker import WorkerResult, run_target

logger = logging.getLogger(__name__)


async def search_catalogs(
    query: str | None,
    *,
    client: httpx.AsyncClient,
    registry: Mapping[str, CatalogService],
) -> SearchResponse:
    """Search every OverDrive library domain concurrently and collect what they return.

    One worker is started per domain and exactly one result is drained per
    worker. Records arrive in completion order, which varies between runs.
    Libraries that fail or have no hits are simply left out.
    """
    if not query:
        raise ValidationError("query parameter is required")

    started = time.perf_counter()
    service = registry[OVERDRIVE]
    targets = build_targets(service, query)
    response = SearchResponse()

    logger.info("Search query received", extra={"query": query, "targets": len(targets)})

    results: asyncio.Queue[WorkerResult] = asyncio.Queue(maxsize=len(targets) or 1)
    tasks = [
        asyncio.create_task(run_target(client, target, service, results), name=f"search:{target.domain}")
        for target in targets
    ]
    try:
        for _ in range(len(tasks)):
            record = await results.get()
            if record is not None:
                response.overdrive.append(record)
    finally:
        # Caller went away (or we are done): don't leave fetches running
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    logger.info(
        "Search completed",
        extra={
            "query": query,
            "results": len(response.overdrive),
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
        },
    )
    return response
