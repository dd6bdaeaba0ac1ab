from __future__ import annotations

import logging
from typing import Mapping

import httpx
from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from libsearch.api.deps import get_catalog_registry, get_http_client
from libsearch.services.catalog.coordinator import search_catalogs
from libsearch.services.catalog.errors import ValidationError
from libsearch.services.catalog.registry import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])

# Sent on every search response, with or without an Origin header
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


@router.get("/")
async def search(
    query: str | None = Query(default=None, description="Title, author or keywords"),
    client: httpx.AsyncClient = Depends(get_http_client),
    registry: Mapping[str, CatalogService] = Depends(get_catalog_registry),
):
    try:
        result = await search_catalogs(query, client=client, registry=registry)
    except ValidationError:
        logger.error("Query parameter not found")
        return Response(status_code=400, headers=CORS_HEADERS)

    return JSONResponse(
        content=result.model_dump(mode="json", by_alias=True),
        headers=CORS_HEADERS,
    )
