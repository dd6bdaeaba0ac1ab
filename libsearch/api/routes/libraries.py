from __future__ import annotations

from typing import Mapping

from fastapi import APIRouter, Depends

from libsearch.api.deps import get_catalog_registry
from libsearch.schemas.library import CatalogServiceOut
from libsearch.services.catalog.registry import CatalogService

router = APIRouter(tags=["libraries"])


@router.get("/libraries", response_model=list[CatalogServiceOut])
def list_libraries(registry: Mapping[str, CatalogService] = Depends(get_catalog_registry)):
    return [
        CatalogServiceOut(
            key=s.key,
            name=s.name,
            url_template=s.url_template,
            domains=list(s.domains),
        )
        for s in registry.values()
    ]
