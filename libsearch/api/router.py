from __future__ import annotations

from fastapi import APIRouter

from libsearch.api.routes import health, libraries, search

api_router = APIRouter()

for _mod in (health, libraries, search):
    api_router.include_router(_mod.router)
