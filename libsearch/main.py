from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from libsearch import __version__
from libsearch.api.router import api_router
from libsearch.core.config import settings
from libsearch.core.logging import configure_logging
from libsearch.core.otel import init_otel
from libsearch.middleware.request_id import RequestIdMiddleware

logger = logging.getLogger(__name__)

configure_logging(settings.log_level)

app = FastAPI(title=settings.api_name, version=__version__)

app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router)

init_otel(app)


def run() -> None:
    import uvicorn

    logger.info("HTTP server listening on port %s", settings.port, extra={"port": settings.port})
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
