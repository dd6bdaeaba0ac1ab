from __future__ import annotations

import uuid

from starlette.middleware.base import BaseHTTPMiddleware

from libsearch.core.logging import request_id_var

REQUEST_ID_HEADER = "X-Request-Id"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Stamp every log line of a search, worker lines included, with one id."""

    async def dispatch(self, request, call_next):
        req_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(req_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)
        response.headers[REQUEST_ID_HEADER] = req_id
        return response
