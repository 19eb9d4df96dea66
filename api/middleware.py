"""
Access-log middleware.

Every response carries ``X-Request-ID`` (echoed from the client when sent,
generated otherwise) and ``X-Process-Time`` in seconds.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request

logger = logging.getLogger("onlinebk.access")

REQUEST_ID_HEADER = "X-Request-ID"


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def access_log(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "[%s] %s %s %d %.1fms",
            request_id, request.method, request.url.path,
            response.status_code, elapsed * 1000,
        )
        return response
