"""Request Middleware — per-application request counter and access log.

Invariants:
    - app.state.request_count increments exactly once per request, before dispatch
    - Exceptions from downstream are not caught here; the catch-all handler owns them
"""

import logging

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_request_counter(app: FastAPI) -> None:
    """Install the counting middleware and initialize the counter."""
    app.state.request_count = 0

    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        request.app.state.request_count += 1
        count = request.app.state.request_count
        logger.info(
            f"{request.method} {request.url.path} => {count}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "request_count": count,
            },
        )
        return await call_next(request)
