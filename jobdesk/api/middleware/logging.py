"""
Request/Response logging middleware.

Each request gets an id, taken from the caller's X-Request-ID header when
present, which is bound to the logging context for the duration of the
request and echoed back on the response.
"""

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response

from jobdesk.config.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128


def _request_id(request: Request) -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if supplied and len(supplied) <= MAX_REQUEST_ID_LENGTH:
        return supplied
    return str(uuid.uuid4())


class LoggingMiddleware:
    """Request/Response logging middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_logging_middleware()

    def add_logging_middleware(self) -> None:
        """Add request/response logging middleware."""

        @self.app.middleware("http")
        async def logging_middleware(request: Request, call_next: Callable) -> Response:
            request_id = _request_id(request)
            request.state.request_id = request_id
            bind_request_context(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
            )
            start_time = time.perf_counter()

            logger.info(
                "Request started",
                query_params=str(request.query_params),
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    error=str(e),
                    process_time=f"{time.perf_counter() - start_time:.4f}s",
                )
                clear_request_context()
                raise

            process_time = time.perf_counter() - start_time
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                process_time=f"{process_time:.4f}s",
            )
            clear_request_context()

            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"
            return response
