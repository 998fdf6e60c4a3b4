"""
Request context and error handling for the conversion API.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from ..exceptions import EmlConverterError
from ..logging_config import bind_conversion_context
from ..models.api_models import ErrorResponse

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context_middleware(app: FastAPI) -> None:
    """
    Bind a request id (taken from ``X-Request-ID`` or generated) and the route
    to every log record of a request, and echo the id in the response.
    """

    @app.middleware("http")
    async def request_context(request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        bind_conversion_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        logger.info(
            "request_handled",
            status_code=response.status_code,
            process_time_ms=round(elapsed * 1000, 2),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        return response


def setup_error_handlers(app: FastAPI) -> None:
    """
    Turn conversion errors that escape a route into ErrorResponse bodies.

    Routes answer expected failures themselves; what reaches these handlers is
    a server-side problem (missing templates, unexpected exceptions).
    """

    @app.exception_handler(EmlConverterError)
    async def conversion_error(request: Request, exc: EmlConverterError) -> JSONResponse:
        logger.error("conversion_error_unhandled", error=str(exc), exc_info=exc)
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unexpected_error", error=str(exc), exc_info=exc)
        message = str(exc) if app.debug else "An unexpected error occurred"
        return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())
