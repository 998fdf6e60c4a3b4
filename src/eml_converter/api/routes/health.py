"""
Health check endpoint for monitoring.
"""

import time
from fastapi import APIRouter

from ...exceptions import TemplateNotFoundError
from ...models.api_models import HealthResponse
from ...rendering.templates import (
    HEADER_CONTAINER_TEMPLATE,
    HEADER_ROW_TEMPLATE,
    HTML_WRAPPER_TEMPLATE,
    load_template,
)
from ...version import API_VERSION

router = APIRouter()

# Track start time for uptime calculation
_start_time = time.time()


def templates_available() -> bool:
    try:
        for name in (HTML_WRAPPER_TEMPLATE, HEADER_CONTAINER_TEMPLATE, HEADER_ROW_TEMPLATE):
            load_template(name)
    except TemplateNotFoundError:
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for monitoring.

    Reports "degraded" when the packaged HTML templates cannot be read.
    """
    ok = templates_available()
    return HealthResponse(
        status="healthy" if ok else "degraded",
        version=API_VERSION,
        uptime_seconds=time.time() - _start_time,
        templates_loaded=ok,
    )
