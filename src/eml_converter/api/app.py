"""
FastAPI application exposing the .eml to HTML/PDF conversion.

Run with ``eml-converter-api`` or ``uvicorn eml_converter.api.app:app``.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from ..config import settings
from ..logging_config import setup_logging
from ..version import API_VERSION
from .middleware import setup_error_handlers, setup_request_context_middleware
from .routes import convert, health, version

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm the template cache so a broken install shows up at startup."""
    templates_ok = health.templates_available()
    log = logger.info if templates_ok else logger.warning
    log(
        "api_starting",
        version=API_VERSION,
        templates_loaded=templates_ok,
        block_remote_resources=settings.block_remote_resources,
        max_email_size_mb=settings.max_email_size_mb,
    )
    yield
    logger.info("api_stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="EML Converter",
        description="Converts .eml messages into self-contained HTML and PDF documents",
        version=API_VERSION,
        lifespan=lifespan,
    )

    setup_error_handlers(app)
    setup_request_context_middleware(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(version.router, prefix="/api/v1", tags=["Version"])
    app.include_router(convert.router, prefix="/api/v1/convert", tags=["Conversion"])
    return app


app = create_app()


def main() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
