"""
Conversion endpoints - .eml upload in, HTML or PDF document out.
"""

from time import time
from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
import structlog

from ...config import settings
from ...converter import EmlConverter
from ...exceptions import EmlConverterError, MessageParseError, PdfRenderError
from ...models.api_models import ErrorResponse

logger = structlog.get_logger(__name__)
router = APIRouter()


async def read_upload(file: UploadFile) -> bytes:
    """
    Validate and read an uploaded .eml file.

    Raises:
        HTTPException: 400 for non-.eml files, 413 above the size limit
    """
    if not file.filename or not file.filename.lower().endswith(".eml"):
        raise HTTPException(status_code=400, detail="File must be .eml format")

    eml_bytes = await file.read()
    size_mb = len(eml_bytes) / (1024 * 1024)
    if size_mb > settings.max_email_size_mb:
        raise HTTPException(
            status_code=413,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum ({settings.max_email_size_mb}MB)",
        )
    return eml_bytes


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post("/html")
async def convert_to_html(
    file: UploadFile = File(..., description=".eml file to convert"),
) -> Response:
    """
    Convert an .eml file into a self-contained HTML document.

    The response body is encoded in, and declares, the charset of the selected
    message body.
    """
    start_time = time()
    eml_bytes = await read_upload(file)

    try:
        converter = EmlConverter.from_bytes(eml_bytes)
    except MessageParseError as e:
        logger.warning("eml_parse_failed", filename=file.filename, error=str(e))
        return error_response(422, f"Parsing failed: {str(e)}")
    except EmlConverterError as e:
        logger.error("eml_conversion_failed", filename=file.filename, error=str(e), exc_info=True)
        return error_response(422, f"Conversion failed: {str(e)}")

    logger.info(
        "html_conversion_completed",
        filename=file.filename,
        charset=converter.charset,
        processing_time_ms=round((time() - start_time) * 1000, 2),
    )
    return Response(
        content=converter.html_bytes(),
        media_type=f"text/html; charset={converter.charset}",
    )


@router.post("/pdf")
async def convert_to_pdf(
    file: UploadFile = File(..., description=".eml file to convert"),
    include_headers: bool = Query(
        default=settings.add_email_headers,
        description="Prepend From/To/Cc/Date/Subject to the document",
    ),
) -> Response:
    """
    Convert an .eml file into a PDF document.
    """
    start_time = time()
    eml_bytes = await read_upload(file)

    try:
        converter = EmlConverter.from_bytes(eml_bytes, add_email_headers=include_headers)
    except MessageParseError as e:
        logger.warning("eml_parse_failed", filename=file.filename, error=str(e))
        return error_response(422, f"Parsing failed: {str(e)}")
    except EmlConverterError as e:
        logger.error("eml_conversion_failed", filename=file.filename, error=str(e), exc_info=True)
        return error_response(422, f"Conversion failed: {str(e)}")

    try:
        pdf = await run_in_threadpool(converter.pdf_bytes)
    except PdfRenderError as e:
        logger.error("pdf_render_failed", filename=file.filename, error=str(e), exc_info=True)
        return error_response(500, f"Rendering failed: {str(e)}")

    logger.info(
        "pdf_conversion_completed",
        filename=file.filename,
        include_headers=include_headers,
        size_bytes=len(pdf),
        processing_time_ms=round((time() - start_time) * 1000, 2),
    )
    stem = file.filename.rsplit(".", 1)[0]
    if not stem or not stem.isascii() or '"' in stem:
        stem = "email"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{stem}.pdf"'},
    )
