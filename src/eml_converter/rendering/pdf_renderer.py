"""
HTML to PDF rendering with WeasyPrint.

WeasyPrint is imported lazily: it needs native Pango/GLib libraries that are not
required for producing the HTML document alone.
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from ..config import settings
from ..exceptions import PdfRenderError

logger = structlog.get_logger(__name__)

EMPTY_RESOURCE = {"string": b"", "mime_type": "image/png"}


def page_stylesheet(page_size: str, margin: str) -> str:
    return f"@page {{ size: {page_size}; margin: {margin}; }}"


def _local_only_fetcher(default_fetcher):
    """
    Wrap WeasyPrint's fetcher so that only ``data:`` and ``file:`` URLs load.
    """

    def fetch(url: str, *args, **kwargs):
        if url.startswith(("data:", "file:")):
            return default_fetcher(url, *args, **kwargs)
        logger.debug("remote_resource_blocked", url=url[:100])
        return dict(EMPTY_RESOURCE)

    return fetch


def render_pdf(document: str, target: Optional[Union[str, Path]] = None) -> Optional[bytes]:
    """
    Render an HTML document to PDF.

    Args:
        document: Complete HTML document
        target: Output path; when omitted the PDF bytes are returned

    Returns:
        PDF bytes when ``target`` is None, otherwise None

    Raises:
        PdfRenderError: If WeasyPrint fails
    """
    from weasyprint import CSS, HTML, default_url_fetcher

    fetcher = (
        _local_only_fetcher(default_url_fetcher)
        if settings.block_remote_resources
        else default_url_fetcher
    )
    try:
        page_css = CSS(string=page_stylesheet(settings.pdf_page_size, settings.pdf_page_margin))
        pdf = HTML(string=document, url_fetcher=fetcher).write_pdf(
            str(target) if target is not None else None,
            stylesheets=[page_css],
        )
    except Exception as e:
        raise PdfRenderError(f"PDF rendering failed: {str(e)}") from e

    logger.info("pdf_rendered", target=str(target) if target else None)
    return pdf
