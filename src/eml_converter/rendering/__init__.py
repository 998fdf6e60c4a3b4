# MIME to HTML rendering module

from email.message import Message

import structlog

from ..models.mime_document import RenderedMessage
from ..parsing.eml_parser import decode_header_value
from .body_selector import select_body
from .header_renderer import (
    HEADER_CONTAINER_ID,
    add_header_block,
    extract_header_parts,
    inject_header_block,
    render_header_rows,
)
from .html_synthesizer import synthesize
from .inline_images import collect_inline_images
from .pdf_renderer import render_pdf
from .replacer import substitute
from .templates import load_template

logger = structlog.get_logger(__name__)


def render_message(msg: Message) -> RenderedMessage:
    """
    Render a parsed message into a self-contained HTML document.

    Two independent walks of the tree: body selection, then inline image
    collection. The message itself is not modified.
    """
    candidate = select_body(msg)
    images = collect_inline_images(msg)
    document = synthesize(
        candidate, images, title=decode_header_value(msg.get("Subject", "")).strip()
    )

    logger.info(
        "message_rendered",
        content_type=candidate.content_type.base_type,
        charset=candidate.charset,
        inline_images=len(images),
        empty_body=candidate.is_empty,
    )
    return RenderedMessage(
        html=document,
        charset=candidate.charset,
        candidate=candidate,
        inline_images=images,
    )


__all__ = [
    "HEADER_CONTAINER_ID",
    "render_message",
    "select_body",
    "collect_inline_images",
    "synthesize",
    "substitute",
    "load_template",
    "extract_header_parts",
    "render_header_rows",
    "inject_header_block",
    "add_header_block",
    "render_pdf",
]
