"""
Collection of images referenced from the body through Content-ID.
"""

import base64
from email.message import Message
from typing import Dict

import structlog

from ..models.mime_document import ContentType, InlineImage
from ..parsing.mime_utils import get_raw_content, walk_mime_structure

logger = structlog.get_logger(__name__)

CONTENT_ID = "Content-ID"


def collect_inline_images(msg: Message) -> Dict[str, InlineImage]:
    """
    Base64-encode every image part that carries a Content-ID header.

    The map is keyed by the raw header value including its angle brackets, so
    ``"<" + cid + ">"`` finds the image referenced by ``cid:<cid>``. Images
    without a Content-ID cannot be referenced and are ignored.

    Raises:
        MimeDecodeError: If an image payload cannot be read
    """
    images: Dict[str, InlineImage] = {}

    def visit(part: Message, level: int) -> None:
        if part.get_content_maintype() != "image":
            return
        content_ids = part.get_all(CONTENT_ID)
        if not content_ids:
            return

        content_id = str(content_ids[0])
        images[content_id] = InlineImage(
            content_id=content_id,
            data=base64.b64encode(get_raw_content(part)).decode("ascii"),
            content_type=ContentType.from_part(part),
        )

    walk_mime_structure(msg, visit)

    if images:
        logger.debug("inline_images_collected", count=len(images))
    return images
