"""
Selection of the part that represents the message body.
"""

from email.message import Message
from typing import Optional

import structlog

from ..models.mime_document import BodyCandidate, ContentType
from ..parsing.charset import resolve_charset
from ..parsing.mime_utils import get_string_content, is_attachment, walk_mime_structure

logger = structlog.get_logger(__name__)

TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"


def select_body(msg: Message) -> BodyCandidate:
    """
    Pick the HTML or plain text part that becomes the rendered body.

    Walks the whole tree in document order. Attachment parts and blank texts are
    skipped. An HTML part always replaces the current candidate, so the last HTML
    part wins; a plain text part is only taken while nothing has been selected.
    Messages without any usable text part give an empty entry carrying the root
    content type.

    Args:
        msg: Parsed message (root of the MIME tree)

    Returns:
        The selected BodyCandidate
    """
    entry: Optional[str] = None
    content_type = ContentType.from_part(msg)

    def visit(part: Message, level: int) -> None:
        nonlocal entry, content_type

        part_type = part.get_content_type()
        if part_type not in (TEXT_PLAIN, TEXT_HTML):
            return
        if is_attachment(part):
            logger.debug("body_part_skipped_attachment", content_type=part_type, level=level)
            return

        text = get_string_content(part)
        if not text.strip():
            return

        if entry is None or part_type == TEXT_HTML:
            entry = text
            content_type = ContentType.from_part(part)

    walk_mime_structure(msg, visit)

    candidate = BodyCandidate(
        entry=entry or "",
        content_type=content_type,
        charset=resolve_charset(content_type),
    )
    logger.debug(
        "body_selected",
        content_type=candidate.content_type.base_type,
        charset=candidate.charset,
        length=len(candidate.entry),
    )
    return candidate
