"""
MIME utility functions for handling multipart email messages.

This module provides the tree walker shared by body selection and inline image
collection, plus helpers for reading part content.
"""

from email.message import Message
from typing import Callable

import structlog

from ..exceptions import MalformedMessageError, MimeDecodeError
from .charset import DEFAULT_CHARSET

logger = structlog.get_logger(__name__)

PartCallback = Callable[[Message, int], None]


def walk_mime_structure(part: Message, callback: PartCallback, level: int = 0) -> None:
    """
    Visit a MIME tree depth-first in document order.

    The callback runs for a part before any of its children. Only multipart parts
    are descended into; an attached message/rfc822 is visited as a single node.
    An exception raised by the callback stops the walk and propagates.

    Args:
        part: Root of the (sub)tree
        callback: Called as callback(part, level)
        level: Nesting depth of ``part``

    Raises:
        MalformedMessageError: If a multipart part has no enumerable children
    """
    callback(part, level)
    if part.get_content_maintype() != "multipart":
        return

    children = part.get_payload()
    if not isinstance(children, list):
        raise MalformedMessageError(
            f"{part.get_content_type()} part at depth {level} has no child parts"
        )
    for child in children:
        if not isinstance(child, Message):
            raise MalformedMessageError(
                f"{part.get_content_type()} part at depth {level} contains a non-MIME child"
            )
        walk_mime_structure(child, callback, level + 1)


def is_attachment(part: Message) -> bool:
    """
    Determine if the part is disposed as an attachment.

    Args:
        part: Message part to check

    Returns:
        True if Content-Disposition is "attachment" (any case)
    """
    return part.get_content_disposition() == "attachment"


def get_raw_content(part: Message) -> bytes:
    """
    Read the transfer-decoded bytes of a leaf part.

    Raises:
        MimeDecodeError: If the part has no readable payload
    """
    raw = part.get_payload(decode=True)
    if raw is None:
        raise MimeDecodeError(f"Cannot read payload of {part.get_content_type()} part")
    return raw


def get_string_content(part: Message) -> str:
    """
    Decode a text part with its declared charset.

    When the declared charset is unknown or does not match the bytes, the raw
    payload is decoded as UTF-8 with replacement characters instead.

    Args:
        part: Text part to decode

    Returns:
        Decoded string content

    Raises:
        MimeDecodeError: If the raw payload cannot be read either
    """
    raw = get_raw_content(part)
    charset = part.get_content_charset() or DEFAULT_CHARSET
    try:
        return raw.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        logger.debug(
            "declared_charset_decode_failed",
            charset=charset,
            content_type=part.get_content_type(),
            error=str(e),
        )
        return raw.decode(DEFAULT_CHARSET, errors="replace")
