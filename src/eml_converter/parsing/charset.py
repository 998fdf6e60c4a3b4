"""
Charset resolution for MIME parts.
"""

import codecs

from ..models.mime_document import ContentType

DEFAULT_CHARSET = "utf-8"


def is_known_charset(charset: str) -> bool:
    """True for text encodings only; bytes-to-bytes codecs such as base64 or rot13 do not count."""
    try:
        codecs.lookup(charset)
        "".encode(charset)
    except LookupError:
        return False
    return True


def resolve_charset(content_type: ContentType) -> str:
    """
    Resolve the charset declared on a content type.

    The declared name is returned as written when Python knows the codec;
    absent, blank or unknown declarations resolve to UTF-8.
    """
    charset = content_type.get_param("charset").strip()
    if charset and is_known_charset(charset):
        return charset
    return DEFAULT_CHARSET
