# Email parsing module

from .charset import DEFAULT_CHARSET, resolve_charset
from .eml_parser import (
    decode_header_value,
    extract_headers,
    parse_eml_bytes,
    parse_eml_file,
    parse_eml_stream,
)
from .mime_utils import (
    get_raw_content,
    get_string_content,
    is_attachment,
    walk_mime_structure,
)

__all__ = [
    "DEFAULT_CHARSET",
    "resolve_charset",
    "parse_eml_bytes",
    "parse_eml_file",
    "parse_eml_stream",
    "decode_header_value",
    "extract_headers",
    "walk_mime_structure",
    "is_attachment",
    "get_raw_content",
    "get_string_content",
]
