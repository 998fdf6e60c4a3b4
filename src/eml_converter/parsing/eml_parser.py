"""
Email parser for .eml files (RFC5322/MIME format).

This module handles parsing of email files using Python's standard library email module
and decodes the envelope headers shown in the PDF header block.
"""

from email import message_from_binary_file, message_from_bytes
from email.header import decode_header, make_header
from email.message import Message
from email.utils import getaddresses
from typing import BinaryIO, List

from ..exceptions import MessageParseError
from ..models.header import EmailHeaders


def parse_eml_bytes(eml_bytes: bytes) -> Message:
    """
    Parse .eml bytes into email.Message object.

    Args:
        eml_bytes: Raw .eml file bytes

    Returns:
        Parsed email.Message object

    Raises:
        MessageParseError: If bytes are not valid RFC5322 format
    """
    try:
        return message_from_bytes(eml_bytes)
    except Exception as e:
        raise MessageParseError(f"Failed to parse .eml file: {str(e)}") from e


def parse_eml_stream(stream: BinaryIO) -> Message:
    """
    Parse an open binary stream into email.Message object.

    Raises:
        MessageParseError: If the stream is not valid RFC5322 format
    """
    try:
        return message_from_binary_file(stream)
    except Exception as e:
        raise MessageParseError(f"Failed to parse .eml stream: {str(e)}") from e


def parse_eml_file(eml_path: str) -> Message:
    """
    Parse .eml file into email.Message object.

    Args:
        eml_path: Path to .eml file

    Returns:
        Parsed email.Message object

    Raises:
        FileNotFoundError: If file doesn't exist
        MessageParseError: If file is not valid RFC5322 format
    """
    with open(eml_path, "rb") as f:
        return parse_eml_stream(f)


def decode_header_value(value) -> str:
    """
    Decode RFC 2047 encoded words of a header value.

    Unknown charsets inside encoded words fall back to the undecoded text.
    """
    if value is None:
        return ""
    try:
        return str(make_header(decode_header(str(value))))
    except (LookupError, UnicodeDecodeError, ValueError):
        return str(value)


def _format_addresses(values: List[str]) -> List[str]:
    addresses = []
    for raw_name, address in getaddresses(values):
        name = decode_header_value(raw_name).strip()
        if name and address:
            addresses.append(f"{name} <{address}>")
        elif address:
            addresses.append(address)
        elif name:
            addresses.append(name)
    return addresses


def extract_headers(msg: Message) -> EmailHeaders:
    """
    Extract and decode the envelope headers of a message.

    Args:
        msg: Parsed email.Message object

    Returns:
        EmailHeaders with display-ready values
    """
    from_addresses = _format_addresses(msg.get_all("From", []))

    return EmailHeaders(
        from_address=", ".join(from_addresses),
        to_addresses=_format_addresses(msg.get_all("To", [])),
        cc_addresses=_format_addresses(msg.get_all("Cc", [])),
        subject=decode_header_value(msg.get("Subject", "")).strip(),
        date=str(msg.get("Date", "")).strip(),
    )
