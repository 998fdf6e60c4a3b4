"""
Header block (From, To, Cc, Date, Subject) prepended to the PDF version of a message.
"""

import html
from email.message import Message
from typing import Iterable, List

import structlog
from bs4 import BeautifulSoup

from ..models.header import HeaderPart, header_part, subject_part
from ..parsing.eml_parser import extract_headers
from .templates import HEADER_CONTAINER_TEMPLATE, render_template

logger = structlog.get_logger(__name__)

HEADER_CONTAINER_ID = "email-header"


def extract_header_parts(msg: Message) -> List[HeaderPart]:
    """
    Build the header rows of a message, HTML-escaped and in display order.
    """
    headers = extract_headers(msg)
    return [
        header_part("From", html.escape(headers.from_address)),
        header_part("To", html.escape(", ".join(headers.to_addresses))),
        header_part("Cc", html.escape(", ".join(headers.cc_addresses))),
        header_part("Date", html.escape(headers.date)),
        subject_part("Subject", html.escape(headers.subject)),
    ]


def render_header_rows(parts: Iterable[HeaderPart]) -> str:
    """Render the non-blank rows with their templates and concatenate them."""
    rows: List[str] = []
    for part in parts:
        if part.is_blank:
            continue
        rows.append(render_template(part.template, name=html.escape(part.name), data=part.data))
    return "".join(rows)


def inject_header_block(document: str, rows: str) -> str:
    """
    Prepend the header container to ``<body>`` and fill it with ``rows``.

    Documents without a body element get one.
    """
    soup = BeautifulSoup(document, "html.parser")
    body = soup.body
    if body is None:
        body = soup.new_tag("body")
        if soup.html is not None:
            soup.html.append(body)
        else:
            soup.append(body)

    container = BeautifulSoup(
        render_template(HEADER_CONTAINER_TEMPLATE, container_id=HEADER_CONTAINER_ID),
        "html.parser",
    )
    for element in reversed(list(container.contents)):
        body.insert(0, element)

    target = soup.find(id=HEADER_CONTAINER_ID)
    for element in list(BeautifulSoup(rows, "html.parser").contents):
        target.append(element)
    logger.debug("header_block_injected", rows_length=len(rows))
    return str(soup)


def add_header_block(document: str, msg: Message) -> str:
    """Render the header rows of ``msg`` into ``document``."""
    return inject_header_block(document, render_header_rows(extract_header_parts(msg)))
