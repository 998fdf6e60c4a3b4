"""
Reconstruction of a self-contained HTML document from the selected body.

HTML bodies keep their markup: ``cid:`` references become base64 ``data:`` URIs
and any ``<meta charset>`` declaration is rewritten to the charset the document
is encoded with. Plain text bodies are wrapped into a whitespace-preserving
block inside a minimal HTML document, and ``[cid:...]`` markers are turned into
image elements. A message without a usable body always gets the wrapper document,
even when its root part is text/html.
"""

import html
import re
from typing import Dict

from ..models.mime_document import BodyCandidate, InlineImage
from .replacer import Replacer, substitute
from .templates import HTML_WRAPPER_TEMPLATE, render_template

# src="cid:image001.png@01D9" -> group(1) is the Content-ID without brackets
IMG_CID_REGEX = re.compile(r'cid:(.*?)"', re.DOTALL)
# "[cid:image001.png@01D9]" as written by mail clients into text/plain bodies
IMG_CID_PLAIN_REGEX = re.compile(r"\[cid:(.*?)\]", re.DOTALL)
# group(1) is everything up to the charset value, group(2) the value itself
HTML_META_CHARSET_REGEX = re.compile(
    r"""(<meta(?!\s*(?:name|value)\s*=)[^>]*?charset\s*=[\s"']*)([^\s"'/>]*)""",
    re.IGNORECASE | re.DOTALL,
)

PRE_WRAP_BLOCK = '<div style="white-space: pre-wrap">{}</div>'


def image_replacer(images: Dict[str, InlineImage], with_img_tag: bool = False) -> Replacer:
    """
    Build a callback that swaps a cid reference for the image's data URI.

    The result keeps the closing quote consumed by the match. References to
    unknown Content-IDs are returned unchanged.
    """

    def replace(match: re.Match) -> str:
        image = images.get(f"<{match.group(1)}>")
        if image is None:
            return match.group(0)
        data = f'{image.data_uri()}"'
        return f'<img src="{data} />' if with_img_tag else data

    return replace


def charset_replacer(charset: str) -> Replacer:
    def replace(match: re.Match) -> str:
        return match.group(1) + charset

    return replace


def plain_text_to_html(text: str) -> str:
    """Turn line feeds into ``<br>`` and drop carriage returns."""
    return text.replace("\n", "<br>").replace("\r", "")


def synthesize(
    candidate: BodyCandidate, images: Dict[str, InlineImage], title: str = ""
) -> str:
    """
    Produce the final HTML document for a body candidate.

    Args:
        candidate: Selected body with its resolved charset
        images: Inline images keyed by raw Content-ID
        title: Document title for plain text bodies

    Returns:
        Complete HTML document
    """
    body = candidate.entry
    charset = candidate.charset

    if candidate.is_html and not candidate.is_empty:
        if images:
            body = substitute(body, IMG_CID_REGEX, image_replacer(images))
        return substitute(body, HTML_META_CHARSET_REGEX, charset_replacer(charset))

    document = render_template(
        HTML_WRAPPER_TEMPLATE,
        charset=charset,
        title=html.escape(title),
        body=PRE_WRAP_BLOCK.format(plain_text_to_html(body)),
    )
    if images:
        document = substitute(
            document, IMG_CID_PLAIN_REGEX, image_replacer(images, with_img_tag=True)
        )
    return document
