"""
Conversion of an .eml message into HTML and PDF files.

Optionally the message attachments are written next to the generated files, and
a header block (sender, recipients, date, subject) is added to the PDF.
"""

import tempfile
from email.message import Message
from pathlib import Path
from typing import BinaryIO, Optional, Union

import structlog

from .attachments import extract_attachments
from .config import settings
from .exceptions import PdfRenderError
from .models.converted_file import ConvertedFile
from .models.mime_document import RenderedMessage
from .parsing.eml_parser import parse_eml_bytes, parse_eml_file, parse_eml_stream
from .rendering import add_header_block, render_message, render_pdf

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def encode_document(document: str, charset: str) -> bytes:
    """
    Encode an HTML document in its declared charset.

    Characters the charset cannot represent become numeric character references.
    """
    return document.encode(charset, errors="xmlcharrefreplace")


class EmlConverter:
    """
    Converts one message. Instances hold no state shared with other conversions.

    Args:
        msg: Parsed message
        download_attachments: Write attachments next to the generated files
        add_email_headers: Prepend the header block to the PDF
    """

    def __init__(
        self,
        msg: Message,
        download_attachments: bool = False,
        add_email_headers: bool = False,
    ):
        self.message = msg
        self.download_attachments = download_attachments
        self.add_email_headers = add_email_headers
        self.rendered: RenderedMessage = render_message(msg)

    @classmethod
    def from_bytes(cls, eml_bytes: bytes, **options) -> "EmlConverter":
        return cls(parse_eml_bytes(eml_bytes), **options)

    @classmethod
    def from_file(cls, eml_path: PathLike, **options) -> "EmlConverter":
        return cls(parse_eml_file(str(eml_path)), **options)

    @classmethod
    def from_stream(cls, stream: BinaryIO, **options) -> "EmlConverter":
        return cls(parse_eml_stream(stream), **options)

    @property
    def html_body(self) -> str:
        return self.rendered.html

    @property
    def charset(self) -> str:
        return self.rendered.charset

    def html_bytes(self) -> bytes:
        return encode_document(self.html_body, self.charset)

    def pdf_html(self) -> str:
        """The document handed to the PDF renderer, with the header block if enabled."""
        if not self.add_email_headers:
            return self.html_body
        return add_header_block(self.html_body, self.message)

    def pdf_bytes(self) -> bytes:
        return render_pdf(self.pdf_html())

    def create_file(
        self,
        temp_dir: Optional[PathLike] = None,
        html_name: Optional[str] = None,
        pdf_name: Optional[str] = None,
        render_pdf_file: bool = True,
    ) -> ConvertedFile:
        """
        Write the HTML file, the PDF file and (optionally) the attachments.

        Args:
            temp_dir: Output directory, a new temporary directory when omitted
            html_name: HTML file name, ``settings.default_html_name`` when blank
            pdf_name: PDF file name, ``settings.default_pdf_name`` when blank
            render_pdf_file: Set to False to only write the HTML file

        Returns:
            ConvertedFile with the paths of everything written

        Raises:
            FileExistsError: If an output file already exists
            PdfRenderError: If the PDF cannot be rendered
        """
        if temp_dir is None:
            temp_dir = tempfile.mkdtemp(prefix=settings.temp_dir_prefix)
        output_dir = Path(temp_dir)
        if not html_name or not html_name.strip():
            html_name = settings.default_html_name
        if not pdf_name or not pdf_name.strip():
            pdf_name = settings.default_pdf_name

        converted = ConvertedFile()

        html_path = output_dir / html_name
        with open(html_path, "xb") as f:
            f.write(self.html_bytes())
        converted.html = html_path

        if render_pdf_file:
            pdf_path = output_dir / pdf_name
            # Exclusive create so an existing PDF is never overwritten
            with open(pdf_path, "xb"):
                pass
            try:
                render_pdf(self.pdf_html(), pdf_path)
            except PdfRenderError:
                # Leave nothing behind so the conversion can be retried in place
                pdf_path.unlink(missing_ok=True)
                html_path.unlink(missing_ok=True)
                logger.warning("partial_output_removed", html=str(html_path), pdf=str(pdf_path))
                raise
            converted.pdf = pdf_path

        if self.download_attachments:
            for path in extract_attachments(self.message, output_dir, limit=settings.max_attachments):
                converted.add_attachment(path)

        logger.info(
            "conversion_completed",
            output_dir=str(output_dir),
            html=str(converted.html),
            pdf=str(converted.pdf) if converted.pdf else None,
            attachments=len(converted.attachments),
        )
        return converted
