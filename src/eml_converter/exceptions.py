"""
Exception hierarchy for the email conversion pipeline.

Decode problems that can be recovered locally (unknown charsets, bytes that do not
match the declared charset) never surface as exceptions; everything defined here is
fatal for the conversion in progress and is propagated to the caller.
"""


class EmlConverterError(Exception):
    """Base class for all conversion errors."""


class MessageParseError(EmlConverterError, ValueError):
    """Raised when raw bytes cannot be parsed into a MIME message."""


class MalformedMessageError(EmlConverterError):
    """Raised when a multipart part does not expose an enumerable list of children."""


class MimeDecodeError(EmlConverterError):
    """Raised when the raw payload of a part cannot be read."""


class TemplateNotFoundError(EmlConverterError):
    """Raised when a named HTML template is not packaged with the library."""


class PdfRenderError(EmlConverterError):
    """Raised when the HTML document cannot be rendered into a PDF."""
