# Data models for the converter

from .converted_file import ConvertedFile
from .header import EmailHeaders, HeaderPart, header_part, subject_part
from .mime_document import BodyCandidate, ContentType, InlineImage, RenderedMessage

__all__ = [
    "BodyCandidate",
    "ContentType",
    "ConvertedFile",
    "EmailHeaders",
    "HeaderPart",
    "InlineImage",
    "RenderedMessage",
    "header_part",
    "subject_part",
]
