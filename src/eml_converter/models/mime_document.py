"""
Value objects produced while rendering a MIME message into HTML.

All models are frozen: a body candidate or an inline image never changes once a
tree walk has produced it.
"""

from email.message import Message
from email.utils import collapse_rfc2231_value
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ContentType(BaseModel):
    """Structured Content-Type: base type plus parameters."""

    model_config = ConfigDict(frozen=True)

    base_type: str = Field(description="Lower-case type/subtype, e.g. text/html")
    params: Dict[str, str] = Field(
        default_factory=dict, description="Parameters keyed by lower-case name"
    )

    @classmethod
    def from_part(cls, part: Message) -> "ContentType":
        """
        Build the content type of a message part.

        Parts without a Content-Type header get the RFC 2045 default
        (text/plain, or message/rfc822 inside multipart/digest).
        """
        params = {}
        for name, value in (part.get_params() or [])[1:]:
            params[name.lower()] = collapse_rfc2231_value(value)
        return cls(base_type=part.get_content_type(), params=params)

    @classmethod
    def parse(cls, header_value: str) -> "ContentType":
        """Parse a raw Content-Type header value."""
        holder = Message()
        holder["Content-Type"] = header_value
        return cls.from_part(holder)

    @property
    def maintype(self) -> str:
        return self.base_type.split("/", 1)[0]

    def get_param(self, name: str, default: str = "") -> str:
        return self.params.get(name.lower(), default)

    def match(self, pattern: str) -> bool:
        """
        Match against ``type/subtype`` or a ``type/*`` wildcard (case-insensitive).
        """
        pattern = pattern.lower()
        if pattern.endswith("/*"):
            return self.maintype == pattern[:-2]
        return self.base_type == pattern

    def __str__(self) -> str:
        rendered = self.base_type
        for name, value in self.params.items():
            rendered += f'; {name}="{value}"'
        return rendered


class BodyCandidate(BaseModel):
    """The single text payload chosen to represent the message body."""

    model_config = ConfigDict(frozen=True)

    entry: str = Field(default="", description="Decoded body text, empty if none found")
    content_type: ContentType = Field(description="Content type of the selected part")
    charset: str = Field(description="Resolved charset used for the output document")

    @property
    def is_html(self) -> bool:
        return self.content_type.match("text/html")

    @property
    def is_empty(self) -> bool:
        return not self.entry


class InlineImage(BaseModel):
    """An image part that can be referenced from the body through its Content-ID."""

    model_config = ConfigDict(frozen=True)

    content_id: str = Field(description="Raw Content-ID header value, angle brackets intact")
    data: str = Field(description="Base64 encoded image bytes")
    content_type: ContentType = Field(description="Content type of the image part")

    def data_uri(self) -> str:
        return f"data:{self.content_type.base_type};base64,{self.data}"


class RenderedMessage(BaseModel):
    """Result of a full HTML rendering of one message."""

    model_config = ConfigDict(frozen=True)

    html: str = Field(description="Self-contained HTML document")
    charset: str = Field(description="Charset the document declares and must be encoded with")
    candidate: BodyCandidate = Field(description="Body the document was built from")
    inline_images: Dict[str, InlineImage] = Field(
        default_factory=dict, description="Inline images keyed by Content-ID"
    )
