"""
Header metadata rows shown above the message body in the PDF.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HEADER_TEMPLATE = "header_row"


class EmailHeaders(BaseModel):
    """Decoded envelope headers of a message (display form, not HTML-escaped)."""

    from_address: str = Field(default="", description="From, as 'Name <address>'")
    to_addresses: List[str] = Field(default_factory=list, description="To addresses")
    cc_addresses: List[str] = Field(default_factory=list, description="CC addresses")
    subject: str = Field(default="", description="Decoded subject")
    date: str = Field(default="", description="Date header as sent")


class HeaderPart(BaseModel):
    """One labelled header row (From, To, Subject, ...)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Row label")
    data: Optional[str] = Field(None, description="Row value as HTML, None when blank")
    template: str = Field(
        default=DEFAULT_HEADER_TEMPLATE, description="Name of the row template"
    )

    @property
    def is_blank(self) -> bool:
        return not self.data or not self.data.strip()


def header_part(name: str, data: Optional[str], template: Optional[str] = None) -> HeaderPart:
    """
    Create a header row. Blank data is normalized to None.

    Raises:
        ValueError: If the row label is blank
    """
    if not name or not name.strip():
        raise ValueError("Header name must not be blank")
    if data is not None and not data.strip():
        data = None
    return HeaderPart(name=name, data=data, template=template or DEFAULT_HEADER_TEMPLATE)


def subject_part(name: str, data: Optional[str], template: Optional[str] = None) -> HeaderPart:
    """Create a header row whose value is rendered in bold."""
    if data is not None and data.strip():
        data = f"<b>{data}</b>"
    return header_part(name, data, template)
