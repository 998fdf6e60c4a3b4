"""
Files produced by a conversion.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class ConvertedFile(BaseModel):
    """Paths of the generated HTML and PDF files and of extracted attachments."""

    html: Optional[Path] = Field(None, description="Generated HTML file")
    pdf: Optional[Path] = Field(None, description="Generated PDF file")
    attachments: List[Path] = Field(
        default_factory=list, description="Attachments written next to the output"
    )

    def add_attachment(self, path: Path) -> None:
        self.attachments.append(path)
