"""
Converter configuration, read from ``EML_*`` environment variables or ``.env``.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Defaults for the CLI, the API and the PDF renderer.

    Example: ``EML_PDF_PAGE_SIZE=Letter`` overrides ``pdf_page_size``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EML_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = True

    # Upload and extraction limits
    max_email_size_mb: int = Field(25, ge=0)
    max_attachments: int = Field(50, ge=0)

    # Output file names
    default_html_name: str = "email.html"
    default_pdf_name: str = "email.pdf"
    temp_dir_prefix: str = "eml-converter-"

    # WeasyPrint
    pdf_page_size: str = "A4"
    pdf_page_margin: str = "20mm"
    block_remote_resources: bool = True

    # Default conversion options
    add_email_headers: bool = False
    download_attachments: bool = False


settings = Settings()
