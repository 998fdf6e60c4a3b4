"""
API request and response models for FastAPI endpoints.

This module defines the Pydantic models used for API response validation.
"""

from pydantic import BaseModel, Field


class ComponentVersions(BaseModel):
    """Versions of the components taking part in a conversion."""

    parser_version: str = Field(description="Email parser version", examples=["eml-parser-1.0.0"])
    renderer_version: str = Field(description="HTML renderer version")
    header_block_version: str = Field(description="Header block renderer version")
    pdf_renderer_version: str = Field(description="PDF renderer version")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["1.0.0"])
    uptime_seconds: float = Field(description="Service uptime")
    templates_loaded: bool = Field(description="Whether the HTML templates are readable")


class VersionResponse(BaseModel):
    """Version information response."""

    api_version: str = Field(description="API version")
    components: ComponentVersions = Field(description="Current component versions")


class ErrorResponse(BaseModel):
    """Body returned when a conversion fails."""

    success: bool = Field(default=False)
    error: str = Field(description="Error message")
