"""
Version constants for the conversion pipeline.

Bump a component version whenever its output for the same input changes.
"""

from .models.api_models import ComponentVersions

# API Version
API_VERSION = "1.0.0"

# Component versions
PARSER_VERSION = "eml-parser-1.0.0"
RENDERER_VERSION = "html-renderer-1.0.0"
HEADER_BLOCK_VERSION = "header-block-1.0.0"
PDF_RENDERER_VERSION = "weasyprint-pdf-1.0.0"


def get_component_versions() -> ComponentVersions:
    """
    Get current component versions for audit and debugging.

    Returns:
        ComponentVersions instance with current versions
    """
    return ComponentVersions(
        parser_version=PARSER_VERSION,
        renderer_version=RENDERER_VERSION,
        header_block_version=HEADER_BLOCK_VERSION,
        pdf_renderer_version=PDF_RENDERER_VERSION,
    )
