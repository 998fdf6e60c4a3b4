# Attachment extraction module

from .extractor import attachment_filename, extract_attachments, is_downloadable

__all__ = ["extract_attachments", "attachment_filename", "is_downloadable"]
