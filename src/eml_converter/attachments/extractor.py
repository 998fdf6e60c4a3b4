"""
Extraction of message attachments into an output directory.
"""

import mimetypes
from email.message import Message
from pathlib import Path
from typing import List, Optional

import structlog

from ..parsing.eml_parser import decode_header_value
from ..parsing.mime_utils import get_raw_content, is_attachment, walk_mime_structure

logger = structlog.get_logger(__name__)

UNKNOWN_FILENAME = "unknown"
MESSAGE_RFC822 = "message/rfc822"


def is_downloadable(part: Message) -> bool:
    """
    Attachments are parts disposed as "attachment", plus named leaf parts that are
    not referenced inline through a Content-ID.
    """
    if part.get_content_maintype() == "multipart":
        return False
    if is_attachment(part):
        return True
    return part.get_filename() is not None and part.get("Content-ID") is None


def attachment_filename(part: Message) -> str:
    """
    Safe file name for an attachment: decoded, stripped of directories, and
    ``unknown`` plus an extension guessed from the content type when blank.
    """
    filename = Path(decode_header_value(part.get_filename()).replace("\\", "/")).name.strip()
    if filename in ("", ".", ".."):
        content_type = part.get_content_type()
        extension = ".eml" if content_type == MESSAGE_RFC822 else mimetypes.guess_extension(content_type)
        filename = UNKNOWN_FILENAME + (extension or "")
    return filename


def attachment_bytes(part: Message) -> bytes:
    """Decoded content of an attachment; attached messages are re-serialized."""
    if part.get_content_type() == MESSAGE_RFC822 and part.is_multipart():
        return part.get_payload(0).as_bytes()
    return get_raw_content(part)


def _unique_path(directory: Path, filename: str) -> Path:
    candidate = directory / filename
    stem, suffix = candidate.stem, candidate.suffix
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem}-{counter}{suffix}"
        counter += 1
    return candidate


def extract_attachments(msg: Message, directory: Path, limit: Optional[int] = None) -> List[Path]:
    """
    Write the attachments of a message into ``directory``.

    Attached messages are written whole (as .eml) rather than being searched for
    attachments of their own.

    Args:
        msg: Parsed email.Message object
        directory: Existing output directory
        limit: Maximum number of files to write

    Returns:
        Paths of the written files, in document order

    Raises:
        MimeDecodeError: If an attachment payload cannot be read
    """
    directory = Path(directory)
    written: List[Path] = []
    skipped = 0

    def visit(part: Message, level: int) -> None:
        nonlocal skipped
        if not is_downloadable(part):
            return
        if limit is not None and len(written) >= limit:
            skipped += 1
            return

        path = _unique_path(directory, attachment_filename(part))
        with open(path, "xb") as f:
            f.write(attachment_bytes(part))
        written.append(path)
        logger.debug("attachment_written", path=str(path), content_type=part.get_content_type())

    walk_mime_structure(msg, visit)

    if skipped:
        logger.warning("attachment_limit_reached", limit=limit, skipped=skipped)
    return written
