"""Transcript text extraction for uploads.

Only plain-text transcripts are accepted.

Tests:
    - tests/unit/test_documents.py
"""

import logging
from pathlib import PurePath

from summarizer.core.errors import InvalidInput

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".txt",)


class UnsupportedFileType(InvalidInput):
    """The upload's extension is not accepted."""


def get_extension(filename: str) -> str:
    """Lowercased extension including the dot, or "" if none."""
    return PurePath(filename).suffix.lower()


def extract_text(filename: str, data: bytes) -> str:
    """Extract transcript text from an upload.

    Args:
        filename: Original filename (used for the type check).
        data: Raw file bytes.

    Returns:
        The trimmed text.

    Raises:
        UnsupportedFileType: If the extension is not allowed.
        InvalidInput: If the bytes are not UTF-8 or the text is blank.
    """
    extension = get_extension(filename)
    if extension not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileType(
            f"Invalid file type. Only {', '.join(ALLOWED_EXTENSIONS)} files are allowed."
        )

    try:
        content = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidInput("File is not valid UTF-8 text") from e

    logger.debug(f"Extracted {len(content)} chars from {filename}")

    content = content.strip()
    if not content:
        raise InvalidInput("File appears to be empty or unreadable")
    return content
