"""Line-oriented metadata extraction for skill descriptor files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from skill_manager.constants.discovery import (
    DEFAULT_DESCRIPTION,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTOR_ENCODING,
    TRUNCATION_MARKER,
)
from skill_manager.constants.parsing import DESCRIPTION_FIELD_PATTERN, NAME_FIELD_PATTERN
from skill_manager.model import DescriptorMetadata

logger = logging.getLogger(__name__)


def extract_metadata(text: str) -> DescriptorMetadata:
    """Extract ``name:`` and ``description:`` fields from descriptor text.

    Each field is taken from the first line that starts (after an optional
    ``#`` and blanks) with the field keyword. Missing fields fall back to
    defaults; this function never raises on malformed input.
    """
    display_name = _first_field_value(NAME_FIELD_PATTERN, text)
    description = _first_field_value(DESCRIPTION_FIELD_PATTERN, text)
    return DescriptorMetadata(
        display_name=display_name,
        description=truncate_description(description if description is not None else DEFAULT_DESCRIPTION),
    )


def read_descriptor(path: Path) -> DescriptorMetadata:
    """Read a descriptor file and extract its metadata.

    Unreadable files are logged and yield default metadata.
    """
    try:
        text = path.read_text(encoding=DESCRIPTOR_ENCODING, errors="replace")
    except OSError as exc:
        logger.warning("Cannot read descriptor %s: %s", path, exc)
        text = ""
    return extract_metadata(text.lstrip("\ufeff"))


def truncate_description(description: str) -> str:
    """Cap a description at the display limit, marking the cut with an ellipsis."""
    if len(description) <= DESCRIPTION_MAX_LENGTH:
        return description
    keep = DESCRIPTION_MAX_LENGTH - len(TRUNCATION_MARKER)
    return description[:keep] + TRUNCATION_MARKER


def _first_field_value(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(1).strip()
