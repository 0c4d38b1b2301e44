"""Regex patterns for descriptor field extraction."""

from __future__ import annotations

import re

NAME_FIELD_PATTERN: re.Pattern[str] = re.compile(r"^#?[ \t]*name:[ \t]*(\S.*)$", re.MULTILINE)
DESCRIPTION_FIELD_PATTERN: re.Pattern[str] = re.compile(r"^#?[ \t]*description:[ \t]*(\S.*)$", re.MULTILINE)
