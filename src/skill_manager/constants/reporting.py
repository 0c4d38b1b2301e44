"""Constants for terminal formatting and interactive prompts."""

from __future__ import annotations

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"

CATEGORY_HEADER_MARKER: str = "■"
INSTALLED_MARKER: str = "✓"
FAILED_MARKER: str = "✗"
DISPLAY_NAME_WIDTH: int = 30

SELECT_SKILLS_MESSAGE: str = "Select skills to install (use space to select, enter to confirm):"
EMPTY_SELECTION_MESSAGE: str = "Please select at least one skill."
REPOSITORY_PROMPT_MESSAGE: str = "Enter the path to your skills repository:"
REPOSITORY_MISSING_MESSAGE: str = "Path does not exist. Please create the directory first."
