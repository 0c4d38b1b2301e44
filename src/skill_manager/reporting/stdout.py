"""ANSI styling for human-readable terminal output."""

from __future__ import annotations

from skill_manager.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
)


def _colorize(text: str, *codes: str) -> str:
    return f"{''.join(codes)}{text}{ANSI_RESET}"


class Styler:
    """Wraps text in ANSI codes when color output is enabled."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _apply(self, text: str, *codes: str) -> str:
        return _colorize(text, *codes) if self._color else text

    def heading(self, text: str) -> str:
        return self._apply(text, ANSI_BOLD, ANSI_CYAN)

    def info(self, text: str) -> str:
        return self._apply(text, ANSI_CYAN)

    def success(self, text: str) -> str:
        return self._apply(text, ANSI_GREEN)

    def warning(self, text: str) -> str:
        return self._apply(text, ANSI_YELLOW)

    def error(self, text: str) -> str:
        return self._apply(text, ANSI_RED)

    def dim(self, text: str) -> str:
        return self._apply(text, ANSI_DIM)
