"""Constants for the install target layout."""

from __future__ import annotations

INSTALL_RELATIVE_PARTS: tuple[str, ...] = (".claude", "skills")
