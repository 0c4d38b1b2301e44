"""Shared file I/O helpers."""

from .files import remove_path, write_text_atomic

__all__ = ["remove_path", "write_text_atomic"]
