"""Parsers for skill descriptor files."""

from .descriptor import extract_metadata, read_descriptor, truncate_description

__all__ = ["extract_metadata", "read_descriptor", "truncate_description"]
