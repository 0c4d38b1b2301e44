"""Command-line interface for Skill Manager."""
