"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "Skill Manager"
CLI_PROG: str = "skill-manager"
BANNER: str = "📦 Claude Code Skill Manager"
CLI_DESCRIPTION: str = "\n".join((BANNER, "", f"{BRAND_NAME} - install Claude Code skills from a local repository"))
CLI_EPILOG: str = "\n".join(
    (
        "usage examples:",
        f"  {CLI_PROG}              Install skills from repository",
        f"  {CLI_PROG} --reconfig   Reconfigure repository path",
        f"  {CLI_PROG} --help       Show this help message",
    )
)
