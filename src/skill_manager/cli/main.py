"""CLI entrypoint for Skill Manager."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skill_manager import __version__
from skill_manager.cli.prompts import prompt_repository_path, select_skills
from skill_manager.config import ConfigStore, default_repository_path
from skill_manager.constants.branding import BANNER, CLI_DESCRIPTION, CLI_EPILOG, CLI_PROG
from skill_manager.constants.discovery import DESCRIPTOR_FILENAME
from skill_manager.constants.reporting import FAILED_MARKER, INSTALLED_MARKER
from skill_manager.exceptions import (
    ConfigError,
    InstallCopyError,
    InvalidRepositoryPathError,
    SkillManagerError,
)
from skill_manager.installer import install_skills, install_target_dir
from skill_manager.model import SkillRecord
from skill_manager.reporting import Styler
from skill_manager.scanner import build_choices, group_skills, resolve_repository_root, scan_repository


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG,
        description=CLI_DESCRIPTION,
        epilog=CLI_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--reconfig", action="store_true", help="Clear the stored repository path and exit")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "-t",
        "--target",
        type=Path,
        default=None,
        help="Project directory to install into (default: current directory)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    style = Styler(color=not args.no_color and sys.stdout.isatty())
    store = ConfigStore(args.config)

    if args.reconfig:
        try:
            store.clear()
        except OSError as exc:
            print(style.error(f"Error: {exc}"), file=sys.stderr)
            return 1
        print(style.warning("Configuration cleared. Please reconfigure."))
        return 0

    print(f"\n{style.heading(BANNER)}\n")

    try:
        repository_path = _resolve_repository_path(store, style)
        if repository_path is None:
            print(style.warning("Setup cancelled."), file=sys.stderr)
            return 1
        root = resolve_repository_root(repository_path)
    except ConfigError as exc:
        print(style.error(f"Configuration error: {exc}"), file=sys.stderr)
        return 1
    except InvalidRepositoryPathError as exc:
        print(style.error(str(exc)), file=sys.stderr)
        print(f"{style.warning('Please reconfigure:')} {style.info(f'{CLI_PROG} --reconfig')}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(style.error(f"Error: {exc}"), file=sys.stderr)
        return 1

    print(style.dim(f"Scanning repository: {root}"))
    skills = scan_repository(root)
    if not skills:
        print(style.warning("No skills found in repository."))
        print(style.dim(f"Make sure each skill directory contains a {DESCRIPTOR_FILENAME} file."))
        return 0

    print(style.success(f"Found {len(skills)} skill(s)\n"))

    selected = select_skills(build_choices(group_skills(skills)))
    if not selected:
        print(style.warning("Selection cancelled."), file=sys.stderr)
        return 1

    return _install(selected, (args.target or Path.cwd()).resolve(), style)


def _resolve_repository_path(store: ConfigStore, style: Styler) -> Path | None:
    """Return the stored repository path, running first-time setup if unset."""
    repository_path = store.get_repository_path()
    if repository_path is not None:
        return repository_path

    print(style.warning("First-time setup: Please configure your skills repository path."))
    repository_path = prompt_repository_path(default_repository_path())
    if repository_path is None:
        return None
    store.set_repository_path(repository_path)
    print(style.success("Configuration saved!"))
    return repository_path


def _install(selected: list[SkillRecord], destination_root: Path, style: Styler) -> int:
    """Install the selected skills and report full or partial success."""
    target_dir = install_target_dir(destination_root)
    print(style.info(f"\nInstalling {len(selected)} skill(s) to {target_dir}..."))

    try:
        report = install_skills(
            selected,
            destination_root,
            on_installed=lambda skill, _path: print(style.success(f"{INSTALLED_MARKER} {skill.display_name}")),
        )
    except InstallCopyError as exc:
        print(style.error(f"{FAILED_MARKER} {exc.skill.display_name}: {exc.reason}"), file=sys.stderr)
        if exc.installed:
            print(
                style.warning(f"Partially installed: {len(exc.installed)} of {len(selected)} skill(s) before failure."),
                file=sys.stderr,
            )
        return 1
    except SkillManagerError as exc:
        print(style.error(f"Error: {exc}"), file=sys.stderr)
        return 1

    print(style.success(f"\n{report.count} skill(s) installed successfully!"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
