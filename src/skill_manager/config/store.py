"""YAML-backed key-value store for the repository path setting."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from skill_manager.constants.config import (
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    CONFIG_PATH_ENV_VAR,
    CONFIG_TEMP_PREFIX,
    CONFIG_TEMP_SUFFIX,
    DEFAULT_REPOSITORY_DIRNAME,
    REPOSITORY_PATH_KEY,
)
from skill_manager.exceptions import ConfigError
from skill_manager.io import write_text_atomic

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Return the config file path, honoring the ``SKILL_MANAGER_CONFIG`` override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def default_repository_path() -> Path:
    """Return the suggested repository location for first-time setup."""
    return Path.home() / DEFAULT_REPOSITORY_DIRNAME


class ConfigStore:
    """Reads and writes the stored repository path.

    The store holds a single ``repository_path`` string. A missing file
    means nothing is configured yet.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or default_config_path()).expanduser()

    def load(self) -> dict[str, Any]:
        """Load the raw config mapping; missing files load as empty."""
        if not self.path.exists():
            return {}

        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML config file at {self.path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Failed to load config {self.path}: {exc}") from exc

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file at {self.path} must be a YAML mapping")
        return raw

    def get_repository_path(self) -> Path | None:
        """Return the configured repository path, or ``None`` if unset."""
        value = self.load().get(REPOSITORY_PATH_KEY)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ConfigError(f"{REPOSITORY_PATH_KEY} must be a string in {self.path}")
        if not value.strip():
            return None
        return Path(value.strip()).expanduser()

    def set_repository_path(self, repository_path: Path | str) -> None:
        """Persist *repository_path*, keeping any other keys in the file."""
        payload = self.load()
        payload[REPOSITORY_PATH_KEY] = str(repository_path)
        write_text_atomic(
            path=self.path,
            content=yaml.safe_dump(payload, sort_keys=True),
            temp_prefix=CONFIG_TEMP_PREFIX,
            temp_suffix=CONFIG_TEMP_SUFFIX,
        )
        logger.debug("Saved %s=%s to %s", REPOSITORY_PATH_KEY, repository_path, self.path)

    def clear(self) -> bool:
        """Delete the stored configuration. Returns ``True`` if a file was removed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True
