"""Configuration defaults, filenames, and keys."""

from __future__ import annotations

CONFIG_DIRNAME: str = ".skill-manager"
CONFIG_FILENAME: str = "config.yaml"
CONFIG_PATH_ENV_VAR: str = "SKILL_MANAGER_CONFIG"
CONFIG_TEMP_PREFIX: str = ".tmp-"
CONFIG_TEMP_SUFFIX: str = ".yaml"

REPOSITORY_PATH_KEY: str = "repository_path"
DEFAULT_REPOSITORY_DIRNAME: str = "skills-warehouse"
