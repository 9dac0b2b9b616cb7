"""
Configuration loader — reads verless.yml into a Config model.

Reads YAML, validates it against the Pydantic schema, and returns a
typed Config.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from verless.core.config.constants import CONFIG_FILE
from verless.core.models.config import Config

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when project configuration is invalid or missing."""


def find_project_file(start_dir: Path | None = None) -> Path | None:
    """Search for verless.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to verless.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_project_root(project: str | Path | None = None) -> Path:
    """Return the project directory a command should act on.

    An explicit *project* wins.  Otherwise the nearest directory above
    the cwd holding a verless.yml is used, falling back to the cwd.
    """
    if project is not None:
        return Path(project)

    found = find_project_file()
    if found is None:
        return Path.cwd()
    return found.parent


def load_config(path: Path) -> Config:
    """Load and validate a verless.yml file.

    *path* may point at the file itself or at the project directory.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path.is_dir():
        path = path / CONFIG_FILE

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is an all-defaults config
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config '%s' (theme: %s)", config.site.meta.title or path.parent.name, config.theme)
    return config
