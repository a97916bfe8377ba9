"""FlicksNow configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from flicksnow.models import DEFAULT_SIGN_IN_DELAY, DEFAULT_SIGN_UP_DELAY, DEFAULT_SPLASH_DURATION

logger = logging.getLogger("flicksnow.config")

PROJECT_DIRNAME = ".flicksnow"
CONFIG_FILENAME = "config.yaml"
CONFIG_ENV_VAR = "FLICKSNOW_CONFIG"


class FlicksNowConfigError(Exception):
    """Raised when configuration or fixture files are invalid or missing."""

    pass


@dataclass
class FlicksNowConfig:
    """Configuration for the FlicksNow demo."""

    project_dir: Path = field(default_factory=lambda: Path(PROJECT_DIRNAME))

    # Simulated authentication
    sign_in_delay: float = DEFAULT_SIGN_IN_DELAY
    sign_up_delay: float = DEFAULT_SIGN_UP_DELAY
    auth_timeout: float | None = None

    # Presentation
    splash_duration: float = DEFAULT_SPLASH_DURATION

    # Fixtures (None = built-in sample catalog)
    catalog_path: Path | None = None

    @classmethod
    def from_file(cls, config_path: Path) -> FlicksNowConfig:
        """Load config from a YAML file."""
        if not config_path.exists():
            raise FlicksNowConfigError(f"Config file not found: {config_path}\n\nTo fix: flicksnow init")
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise FlicksNowConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise FlicksNowConfigError(f"Config file must be a YAML mapping: {config_path}")
        return cls._from_dict(data, config_path.parent)

    @classmethod
    def _from_dict(cls, data: dict[str, Any], project_dir: Path) -> FlicksNowConfig:
        """Create config from a dictionary."""
        config = cls()
        config.project_dir = project_dir

        if "sign_in_delay" in data:
            config.sign_in_delay = _non_negative(data["sign_in_delay"], "sign_in_delay")
        if "sign_up_delay" in data:
            config.sign_up_delay = _non_negative(data["sign_up_delay"], "sign_up_delay")
        if data.get("auth_timeout") is not None:
            config.auth_timeout = _non_negative(data["auth_timeout"], "auth_timeout")
        if "splash_duration" in data:
            config.splash_duration = _non_negative(data["splash_duration"], "splash_duration")
        if data.get("catalog"):
            config.catalog_path = project_dir / data["catalog"]

        return config

    @classmethod
    def load(cls, config_path: Path | None = None) -> FlicksNowConfig:
        """Load the effective config, falling back to defaults when no file is found."""
        path = config_path or resolve_config_path()
        if path is None:
            logger.debug("No config file found, using defaults")
            return cls()
        logger.debug("Loading config from %s", path)
        return cls.from_file(path)


def _non_negative(value: Any, key: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FlicksNowConfigError(f"'{key}' must be a number, got: {value!r}") from None
    if number < 0:
        raise FlicksNowConfigError(f"'{key}' must not be negative, got: {number}")
    return number


def find_project_dir(start: Path | None = None) -> Path:
    """Locate the .flicksnow/ project directory by searching upward from *start* (cwd)."""
    current = start or Path.cwd()
    for base in [current, *current.parents]:
        candidate = base / PROJECT_DIRNAME
        if candidate.is_dir():
            return candidate
    return current / PROJECT_DIRNAME


def resolve_config_path(start: Path | None = None) -> Path | None:
    """Resolve which config file to use.

    Resolution order (highest priority first):
    1. FLICKSNOW_CONFIG environment variable
    2. .flicksnow/config.yaml found upward from cwd
    3. Global config (~/.flicksnow/config.yaml)

    Returns None when no file exists, meaning built-in defaults apply.
    """
    # 1. Environment variable
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)

    # 2. Project config
    project_config = find_project_dir(start) / CONFIG_FILENAME
    if project_config.is_file():
        return project_config

    # 3. Global config
    global_config = Path.home() / PROJECT_DIRNAME / CONFIG_FILENAME
    if global_config.is_file():
        return global_config

    return None
