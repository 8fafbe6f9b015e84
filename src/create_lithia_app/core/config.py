"""User-level defaults stored in <home>/config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .constants import DEFAULT_PROJECT_NAME, PACKAGE_MANAGERS
from .templates import DEFAULT_TEMPLATE, TEMPLATES

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "CREATE_LITHIA_APP_HOME"
CONFIG_FILE = "config.yaml"


class ConfigError(RuntimeError):
    """Raised when the user config file is invalid."""


def _is_windows() -> bool:
    """Return True when running on Windows."""
    return os.name == "nt"


def get_app_home() -> Path:
    """Return the directory holding the user config.

    Resolution order:
    1. CREATE_LITHIA_APP_HOME environment variable (all platforms)
    2. %LOCALAPPDATA%\\create-lithia-app\\ on Windows (via platformdirs)
    3. ~/.create-lithia-app/ elsewhere
    """
    if env_home := os.environ.get(HOME_ENV_VAR):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("create-lithia-app"))

    return Path.home() / ".create-lithia-app"


@dataclass(slots=True)
class ScaffoldConfig:
    """Defaults pre-selected in the interactive prompts."""

    project_name: str = DEFAULT_PROJECT_NAME
    template: str = DEFAULT_TEMPLATE
    package_manager: str = PACKAGE_MANAGERS[0]
    install_dependencies: bool = True
    git_init: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, object] | None) -> "ScaffoldConfig":
        config = cls()
        if not isinstance(data, dict):
            return config

        project_name = data.get("project_name")
        if isinstance(project_name, str) and project_name.strip():
            config.project_name = project_name.strip()

        template = data.get("template")
        if isinstance(template, str):
            if template in {t.name for t in TEMPLATES}:
                config.template = template
            else:
                logger.warning("Ignoring unknown template %r in config", template)

        manager = data.get("package_manager")
        if isinstance(manager, str):
            if manager in PACKAGE_MANAGERS:
                config.package_manager = manager
            else:
                logger.warning("Ignoring unknown package manager %r in config", manager)

        for key in ("install_dependencies", "git_init"):
            value = data.get(key)
            if isinstance(value, bool):
                setattr(config, key, value)

        return config


def load_config(home: Path | None = None) -> ScaffoldConfig:
    """Load config.yaml from the app home, falling back to built-in defaults."""
    config_path = (home or get_app_home()) / CONFIG_FILE
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ScaffoldConfig()

    yaml = YAML(typ="safe")
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle)
    except YAMLError as exc:
        raise ConfigError(f"Failed to parse {config_path}: {exc}") from exc

    if payload is None:
        return ScaffoldConfig()
    if not isinstance(payload, dict):
        raise ConfigError(f"{config_path} must contain a mapping of settings")

    logger.debug("Loaded config from %s", config_path)
    return ScaffoldConfig.from_dict(payload)


__all__ = [
    "CONFIG_FILE",
    "ConfigError",
    "HOME_ENV_VAR",
    "ScaffoldConfig",
    "get_app_home",
    "load_config",
]
