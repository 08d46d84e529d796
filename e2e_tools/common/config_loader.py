"""
================================================================================
Configuration Loader
================================================================================

Settings for the Swag Labs suite, read once from config/config.yaml.

Lookup order for `get("section.key")`:
    1. Environment variable SECTION_KEY (UI_BASE_URL, BROWSER_HEADLESS, ...),
       coerced to the type of the supplied default
    2. The YAML file
    3. The supplied default

Relative filesystem settings (auth.state_file, reports.screenshot_dir) are
anchored at the project root via `get_path`, so the suite writes its
artifacts to the same place whatever directory pytest is launched from.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"

_TRUTHY = ("true", "1", "yes", "on")


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be parsed."""
    pass


def resolve_project_path(value: Union[str, Path]) -> Path:
    """Return `value` as a path, anchoring relative ones at the project root."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else PROJECT_ROOT / path


def _env_name(key: str) -> str:
    return key.upper().replace(".", "_")


def _coerce(raw: str, default: Any) -> Any:
    """Convert an environment string to the type of `default` when possible."""
    if isinstance(default, bool):
        return raw.strip().lower() in _TRUTHY
    for kind in (int, float):
        if isinstance(default, kind):
            try:
                return kind(raw)
            except ValueError:
                logger.warning(f"Cannot read {raw!r} as {kind.__name__}; keeping the string")
                return raw
    return raw


class ConfigLoader:
    """
    Process-wide settings object.

    Usage:
        >>> ConfigLoader().get("ui.timeout", 10000)
        10000
        >>> ConfigLoader().get_path("auth.state_file", ".auth/storage_state.json")
        PosixPath('/.../.auth/storage_state.json')
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
            instance._settings = instance._read(instance._config_path)
            cls._instance = instance
        return cls._instance

    @property
    def config_path(self) -> Path:
        return self._config_path

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.warning(f"No configuration at {path}; environment and defaults only")
            return {}
        try:
            settings = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        logger.debug(f"Configuration loaded from {path}")
        return settings

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read a dot-notation setting, e.g. "browser.viewport.width".

        A null or missing YAML value yields `default`.
        """
        raw = os.environ.get(_env_name(key))
        if raw is not None:
            return _coerce(raw, default)

        node: Any = self._settings
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def get_path(self, key: str, default: Union[str, Path]) -> Path:
        """Read a filesystem setting, resolved against the project root."""
        return resolve_project_path(self.get(key, str(default)))

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded instance; the next ConfigLoader() re-reads the file."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "resolve_project_path",
]
