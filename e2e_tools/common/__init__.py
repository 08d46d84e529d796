"""
Shared configuration and logging utilities.

Usage:
    from e2e_tools.common import ConfigLoader, init_logger

    init_logger()
    timeout = ConfigLoader().get("ui.timeout", 10000)
"""

from .config_loader import ConfigLoader, ConfigurationError, resolve_project_path
from .global_config import get_logger, init_logger, reset_logger

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "get_logger",
    "init_logger",
    "reset_logger",
    "resolve_project_path",
]
