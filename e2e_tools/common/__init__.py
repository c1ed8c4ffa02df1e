"""
================================================================================
E2E Tools Common Utilities
================================================================================

This module provides shared configuration management and logging setup for
the UI test suites and the test runner.

Exports:
    - GlobalConfig: Singleton configuration manager
    - ConfigurationError: Raised on invalid configuration
    - get_config / set_config: Convenience accessors using dot notation
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from e2e_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "http://localhost:3000")

================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# ============================================================
# Configuration Management
# ============================================================

# Repository-level configuration file
REPO_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"

# Environment variable -> dot-notation config key
ENV_MAPPING: Dict[str, str] = {
    "UI_BASE_URL": "ui.base_url",
    "UI_BROWSER": "ui.browser",
    "UI_HEADLESS": "ui.headless",
    "UI_SCREENSHOT_DIR": "ui.screenshot_dir",
    "UI_TIMEOUT_SHORT": "timeouts.SHORT",
    "UI_TIMEOUT_MEDIUM": "timeouts.MEDIUM",
    "UI_TIMEOUT_LONG": "timeouts.LONG",
    "UI_INVALID_LOGIN_MESSAGE": "error_messages.INVALID_LOGIN",
    "LOG_LEVEL": "logging.level",
    "LOG_FILE": "logging.file",
}


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class GlobalConfig:
    """
    Singleton class to manage global configuration for the test suites.

    Loads settings from a YAML configuration file and environment variables.
    Environment variables take precedence over file-based configuration.
    """
    _instance: Optional["GlobalConfig"] = None

    def __new__(cls, config_paths: Optional[List[Path]] = None) -> "GlobalConfig":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_paths: Optional[List[Path]] = None):
        if self._initialized:
            return
        self._config: Dict[str, Any] = {}
        self._config_paths = config_paths or [
            Path("config") / "config.yaml",
            REPO_CONFIG_PATH,
        ]
        self._load_configs()
        self._initialized = True

    def _load_configs(self) -> None:
        """
        Loads configuration from the first YAML file found, then applies
        environment variable overrides.
        """
        for config_path in self._config_paths:
            if not config_path.exists():
                continue
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    self._config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in configuration file {config_path}: {e}"
                ) from e
            logger.debug(f"Loaded configuration from {config_path}")
            break
        else:
            logger.warning("No configuration file found. Using defaults and environment variables only.")

        for env_key, config_key in ENV_MAPPING.items():
            if env_key in os.environ:
                self._set_nested(config_key, os.environ[env_key])

    def _set_nested(self, key: str, value: Any) -> None:
        """
        Sets a nested configuration value using dot notation.
        """
        keys = key.split(".")
        current = self._config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "ui.base_url")
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        value = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Sets a configuration value at runtime.
        """
        self._set_nested(key, value)

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Returns a copy of a top-level section, or an empty dict.
        """
        value = self._config.get(section)
        return dict(value) if isinstance(value, dict) else {}

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get a configuration value.

    Example:
        base_url = get_config("ui.base_url", "http://localhost:3000")
    """
    return GlobalConfig().get(key, default)


def set_config(key: str, value: Any) -> None:
    """
    Convenience function to set a configuration value.
    """
    GlobalConfig().set(key, value)


def as_bool(value: Any) -> bool:
    """Interpret config/env values such as "false" or "0" as booleans."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()

    level = (level or get_config("logging.level", "INFO")).upper()
    format_string = format_string or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


# Export public API
__all__ = [
    "ConfigurationError",
    "ENV_MAPPING",
    "GlobalConfig",
    "as_bool",
    "get_config",
    "set_config",
    "init_logger",
]
