"""
================================================================================
Global Configuration for Automation Tools
================================================================================

This module provides centralized configuration management for the test
tooling, including logging setup and configuration file loading.

Features:
    - YAML-based configuration loading (config/config.yaml + config/<ENV>.yaml)
    - Environment variable overrides (LOGGING__LEVEL=INFO)
    - Centralized Loguru logging configuration (stdout / stderr split)

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

# Records at or above this level go to stderr
STDERR_LEVEL_NO = 30

CONSOLE_TIME_FORMAT = "HH:mm:ss.SSS"

# Custom levels used by the step logger: (name, severity number, color markup)
CUSTOM_LEVELS = (
    ("STEP", 22, "<blue><bold>"),
    ("TEST", 23, "<cyan><bold>"),
    ("TEST_FAILED", 24, "<red><bold>"),
    ("SEPARATOR", 21, "<light-black>"),
)


def console_format(record: Dict[str, Any]) -> str:
    """
    Loguru format callable for console lines.

    Produces `[HH:MM:SS.mmm] [TAG] message` where TAG is the `tag` bound in
    the record's extra dict, or the level name when nothing is bound.
    """
    tag = record["extra"].get("tag") or record["level"].name
    return (
        "<level>[{time:" + CONSOLE_TIME_FORMAT + "}] [" + tag + "]</level> "
        "{message}\n{exception}"
    )


def _stdout_sink(message) -> None:
    sys.stdout.write(message)
    sys.stdout.flush()


def _stderr_sink(message) -> None:
    sys.stderr.write(message)
    sys.stderr.flush()


def _register_levels() -> None:
    for name, no, color in CUSTOM_LEVELS:
        try:
            logger.level(name)
        except ValueError:
            logger.level(name, no=no, color=color)


def init_logger(level: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call many times; only the first call installs sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()
    _register_levels()

    log_level = str(level or get_config("logging.level", "DEBUG")).upper()

    # Remove default logger and add the console pair
    logger.remove()
    logger.add(
        _stdout_sink,
        level=log_level,
        format=console_format,
        filter=lambda record: record["level"].no < STDERR_LEVEL_NO,
        colorize=True,
    )
    logger.add(
        _stderr_sink,
        level=log_level,
        format=console_format,
        filter=lambda record: record["level"].no >= STDERR_LEVEL_NO,
        colorize=True,
    )

    # Optional: Add file logging
    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}",
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    """
    Ensures the configuration is loaded.
    """
    global _config
    if not _config:
        _load_config()


def _load_config() -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Default configuration file (config/config.yaml)
        2. Environment-specific configuration (config/{ENV}.yaml)
        3. Environment variables (override YAML settings)
    """
    global _config

    possible_config_dirs = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]

    config_dir = None
    for dir_path in possible_config_dirs:
        if dir_path.exists():
            config_dir = dir_path
            break

    _config = _get_defaults()

    if config_dir:
        default_config_path = config_dir / "config.yaml"
        if default_config_path.exists():
            with open(default_config_path, "r", encoding="utf-8") as f:
                _config = _deep_merge(_config, yaml.safe_load(f) or {})

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config_path = config_dir / f"{env}.yaml"
        if env_config_path.exists():
            with open(env_config_path, "r", encoding="utf-8") as f:
                env_config = yaml.safe_load(f) or {}
            _config = _deep_merge(_config, env_config)

    _apply_env_overrides()


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "DEBUG",
        },
        "browser": {
            "viewport": {"width": 1920, "height": 1080},
            "args": [],
        },
        "reporting": {
            "environment": "TEST",
            "application": "SauceDemo",
            "executor": {
                "name": "Automation Team",
                "type": "LOCAL",
                "buildName": "Test Execution",
            },
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: LOGGING__LEVEL=INFO overrides logging.level
        - Only known top-level sections are considered
        - Values are parsed as YAML scalars (BROWSER__VIEWPORT__WIDTH=1280 -> 1280)
        - Paths running through a non-mapping value are skipped
    """
    for key, value in os.environ.items():
        if "__" not in key:
            continue
        parts = [p.lower() for p in key.split("__")]
        if parts[0] not in _config:
            continue
        if not _set_nested(_config, parts, _parse_env_value(value)):
            logger.warning(f"Ignoring config override {key}: path is not a mapping")


def _parse_env_value(value: str) -> Any:
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    # Empty values, bare `null` and block-style YAML stay as the literal text
    if parsed is None:
        return value
    if isinstance(parsed, (dict, list)) and value.lstrip()[:1] not in ("[", "{"):
        return value
    return parsed


def _set_nested(d: Dict, keys: list, value: Any) -> bool:
    """
    Sets a nested dictionary value using a list of keys.

    Returns:
        False (leaving `d` untouched) if an intermediate value is not a dict
    """
    for key in keys[:-1]:
        d = d.setdefault(key, {})
        if not isinstance(d, dict):
            return False
    d[keys[-1]] = value
    return True


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "browser.viewport").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("logging.level", "INFO")
        'DEBUG'
        >>> get_config("reporting.application")
        'SauceDemo'
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value

