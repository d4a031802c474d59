"""
================================================================================
Form Test Tools Common Utilities
================================================================================

Shared configuration access and logging setup for the form suite and its
runner. Reads config/config.yaml on its own so the tools never depend on
the suites.

Exports:
    - get_config: Dot-path lookup in the YAML config (env overrides win)
    - reload_config: Drop the cached config (next lookup re-reads the file)
    - init_logger: Initialize the loguru logger with standard settings
    - ensure_directory: Create a directory if it does not exist

Usage:
    from formtest_tools.common import get_config, init_logger

    init_logger()
    level = get_config("logging.level", "INFO")

================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Repository root / config / config.yaml
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"

# Points every loader at another YAML file (CI, local overrides)
CONFIG_PATH_ENV = "FORMTEST_CONFIG"

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_config: Optional[Dict[str, Any]] = None
_logger_initialized = False


# ============================================================
# Configuration
# ============================================================

def config_path() -> Path:
    return Path(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_config(key: str, default: Any = None) -> Any:
    """
    Value for a dot-separated key such as "logging.level".

    An environment variable named after the key (LOGGING_LEVEL) wins over
    the YAML file.
    """
    global _config

    env_value = os.environ.get(key.upper().replace(".", "_"))
    if env_value is not None:
        return env_value

    if _config is None:
        _config = _load_config()

    value: Any = _config
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return default
        value = value[part]
    return default if value is None else value


def reload_config() -> None:
    global _config
    _config = None


# ============================================================
# Logging
# ============================================================

def init_logger(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Defaults to config value.
        log_file: Optional file path to write logs to. Defaults to config value.
        force: Re-initialize even if the logger was already configured.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()

    level = (level or get_config("logging.level", "INFO")).upper()
    format_string = format_string or get_config("logging.format", DEFAULT_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        ensure_directory(os.path.dirname(log_file))
        logger.add(
            log_file,
            format=format_string,
            level=level,
            colorize=False,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path (empty string means current directory)

    Returns:
        The path (for chaining)
    """
    if path:
        os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "config_path",
    "get_config",
    "reload_config",
    "init_logger",
    "ensure_directory",
]
