"""
================================================================================
Configuration Loader
================================================================================

Reads config/config.yaml and lets environment variables override any key,
which is how run_tests.py hands browser and URL choices to the test process.

Key `ui.base_url` is overridden by `UI_BASE_URL`, `timeouts.page_load` by
`TIMEOUTS_PAGE_LOAD`, and so on. FormTestSettings turns the raw values into
typed settings for one run.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from formtest_tools.common import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH


# Host the bundled demo form is served on when no real target is configured
DEMO_BASE_URL = "http://form.local"

DEFAULT_DEVICES: Dict[str, Dict[str, int]] = {
    "desktop": {"width": 1920, "height": 1080},
    "tablet": {"width": 768, "height": 1024},
    "mobile": {"width": 375, "height": 667},
}


class ConfigurationError(Exception):
    """The YAML file exists but cannot be parsed."""


class ConfigLoader:
    """
    Process-wide configuration (one instance, loaded once).

    Lookup order for `get("a.b")`: environment variable `A_B`, then the YAML
    value, then the caller's default. Environment strings are converted to
    the type of the default (bool, int, float).

    Usage:
        >>> ConfigLoader().get("ui.browser", "chromium")
        'firefox'  # with UI_BROWSER=firefox
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Args:
            config_path: YAML file; falls back to $FORMTEST_CONFIG, then
                DEFAULT_CONFIG_PATH. Ignored once the singleton is loaded.
        """
        if getattr(self, "_initialized", False):
            return

        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self._config_path.exists():
            logger.warning(
                f"No config file at {self._config_path}; "
                f"running on defaults and environment variables"
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {self._config_path}: {e}") from e
        logger.debug(f"Config loaded: {self._config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    def get(self, key: str, default: Any = None) -> Any:
        """Value for a dotted key such as "ui.base_url" (env > YAML > default)."""
        env_value = os.environ.get(key.upper().replace(".", "_"))
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            value = value.get(part) if isinstance(value, dict) else None
            if value is None:
                return default
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Whole top-level YAML section ({} when absent). No env overrides."""
        return self._config.get(section, {}) or {}

    def reload(self) -> None:
        self._load_config()
        logger.info(f"Config reloaded: {self._config_path}")

    @staticmethod
    def _convert_type(value: str, reference: Any) -> Any:
        # bool before int: bool is an int subclass
        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        for kind in (int, float):
            if isinstance(reference, kind):
                try:
                    return kind(value)
                except ValueError:
                    return value
        return value

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded instance (tests switch config files with this)."""
        cls._instance = None
        cls._config = {}


# =============================================================================
# Typed Settings
# =============================================================================

@dataclass(frozen=True)
class Timeouts:
    """Timeouts in milliseconds handed straight to Playwright."""
    page_load: int = 10000
    form_submit: int = 15000
    element_visible: int = 5000
    network_idle: int = 10000


@dataclass
class FormTestSettings:
    """
    Resolved settings for one test run.

    Attributes:
        base_url: URL of the page hosting the form
        use_demo_form: Serve the bundled demo form on base_url
        browser: 'chromium', 'firefox' or 'webkit'
        headless: Run browser without a window
        slow_mo: Delay between Playwright operations (ms)
        devices: Viewport matrix, name -> {"width": .., "height": ..}
        timeouts: Playwright timeouts
        retries: Reruns per failed test (passed to the runner)
    """
    base_url: str = DEMO_BASE_URL
    use_demo_form: bool = True
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0
    devices: Dict[str, Dict[str, int]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_DEVICES.items()}
    )
    timeouts: Timeouts = field(default_factory=Timeouts)
    retries: int = 0

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "FormTestSettings":
        """Build settings from a ConfigLoader (YAML + environment)."""
        config = config or ConfigLoader()
        defaults = Timeouts()

        timeouts = Timeouts(
            page_load=config.get("timeouts.page_load", defaults.page_load),
            form_submit=config.get("timeouts.form_submit", defaults.form_submit),
            element_visible=config.get("timeouts.element_visible", defaults.element_visible),
            network_idle=config.get("timeouts.network_idle", defaults.network_idle),
        )

        devices = config.get("ui.devices") or {}
        if not isinstance(devices, dict) or not devices:
            devices = {k: dict(v) for k, v in DEFAULT_DEVICES.items()}

        # The Playwright Inspector needs a visible browser
        headless = config.get("ui.headless", True)
        if os.environ.get("PWDEBUG"):
            headless = False

        return cls(
            base_url=str(config.get("ui.base_url", DEMO_BASE_URL)).rstrip("/"),
            use_demo_form=config.get("ui.use_demo_form", True),
            browser=config.get("ui.browser", "chromium"),
            headless=headless,
            slow_mo=config.get("ui.slow_mo", 0),
            devices=devices,
            timeouts=timeouts,
            retries=config.get("run.retries", 0),
        )


def load_settings(config_path: Optional[Path] = None) -> FormTestSettings:
    """Convenience wrapper: load configuration and resolve settings."""
    return FormTestSettings.from_config(ConfigLoader(config_path))


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEMO_BASE_URL",
    "DEFAULT_DEVICES",
    "FormTestSettings",
    "Timeouts",
    "load_settings",
]
