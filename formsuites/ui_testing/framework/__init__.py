"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (async) UI automation framework for the form suite.

Components:
    - config_loader: YAML + environment configuration, run settings
    - smart_locator: Ordered fallback selector lists per element
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - demo_form: Bundled contact form served through request routing

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError, FormTestSettings, Timeouts
from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage
from .browser_manager import BrowserManager
from .demo_form import DemoFormServer

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "DemoFormServer",
    "ElementNotFoundError",
    "FormTestSettings",
    "SmartLocator",
    "Timeouts",
]
