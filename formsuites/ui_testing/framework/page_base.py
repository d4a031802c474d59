"""
================================================================================
Base Page Object
================================================================================

Common ground for the form page objects.

Provides:
    - Navigation relative to the configured base URL
    - A SmartLocator registry per page (LOCATOR_CLASS)
    - Viewport and keyboard helpers
    - Screenshots and failure evidence for the Allure report
    - Capture of the page's recent /api/ exchanges

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, Response

from .config_loader import DEMO_BASE_URL, ConfigLoader, Timeouts
from .smart_locator import SmartLocator


# Screenshots land under <repo>/reports/screenshots
SCREENSHOT_DIR = Path(__file__).resolve().parents[3] / "reports" / "screenshots"

# Keep only the most recent API exchanges
MAX_CAPTURED_REQUESTS = 20


class BasePage:
    """
    Base class for page objects.

    Subclasses set URL_PATH and LOCATOR_CLASS; elements are then reached
    through `self.locators`.

    Usage:
        class ContactPage(BasePage):
            URL_PATH = "/contact"
            LOCATOR_CLASS = ContactLocators

            async def open(self):
                await self.navigate()
    """

    URL_PATH: str = "/"
    LOCATOR_CLASS: Type[SmartLocator] = SmartLocator

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        timeouts: Optional[Timeouts] = None,
    ):
        """
        Args:
            page: Playwright page
            base_url: Site root (defaults to ui.base_url)
            timeouts: Playwright timeouts (defaults to Timeouts())
        """
        self.page = page
        if not base_url:
            base_url = ConfigLoader().get("ui.base_url", DEMO_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.timeouts = timeouts or Timeouts()
        self.locators = self.LOCATOR_CLASS(page)

        self._api_exchanges: List[Dict[str, Any]] = []
        self.page.on("response", self._record_api_response)

    async def _record_api_response(self, response: Response) -> None:
        if "/api/" not in response.url:
            return
        try:
            body = await response.text()
        except PlaywrightError:
            body = "<unable to read>"

        self._api_exchanges.append({
            "time": datetime.now().isoformat(),
            "method": response.request.method,
            "url": response.url,
            "status": response.status,
            "body": body[:1000],
        })
        del self._api_exchanges[:-MAX_CAPTURED_REQUESTS]

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation and Waits
    # =========================================================================

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Open this page.

        Args:
            wait_for: 'load', 'domcontentloaded' or 'networkidle'
        """
        with allure.step(f"Navigate to {self.url}"):
            await self.page.goto(self.url, wait_until=wait_for, timeout=self.timeouts.page_load)
            logger.debug(f"Opened {self.url}")

    async def wait_for_network_idle(self, timeout: Optional[int] = None) -> None:
        """Wait until the page has had no network traffic for 500 ms."""
        await self.page.wait_for_load_state(
            "networkidle", timeout=timeout or self.timeouts.network_idle
        )

    # =========================================================================
    # Viewport and Keyboard
    # =========================================================================

    async def set_viewport(self, width: int, height: int) -> None:
        """Resize the page viewport (e.g. to a tablet or mobile size)."""
        with allure.step(f"Set viewport {width}x{height}"):
            await self.page.set_viewport_size({"width": width, "height": height})
            logger.debug(f"Viewport set to {width}x{height}")

    async def press_key(self, key: str) -> None:
        """Press a key on whatever has focus ("Tab", "Enter", ...)."""
        await self.page.keyboard.press(key)
        logger.debug(f"Pressed {key}")

    # =========================================================================
    # Evidence
    # =========================================================================

    async def screenshot(self, name: str, full_page: bool = False) -> Path:
        """
        Save a screenshot under SCREENSHOT_DIR and attach it to the report.

        Returns:
            Path of the PNG file
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = SCREENSHOT_DIR / f"{name}_{stamp}.png"

        await self.page.screenshot(path=str(path), full_page=full_page)
        allure.attach.file(str(path), name=name, attachment_type=allure.attachment_type.PNG)

        logger.debug(f"Screenshot: {path}")
        return path

    async def capture_failure(self, test_name: str) -> None:
        """Attach a full-page screenshot, the URL and recent API exchanges."""
        with allure.step("Capture failure evidence"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(self.page.url, name="Page URL", attachment_type=allure.attachment_type.TEXT)

            if self._api_exchanges:
                allure.attach(
                    json.dumps(self._api_exchanges[-10:], indent=2, ensure_ascii=False),
                    name="Recent API Exchanges",
                    attachment_type=allure.attachment_type.JSON,
                )

    def get_locator_health_report(self) -> str:
        return self.locators.get_health_report()


__all__ = [
    "BasePage",
    "SCREENSHOT_DIR",
]
