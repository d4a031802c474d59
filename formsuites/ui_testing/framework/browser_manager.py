"""
================================================================================
Browser Manager
================================================================================

Launches one browser per test session and hands out isolated contexts.

When the bundled demo form is enabled, every context it creates routes the
form URL to the in-process DemoFormServer, so no web server is needed.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Playwright,
)

from .config_loader import FormTestSettings
from .demo_form import DemoFormServer


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Session-wide browser with per-test contexts.

    Usage:
        manager = BrowserManager.from_settings(load_settings())
        await manager.start()
        context = await manager.new_context(viewport={"width": 375, "height": 667})
        ...
        await manager.release(context)
        await manager.close()
    """

    CONTEXT_DEFAULTS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        slow_mo: int = 0,
        base_url: Optional[str] = None,
        demo_form: Optional[DemoFormServer] = None,
    ):
        """
        Args:
            headless: Launch without a window
            browser_type: One of SUPPORTED_BROWSERS
            slow_mo: Milliseconds added to every browser operation
            base_url: Origin the demo form answers on
            demo_form: Demo form to route into each new context
        """
        if browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{browser_type}', expected one of {SUPPORTED_BROWSERS}"
            )
        if demo_form is not None and not base_url:
            raise ValueError("base_url is required when serving the demo form")

        self.headless = headless
        self.browser_type = browser_type
        self.slow_mo = slow_mo
        self.base_url = base_url
        self.demo_form = demo_form

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @classmethod
    def from_settings(cls, settings: FormTestSettings) -> "BrowserManager":
        return cls(
            headless=settings.headless,
            browser_type=settings.browser,
            slow_mo=settings.slow_mo,
            base_url=settings.base_url,
            demo_form=DemoFormServer() if settings.use_demo_form else None,
        )

    async def start(self) -> None:
        """Start Playwright and launch the configured browser."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)

        self._browser = await launcher.launch(headless=self.headless, slow_mo=self.slow_mo)
        logger.debug(
            f"Launched {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )

    async def close(self) -> None:
        """Close remaining contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.debug(f"Context already closed: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug(f"{self.browser_type} shut down")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Open a fresh context (own cookies and storage).

        Args:
            **options: Playwright context options, merged over CONTEXT_DEFAULTS
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**{**self.CONTEXT_DEFAULTS, **options})
        self._contexts.append(context)

        if self.demo_form is not None:
            await self.demo_form.install(context, self.base_url)

        return context

    async def release(self, context: BrowserContext) -> None:
        """Close one context and forget it."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
