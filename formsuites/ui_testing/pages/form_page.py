"""
================================================================================
Form Page Object (Async / Playwright)
================================================================================

Navigation and load handling for the contact form page.

Element location goes through `FormLocators` (primary + fallback selectors),
so the same page object works against the bundled demo form and externally
hosted variants of it.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import expect

from formsuites.ui_testing.framework.page_base import BasePage
from formsuites.ui_testing.pages.form_locators import FormLocators


class FormPage(BasePage):
    """Contact form page object (async)."""

    URL_PATH = "/"
    LOCATOR_CLASS = FormLocators

    locators: FormLocators

    @allure.step("Open form page")
    async def navigate_to_form(self) -> "FormPage":
        """Navigate to the form and wait until it is usable."""
        await self.navigate()
        await self.wait_for_form_to_load()
        return self

    @allure.step("Wait for form to load")
    async def wait_for_form_to_load(self) -> None:
        """
        Wait for the form container, then for any loading indicator to go away.

        A loading indicator that never shows up is fine. One that stays
        visible is logged and does not fail the load.
        """
        await expect(self.locators.form_container).to_be_visible(
            timeout=self.timeouts.page_load
        )

        try:
            await expect(self.locators.loading_indicator).to_be_hidden(
                timeout=self.timeouts.element_visible
            )
        except AssertionError:
            logger.warning("⚠️ Loading indicator still visible after form load, continuing")

        logger.info(f"Form loaded: {self.page.url}")

    async def has_field(self, element_name: str) -> bool:
        """Return True if the form currently renders the element."""
        return await self.locators.has(element_name)

    async def focus(self, element_name: str) -> None:
        """Move keyboard focus to an element."""
        element = await self.locators.resolve(element_name)
        await element.focus()
        logger.debug(f"Focused: {element_name}")


__all__ = ["FormPage"]
