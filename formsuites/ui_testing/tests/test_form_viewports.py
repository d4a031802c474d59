"""
================================================================================
Viewport Compatibility UI Tests (Async / Playwright)
================================================================================

The submission flow on every device viewport from `ui.devices`
(desktop, tablet, mobile by default).

================================================================================
"""

import allure
import pytest
from playwright.async_api import expect

from formsuites.ui_testing.framework.config_loader import load_settings
from formsuites.ui_testing.pages.form_actions import FormActions


DEVICES = load_settings().devices


@allure.epic("UI Testing")
@allure.feature("Contact Form")
@allure.story("Viewport Compatibility")
class TestFormViewports:
    """Responsive layout test suite (async)."""

    @allure.title("Form submits on {device} viewport")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.responsive
    @pytest.mark.asyncio(loop_scope="session")
    @pytest.mark.parametrize("device", sorted(DEVICES))
    async def test_submit_on_device(self, form: FormActions, device: str):
        size = DEVICES[device]
        await form.set_viewport(size["width"], size["height"])
        await form.wait_for_form_to_load()

        with allure.step("Core fields usable"):
            await expect(form.locators.name_input).to_be_visible()
            await expect(form.locators.submit_button).to_be_visible()

        with allure.step("Submit required fields"):
            await form.fill_name("John Smith")
            await form.fill_email("")
            await form.select_country("Algeria")
            await form.submit_form()

        await form.verify_form_success()
        await form.screenshot(f"form_{device}")
