"""
================================================================================
Form Reset UI Tests (Async / Playwright)
================================================================================
"""

import allure
import pytest
from playwright.async_api import expect

from formsuites.ui_testing.data.form_test_data import FormDataFactory, FormTestConstants
from formsuites.ui_testing.pages.form_actions import FormActions


@allure.epic("UI Testing")
@allure.feature("Contact Form")
@allure.story("Reset")
class TestFormReset:
    """Reset / clear test suite (async)."""

    @allure.title("Reset empties a filled form")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio(loop_scope="session")
    async def test_reset_clears_form(self, form: FormActions, form_data: FormDataFactory):
        data = form_data.valid()

        with allure.step("Fill form"):
            await form.fill_complete_form(data)
            await form.verify_form_data({"name": data.name, "email": data.email})

        with allure.step("Reset and verify"):
            await form.reset_form()
            await form.verify_form_is_empty()
            await expect(form.locators.agree_checkbox).not_to_be_checked()

    @allure.title("Reset removes validation errors")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P2
    @pytest.mark.asyncio(loop_scope="session")
    async def test_reset_clears_errors(self, form: FormActions):
        await form.submit_form()
        await form.verify_field_error(
            "name", FormTestConstants.VALIDATION_MESSAGES["REQUIRED_NAME"]
        )

        await form.reset_form()

        await expect(form.locators.field_error("name")).to_be_hidden()

    @allure.title("clear_all_fields empties the text fields")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.asyncio(loop_scope="session")
    async def test_clear_all_fields(self, form: FormActions, form_data: FormDataFactory):
        await form.fill_complete_form(form_data.special_characters())

        await form.clear_all_fields()

        await form.verify_form_is_empty()
        values = await form.get_current_form_values()
        assert values["name"] == ""
        assert values["country"] == "Spain", "Selects are not cleared"
