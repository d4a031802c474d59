"""
================================================================================
Form Actions (Async / Playwright)
================================================================================

High-level actions and verifications for the contact form.

Every action:
    - Resolves its element through FormLocators (priority-ordered fallbacks)
    - Asserts visibility / state inline with Playwright `expect`
    - Is reported as an Allure step and logged
    - Wraps Playwright and assertion failures in FormActionError, keeping
      the original error as __cause__

Usage:
    form = FormActions(page)
    await form.navigate_to_form()
    await form.fill_complete_form(FormDataFactory().valid())
    await form.submit_form()
    await form.verify_form_success("Thank you")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, expect

from formsuites.ui_testing.data.form_test_data import ContactMethod, FormTestData
from formsuites.ui_testing.pages.form_page import FormPage


# Field name -> locator key
TEXT_FIELDS: Dict[str, str] = {
    "name": "name_input",
    "email": "email_input",
    "phone": "phone_input",
    "message": "message_textarea",
    "company": "company_input",
}

SELECT_FIELDS: Dict[str, str] = {
    "role": "role_select",
    "country": "country_select",
}

FORM_FIELDS: Dict[str, str] = {**TEXT_FIELDS, **SELECT_FIELDS}

# Selects compared by visible option text rather than value
LABELLED_SELECTS = ("country",)

ActionFailure = (PlaywrightError, AssertionError)


class FormActionError(Exception):
    """Raised when a form interaction fails; the cause is chained."""
    pass


class FormActions(FormPage):
    """Form interactions with inline assertions and descriptive errors."""

    # =========================================================================
    # Text fields
    # =========================================================================

    @allure.step("Fill {field_name} field")
    async def fill_field(self, element_name: str, value: str, field_name: str) -> None:
        """
        Fill a text field and verify the value stuck.

        Args:
            element_name: Locator key of the field
            value: Text to enter
            field_name: Human-readable field name for messages

        Raises:
            FormActionError: When the field is missing, hidden, or ends up
                with a different value (e.g. truncated by maxlength)
        """
        try:
            field = await self.locators.resolve(element_name)
            await expect(field).to_be_visible(timeout=self.timeouts.element_visible)
            await field.clear()
            await field.fill(value)
            await expect(field).to_have_value(value)
        except ActionFailure as e:
            logger.error(f"❌ Failed to fill {field_name}: {e}")
            raise FormActionError(
                f'Failed to fill {field_name} field with value "{value}": {e}'
            ) from e

        logger.info(f"Filled {field_name} field")

    async def fill_name(self, name: str) -> None:
        await self.fill_field("name_input", name, "name")

    async def fill_email(self, email: str) -> None:
        await self.fill_field("email_input", email, "email")

    async def fill_phone(self, phone: str) -> None:
        await self.fill_field("phone_input", phone, "phone")

    async def fill_message(self, message: str) -> None:
        await self.fill_field("message_textarea", message, "message")

    async def fill_company(self, company: str) -> None:
        await self.fill_field("company_input", company, "company")

    # =========================================================================
    # Selects
    # =========================================================================

    @allure.step("Select role: {role}")
    async def select_role(self, role: str) -> None:
        """Select a role by option value."""
        try:
            field = await self.locators.resolve("role_select")
            await expect(field).to_be_visible(timeout=self.timeouts.element_visible)
            await field.select_option(role)
            await expect(field).to_have_value(role)
        except ActionFailure as e:
            logger.error(f"❌ Failed to select role: {e}")
            raise FormActionError(f'Failed to select role "{role}": {e}') from e

        logger.info(f"Selected role: {role}")

    @allure.step("Select country: {country}")
    async def select_country(self, country: str) -> None:
        """Select a country by option value or label."""
        try:
            field = await self.locators.resolve("country_select")
            await expect(field).to_be_visible(timeout=self.timeouts.element_visible)
            await field.select_option(country)
            await expect(field.locator("option:checked")).to_have_text(country)
        except ActionFailure as e:
            logger.error(f"❌ Failed to select country: {e}")
            raise FormActionError(f'Failed to select country "{country}": {e}') from e

        logger.info(f"Selected country: {country}")

    # =========================================================================
    # Checkboxes and radios
    # =========================================================================

    @allure.step("Set {field_name} checkbox to {checked}")
    async def set_checkbox(self, element_name: str, checked: bool, field_name: str) -> None:
        try:
            box = await self.locators.resolve(element_name)
            await expect(box).to_be_visible(timeout=self.timeouts.element_visible)
            await box.set_checked(checked)
            await expect(box).to_be_checked(checked=checked)
        except ActionFailure as e:
            logger.error(f"❌ Failed to set {field_name} checkbox: {e}")
            raise FormActionError(
                f"Failed to set {field_name} checkbox to {checked}: {e}"
            ) from e

        logger.info(f"Set {field_name} checkbox to {checked}")

    async def set_agree_to_terms(self, checked: bool) -> None:
        await self.set_checkbox("agree_checkbox", checked, "agree to terms")

    async def set_newsletter_subscription(self, checked: bool) -> None:
        await self.set_checkbox("newsletter_checkbox", checked, "newsletter")

    @allure.step("Select contact method: {method}")
    async def select_contact_method(self, method: Union[ContactMethod, str]) -> None:
        """
        Check the radio for a preferred contact method.

        Raises:
            ValueError: For methods other than email / phone
            FormActionError: When the radio cannot be checked
        """
        method = ContactMethod(method).value

        try:
            radio = await self.locators.resolve(f"{method}_contact_radio")
            await expect(radio).to_be_visible(timeout=self.timeouts.element_visible)
            await radio.check()
            await expect(radio).to_be_checked()
        except ActionFailure as e:
            logger.error(f"❌ Failed to select contact method: {e}")
            raise FormActionError(f'Failed to select contact method "{method}": {e}') from e

        logger.info(f"Selected contact method: {method}")

    # =========================================================================
    # Buttons
    # =========================================================================

    @allure.step("Submit form")
    async def submit_form(self) -> None:
        """Click submit and wait for the resulting requests to settle."""
        try:
            button = await self.locators.resolve("submit_button")
            await expect(button).to_be_visible(timeout=self.timeouts.element_visible)
            await expect(button).to_be_enabled()
            await button.click(timeout=self.timeouts.form_submit)
            await self.wait_for_network_idle()
        except ActionFailure as e:
            logger.error(f"❌ Failed to submit form: {e}")
            raise FormActionError(f"Failed to submit form: {e}") from e

        logger.info("📨 Form submitted")

    @allure.step("Reset form")
    async def reset_form(self) -> None:
        try:
            button = await self.locators.resolve("reset_button")
            await expect(button).to_be_visible(timeout=self.timeouts.element_visible)
            await button.click()
        except ActionFailure as e:
            logger.error(f"❌ Failed to reset form: {e}")
            raise FormActionError(f"Failed to reset form: {e}") from e

        logger.info("Form reset")

    # =========================================================================
    # Whole-form operations
    # =========================================================================

    @allure.step("Fill complete form")
    async def fill_complete_form(self, data: FormTestData) -> None:
        """
        Fill the form from a FormTestData record.

        Empty text and select values are skipped; checkboxes are set
        whenever the flag is not None.
        """
        if data.name:
            await self.fill_name(data.name)
        if data.email:
            await self.fill_email(data.email)
        if data.phone:
            await self.fill_phone(data.phone)
        if data.message:
            await self.fill_message(data.message)
        if data.company:
            await self.fill_company(data.company)
        if data.role:
            await self.select_role(data.role)
        if data.country:
            await self.select_country(data.country)
        if data.agree_to_terms is not None:
            await self.set_agree_to_terms(data.agree_to_terms)
        if data.subscribe_newsletter is not None:
            await self.set_newsletter_subscription(data.subscribe_newsletter)
        if data.contact_method:
            await self.select_contact_method(data.contact_method)

    @allure.step("Clear all text fields")
    async def clear_all_fields(self) -> None:
        for field_name, element_name in TEXT_FIELDS.items():
            if not await self.locators.has(element_name):
                logger.debug(f"Skipping clear, no {field_name} field")
                continue
            field = await self.locators.resolve(element_name)
            await field.clear()

        logger.info("Cleared all text fields")

    async def get_current_form_values(self) -> Dict[str, str]:
        """Current value of every known field ("" for fields the form lacks)."""
        values: Dict[str, str] = {}
        for field_name, element_name in FORM_FIELDS.items():
            if await self.locators.has(element_name):
                field = await self.locators.resolve(element_name)
                values[field_name] = await field.input_value()
            else:
                values[field_name] = ""
        return values

    # =========================================================================
    # Verifications
    # =========================================================================

    async def _field(self, field_name: str) -> Locator:
        element_name = FORM_FIELDS.get(field_name)
        if element_name is None:
            raise ValueError(
                f"Unknown field '{field_name}', expected one of {', '.join(FORM_FIELDS)}"
            )
        return await self.locators.resolve(element_name)

    @allure.step("Verify form is empty")
    async def verify_form_is_empty(self) -> None:
        for field_name, element_name in TEXT_FIELDS.items():
            if not await self.locators.has(element_name):
                continue
            await expect(await self._field(field_name)).to_have_value("")

    @allure.step("Verify form data")
    async def verify_form_data(self, expected: Mapping[str, str]) -> None:
        """
        Assert field values.

        Args:
            expected: field name -> expected value. Country is compared by
                the selected option's text, every other field by value.
        """
        for field_name, value in expected.items():
            field = await self._field(field_name)
            if field_name in LABELLED_SELECTS:
                await expect(field.locator("option:checked")).to_have_text(value)
            else:
                await expect(field).to_have_value(value)

    @allure.step("Verify validation errors")
    async def verify_validation_errors(self, expected: Optional[Sequence[str]] = None) -> None:
        """
        Assert that a validation error is shown.

        Args:
            expected: Substrings that must each appear in some visible error
        """
        errors = self.locators.error_messages
        await expect(errors.first).to_be_visible(timeout=self.timeouts.element_visible)

        for text in expected or []:
            await expect(errors.filter(has_text=text).first).to_be_visible(
                timeout=self.timeouts.element_visible
            )

        logger.info(f"Validation errors shown: {list(expected or [])}")

    @allure.step("Verify {field} field error")
    async def verify_field_error(self, field: str, expected: Optional[str] = None) -> None:
        """
        Assert the inline error of one field.

        Raises:
            ValueError: For fields without an inline error
        """
        error = self.locators.field_error(field)
        await expect(error).to_be_visible(timeout=self.timeouts.element_visible)
        if expected:
            await expect(error).to_contain_text(expected)

    @allure.step("Verify form success")
    async def verify_form_success(self, expected: Optional[str] = None) -> None:
        success = self.locators.success_messages.first
        await expect(success).to_be_visible(timeout=self.timeouts.page_load)
        if expected:
            await expect(success).to_contain_text(expected)

        logger.info("✅ Success message shown")

    @allure.step("Verify required field indicators")
    async def verify_required_fields(self) -> None:
        await expect(self.locators.required_field_indicators.first).to_be_attached()


__all__ = [
    "FORM_FIELDS",
    "FormActionError",
    "FormActions",
    "SELECT_FIELDS",
    "TEXT_FIELDS",
]
