"""
================================================================================
Form Locators
================================================================================

Selector definitions for the contact / registration form.

Every element has an ordered selector list so the same suite works against
forms that name their fields differently. Properties return lazy Playwright
locators built from the union of an element's selectors.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Dict, List, Optional

from playwright.async_api import Locator

from formsuites.ui_testing.framework.smart_locator import SmartLocator


# Fields that render an inline validation error
ERROR_FIELDS = ("name", "email", "phone", "message", "country")


# Substring id matches must not land on choice inputs such as id="contact-phone"
NOT_CHOICE_INPUT = ':not([type="radio"]):not([type="checkbox"])'


def _field_inputs(field: str, tag: str = "input", extra: Optional[List[str]] = None) -> List[str]:
    partial_id = f'{tag}[id*="{field}"]'
    if tag == "input":
        partial_id += NOT_CHOICE_INPUT

    selectors = [f'{tag}[name="{field}"]'] + list(extra or [])
    selectors += [
        f'{tag}[id="{field}"]',
        partial_id,
    ]
    return selectors


class FormLocators(SmartLocator):
    """
    Locator registry for the form page.

    Usage:
        locators = FormLocators(page)
        await expect(locators.name_input).to_be_visible()
        email = await locators.resolve("email_input")
    """

    LOCATORS: Dict[str, List[str]] = {
        # Containers
        "form_container": ["form", '[role="form"]', ".form-container", ".contact-form"],
        "form_title": ["h1", "h2", ".form-title", ".page-title"],

        # Inputs
        "name_input": _field_inputs("name") + [
            'input[placeholder*="name" i]',
            "#name",
            f".name-input input{NOT_CHOICE_INPUT}",
        ],
        "email_input": _field_inputs("email", extra=['input[type="email"]']) + [
            'input[placeholder*="email" i]',
            "#email",
            f".email-input input{NOT_CHOICE_INPUT}",
        ],
        "phone_input": _field_inputs("phone", extra=['input[type="tel"]']) + [
            'input[placeholder*="phone" i]',
            "#phone",
            f".phone-input input{NOT_CHOICE_INPUT}",
        ],
        "message_textarea": _field_inputs("message", tag="textarea") + [
            'textarea[placeholder*="message" i]',
            "#message",
            ".message-input textarea",
            "textarea",
        ],
        "company_input": _field_inputs("company") + [
            'input[placeholder*="company" i]',
            "#company",
            f".company-input input{NOT_CHOICE_INPUT}",
        ],
        "role_select": _field_inputs("role", tag="select") + [
            "#role",
            ".role-select select",
            "select",
        ],
        "country_select": _field_inputs("country", tag="select") + [
            "#country",
            ".country-select select",
        ],

        # Buttons
        "submit_button": [
            'button[type="submit"]',
            'input[type="submit"]',
            'button:has-text("Submit")',
            'button:has-text("Send")',
            ".submit-btn",
            ".send-btn",
            '[role="button"]:has-text("Submit")',
        ],
        "reset_button": [
            'button[type="reset"]',
            'input[type="reset"]',
            'button:has-text("Reset")',
            'button:has-text("Clear")',
            ".reset-btn",
            ".clear-btn",
        ],

        # Checkboxes and radios
        "agree_checkbox": [
            'input[type="checkbox"][name*="agree"]',
            'input[type="checkbox"][id*="agree"]',
            'input[type="checkbox"][name*="terms"]',
            'input[type="checkbox"][id*="terms"]',
        ],
        "newsletter_checkbox": [
            'input[type="checkbox"][name*="newsletter"]',
            'input[type="checkbox"][id*="newsletter"]',
            'input[type="checkbox"][name*="subscribe"]',
            'input[type="checkbox"][id*="subscribe"]',
        ],
        "contact_method_radios": [
            'input[type="radio"][name*="contact"]',
            'input[type="radio"][name*="method"]',
            'input[type="radio"][name*="preference"]',
        ],
        "email_contact_radio": ['input[type="radio"][value*="email"]'],
        "phone_contact_radio": ['input[type="radio"][value*="phone"]'],

        # Messages and status
        "error_message": [
            ".error",
            ".error-message",
            ".alert-error",
            ".danger",
            '[role="alert"]',
            ".validation-error",
            ".field-error",
        ],
        "success_message": [
            ".success",
            ".success-message",
            ".alert-success",
            ".confirmation",
            ".thank-you",
            ".form-success",
            '[role="status"]',
        ],
        "loading_indicator": [
            ".loading",
            ".spinner",
            ".loader",
            '[aria-label="Loading"]',
            ".form-loading",
        ],

        # Field validation errors
        "name_field_error": [
            ".name-error",
            'input[name="name"] + .error',
            'input[id*="name"] + .error',
            '[data-field="name"] .error',
        ],
        "email_field_error": [
            ".email-error",
            'input[name="email"] + .error',
            'input[type="email"] + .error',
            '[data-field="email"] .error',
        ],
        "phone_field_error": [
            ".phone-error",
            'input[name="phone"] + .error',
            'input[type="tel"] + .error',
            '[data-field="phone"] .error',
        ],
        "message_field_error": [
            ".message-error",
            'textarea[name="message"] + .error',
            '[data-field="message"] .error',
        ],
        "country_field_error": [
            ".country-error",
            'select[name="country"] + .error',
            '[data-field="country"] .error',
        ],

        # Labels
        "name_label": ['label[for*="name"]', 'label:has-text("Name")'],
        "email_label": ['label[for*="email"]', 'label:has-text("Email")'],
        "phone_label": ['label[for*="phone"]', 'label:has-text("Phone")'],
        "message_label": ['label[for*="message"]', 'label:has-text("Message")'],
        "country_label": ['label[for*="country"]', 'label:has-text("Country")'],

        # Collections
        "required_field_indicators": [
            ".required",
            "[required]",
            '[aria-required="true"]',
            ".asterisk",
        ],
        "all_form_inputs": ["input", "textarea", "select"],
        "all_interactive_elements": [
            "input",
            "textarea",
            "select",
            "button",
            '[role="button"]',
            "[tabindex]",
        ],
    }

    # =========================================================================
    # Single elements
    # =========================================================================

    def _single(self, element_name: str) -> Locator:
        return self.union(element_name).first

    @property
    def form_container(self) -> Locator:
        return self._single("form_container")

    @property
    def form_title(self) -> Locator:
        return self._single("form_title")

    @property
    def name_input(self) -> Locator:
        return self._single("name_input")

    @property
    def email_input(self) -> Locator:
        return self._single("email_input")

    @property
    def phone_input(self) -> Locator:
        return self._single("phone_input")

    @property
    def message_textarea(self) -> Locator:
        return self._single("message_textarea")

    @property
    def company_input(self) -> Locator:
        return self._single("company_input")

    @property
    def country_select(self) -> Locator:
        return self._single("country_select")

    @property
    def submit_button(self) -> Locator:
        return self._single("submit_button")

    @property
    def reset_button(self) -> Locator:
        return self._single("reset_button")

    @property
    def agree_checkbox(self) -> Locator:
        return self._single("agree_checkbox")

    @property
    def newsletter_checkbox(self) -> Locator:
        return self._single("newsletter_checkbox")

    @property
    def loading_indicator(self) -> Locator:
        return self._single("loading_indicator")

    # =========================================================================
    # Collections
    # =========================================================================

    @property
    def contact_method_radios(self) -> Locator:
        return self.union("contact_method_radios")

    @property
    def required_field_indicators(self) -> Locator:
        return self.union("required_field_indicators")

    @property
    def all_form_inputs(self) -> Locator:
        return self.union("all_form_inputs")

    @property
    def all_interactive_elements(self) -> Locator:
        return self.union("all_interactive_elements")

    # =========================================================================
    # Messages
    # =========================================================================

    def visible_messages(self, element_name: str) -> Locator:
        """All currently visible matches, e.g. every shown error."""
        return self.union(element_name).filter(visible=True)

    @property
    def error_messages(self) -> Locator:
        return self.visible_messages("error_message")

    @property
    def success_messages(self) -> Locator:
        return self.visible_messages("success_message")

    def field_error(self, field: str) -> Locator:
        """
        Inline error for one field.

        Raises:
            ValueError: For fields without an inline error definition
        """
        if field not in ERROR_FIELDS:
            raise ValueError(
                f"Unknown field '{field}', expected one of {', '.join(ERROR_FIELDS)}"
            )
        return self._single(f"{field}_field_error")

    def label(self, field: str) -> Locator:
        return self._single(f"{field}_label")


__all__ = [
    "ERROR_FIELDS",
    "FormLocators",
]
