from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from formsuites.ui_testing.data.form_test_data import FormTestData
from formsuites.ui_testing.framework.config_loader import Timeouts
from formsuites.ui_testing.pages import form_actions, form_page
from formsuites.ui_testing.pages.form_actions import FormActionError, FormActions


ASSERTIONS = (
    "to_be_attached",
    "to_be_checked",
    "to_be_enabled",
    "to_be_hidden",
    "to_be_visible",
    "to_contain_text",
    "to_have_text",
    "to_have_value",
)

ELEMENT_METHODS = ("check", "clear", "click", "fill", "focus", "select_option", "set_checked")


def make_element(count=1, value=""):
    element = MagicMock()
    element.count = AsyncMock(return_value=count)
    element.input_value = AsyncMock(return_value=value)
    element.first = element
    for name in ELEMENT_METHODS:
        setattr(element, name, AsyncMock())
    return element


@pytest.fixture
def element():
    return make_element()


@pytest.fixture
def page(element):
    page = MagicMock()
    page.url = "http://form.local/"
    page.locator.return_value = element
    page.goto = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    return page


@pytest.fixture
def assertions(monkeypatch):
    """Replace Playwright `expect` with a recorder; every assertion passes by default."""
    recorder = MagicMock()
    for name in ASSERTIONS:
        setattr(recorder, name, AsyncMock())
    fake_expect = MagicMock(return_value=recorder)
    monkeypatch.setattr(form_actions, "expect", fake_expect)
    monkeypatch.setattr(form_page, "expect", fake_expect)
    return recorder


@pytest.fixture
def form(page, assertions):
    return FormActions(page, base_url="http://form.local", timeouts=Timeouts())


@pytest.mark.asyncio
async def test_fill_field_fills_and_checks_value(form, element, assertions):
    await form.fill_name("John Doe")

    element.clear.assert_awaited_once()
    element.fill.assert_awaited_once_with("John Doe")
    assertions.to_be_visible.assert_awaited_once_with(timeout=5000)
    assertions.to_have_value.assert_awaited_once_with("John Doe")


@pytest.mark.asyncio
async def test_fill_field_wraps_assertion_failure(form, assertions):
    assertions.to_have_value.side_effect = AssertionError("value was truncated")

    with pytest.raises(FormActionError) as exc_info:
        await form.fill_name("A" * 101)

    message = str(exc_info.value)
    assert message.startswith('Failed to fill name field with value "AAAA')
    assert message.endswith(": value was truncated")
    assert isinstance(exc_info.value.__cause__, AssertionError)


@pytest.mark.asyncio
async def test_fill_field_wraps_playwright_error(form, element):
    element.fill.side_effect = PlaywrightError("element is detached")

    with pytest.raises(FormActionError, match='Failed to fill email field with value "a@b.co"'):
        await form.fill_email("a@b.co")


@pytest.mark.asyncio
async def test_select_country_checks_option_text(form, element, assertions):
    await form.select_country("Algeria")

    element.select_option.assert_awaited_once_with("Algeria")
    element.locator.assert_called_with("option:checked")
    assertions.to_have_text.assert_awaited_once_with("Algeria")


@pytest.mark.asyncio
async def test_select_role_failure_message(form, element):
    element.select_option.side_effect = PlaywrightError("no option")

    with pytest.raises(FormActionError, match='Failed to select role "ceo": no option'):
        await form.select_role("ceo")


@pytest.mark.asyncio
async def test_set_checkbox_failure_message(form, assertions):
    assertions.to_be_checked.side_effect = AssertionError("still unchecked")

    with pytest.raises(FormActionError, match="Failed to set newsletter checkbox to True"):
        await form.set_newsletter_subscription(True)


@pytest.mark.asyncio
async def test_select_contact_method(form, page, element, assertions):
    await form.select_contact_method("phone")

    page.locator.assert_any_call('input[type="radio"][value*="phone"]')
    element.check.assert_awaited_once()
    assertions.to_be_checked.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_select_contact_method_rejects_unknown(form):
    with pytest.raises(ValueError):
        await form.select_contact_method("fax")


@pytest.mark.asyncio
async def test_submit_waits_for_network_idle(form, page, element, assertions):
    await form.submit_form()

    assertions.to_be_enabled.assert_awaited_once()
    element.click.assert_awaited_once_with(timeout=15000)
    page.wait_for_load_state.assert_awaited_once_with("networkidle", timeout=10000)


@pytest.mark.asyncio
async def test_submit_failure_is_wrapped(form, assertions):
    assertions.to_be_enabled.side_effect = AssertionError("button disabled")

    with pytest.raises(FormActionError, match="Failed to submit form: button disabled"):
        await form.submit_form()


@pytest.mark.asyncio
async def test_fill_complete_form_skips_empty_values(form, element):
    data = FormTestData(name="", email="a@b.co", role="", agree_to_terms=False)

    await form.fill_complete_form(data)

    element.fill.assert_awaited_once_with("a@b.co")
    element.select_option.assert_not_awaited()
    element.set_checked.assert_awaited_once_with(False)
    element.check.assert_not_awaited()


@pytest.mark.asyncio
async def test_current_values_blank_for_missing_fields(form, element):
    element.count.return_value = 0

    values = await form.get_current_form_values()

    assert values == {
        "name": "",
        "email": "",
        "phone": "",
        "message": "",
        "company": "",
        "role": "",
        "country": "",
    }
    element.input_value.assert_not_awaited()


@pytest.mark.asyncio
async def test_clear_all_fields_skips_missing(form, element):
    element.count.return_value = 0

    await form.clear_all_fields()

    element.clear.assert_not_awaited()


@pytest.mark.asyncio
async def test_verify_validation_errors_checks_each_text(form, element, assertions):
    await form.verify_validation_errors(["Name is required", "Country is required"])

    assert assertions.to_be_visible.await_count == 3
    element.filter.assert_any_call(visible=True)


@pytest.mark.asyncio
async def test_verify_field_error_unknown_field(form):
    with pytest.raises(ValueError):
        await form.verify_field_error("company")


@pytest.mark.asyncio
async def test_verify_form_data_unknown_field(form):
    with pytest.raises(ValueError, match="Unknown field 'fax'"):
        await form.verify_form_data({"fax": "123"})


@pytest.mark.asyncio
async def test_lingering_loading_indicator_does_not_fail_load(form, page, assertions):
    assertions.to_be_hidden.side_effect = AssertionError("spinner still visible")

    await form.navigate_to_form()

    page.goto.assert_awaited_once_with("http://form.local/", wait_until="load", timeout=10000)
    assertions.to_be_visible.assert_awaited_once_with(timeout=10000)
