"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for the form UI tests, providing fixtures for
browser management, the form page object and test setup/teardown.

Key Features:
- One browser per session, a fresh context and page per test
- Bundled demo form routed into every context (ui.use_demo_form)
- Form page object opened before each test
- Screenshot + URL attached to Allure on failure

================================================================================
"""

from typing import AsyncGenerator, Optional

import allure
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page
from playwright.async_api import Error as PlaywrightError

from formsuites.ui_testing.data.form_test_data import FormDataFactory
from formsuites.ui_testing.framework.browser_manager import BrowserManager
from formsuites.ui_testing.framework.config_loader import FormTestSettings, load_settings
from formsuites.ui_testing.framework.demo_form import DemoFormServer
from formsuites.ui_testing.pages.form_actions import FormActions
from formtest_tools.report_tools import attach_text


# ================================================================================
# Settings and Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def settings() -> FormTestSettings:
    """Run settings resolved from config/config.yaml and the environment."""
    resolved = load_settings()
    logger.info(
        f"🌐 Form under test: {resolved.base_url} "
        f"(demo form: {resolved.use_demo_form}, browser: {resolved.browser})"
    )
    return resolved


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(settings: FormTestSettings) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches a single browser for all tests in the session. When the browser
    cannot be launched (e.g. `playwright install` was never run) the UI tests
    are skipped instead of erroring one by one.
    """
    manager = BrowserManager.from_settings(settings)
    try:
        await manager.start()
    except PlaywrightError as e:
        await manager.close()
        pytest.skip(f"Cannot launch {settings.browser}: {e}")

    yield manager
    await manager.close()


@pytest.fixture
def demo_form(browser_manager: BrowserManager) -> Optional[DemoFormServer]:
    """The routed demo form (None when probing a real deployment), emptied per test."""
    server = browser_manager.demo_form
    if server is not None:
        server.reset()
    return server


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser_manager: BrowserManager,
    demo_form: Optional[DemoFormServer],
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.release(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    """Function-scoped page fixture."""
    page = await context.new_page()
    yield page
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def form(
    page: Page,
    settings: FormTestSettings,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[FormActions, None]:
    """
    Provides FormActions on an opened, loaded form.

    On failure a full-page screenshot, the current URL and recent API
    exchanges are attached to the Allure report.
    """
    allure.dynamic.parameter("browser", settings.browser)
    form = FormActions(page, base_url=settings.base_url, timeouts=settings.timeouts)
    await form.navigate_to_form()

    yield form

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await form.capture_failure(request.node.name)
            attach_text(form.get_locator_health_report(), name="Locator Health")
        except PlaywrightError as e:
            logger.warning(f"Failed to capture failure details: {e}")

    logger.debug(form.get_locator_health_report())


@pytest.fixture
def form_data() -> FormDataFactory:
    """Form data generator (fresh, unseeded)."""
    return FormDataFactory()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
