"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- One browser per session, a fresh context and page per test
- Page Object fixtures bound to the test's page
- Screenshot and URL capture on failure
- Start/end banners in the console log

All browser fixtures and tests share the session event loop.

================================================================================
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import BrowserContext, Page

from autotest_tools.report_tools.allure_utils import attach_json
from testsuites.ui_testing.framework import env_config
from testsuites.ui_testing.framework import step_logger as log
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages.dashboard_page import DashboardPage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(pytestconfig) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches the browser selected with `--browser` once per session,
    reducing browser launch overhead.
    """
    manager = BrowserManager(
        headless=not pytestconfig.getoption("headed"),
        browser_type=pytestconfig.getoption("browser"),
    )
    await manager.start()
    log.separator(f"{manager.browser_type} session")
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.release_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Creates a new page for each test. On failure, captures a screenshot and
    the current URL before the page is closed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await BasePage(page).capture_failure(request.node.name)
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """
    Provides LoginPage instance bound to this test's page.
    """
    return LoginPage(page)


@pytest.fixture
def dashboard_page(page: Page) -> DashboardPage:
    """
    Provides DashboardPage instance bound to this test's page.
    """
    return DashboardPage(page)


@pytest_asyncio.fixture(loop_scope="session")
async def opened_login_page(login_page: LoginPage) -> LoginPage:
    """
    Provides LoginPage already navigated to the base URL.
    """
    return await login_page.open()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Expose each phase's report on the item (`item.rep_setup`, `item.rep_call`).

    Fixtures read these during teardown to decide whether to capture
    failure details.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(autouse=True)
def lifecycle_banner(request):
    """
    Log the start/end banners around every UI test and attach the resolved
    configuration to the report.
    """
    log.test_start(request.node.name)
    attach_json(env_config.get_all_config(mask_secrets=True), name="Run configuration")
    yield
    setup = getattr(request.node, "rep_setup", None)
    call = getattr(request.node, "rep_call", None)
    failed = (setup is not None and setup.failed) or (call is not None and call.failed)
    log.test_end("FAILED" if failed else "PASSED")
