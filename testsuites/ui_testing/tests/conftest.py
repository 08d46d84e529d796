"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures wiring the Swag Labs Page Objects to scenarios.

Lifecycle:
    browser_manager   session   one browser process per run / xdist worker
    target_app        session   skip the suite when the app is unreachable
    auth_state        session   log in once, save the storage state
    browser_session   function  isolated context + page, closed after the test
    pages             function  PageFactory over the test's session
    <role>_page       function  Page Objects resolved through the factory

Tests marked `authenticated` start from the saved login.
A failing test gets a screenshot and its current URL attached to Allure.

================================================================================
"""

import os
import re
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import Error as PlaywrightError, Page, expect

from e2e_tools.report_tools.allure_utils import attach_page_screenshot, attach_text
from testsuites.ui_testing.data import USERS
from testsuites.ui_testing.framework import BrowserManager, BrowserSession, PageFactory
from testsuites.ui_testing.pages import (
    PAGE_BINDINGS,
    CartPage,
    CheckoutCompletePage,
    CheckoutInfoPage,
    CheckoutOverviewPage,
    InventoryDetailsPage,
    InventoryPage,
    LoginPage,
)


INVENTORY_URL = re.compile(r".*inventory\.html")


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(request) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager.

    The UI suite is skipped when no browser can be launched (for example
    when `playwright install` has not been run).
    """
    manager = BrowserManager(
        headless=False if request.config.getoption("--headed") else None,
        browser_type=request.config.getoption("--ui-browser"),
    )

    worker = os.environ.get("PYTEST_XDIST_WORKER")
    if worker:
        state_file = manager.auth_state_file
        manager.auth_state_file = state_file.with_name(f"{state_file.stem}_{worker}.json")

    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser could not be launched: {e}")

    yield manager
    await manager.close()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def target_app(browser_manager: BrowserManager) -> str:
    """Base URL of the application, after checking it answers."""
    session = await browser_manager.new_session()
    try:
        await session.page.goto(session.absolute_url("/"), wait_until="domcontentloaded")
    except PlaywrightError as e:
        pytest.skip(f"Application unreachable at {browser_manager.base_url}: {e}")
    finally:
        await session.close()
    return browser_manager.base_url


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def auth_state(browser_manager: BrowserManager, target_app: str):
    """Log in as the standard user once and save the storage state."""

    async def do_login(session: BrowserSession) -> None:
        user = USERS["standard"]
        login_page = LoginPage(session)
        await login_page.goto()
        await login_page.login(user.username, user.password)
        await expect(session.page).to_have_url(INVENTORY_URL)

    return await browser_manager.bootstrap_auth_state(do_login)


@pytest_asyncio.fixture(loop_scope="session")
async def browser_session(
    request,
    browser_manager: BrowserManager,
    target_app: str,
    auth_state,
) -> AsyncGenerator[BrowserSession, None]:
    """
    Function-scoped session handle.

    Creates a fresh browser context for each test, providing isolation.
    """
    restore_auth = request.node.get_closest_marker("authenticated") is not None
    session = await browser_manager.new_session(restore_auth=restore_auth)

    yield session

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await attach_page_screenshot(session.page, "failure_screenshot", full_page=True)
            attach_text(session.url, name="Current URL")
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await session.close()


@pytest.fixture
def page(browser_session: BrowserSession) -> Page:
    """Raw Playwright page of the current session, for URL/content assertions."""
    return browser_session.page


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def pages(browser_session: BrowserSession) -> PageFactory:
    """Role-keyed Page Object factory for the current test."""
    return PageFactory(browser_session, PAGE_BINDINGS)


@pytest_asyncio.fixture(loop_scope="session")
async def login_page(pages: PageFactory) -> LoginPage:
    """LoginPage, already opened at the site root."""
    return await pages.get("login_page")


@pytest_asyncio.fixture(loop_scope="session")
async def inventory_page(pages: PageFactory) -> InventoryPage:
    return await pages.get("inventory_page")


@pytest_asyncio.fixture(loop_scope="session")
async def inventory_details_page(pages: PageFactory) -> InventoryDetailsPage:
    return await pages.get("inventory_details_page")


@pytest_asyncio.fixture(loop_scope="session")
async def cart_page(pages: PageFactory) -> CartPage:
    return await pages.get("cart_page")


@pytest_asyncio.fixture(loop_scope="session")
async def checkout_info_page(pages: PageFactory) -> CheckoutInfoPage:
    return await pages.get("checkout_info_page")


@pytest_asyncio.fixture(loop_scope="session")
async def checkout_overview_page(pages: PageFactory) -> CheckoutOverviewPage:
    return await pages.get("checkout_overview_page")


@pytest_asyncio.fixture(loop_scope="session")
async def checkout_complete_page(pages: PageFactory) -> CheckoutCompletePage:
    return await pages.get("checkout_complete_page")


# ================================================================================
# Scenario Preconditions
# ================================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def logged_in(login_page: LoginPage, inventory_page: InventoryPage, page: Page) -> InventoryPage:
    """Standard user logged in through the form, landing on the inventory."""
    user = USERS["standard"]
    await login_page.login(user.username, user.password)
    await expect(page).to_have_url(INVENTORY_URL)
    return inventory_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
