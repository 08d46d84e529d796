"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model implementation.

Provides:
    - Navigation and URL handling over a shared BrowserSession
    - Traced primitive interactions on declarative ElementLocators
    - Screenshot and evidence utilities

Page Objects declare their locators as class attributes and build user-intent
operations from the primitives below. Every primitive is an Allure step and
lets Playwright failures (timeouts, strict mode violations) propagate as-is.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from e2e_tools.common import ConfigLoader
from e2e_tools.report_tools.allure_utils import attach_png

from .browser_manager import BrowserSession
from .element_locator import ElementLocator


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"
            USERNAME_INPUT = by_placeholder("Username", "Username Input")

            async def login(self, username: str, password: str) -> None:
                await self.fill(self.USERNAME_INPUT, username)
                ...
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = "Swag Labs"

    def __init__(self, session: BrowserSession):
        """
        Initialize page object.

        Args:
            session: Session handle shared by every page object of the test
        """
        self.session = session

    @property
    def page(self) -> Page:
        return self.session.page

    @property
    def base_url(self) -> str:
        return self.session.base_url

    @property
    def url(self) -> str:
        """Full URL of this page's route."""
        return self.session.absolute_url(self.URL_PATH)

    def element(self, locator: ElementLocator) -> Locator:
        """Resolve a declared locator against the live document."""
        return locator.resolve(self.page)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, path: str, wait_for: str = "commit") -> None:
        """
        Navigate to a path relative to the base URL.

        Returns once the navigation is committed; use wait_for_page_load()
        or an element wait when the rendered document is needed.

        Args:
            path: URL path to navigate to
            wait_for: Playwright wait condition - 'commit', 'domcontentloaded', 'load'
        """
        full_url = self.session.absolute_url(path)
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {full_url}")

    async def goto(self) -> None:
        """Navigate to this page's route."""
        await self.navigate_to(self.URL_PATH)

    async def wait_for_page_load(self, state: str = "domcontentloaded") -> None:
        """Wait for the page to reach the given load state."""
        await self.page.wait_for_load_state(state)

    def get_current_url(self) -> str:
        return self.page.url

    async def reload(self) -> None:
        with allure.step("Reload page"):
            await self.page.reload()

    async def go_back_in_history(self) -> None:
        """Browser back button."""
        with allure.step("Browser back"):
            await self.page.go_back()

    async def get_title(self) -> str:
        return await self.page.title()

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, locator: ElementLocator, **kwargs: Any) -> None:
        with allure.step(f"Click: {locator.name}"):
            logger.debug(f"Click: {locator.name}")
            await self.element(locator).click(**kwargs)

    async def fill(self, locator: ElementLocator, value: str) -> None:
        """Fill an input; values of password fields are masked in the report."""
        shown = "*" * len(value) if "password" in locator.name.lower() else value
        with allure.step(f"Fill {locator.name}: {shown}"):
            logger.debug(f"Fill {locator.name}: {shown}")
            await self.element(locator).fill(value)

    async def select_option(self, locator: ElementLocator, value: str) -> None:
        with allure.step(f"Select '{value}' in {locator.name}"):
            await self.element(locator).select_option(value)

    async def get_text(self, locator: ElementLocator) -> Optional[str]:
        """Text content of the single matched element (waits for it to attach)."""
        return await self.element(locator).text_content()

    async def get_input_value(self, locator: ElementLocator) -> str:
        return await self.element(locator).input_value()

    async def is_visible(self, locator: ElementLocator) -> bool:
        """Immediate visibility check; absence is reported as False."""
        return await self.element(locator).is_visible()

    async def wait_visible(
        self,
        locator: ElementLocator,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait until the element is visible.

        Raises:
            playwright TimeoutError: When the element never becomes visible
        """
        await self.element(locator).wait_for(state="visible", timeout=timeout)

    async def count(self, locator: ElementLocator) -> int:
        return await self.element(locator).count()

    async def all_text_contents(self, locator: ElementLocator) -> List[str]:
        """Text of every match, in document order (empty list if none)."""
        return await self.element(locator).all_text_contents()

    # =========================================================================
    # Screenshot and Evidence
    # =========================================================================

    async def take_screenshot(
        self,
        destination: Optional[Union[str, Path]] = None,
        full_page: bool = False,
    ) -> bytes:
        """
        Capture the current rendered state.

        Args:
            destination: File to write; a timestamped file under
                reports.screenshot_dir is used when omitted
            full_page: Capture full scrollable page

        Returns:
            PNG bytes
        """
        if destination is None:
            screenshot_dir = ConfigLoader().get_path(
                "reports.screenshot_dir", "reports/screenshots"
            )
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            destination = screenshot_dir / f"{type(self).__name__}_{timestamp}.png"

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        data = await self.page.screenshot(path=str(destination), full_page=full_page)
        logger.debug(f"Screenshot saved: {destination}")
        return data

    async def attach_screenshot(self, name: str, full_page: bool = False) -> None:
        """Attach the current rendered state to the Allure report as evidence."""
        attach_png(await self.page.screenshot(full_page=full_page), name=name)


__all__ = [
    "BasePage",
]
