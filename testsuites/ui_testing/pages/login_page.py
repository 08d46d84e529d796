"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

The Swag Labs login screen served at the site root.

`login()` only submits the form. Whether the attempt succeeded is for the
caller to assert, so positive and negative scenarios share the same operation.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_locator import (
    by_placeholder,
    by_role,
    by_test_id,
)
from testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/"

    USERNAME_INPUT = by_placeholder("Username", "Username Input")
    PASSWORD_INPUT = by_placeholder("Password", "Password Input")
    LOGIN_BUTTON = by_role("button", "Login Button", accessible_name="Login", exact=True)
    ERROR_MESSAGE = by_test_id("error", "Login Error Message")

    @allure.step("Navigate to login page")
    async def goto(self) -> None:
        await self.navigate_to(self.URL_PATH)

    @allure.step("Login with username: {username}")
    async def login(self, username: str, password: str) -> None:
        """
        Fill both credentials and submit.

        Args:
            username: Username to login with
            password: Password to login with
        """
        logger.info(f"Login attempt as '{username}'")
        await self.fill(self.USERNAME_INPUT, username)
        await self.fill(self.PASSWORD_INPUT, password)
        await self.click(self.LOGIN_BUTTON)

    @allure.step("Get login error message")
    async def get_error_message(self) -> str:
        """
        Wait for the error region and return its text.

        Raises:
            playwright TimeoutError: When no error is shown within the bound
        """
        await self.wait_visible(self.ERROR_MESSAGE)
        text: Optional[str] = await self.get_text(self.ERROR_MESSAGE)
        return text or ""

    async def is_error_message_visible(self) -> bool:
        return await self.is_visible(self.ERROR_MESSAGE)

    async def is_login_button_visible(self) -> bool:
        return await self.is_visible(self.LOGIN_BUTTON)

    @allure.step("Verify user is on login page")
    async def is_on_login_page(self) -> bool:
        """True only when both the submit button and the username field are shown."""
        return (
            await self.is_visible(self.LOGIN_BUTTON)
            and await self.is_visible(self.USERNAME_INPUT)
        )


__all__ = [
    "LoginPage",
]
