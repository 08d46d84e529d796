"""
================================================================================
Authenticated Shell
================================================================================

Capabilities shared by every screen reachable only after login: the header
cart link and badge, and the hamburger sidebar with the logout entry.

AuthenticatedShell is a mixin: a screen opts into it by listing it before
BasePage in its bases. AuthenticatedPage is the ready-made combination.

Sidebar states: collapsed -> open (open_sidebar_menu) -> session ended
(click_logout). Logging out from a collapsed sidebar is not supported; call
logout() for the composed flow.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_locator import (
    by_css,
    by_test_id,
    parse_count,
)
from testsuites.ui_testing.framework.page_base import BasePage


class AuthenticatedShell:
    """Header and sidebar operations; requires a BasePage in the MRO."""

    CART_BADGE = by_css(".shopping_cart_badge", "Cart Badge")
    CART_LINK = by_test_id("shopping-cart-link", "Cart Link")
    HAMBURGER_MENU_BUTTON = by_css("#react-burger-menu-btn", "Hamburger Menu Button")
    SIDEBAR_MENU = by_css(".bm-menu", "Sidebar Menu")
    LOGOUT_LINK = by_css("#logout_sidebar_link", "Logout Link")

    @allure.step("Get cart badge count")
    async def get_cart_badge_count(self) -> int:
        """
        Number shown on the cart badge.

        An absent badge is the empty-cart state and reads as 0.

        Raises:
            DataIntegrityError: When a visible badge does not hold an integer
        """
        if not await self.is_visible(self.CART_BADGE):
            return 0
        return parse_count(await self.get_text(self.CART_BADGE))

    @allure.step("Check if cart badge is visible")
    async def is_cart_badge_visible(self) -> bool:
        return await self.is_visible(self.CART_BADGE)

    @allure.step("Navigate to cart page")
    async def navigate_to_cart(self) -> None:
        await self.click(self.CART_LINK)

    @allure.step("Open sidebar menu")
    async def open_sidebar_menu(self) -> None:
        """Open the hamburger menu and wait until the side panel is visible."""
        await self.click(self.HAMBURGER_MENU_BUTTON)
        await self.wait_visible(self.SIDEBAR_MENU)

    @allure.step("Click logout button")
    async def click_logout(self) -> None:
        await self.click(self.LOGOUT_LINK)

    @allure.step("Check if sidebar is visible")
    async def is_sidebar_visible(self) -> bool:
        return await self.is_visible(self.SIDEBAR_MENU)

    @allure.step("Perform logout")
    async def logout(self) -> None:
        await self.open_sidebar_menu()
        await self.click_logout()
        logger.info("Logout requested")


class AuthenticatedPage(AuthenticatedShell, BasePage):
    """Any post-login screen when only the shell is needed."""

    URL_PATH = "/inventory.html"


__all__ = [
    "AuthenticatedPage",
    "AuthenticatedShell",
]
