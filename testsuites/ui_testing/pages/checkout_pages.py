"""
================================================================================
Checkout Page Objects
================================================================================

Cart and the three checkout steps:

    Cart -> Checkout Info -> Checkout Overview -> Checkout Complete

Cancel leads from Info back to Cart and from Overview back to Inventory.
The application enforces this flow; these objects only expose the operations
of each step and leave transition checks to the scenarios.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure

from testsuites.ui_testing.framework.element_locator import (
    by_css,
    by_placeholder,
    by_role,
    by_test_id,
    exact_text,
)
from testsuites.ui_testing.framework.page_base import BasePage

from .authenticated_page import AuthenticatedShell


THANK_YOU_HEADERS = frozenset({
    "THANK YOU FOR YOUR ORDER",
    "THANK YOU FOR YOUR ORDER!",
})


# ================================================================================
# Cart Page
# ================================================================================

class CartPage(AuthenticatedShell, BasePage):
    """Shopping cart."""

    URL_PATH = "/cart.html"

    CART_LIST = by_css(".cart_list", "Cart List")
    CART_ITEMS = by_css(".cart_item", "Cart Item")
    ITEM_NAMES = by_test_id("inventory-item-name", "Cart Item Name")
    REMOVE_BUTTONS = by_css('button[id^="remove"]', "Remove Button")
    CHECKOUT_BUTTON = by_test_id("checkout", "Checkout Button")
    CONTINUE_SHOPPING_BUTTON = by_test_id("continue-shopping", "Continue Shopping Button")

    @allure.step("Navigate to cart page")
    async def goto(self) -> None:
        await self.navigate_to(self.URL_PATH)

    @allure.step("Get cart item count")
    async def get_cart_item_count(self) -> int:
        return await self.count(self.CART_ITEMS)

    @allure.step("Check if product is in cart: {product_name}")
    async def is_product_in_cart(self, product_name: str) -> bool:
        return await self.is_visible(
            self.ITEM_NAMES.filter(has_text=exact_text(product_name))
        )

    @allure.step("Remove first item from cart")
    async def remove_first_item(self) -> None:
        await self.click(self.REMOVE_BUTTONS.first())

    @allure.step("Click checkout button")
    async def click_checkout(self) -> None:
        await self.click(self.CHECKOUT_BUTTON)

    @allure.step("Click continue shopping button")
    async def click_continue_shopping(self) -> None:
        await self.click(self.CONTINUE_SHOPPING_BUTTON)


# ================================================================================
# Checkout Info Page
# ================================================================================

class CheckoutInfoPage(AuthenticatedShell, BasePage):
    """Checkout step one: customer information."""

    URL_PATH = "/checkout-step-one.html"

    FIRST_NAME_INPUT = by_placeholder("First Name", "First Name Input")
    LAST_NAME_INPUT = by_placeholder("Last Name", "Last Name Input")
    ZIP_CODE_INPUT = by_placeholder("Zip/Postal Code", "Zip Code Input")
    CONTINUE_BUTTON = by_role("button", "Continue Button", accessible_name="Continue", exact=True)
    CANCEL_BUTTON = by_role("button", "Cancel Button", accessible_name="Cancel", exact=True)
    ERROR_MESSAGE = by_test_id("error", "Checkout Error Message")

    @allure.step("Fill checkout information form")
    async def fill_checkout_info(self, first_name: str, last_name: str, zip_code: str) -> None:
        """Fill the three fields; each fill is its own step in the report."""
        await self.fill(self.FIRST_NAME_INPUT, first_name)
        await self.fill(self.LAST_NAME_INPUT, last_name)
        await self.fill(self.ZIP_CODE_INPUT, zip_code)

    @allure.step("Click continue button")
    async def click_continue(self) -> None:
        await self.click(self.CONTINUE_BUTTON)

    @allure.step("Click cancel button")
    async def click_cancel(self) -> None:
        await self.click(self.CANCEL_BUTTON)

    @allure.step("Get checkout error message")
    async def get_error_message(self) -> Optional[str]:
        """
        Error text, or None when no error is shown.

        Unlike the login page this does not wait: None means "no error now".
        """
        if await self.is_visible(self.ERROR_MESSAGE):
            return await self.get_text(self.ERROR_MESSAGE)
        return None

    @allure.step("Check if checkout error message is visible")
    async def is_error_message_visible(self) -> bool:
        return await self.is_visible(self.ERROR_MESSAGE)


# ================================================================================
# Checkout Overview Page
# ================================================================================

class CheckoutOverviewPage(AuthenticatedShell, BasePage):
    """Checkout step two: order review."""

    URL_PATH = "/checkout-step-two.html"

    CART_ITEMS = by_css(".cart_item", "Order Item")
    CART_LIST = by_css(".cart_list", "Order List")
    SUMMARY_INFO = by_css(".summary_info", "Summary Info")
    FINISH_BUTTON = by_test_id("finish", "Finish Button")
    CANCEL_BUTTON = by_test_id("cancel", "Cancel Button")
    TOTAL_PRICE_LABEL = by_css(".summary_total_label", "Total Price Label")

    @allure.step("Get order item count")
    async def get_order_item_count(self) -> int:
        return await self.count(self.CART_ITEMS)

    @allure.step("Get total price text")
    async def get_total_price_text(self) -> Optional[str]:
        return await self.get_text(self.TOTAL_PRICE_LABEL)

    @allure.step("Check if order summary is visible")
    async def is_summary_visible(self) -> bool:
        return await self.is_visible(self.CART_LIST)

    @allure.step("Click finish button")
    async def click_finish(self) -> None:
        await self.click(self.FINISH_BUTTON)

    @allure.step("Click cancel button")
    async def click_cancel(self) -> None:
        await self.click(self.CANCEL_BUTTON)


# ================================================================================
# Checkout Complete Page
# ================================================================================

class CheckoutCompletePage(AuthenticatedShell, BasePage):
    """Order confirmation."""

    URL_PATH = "/checkout-complete.html"

    COMPLETE_HEADER = by_css(".complete-header", "Completion Header")
    COMPLETE_TEXT = by_css(".complete-text", "Completion Text")
    BACK_HOME_BUTTON = by_test_id("back-to-products", "Back Home Button")

    @allure.step("Get completion header text")
    async def get_completion_header(self) -> Optional[str]:
        return await self.get_text(self.COMPLETE_HEADER)

    @allure.step('Check if "THANK YOU" header is visible')
    async def is_thank_you_header_visible(self) -> bool:
        """
        Case-insensitive check of the header against the accepted wording.

        Both "Thank you for your order" and "Thank you for your order!" are
        accepted; the application has shipped both.
        """
        text = await self.get_completion_header()
        return (text or "").strip().upper() in THANK_YOU_HEADERS

    @allure.step("Click back home button")
    async def click_back_home(self) -> None:
        await self.click(self.BACK_HOME_BUTTON)


__all__ = [
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutInfoPage",
    "CheckoutOverviewPage",
    "THANK_YOU_HEADERS",
]
