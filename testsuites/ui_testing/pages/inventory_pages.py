"""
================================================================================
Inventory Page Objects
================================================================================

Product listing and product details screens.

Key Features:
- Row lookup by exact product name (no partial or first-match fallbacks)
- Ordered name/price reads for sort validation
- Enumerated sort options instead of free strings

================================================================================
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_locator import (
    DataIntegrityError,
    ElementLocator,
    by_css,
    by_role,
    by_test_id,
    exact_text,
    parse_price,
)
from testsuites.ui_testing.framework.page_base import BasePage

from .authenticated_page import AuthenticatedShell


class SortOption(str, Enum):
    """Values of the product sort dropdown."""

    NAME_ASC = "az"
    NAME_DESC = "za"
    PRICE_ASC = "lohi"
    PRICE_DESC = "hilo"


# ================================================================================
# Inventory Page (Product Listing)
# ================================================================================

class InventoryPage(AuthenticatedShell, BasePage):
    """
    Page Object for the product listing.

    Rows are identified by the exact product name; a name that matches no row,
    or more than one, fails instead of acting on the wrong product.
    """

    URL_PATH = "/inventory.html"

    INVENTORY_CONTAINER = by_css(".inventory_container", "Inventory Container").first()
    INVENTORY_ITEMS = by_test_id("inventory-item", "Inventory Item")
    SORT_CONTAINER = by_test_id("product-sort-container", "Sort Dropdown")
    ITEM_NAMES = by_test_id("inventory-item-name", "Product Name")
    ITEM_PRICES = by_test_id("inventory-item-price", "Product Price")
    ITEM_NAME_LINKS = by_css(".inventory_item_name", "Product Name Link")
    ADD_TO_CART_BUTTON = by_role(
        "button", "Add To Cart Button", accessible_name=re.compile("add to cart", re.IGNORECASE)
    )
    ITEM_BUTTON = by_role("button", "Product Button")

    # ============================================================
    # Dynamic locators
    # ============================================================

    @classmethod
    def product_row(cls, product_name: str) -> ElementLocator:
        """The listing row whose name is exactly `product_name`."""
        return cls.INVENTORY_ITEMS.filter(
            has=cls.ITEM_NAMES.filter(has_text=exact_text(product_name))
        ).described_as(f"Row '{product_name}'")

    @classmethod
    def add_to_cart_button(cls, product_name: str) -> ElementLocator:
        return cls.product_row(product_name).within(cls.ADD_TO_CART_BUTTON)

    @classmethod
    def product_button(cls, product_name: str) -> ElementLocator:
        """The row's cart control, whichever label it currently shows."""
        return cls.product_row(product_name).within(cls.ITEM_BUTTON)

    @classmethod
    def product_link(cls, product_name: str) -> ElementLocator:
        return cls.ITEM_NAME_LINKS.filter(
            has_text=exact_text(product_name)
        ).described_as(f"Link '{product_name}'")

    # ============================================================
    # Page Actions
    # ============================================================

    @allure.step("Navigate to inventory page")
    async def goto(self) -> None:
        """Navigate to the listing and fail fast if it never renders."""
        await self.navigate_to(self.URL_PATH)
        await self.wait_visible(self.INVENTORY_CONTAINER)

    @allure.step("Add product to cart: {product_name}")
    async def add_product_to_cart(self, product_name: str) -> None:
        logger.info(f"Adding '{product_name}' to cart")
        await self.click(self.add_to_cart_button(product_name))

    @allure.step("Check if inventory page is loaded")
    async def is_inventory_page_loaded(self) -> bool:
        return await self.is_visible(self.INVENTORY_CONTAINER)

    @allure.step("Get inventory item count")
    async def get_inventory_item_count(self) -> int:
        return await self.count(self.INVENTORY_ITEMS)

    @allure.step("Get all product names")
    async def get_all_product_names(self) -> List[str]:
        """Product names in display order."""
        return await self.all_text_contents(self.ITEM_NAMES)

    @allure.step("Get all product prices")
    async def get_all_product_prices(self) -> List[float]:
        """
        Product prices in display order.

        Raises:
            DataIntegrityError: When a price label is not "$<number>"
        """
        return [parse_price(text) for text in await self.all_text_contents(self.ITEM_PRICES)]

    @allure.step("Select sort option: {option}")
    async def select_sort_option(self, option: SortOption) -> None:
        option = SortOption(option)
        await self.select_option(self.SORT_CONTAINER, option.value)

    @allure.step("Get selected sort option")
    async def get_selected_sort_option(self) -> SortOption:
        value = await self.get_input_value(self.SORT_CONTAINER)
        try:
            return SortOption(value)
        except ValueError as e:
            raise DataIntegrityError(f"Unknown sort option {value!r}") from e

    @allure.step("Get cart button text for: {product_name}")
    async def get_product_button_text(self, product_name: str) -> str:
        return (await self.get_text(self.product_button(product_name)) or "").strip()

    @allure.step("Open product details for: {product_name}")
    async def open_product_details(self, product_name: str) -> None:
        await self.click(self.product_link(product_name))


# ================================================================================
# Inventory Details Page (Product Details)
# ================================================================================

class InventoryDetailsPage(AuthenticatedShell, BasePage):
    """
    Page Object for a single product's detail screen.

    "Add to cart" and "Remove" are the same control in two states; only the
    one matching the current cart membership exists at a time.
    """

    URL_PATH = "/inventory-item.html"

    DETAILS_CONTAINER = by_css(".inventory_details_container", "Details Container")
    BACK_TO_PRODUCTS_BUTTON = by_test_id("back-to-products", "Back To Products Button")
    ADD_TO_CART_BUTTON = by_css('button[id^="add-to-cart"]', "Add To Cart Button")
    REMOVE_BUTTON = by_css('button[id^="remove"]', "Remove Button")
    PRODUCT_NAME = by_test_id("inventory-item-name", "Product Name")

    @allure.step("Check if inventory details page is loaded")
    async def is_loaded(self) -> bool:
        """Wait for the detail container; a timeout propagates."""
        await self.wait_visible(self.DETAILS_CONTAINER)
        return await self.is_visible(self.DETAILS_CONTAINER)

    @allure.step("Get product name from details")
    async def get_product_name(self) -> str:
        return await self.get_text(self.PRODUCT_NAME) or ""

    @allure.step("Add product to cart from details page")
    async def click_add_to_cart(self) -> None:
        await self.click(self.ADD_TO_CART_BUTTON)

    @allure.step("Remove product from cart from details page")
    async def click_remove(self) -> None:
        await self.click(self.REMOVE_BUTTON)

    @allure.step("Navigate back to product list")
    async def go_back(self) -> None:
        await self.click(self.BACK_TO_PRODUCTS_BUTTON)


__all__ = [
    "InventoryDetailsPage",
    "InventoryPage",
    "SortOption",
]
