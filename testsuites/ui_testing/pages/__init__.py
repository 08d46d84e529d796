"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Swag Labs screens, plus the role
bindings used by the per-test PageFactory.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Dict

from testsuites.ui_testing.framework.page_factory import PageBinding

from .authenticated_page import AuthenticatedPage, AuthenticatedShell
from .checkout_pages import (
    CartPage,
    CheckoutCompletePage,
    CheckoutInfoPage,
    CheckoutOverviewPage,
)
from .inventory_pages import InventoryDetailsPage, InventoryPage, SortOption
from .login_page import LoginPage


# The login page opens itself; every other screen is reached by the scenario.
PAGE_BINDINGS: Dict[str, PageBinding] = {
    "login_page": PageBinding(LoginPage, auto_navigate=True),
    "inventory_page": PageBinding(InventoryPage),
    "inventory_details_page": PageBinding(InventoryDetailsPage),
    "cart_page": PageBinding(CartPage),
    "checkout_info_page": PageBinding(CheckoutInfoPage),
    "checkout_overview_page": PageBinding(CheckoutOverviewPage),
    "checkout_complete_page": PageBinding(CheckoutCompletePage),
}

__all__ = [
    "AuthenticatedPage",
    "AuthenticatedShell",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutInfoPage",
    "CheckoutOverviewPage",
    "InventoryDetailsPage",
    "InventoryPage",
    "LoginPage",
    "PAGE_BINDINGS",
    "SortOption",
]
