"""
================================================================================
UI Testing Framework
================================================================================

Async Playwright building blocks for the Swag Labs Page Objects.

Components:
    - element_locator: Declarative, lazily resolved element queries
    - page_base: Base page object with traced primitive actions
    - browser_manager: Browser lifecycle and per-test sessions
    - page_factory: Role-keyed Page Object construction per test

Author: Automation Team
License: MIT
================================================================================
"""

from .element_locator import (
    DataIntegrityError,
    ElementLocator,
    Strategy,
    by_css,
    by_placeholder,
    by_role,
    by_test_id,
    by_text,
    exact_text,
    parse_count,
    parse_price,
)
from .browser_manager import BrowserManager, BrowserSession
from .page_base import BasePage
from .page_factory import PageBinding, PageFactory, UnknownPageRoleError

__all__ = [
    "BasePage",
    "BrowserManager",
    "BrowserSession",
    "DataIntegrityError",
    "ElementLocator",
    "PageBinding",
    "PageFactory",
    "Strategy",
    "UnknownPageRoleError",
    "by_css",
    "by_placeholder",
    "by_role",
    "by_test_id",
    "by_text",
    "exact_text",
    "parse_count",
    "parse_price",
]
