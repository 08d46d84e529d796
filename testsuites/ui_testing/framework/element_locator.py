"""
================================================================================
Element Locator
================================================================================

Declarative, lazily-resolved element references for Page Objects.

An ElementLocator only describes *how* to find zero or more elements:
    - query strategy (CSS, ARIA role, test id, placeholder, text)
    - strategy options (accessible name, exact matching)
    - an optional filter chain (descendant text, containment of another locator)
    - an optional parent scope

Building one never talks to the browser. `resolve(page)` turns it into a
Playwright Locator, which itself re-queries the live document on every action,
so a Page Object never holds a stale element handle.

Failure semantics are Playwright's own and are never masked here:
    - no match within the wait window -> playwright TimeoutError
    - several matches for a single-element action -> strict mode Error
    - count()/all_text_contents() tolerate zero matches

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Pattern, Tuple, Union

from playwright.async_api import Locator, Page


TextMatch = Union[str, Pattern[str]]


class DataIntegrityError(ValueError):
    """Raised when text read from the page does not parse into the expected value."""
    pass


class Strategy(str, Enum):
    """Supported query strategies."""

    CSS = "css"
    ROLE = "role"
    TEST_ID = "test_id"
    PLACEHOLDER = "placeholder"
    TEXT = "text"


@dataclass(frozen=True)
class LocatorFilter:
    """
    One link of a filter chain.

    Attributes:
        has_text: Keep elements containing this text (or matching this pattern)
        has: Keep elements containing a descendant matched by this locator
    """
    has_text: Optional[TextMatch] = None
    has: Optional["ElementLocator"] = None


@dataclass(frozen=True)
class ElementLocator:
    """
    Lazy, re-resolvable query for zero or more elements.

    Attributes:
        strategy: Query strategy
        value: Selector / role / test id / placeholder / text
        description: Human-readable name used in logs and Allure steps
        options: Strategy keyword options, e.g. (("name", "Login"),)
        filters: Filter chain applied after the base query
        parent: Scope the query inside another locator
        first_only: Resolve to the first match only

    Usage:
        >>> row = by_test_id("inventory-item", "Product row")
        >>> button = row.filter(has_text="Backpack").within(by_role("button", "Add"))
        >>> await button.resolve(page).click()
    """
    strategy: Strategy
    value: str
    description: str = ""
    options: Tuple[Tuple[str, Any], ...] = ()
    filters: Tuple[LocatorFilter, ...] = ()
    parent: Optional["ElementLocator"] = None
    first_only: bool = False

    @property
    def name(self) -> str:
        return self.description or f"{self.strategy.value}={self.value}"

    def filter(
        self,
        has_text: Optional[TextMatch] = None,
        has: Optional["ElementLocator"] = None,
    ) -> "ElementLocator":
        """Return a copy narrowed by descendant text and/or a contained locator."""
        return replace(
            self,
            filters=self.filters + (LocatorFilter(has_text=has_text, has=has),),
        )

    def within(self, child: "ElementLocator") -> "ElementLocator":
        """
        Return `child` scoped inside this locator.

        A child that already has a scope keeps it; this locator becomes the
        outermost link of the chain.
        """
        parent = self.within(child.parent) if child.parent is not None else self
        description = child.description
        if self.description and child.description:
            description = f"{child.description} in {self.description}"
        return replace(child, parent=parent, description=description)

    def first(self) -> "ElementLocator":
        """Return a copy that targets the first match explicitly."""
        return replace(self, first_only=True)

    def described_as(self, description: str) -> "ElementLocator":
        return replace(self, description=description)

    def resolve(self, page: Page) -> Locator:
        """
        Build the Playwright Locator for the current document.

        Playwright locators are lazy too; nothing is queried until an action
        or read is awaited on the result.
        """
        root = self.parent.resolve(page) if self.parent is not None else page
        kwargs = dict(self.options)

        if self.strategy is Strategy.CSS:
            locator = root.locator(self.value)
        elif self.strategy is Strategy.ROLE:
            locator = root.get_by_role(self.value, **kwargs)
        elif self.strategy is Strategy.TEST_ID:
            locator = root.get_by_test_id(self.value)
        elif self.strategy is Strategy.PLACEHOLDER:
            locator = root.get_by_placeholder(self.value, **kwargs)
        elif self.strategy is Strategy.TEXT:
            locator = root.get_by_text(self.value, **kwargs)
        else:
            raise ValueError(f"Unsupported locator strategy: {self.strategy}")

        for link in self.filters:
            filter_kwargs = {}
            if link.has_text is not None:
                filter_kwargs["has_text"] = link.has_text
            if link.has is not None:
                filter_kwargs["has"] = link.has.resolve(page)
            locator = locator.filter(**filter_kwargs)

        if self.first_only:
            locator = locator.first
        return locator

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Constructors
# =============================================================================

def by_css(selector: str, description: str = "") -> ElementLocator:
    return ElementLocator(Strategy.CSS, selector, description)


def by_test_id(test_id: str, description: str = "") -> ElementLocator:
    return ElementLocator(Strategy.TEST_ID, test_id, description)


def by_placeholder(text: str, description: str = "", exact: bool = True) -> ElementLocator:
    return ElementLocator(
        Strategy.PLACEHOLDER, text, description, options=(("exact", exact),)
    )


def by_role(
    role: str,
    description: str = "",
    accessible_name: Optional[TextMatch] = None,
    exact: Optional[bool] = None,
) -> ElementLocator:
    """
    Locate by ARIA role.

    Args:
        role: ARIA role, e.g. "button"
        description: Human-readable element name
        accessible_name: Accessible name (string or compiled pattern)
        exact: Exact accessible-name matching (strings only)
    """
    options = []
    if accessible_name is not None:
        options.append(("name", accessible_name))
    if exact is not None:
        options.append(("exact", exact))
    return ElementLocator(Strategy.ROLE, role, description, options=tuple(options))


def by_text(text: str, description: str = "", exact: bool = False) -> ElementLocator:
    return ElementLocator(Strategy.TEXT, text, description, options=(("exact", exact),))


def exact_text(text: str) -> Pattern[str]:
    """Pattern matching an element whose whole text equals `text` (trimmed)."""
    return re.compile(rf"^\s*{re.escape(text)}\s*$")


# =============================================================================
# Text parsing
# =============================================================================

_PRICE_PATTERN = re.compile(r"^\s*\$\s*(\d+(?:\.\d+)?)\s*$")
_COUNT_PATTERN = re.compile(r"^\s*(\d+)\s*$")


def parse_price(text: Optional[str]) -> float:
    """
    Parse a currency-prefixed price such as "$9.99".

    Raises:
        DataIntegrityError: When the text is missing or the remainder is not numeric
    """
    match = _PRICE_PATTERN.match(text or "")
    if not match:
        raise DataIntegrityError(f"Cannot parse price from {text!r}")
    return float(match.group(1))


def parse_count(text: Optional[str]) -> int:
    """
    Parse a non-negative integer counter such as a cart badge.

    Raises:
        DataIntegrityError: When the text is not a plain integer
    """
    match = _COUNT_PATTERN.match(text or "")
    if not match:
        raise DataIntegrityError(f"Cannot parse count from {text!r}")
    return int(match.group(1))


__all__ = [
    "DataIntegrityError",
    "ElementLocator",
    "LocatorFilter",
    "Strategy",
    "by_css",
    "by_placeholder",
    "by_role",
    "by_test_id",
    "by_text",
    "exact_text",
    "parse_count",
    "parse_price",
]
