"""
================================================================================
Page Factory
================================================================================

Explicit registry that builds Page Objects for one test execution.

Each role name ("login_page", "cart_page", ...) maps to a PageBinding: the
Page Object class plus an optional setup step (auto-navigation). A PageFactory
is created per test over that test's BrowserSession and handed to the
scenario (directly or through the per-role pytest fixtures).

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Type, TypeVar

import allure
from loguru import logger

from .browser_manager import BrowserSession
from .page_base import BasePage


PageT = TypeVar("PageT", bound=BasePage)


class UnknownPageRoleError(KeyError):
    """Raised when a page role has no binding."""
    pass


@dataclass(frozen=True)
class PageBinding:
    """
    Construction recipe for one page role.

    Attributes:
        page_class: Page Object class, constructed with the session
        auto_navigate: Await `goto()` right after construction
    """
    page_class: Type[BasePage]
    auto_navigate: bool = False


class PageFactory:
    """
    Per-test Page Object provider.

    Objects are built on first request and reused for the rest of the test,
    so every role shares the same session and the same instance.

    Usage:
        pages = PageFactory(session, PAGE_BINDINGS)
        login_page = await pages.get("login_page")
        await login_page.login("standard_user", "secret_sauce")
    """

    def __init__(
        self,
        session: BrowserSession,
        bindings: Mapping[str, PageBinding],
    ):
        self.session = session
        self._bindings: Dict[str, PageBinding] = dict(bindings)
        self._built: Dict[str, BasePage] = {}

    @property
    def roles(self) -> Tuple[str, ...]:
        return tuple(self._bindings)

    def register(self, role: str, binding: PageBinding) -> None:
        """Add or replace a binding for this test only."""
        self._bindings[role] = binding
        self._built.pop(role, None)

    async def get(self, role: str) -> BasePage:
        """
        Return the Page Object bound to `role`, building it if needed.

        Raises:
            UnknownPageRoleError: When `role` has no binding
        """
        if role in self._built:
            return self._built[role]

        binding = self._bindings.get(role)
        if binding is None:
            raise UnknownPageRoleError(
                f"No page bound to role '{role}'. Known roles: {', '.join(self.roles)}"
            )

        page = binding.page_class(self.session)
        if binding.auto_navigate:
            with allure.step(f"Open {binding.page_class.__name__}"):
                await page.goto()

        logger.debug(f"Built {binding.page_class.__name__} for role '{role}'")
        self._built[role] = page
        return page

    async def build(self, page_class: Type[PageT], navigate: bool = False) -> PageT:
        """Construct an unbound Page Object over the same session."""
        page = page_class(self.session)
        if navigate:
            await page.goto()
        return page

    def built(self, role: str) -> Optional[BasePage]:
        return self._built.get(role)


__all__ = [
    "PageBinding",
    "PageFactory",
    "UnknownPageRoleError",
]
