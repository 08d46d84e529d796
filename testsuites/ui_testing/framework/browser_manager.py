"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser process per test run (or per xdist worker)
    - One isolated BrowserSession (context + page) per test
    - Authentication state persistence via storage state
    - Scoped network-offline simulation with guaranteed restore

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from e2e_tools.common import ConfigLoader, resolve_project_path


DEFAULT_AUTH_STATE_FILE = ".auth/storage_state.json"


class BrowserSession:
    """
    Session handle for one test: an isolated browser context and its page.

    Page Objects hold a shared reference to the session; the session is
    created before the test body runs and closed after it, so it outlives
    every Page Object built over it.

    Usage:
        session = await manager.new_session()
        login_page = LoginPage(session)
        async with session.offline():
            ...
        await session.close()
    """

    def __init__(self, context: BrowserContext, page: Page, base_url: str):
        self.context = context
        self.page = page
        self.base_url = base_url.rstrip("/")
        self._closed = False

    @property
    def url(self) -> str:
        """Current location of the page (no round trip)."""
        return self.page.url

    def absolute_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    @asynccontextmanager
    async def offline(self) -> AsyncIterator["BrowserSession"]:
        """
        Simulate loss of network for the duration of the block.

        Online mode is restored on exit whether the block succeeds or raises.
        """
        logger.info("Network set to offline")
        await self.context.set_offline(True)
        try:
            yield self
        finally:
            await self.context.set_offline(False)
            logger.info("Network restored to online")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.context.close()
        logger.debug("Browser session closed")


class BrowserManager:
    """
    Manages the browser instance and hands out isolated sessions.

    Usage:
        async with BrowserManager() as manager:
            session = await manager.new_session()
            await session.page.goto(session.absolute_url("/"))

        # Or with a saved login
        async with BrowserManager() as manager:
            session = await manager.new_session(restore_auth=True)
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": ["--ignore-certificate-errors"],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        base_url: Optional[str] = None,
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize browser manager.

        Unset arguments fall back to the `browser.*` / `ui.*` configuration.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            base_url: Application base URL
            config: Configuration loader (defaults to the shared instance)
        """
        self.config = config or ConfigLoader()
        self.headless = (
            headless if headless is not None
            else self.config.get("browser.headless", True)
        )
        self.browser_type = browser_type or self.config.get("browser.type", "chromium")
        self.base_url = (
            base_url or self.config.get("ui.base_url", "https://www.saucedemo.com")
        ).rstrip("/")
        self.default_timeout = self.config.get("ui.timeout", 10000)
        self.navigation_timeout = self.config.get("ui.navigation_timeout", 30000)
        self.auth_state_file = resolve_project_path(
            self.config.get("auth.state_file", DEFAULT_AUTH_STATE_FILE)
        )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        self._playwright.selectors.set_test_id_attribute(
            self.config.get("ui.test_id_attribute", "data-test")
        )

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        try:
            self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close browser and stop Playwright."""
        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_session(
        self,
        restore_auth: bool = False,
        **options: Any,
    ) -> BrowserSession:
        """
        Create an isolated session (new context + page).

        Args:
            restore_auth: Start from the saved storage state (logged-in user)
            **options: Additional context options

        Returns:
            New BrowserSession
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        viewport = self.config.get("browser.viewport", None)
        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        if viewport and "viewport" not in options:
            context_options["viewport"] = viewport

        if restore_auth:
            if not self.auth_state_file.exists():
                raise RuntimeError(
                    f"No saved authentication state at {self.auth_state_file}. "
                    f"Run bootstrap_auth_state() first."
                )
            context_options["storage_state"] = str(self.auth_state_file)
            logger.debug("Restored authentication state from file")

        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.default_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        page = await context.new_page()

        return BrowserSession(context, page, self.base_url)

    async def bootstrap_auth_state(
        self,
        login_func: Callable[[BrowserSession], Awaitable[None]],
    ) -> Path:
        """
        Log in once and save the storage state for later sessions.

        Args:
            login_func: Async function performing a full login on the session

        Returns:
            Path of the saved storage state file
        """
        session = await self.new_session()
        try:
            await login_func(session)
            self.auth_state_file.parent.mkdir(parents=True, exist_ok=True)
            await session.context.storage_state(path=str(self.auth_state_file))
            logger.info(f"Authentication state saved to: {self.auth_state_file}")
        finally:
            await session.close()
        return self.auth_state_file

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
    "BrowserSession",
]
