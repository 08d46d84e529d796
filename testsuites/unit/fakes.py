"""
In-memory stand-ins for the Playwright page, locator and context.

Locators resolve to a key describing the query chain, so a test registers
element state through the same ElementLocator the page object uses:

    fake_page.set_element(LoginPage.ERROR_MESSAGE, texts=["Epic sadface"])

Unregistered elements behave like an empty document: reads that tolerate zero
matches return empty results, single-element operations time out. More than
one match on a single-element operation is a strict mode violation.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework import BrowserSession, ElementLocator


FIRST = ("first",)

PNG_BYTES = b"\x89PNG fake"


def _freeze(options: Dict[str, Any]) -> Tuple[Tuple[str, Any], ...]:
    return tuple(sorted(options.items()))


@dataclass
class FakeElement:
    texts: List[str] = field(default_factory=lambda: [""])
    visible: bool = True
    value: str = ""
    on_click: Optional[Callable[[], None]] = None


class FakeLocator:
    """Query chain node; every call returns a longer chain."""

    def __init__(self, page: "FakePage", key: Tuple = ()):
        self._page = page
        self.key = key

    def _chain(self, *link: Any) -> "FakeLocator":
        return FakeLocator(self._page, self.key + (tuple(link),))

    # Query building

    def locator(self, selector: str) -> "FakeLocator":
        return self._chain("css", selector)

    def get_by_role(self, role: str, **options: Any) -> "FakeLocator":
        return self._chain("role", role, _freeze(options))

    def get_by_test_id(self, test_id: str) -> "FakeLocator":
        return self._chain("test_id", test_id)

    def get_by_placeholder(self, text: str, **options: Any) -> "FakeLocator":
        return self._chain("placeholder", text, _freeze(options))

    def get_by_text(self, text: Any, **options: Any) -> "FakeLocator":
        return self._chain("text", text, _freeze(options))

    def filter(self, has_text: Any = None, has: Optional["FakeLocator"] = None) -> "FakeLocator":
        return self._chain("filter", has_text, has.key if has is not None else None)

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._page, self.key + (FIRST,))

    # Element access

    def _single(self) -> FakeElement:
        element = self._page.lookup(self.key)
        if element is None:
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {self.key}")
        if len(element.texts) > 1:
            raise PlaywrightError(
                f"strict mode violation: {self.key} resolved to {len(element.texts)} elements"
            )
        return element

    async def click(self, **kwargs: Any) -> None:
        element = self._single()
        self._page.actions.append(("click", self.key, None))
        if element.on_click is not None:
            element.on_click()

    async def fill(self, value: str) -> None:
        element = self._single()
        element.value = value
        self._page.actions.append(("fill", self.key, value))

    async def select_option(self, value: str) -> List[str]:
        element = self._single()
        element.value = value
        self._page.actions.append(("select", self.key, value))
        return [value]

    async def text_content(self) -> Optional[str]:
        return self._single().texts[0]

    async def input_value(self) -> str:
        return self._single().value

    async def is_visible(self) -> bool:
        element = self._page.lookup(self.key)
        if element is None:
            return False
        if len(element.texts) > 1:
            raise PlaywrightError(f"strict mode violation: {self.key}")
        return element.visible

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        element = self._single()
        if state == "visible" and not element.visible:
            raise PlaywrightTimeoutError(f"Timeout exceeded waiting for {self.key} to be visible")

    async def count(self) -> int:
        element = self._page.lookup(self.key)
        return len(element.texts) if element is not None else 0

    async def all_text_contents(self) -> List[str]:
        element = self._page.lookup(self.key)
        return list(element.texts) if element is not None else []


class FakeContext:
    def __init__(self) -> None:
        self.offline_calls: List[bool] = []
        self.closed = False
        self.default_timeout: Optional[float] = None
        self.default_navigation_timeout: Optional[float] = None
        self.options: Dict[str, Any] = {}

    async def set_offline(self, offline: bool) -> None:
        self.offline_calls.append(offline)

    @property
    def offline(self) -> bool:
        return bool(self.offline_calls) and self.offline_calls[-1]

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.default_navigation_timeout = timeout

    async def new_page(self) -> "FakePage":
        return FakePage(context=self)

    async def storage_state(self, path: Optional[str] = None) -> Dict[str, Any]:
        if path:
            Path(path).write_text('{"cookies": [], "origins": []}', encoding="utf-8")
        return {"cookies": [], "origins": []}

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self) -> None:
        self.contexts: List[FakeContext] = []

    async def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext()
        context.options = options
        self.contexts.append(context)
        return context


class FakePage(FakeLocator):
    """Page root: holds element state, navigation history and recorded actions."""

    def __init__(self, url: str = "about:blank", context: Optional[FakeContext] = None):
        super().__init__(self, ())
        self.url = url
        self.context = context or FakeContext()
        self.page_title = "Swag Labs"
        self.elements: Dict[Tuple, FakeElement] = {}
        self.actions: List[Tuple[str, Any, Any]] = []
        self.navigations: List[Tuple[str, Optional[str]]] = []

    # State registration

    def set_element(
        self,
        locator: ElementLocator,
        texts: Optional[List[str]] = None,
        visible: bool = True,
        value: str = "",
        on_click: Optional[Callable[[], None]] = None,
    ) -> FakeElement:
        element = FakeElement(
            texts=list(texts) if texts is not None else [""],
            visible=visible,
            value=value,
            on_click=on_click,
        )
        self.elements[locator.resolve(self).key] = element
        return element

    def remove_element(self, locator: ElementLocator) -> None:
        self.elements.pop(locator.resolve(self).key, None)

    def lookup(self, key: Tuple) -> Optional[FakeElement]:
        if key in self.elements:
            return self.elements[key]
        if key and key[-1] == FIRST:
            group = self.lookup(key[:-1])
            if group is not None and group.texts:
                return FakeElement(
                    texts=group.texts[:1],
                    visible=group.visible,
                    value=group.value,
                    on_click=group.on_click,
                )
        return None

    # Recorded actions

    def was_clicked(self, locator: ElementLocator) -> bool:
        key = locator.resolve(self).key
        return any(action == "click" and target == key for action, target, _ in self.actions)

    def filled_value(self, locator: ElementLocator) -> Optional[str]:
        key = locator.resolve(self).key
        values = [value for action, target, value in self.actions if action == "fill" and target == key]
        return values[-1] if values else None

    # Page API

    async def goto(self, url: str, wait_until: Optional[str] = None, **kwargs: Any) -> None:
        self.navigations.append((url, wait_until))
        self.url = url

    async def reload(self, **kwargs: Any) -> None:
        self.actions.append(("reload", None, None))

    async def go_back(self, **kwargs: Any) -> None:
        self.actions.append(("go_back", None, None))

    async def wait_for_load_state(self, state: str = "load", **kwargs: Any) -> None:
        self.actions.append(("load_state", None, state))

    async def title(self) -> str:
        return self.page_title

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False, **kwargs: Any) -> bytes:
        self.actions.append(("screenshot", path, full_page))
        if path:
            Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES


def make_session(base_url: str = "https://www.saucedemo.com") -> BrowserSession:
    page = FakePage()
    return BrowserSession(page.context, page, base_url)
