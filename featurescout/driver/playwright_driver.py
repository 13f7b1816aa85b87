"""
Playwright adapter for the page-driver interface.

Wraps Playwright's async Page and Locator objects so the discovery
pipeline can run against a real browser.
"""

from typing import Optional

from .base import ElementHandle, PageDriver


class PlaywrightElementHandle(ElementHandle):
    """
    ElementHandle backed by a Playwright Locator.

    The adapter remembers the selector chain used to reach each
    locator; that chain is the handle's native selector.
    """

    def __init__(self, locator, selector: str):
        self._locator = locator
        self._selector = selector

    async def all(self) -> list[ElementHandle]:
        locators = await self._locator.all()
        return [
            PlaywrightElementHandle(loc, f"{self._selector} >> nth={i}")
            for i, loc in enumerate(locators)
        ]

    def first(self) -> ElementHandle:
        return PlaywrightElementHandle(self._locator.first, f"{self._selector} >> nth=0")

    def query(self, selector: str) -> ElementHandle:
        return PlaywrightElementHandle(
            self._locator.locator(selector), f"{self._selector} >> {selector}"
        )

    async def count(self) -> int:
        return await self._locator.count()

    async def is_visible(self, timeout_ms: Optional[int] = None) -> bool:
        if timeout_ms is None:
            return await self._locator.is_visible()
        # Locator.is_visible ignores its timeout and answers immediately
        from playwright.async_api import TimeoutError as PlaywrightTimeoutError

        try:
            await self._locator.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    async def is_enabled(self) -> bool:
        return await self._locator.is_enabled()

    async def is_checked(self) -> bool:
        return await self._locator.is_checked()

    async def text_content(self) -> Optional[str]:
        return await self._locator.text_content()

    async def all_text_contents(self) -> list[str]:
        return await self._locator.all_text_contents()

    async def input_value(self) -> str:
        return await self._locator.input_value()

    async def get_attribute(self, name: str) -> Optional[str]:
        return await self._locator.get_attribute(name)

    async def tag_name(self) -> str:
        return await self._locator.evaluate("el => el.tagName.toLowerCase()")

    def native_selector(self) -> str:
        return self._selector

    async def click(self) -> None:
        await self._locator.click()

    async def hover(self) -> None:
        await self._locator.hover()

    async def fill(self, value: str) -> None:
        await self._locator.fill(value)

    async def clear(self) -> None:
        await self._locator.clear()

    async def focus(self) -> None:
        await self._locator.focus()

    async def blur(self) -> None:
        await self._locator.blur()

    async def select_option(self, value: str) -> None:
        await self._locator.select_option(value)

    async def check(self) -> None:
        await self._locator.check()

    async def uncheck(self) -> None:
        await self._locator.uncheck()

    async def press(self, key: str) -> None:
        await self._locator.press(key)

    async def screenshot(self, path: str) -> None:
        await self._locator.screenshot(path=path)


class PlaywrightPageDriver(PageDriver):
    """PageDriver backed by a Playwright async Page."""

    def __init__(self, page, navigation_timeout_ms: int = 30000):
        self._page = page
        self.navigation_timeout_ms = navigation_timeout_ms

    @property
    def page(self):
        """The wrapped Playwright page."""
        return self._page

    async def navigate(self, url: str) -> None:
        await self._page.goto(url, wait_until="networkidle", timeout=self.navigation_timeout_ms)

    def current_url(self) -> str:
        return self._page.url

    async def title(self) -> str:
        return await self._page.title()

    def query(self, selector: str) -> ElementHandle:
        return PlaywrightElementHandle(self._page.locator(selector), selector)

    async def wait(self, ms: int) -> None:
        await self._page.wait_for_timeout(ms)

    async def screenshot(self, path: str) -> None:
        await self._page.screenshot(path=path, full_page=True)
