"""
Base page object.

This module defines the base class that all page objects inherit.
Page objects expose semantic queries and hide CSS selectors from the
specs. They hold no state besides the session: every call resolves the
live page and re-queries the DOM.
"""

from typing import Any

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from core.exceptions import SelectorNotFoundError
from core.logger import get_logger
from core.session import BrowserSession

ROOT_SELECTOR = "#root"


class BasePage:
    """
    Base class for page objects.

    Attributes:
        session: BrowserSession providing the live page
    """

    def __init__(self, session: BrowserSession) -> None:
        self.session = session
        self.logger = get_logger(f"react_e2e.{self.__class__.__name__.lower()}")

    @property
    def page(self) -> Page:
        """Live page of the session (raises NotLoadedError outside load/close)."""
        return self.session.root()

    def _scoped(self, selector: str) -> str:
        """Scope a selector under the app root element."""
        return f"{ROOT_SELECTOR} {selector}"

    async def _inner_text(self, selector: str) -> str:
        """
        Read the rendered text of the element matching selector.

        Waits for the element with the engine's default timeout.

        Args:
            selector: CSS selector relative to the app root

        Returns:
            innerText of the element

        Raises:
            NotLoadedError: If the session is not loaded
            SelectorNotFoundError: If the element never appears
        """
        page = self.page
        scoped = self._scoped(selector)
        try:
            text = await page.locator(scoped).inner_text()
        except PlaywrightTimeoutError as e:
            raise SelectorNotFoundError(scoped, f"Element not found: {scoped}: {e}") from e
        self.logger.debug(f"{scoped} -> {text!r}")
        return text

    async def _evaluate(self, expression: str) -> Any:
        """Evaluate a JavaScript expression in the live page."""
        return await self.page.evaluate(expression)
