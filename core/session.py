"""
Browser session for the e2e harness.

A BrowserSession owns exactly one Playwright driver, one browser, one
browsing context and one page. Each test case creates its own session,
loads it in setup and closes it in teardown, so no browser process or
DOM state leaks from one test into the next.
"""

from types import TracebackType
from typing import Optional, Type

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from core.config import HarnessConfig
from core.exceptions import (
    LaunchError,
    NavigationError,
    NotLoadedError,
    SessionAlreadyLoadedError,
)
from core.logger import get_logger

logger = get_logger("react_e2e.session")


class BrowserSession:
    """
    Browser session bound to one HarnessConfig.

    Attributes:
        config: Harness configuration used by load()
        playwright: Playwright driver instance
        browser: Browser instance for the configured engine
        context: Browsing context created with the device preset
        page: Page navigated to config.base_url
    """

    def __init__(self, config: HarnessConfig) -> None:
        self.config = config
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> "BrowserSession":
        """
        Launch the browser and navigate to the base URL.

        Waits until the page fires its load event. On failure, whatever was
        started so far stays attached to the session so that close() can
        release it.

        Returns:
            The loaded session

        Raises:
            SessionAlreadyLoadedError: If loaded, or a failed load() was not closed
            LaunchError: If the driver, the browser or the page cannot start
            ConfigError: If the device preset is unknown
            NavigationError: If the base URL cannot be reached
        """
        if self._loaded:
            raise SessionAlreadyLoadedError("Session already loaded, close() it first")
        if self.playwright is not None:
            raise SessionAlreadyLoadedError("Previous load() not closed, close() it first")

        config = self.config

        try:
            self.playwright = await async_playwright().start()
            browser_type = getattr(self.playwright, config.browser)
            self.browser = await browser_type.launch(**config.launch.to_playwright())
        except PlaywrightError as e:
            raise LaunchError(f"Failed to launch {config.browser}: {e}") from e

        logger.info(
            f"Launched {config.browser} (headless={config.launch.headless}, "
            f"slow_mo={config.launch.slow_mo_ms}ms)"
        )

        context_options = config.context.resolve(self.playwright.devices)
        try:
            self.context = await self.browser.new_context(**context_options)
            if config.default_timeout_ms is not None:
                self.context.set_default_timeout(config.default_timeout_ms)
            logger.debug(f"Created context with options: {context_options}")

            self.page = await self.context.new_page()
        except PlaywrightError as e:
            raise LaunchError(f"Failed to open a page in {config.browser}: {e}") from e

        try:
            await self.page.goto(config.base_url)
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {config.base_url}: {e}") from e

        self._loaded = True
        logger.info(f"Loaded {config.base_url}")
        return self

    def root(self) -> Page:
        """
        Get the live page.

        Raises:
            NotLoadedError: If called before load() or after close()
        """
        if not self._loaded or self.page is None:
            raise NotLoadedError("Page not loaded, call load() first")
        return self.page

    async def close(self) -> None:
        """
        Clean up resources.

        Closes the context and the browser and stops Playwright. Safe to call
        on a partially loaded or already closed session; cleanup errors are
        logged and never raised so they cannot mask the original failure.
        """
        self._loaded = False
        self.page = None

        if self.context is not None:
            try:
                await self.context.close()
            except Exception as e:
                logger.warning(f"Error closing context: {e}")
            self.context = None

        if self.browser is not None:
            try:
                await self.browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
            self.browser = None

        if self.playwright is not None:
            try:
                await self.playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping playwright: {e}")
            self.playwright = None
            logger.info("Browser session closed")

    async def __aenter__(self) -> "BrowserSession":
        try:
            return await self.load()
        except BaseException:
            await self.close()
            raise

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()
