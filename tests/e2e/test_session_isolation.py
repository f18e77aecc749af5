"""
Specs for the session bracket around each test.

Tests cover:
- Device preset applied to the live page
- Accessors reflecting DOM changes made after load
- Independent sessions for sequential loads
- Access outside the load/close bracket
"""

import pytest

from core.config import HarnessConfig
from core.exceptions import NotLoadedError, SelectorNotFoundError
from core.session import BrowserSession
from pages import AppPage, IndexPage, collect_snapshot

pytestmark = pytest.mark.e2e

RENAME_LINK = "() => { document.querySelector('.App-link').textContent = 'Learn React Native'; }"


class TestSessionIsolation:
    """Session lifecycle specs against a real browser."""

    @pytest.mark.asyncio
    async def test_device_preset_applied(
        self, session: BrowserSession, harness_config: HarnessConfig, index_page: IndexPage
    ) -> None:
        """Test that the page sees the configured viewport and user agent."""
        expected = harness_config.context.resolve(session.playwright.devices)
        if not expected:
            pytest.skip("No device preset configured")

        if "viewport" in expected:
            assert await index_page.get_viewport() == expected["viewport"]
        if "user_agent" in expected:
            assert await index_page.get_user_agent() == expected["user_agent"]

    @pytest.mark.asyncio
    async def test_accessors_requery_dom(self, session: BrowserSession, app_page: AppPage) -> None:
        """Test that accessors read the current DOM instead of a cached value."""
        assert await app_page.get_link_text() == "Learn React"

        await session.root().evaluate(RENAME_LINK)

        assert await app_page.get_link_text() == "Learn React Native"

    @pytest.mark.asyncio
    async def test_missing_element(self, session: BrowserSession, app_page: AppPage) -> None:
        """Test that a removed element raises SelectorNotFoundError."""
        page = session.root()
        page.set_default_timeout(500)
        await page.evaluate("() => document.querySelector('.App-link').remove()")

        with pytest.raises(SelectorNotFoundError):
            await app_page.get_link_text()

    @pytest.mark.asyncio
    async def test_sequential_sessions_are_independent(self, open_session) -> None:
        """Test that DOM changes and processes do not leak into the next session."""
        first = await open_session()
        await first.root().evaluate(RENAME_LINK)
        assert await AppPage(first).get_link_text() == "Learn React Native"
        first_browser = first.browser
        await first.close()

        assert first_browser is not None
        assert not first_browser.is_connected()

        second = await open_session()
        assert second.browser is not first_browser
        snapshot = await collect_snapshot(second)
        assert snapshot.link_text == "Learn React"
        assert snapshot.title == "React App"

    @pytest.mark.asyncio
    async def test_accessors_outside_bracket(self, harness_config: HarnessConfig, open_session) -> None:
        """Test that accessors fail before load() and after close()."""
        with pytest.raises(NotLoadedError):
            await IndexPage(BrowserSession(harness_config)).get_title()

        browser_session = await open_session()
        index_page = IndexPage(browser_session)
        assert await index_page.get_title() == "React App"

        await browser_session.close()

        with pytest.raises(NotLoadedError):
            await index_page.get_title()
        with pytest.raises(NotLoadedError):
            await AppPage(browser_session).get_intro_text()
