"""
App component page object.

Wraps the header rendered by the App component.
"""

from pages.base_page import BasePage


class AppPage(BasePage):
    """Page object for the App component."""

    INTRO_SELECTOR = ".App-header > p"
    LINK_SELECTOR = ".App-link"

    async def get_intro_text(self) -> str:
        """Get the introductory paragraph text."""
        return await self._inner_text(self.INTRO_SELECTOR)

    async def get_link_text(self) -> str:
        """Get the primary link text."""
        return await self._inner_text(self.LINK_SELECTOR)
