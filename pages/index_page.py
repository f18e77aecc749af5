"""
Index page object.

Document-level queries: title and the effective viewport / user agent
of the browsing context.
"""

from typing import Dict

from pages.base_page import BasePage


class IndexPage(BasePage):
    """Page object for the application document."""

    async def get_title(self) -> str:
        """Get the document title."""
        return await self.page.title()

    async def get_viewport(self) -> Dict[str, int]:
        """Get the effective viewport size as seen by the page."""
        size = await self._evaluate(
            "() => ({ width: window.innerWidth, height: window.innerHeight })"
        )
        return {"width": int(size["width"]), "height": int(size["height"])}

    async def get_user_agent(self) -> str:
        """Get navigator.userAgent of the page."""
        return await self._evaluate("() => navigator.userAgent")
