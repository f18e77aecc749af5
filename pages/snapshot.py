"""
Page content snapshot.

Collects every page object query once against a live session. The
snapshot is a plain value: it is never refreshed, callers collect a new
one to see later DOM state.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from core.session import BrowserSession
from pages.app_page import AppPage
from pages.index_page import IndexPage


@dataclass(frozen=True)
class PageSnapshot:
    """Text content and device properties read from a live page."""

    title: str
    intro_text: str
    link_text: str
    viewport: Dict[str, int]
    user_agent: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


async def collect_snapshot(session: BrowserSession) -> PageSnapshot:
    """
    Query the live page through the page objects.

    Args:
        session: Loaded BrowserSession

    Returns:
        PageSnapshot with the current page content

    Raises:
        NotLoadedError: If the session is not loaded
        SelectorNotFoundError: If an app element never appears
    """
    index_page = IndexPage(session)
    app_page = AppPage(session)

    return PageSnapshot(
        title=await index_page.get_title(),
        intro_text=await app_page.get_intro_text(),
        link_text=await app_page.get_link_text(),
        viewport=await index_page.get_viewport(),
        user_agent=await index_page.get_user_agent(),
    )
