"""
Page objects for the React App.

This package contains the page objects used by the specs:
- IndexPage: Document title, viewport and user agent
- AppPage: App component header text
- PageSnapshot: All of the above read in one pass
"""

from pages.base_page import BasePage
from pages.index_page import IndexPage
from pages.app_page import AppPage
from pages.snapshot import PageSnapshot, collect_snapshot

__all__ = ["BasePage", "IndexPage", "AppPage", "PageSnapshot", "collect_snapshot"]
