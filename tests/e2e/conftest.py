"""
Fixtures for the browser specs.

Every test gets its own BrowserSession: loaded before the test body and
closed after it, whether the body passes or fails. A missing browser
engine skips the test unless HARNESS_REQUIRE_BROWSER=1. Without
HARNESS_BASE_URL the specs run against a static copy of the rendered
React App served from a local HTTP server.
"""

import functools
import os
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Iterator

import pytest

from core.config import HarnessConfig
from core.config_loader import load_config
from core.session import BrowserSession
from core.testing import load_or_skip, session_lifecycle
from pages import AppPage, IndexPage

REFERENCE_APP_DIR = Path(__file__).parent / "reference_app"


class QuietHandler(SimpleHTTPRequestHandler):
    """Static file handler that does not write access logs to stderr."""

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture(scope="session")
def reference_app_url() -> Iterator[str]:
    """Serve the reference app on a free localhost port."""
    handler = functools.partial(QuietHandler, directory=str(REFERENCE_APP_DIR))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture(scope="session")
def harness_config(request: pytest.FixtureRequest) -> HarnessConfig:
    """Harness configuration for the run, pointed at the reference app by default."""
    config = load_config()
    if os.environ.get("HARNESS_BASE_URL"):
        return config
    return config.with_base_url(request.getfixturevalue("reference_app_url"))


@pytest.fixture
async def session(harness_config: HarnessConfig):
    """Loaded browser session, closed after the test."""
    async for browser_session in session_lifecycle(harness_config):
        yield browser_session


@pytest.fixture
def index_page(session: BrowserSession) -> IndexPage:
    return IndexPage(session)


@pytest.fixture
def app_page(session: BrowserSession) -> AppPage:
    return AppPage(session)


@pytest.fixture
async def open_session(harness_config: HarnessConfig):
    """Factory for extra loaded sessions, all closed after the test."""
    opened = []

    async def _open() -> BrowserSession:
        browser_session = BrowserSession(harness_config)
        opened.append(browser_session)
        return await load_or_skip(browser_session)

    yield _open

    for browser_session in opened:
        await browser_session.close()
