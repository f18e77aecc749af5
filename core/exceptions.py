"""
Exception hierarchy for the e2e harness.

This module defines the errors raised by the configuration layer,
the browser session and the page objects. Assertion failures are
reported by pytest itself and are not part of this hierarchy.
"""


class HarnessError(Exception):
    """Base exception for harness related errors."""

    pass


class ConfigError(HarnessError):
    """Raised when the harness configuration is invalid."""

    pass


class SessionError(HarnessError):
    """Base exception for browser session lifecycle errors."""

    pass


class LaunchError(SessionError):
    """Raised when the browser engine or its driver fails to start."""

    pass


class NavigationError(SessionError):
    """Raised when the base URL cannot be reached."""

    pass


class NotLoadedError(SessionError):
    """Raised when the page is accessed outside the load/close bracket."""

    pass


class SessionAlreadyLoadedError(SessionError):
    """Raised when load() is called on a live session."""

    pass


class SelectorNotFoundError(HarnessError):
    """Raised when an element never appears in the page."""

    def __init__(self, selector: str, message: str = "") -> None:
        self.selector = selector
        super().__init__(message or f"Element not found: {selector}")
