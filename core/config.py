"""
Harness configuration types.

A HarnessConfig is built once per test run (see core.config_loader) and
handed to every BrowserSession. All types are frozen so a session can
never see its configuration change after construction.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from core.exceptions import ConfigError

BROWSER_ENGINES = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class LaunchOptions:
    """Options passed to BrowserType.launch()."""

    headless: bool = True
    # Delay applied by Playwright to every operation, for visual debugging
    slow_mo_ms: int = 0

    def to_playwright(self) -> Dict[str, Any]:
        return {"headless": self.headless, "slow_mo": self.slow_mo_ms}


@dataclass(frozen=True)
class ContextOptions:
    """
    Options for Browser.new_context().

    The viewport and user agent come from a named device preset
    (e.g. "iPhone 6"). Explicit viewport / user_agent values override
    the corresponding preset fields.
    """

    device: Optional[str] = "iPhone 6"
    viewport: Optional[Dict[str, int]] = None
    user_agent: Optional[str] = None

    def resolve(self, devices: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Build new_context() keyword arguments.

        Args:
            devices: Device preset table (playwright.devices)

        Returns:
            Dictionary with "viewport" and/or "user_agent" keys

        Raises:
            ConfigError: If the device preset is unknown
        """
        options: Dict[str, Any] = {}

        if self.device:
            try:
                preset = devices[self.device]
            except KeyError:
                raise ConfigError(f"Unknown device preset: {self.device!r}") from None
            options["viewport"] = dict(preset["viewport"])
            options["user_agent"] = preset["user_agent"]

        if self.viewport is not None:
            options["viewport"] = dict(self.viewport)
        if self.user_agent is not None:
            options["user_agent"] = self.user_agent

        return options


@dataclass(frozen=True)
class HarnessConfig:
    """
    Configuration for one harness instance.

    Attributes:
        base_url: URL of the application under test
        browser: Browser engine name (chromium, firefox or webkit)
        launch: Browser launch options
        context: Browsing context options
        default_timeout_ms: Default timeout for page operations (engine default if None)
    """

    base_url: str = "http://localhost:3000"
    browser: str = "chromium"
    launch: LaunchOptions = field(default_factory=LaunchOptions)
    context: ContextOptions = field(default_factory=ContextOptions)
    default_timeout_ms: Optional[int] = None

    def __post_init__(self) -> None:
        if self.browser not in BROWSER_ENGINES:
            raise ConfigError(
                f"Invalid browser engine: {self.browser!r}. "
                f"Available engines: {list(BROWSER_ENGINES)}"
            )

        parsed = urlparse(self.base_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid base_url: {self.base_url!r}")

        if isinstance(self.launch.slow_mo_ms, bool) or not isinstance(self.launch.slow_mo_ms, int):
            raise ConfigError(f"slow_mo_ms must be an integer, got {self.launch.slow_mo_ms!r}")
        if self.launch.slow_mo_ms < 0:
            raise ConfigError(f"slow_mo_ms must be non-negative, got {self.launch.slow_mo_ms}")

        if self.default_timeout_ms is not None and self.default_timeout_ms <= 0:
            raise ConfigError(
                f"default_timeout_ms must be positive, got {self.default_timeout_ms}"
            )

    def with_base_url(self, base_url: str) -> "HarnessConfig":
        """Return a copy pointing at another base URL."""
        return replace(self, base_url=base_url)
