"""
Text output formatter for CLI.

Provides colored text output for page snapshots and ping results.
"""

import json
from typing import Optional

from core.config import HarnessConfig
from pages.snapshot import PageSnapshot


class TextFormatter:
    """
    Text formatter with colored output.

    Provides simple, clean text output suitable for terminal display.
    """

    RESET = "\033[0m"
    BOLD = "\033[1m"

    WHITE = "\033[97m"  # Titles and headers
    LIGHT_GRAY = "\033[37m"  # Values
    DIM_GRAY = "\033[90m"  # Labels
    BLUE = "\033[94m"  # URLs
    GREEN = "\033[92m"  # Success
    RED = "\033[91m"  # Errors

    def __init__(self, color: bool = True) -> None:
        if not color:
            for name in ("RESET", "BOLD", "WHITE", "LIGHT_GRAY", "DIM_GRAY", "BLUE", "GREEN", "RED"):
                setattr(self, name, "")

    def _field(self, label: str, value: str) -> str:
        return f"{self.DIM_GRAY}    {label}:{self.RESET} {self.LIGHT_GRAY}{value}{self.RESET}"

    def format_snapshot(self, config: HarnessConfig, snapshot: PageSnapshot) -> str:
        """
        Format a page snapshot as colored text.

        Args:
            config: Configuration the snapshot was taken with
            snapshot: Collected page snapshot

        Returns:
            Formatted string
        """
        device = config.context.device or "none"
        viewport = snapshot.viewport
        output = [
            f"{self.BOLD}{self.WHITE}Page Snapshot{self.RESET}: {self.BLUE}{config.base_url}{self.RESET} "
            f"{self.DIM_GRAY}({config.browser}, device: {device}){self.RESET}",
            "",
            self._field("Title", snapshot.title),
            self._field("Intro", snapshot.intro_text),
            self._field("Link", snapshot.link_text),
            self._field("Viewport", f"{viewport['width']}x{viewport['height']}"),
            self._field("User-Agent", snapshot.user_agent),
        ]
        return "\n".join(output)

    def format_snapshot_json(self, snapshot: PageSnapshot) -> str:
        return json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2)

    def format_ping(self, url: str, status_code: Optional[int], error: str = "") -> str:
        """
        Format the result of a base URL ping.

        Args:
            url: Pinged URL
            status_code: HTTP status code, or None if the request failed
            error: Error message when the request failed

        Returns:
            Formatted string
        """
        if status_code is None:
            return f"{self.RED}DOWN{self.RESET} {self.BLUE}{url}{self.RESET} {self.DIM_GRAY}{error}{self.RESET}"
        color = self.GREEN if status_code < 400 else self.RED
        return f"{color}{status_code}{self.RESET} {self.BLUE}{url}{self.RESET}"
