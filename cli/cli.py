"""
Command-line interface for the e2e harness.

Main entry point for the react-e2e tool.
"""

import asyncio
import argparse
import dataclasses
import logging
import sys
from typing import Optional, Tuple

import httpx

from core.logger import setup_logger, get_logger, ROOT_LOGGER_NAME
from core.config import HarnessConfig
from core.config_loader import load_config
from core.exceptions import HarnessError
from core.session import BrowserSession
from pages.snapshot import PageSnapshot, collect_snapshot
from cli.output import TextFormatter

logger = get_logger("react_e2e.cli")


def apply_overrides(config: HarnessConfig, args: argparse.Namespace) -> HarnessConfig:
    """
    Apply command-line flags on top of the loaded configuration.

    Raises:
        ConfigError: If an overridden value is invalid
    """
    changes = {}
    if args.base_url:
        changes["base_url"] = args.base_url
    if args.browser:
        changes["browser"] = args.browser

    launch = config.launch
    if args.headed:
        launch = dataclasses.replace(launch, headless=False)
    if args.slow_mo is not None:
        launch = dataclasses.replace(launch, slow_mo_ms=args.slow_mo)
    changes["launch"] = launch

    if args.device:
        device = None if args.device.lower() == "none" else args.device
        changes["context"] = dataclasses.replace(config.context, device=device)

    return dataclasses.replace(config, **changes)


async def take_snapshot(config: HarnessConfig) -> PageSnapshot:
    """Load the configured page, snapshot it and close the browser."""
    async with BrowserSession(config) as session:
        return await collect_snapshot(session)


async def ping(url: str, timeout: float = 10.0) -> Tuple[Optional[int], str]:
    """
    Check a URL with a single GET request.

    Returns:
        (status_code, "") on response, (None, error message) on failure
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        logger.debug(f"Ping {url} failed: {e!r}")
        return None, str(e) or e.__class__.__name__
    return response.status_code, ""


def create_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="react-e2e",
        description="React App e2e harness - inspect the app under test",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the dev server is up
  react-e2e ping

  # Print title, intro and link text as seen on an iPhone 6
  react-e2e snapshot

  # Watch a webkit run with a 10ms operation delay
  react-e2e snapshot --browser webkit --headed --slow-mo 10

  # Desktop viewport, JSON output
  react-e2e snapshot --device none --json
        """,
    )

    parser.add_argument("command", choices=["snapshot", "ping"], help="Command to run")

    parser.add_argument("--config", "-c", type=str, default=None, help="Path to harness YAML config")
    parser.add_argument("--base-url", type=str, default=None, help="URL of the application")
    parser.add_argument(
        "--browser",
        "-b",
        type=str,
        choices=["chromium", "firefox", "webkit"],
        default=None,
        help="Browser engine",
    )
    parser.add_argument(
        "--device", "-d", type=str, default=None, help="Device preset name, or 'none'"
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument(
        "--slow-mo", type=int, default=None, help="Delay in ms applied to every browser operation"
    )
    parser.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return parser


async def main_async(args: argparse.Namespace) -> int:
    """
    Async main function.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    setup_logger(
        name=ROOT_LOGGER_NAME,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
        force_reconfigure=True,
    )
    formatter = TextFormatter(color=not args.no_color and sys.stdout.isatty())

    try:
        config = apply_overrides(load_config(args.config), args)
    except HarnessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "ping":
        status_code, error = await ping(config.base_url)
        print(formatter.format_ping(config.base_url, status_code, error))
        return 0 if status_code is not None and status_code < 400 else 1

    try:
        snapshot = await take_snapshot(config)
    except HarnessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(formatter.format_snapshot_json(snapshot))
    else:
        print(formatter.format_snapshot(config, snapshot))
    return 0


def main() -> int:
    """
    Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args()

    return asyncio.run(main_async(args))


if __name__ == "__main__":
    sys.exit(main())
