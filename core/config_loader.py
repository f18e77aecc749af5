"""
Configuration loader for the e2e harness.

This module loads the harness configuration from YAML file
and supports environment variable overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from core.config import ContextOptions, HarnessConfig, LaunchOptions
from core.exceptions import ConfigError
from core.logger import get_logger

logger = get_logger("react_e2e.config_loader")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "harness.yaml"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


def _parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid integer for {name}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid integer for {name}: {value!r}") from None


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        logger.warning(f"Harness config file not found: {config_path}, using defaults")
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Harness config must be a mapping: {config_path}")

    return data


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply environment variable overrides to raw config data.

    Environment variable overrides:
    - HARNESS_BASE_URL: Application URL
    - HARNESS_BROWSER: chromium, firefox or webkit
    - HARNESS_HEADLESS: "false" to show the browser window
    - HARNESS_SLOW_MO: Operation delay in milliseconds
    - HARNESS_DEVICE: Device preset name ("none" to disable)
    - HARNESS_TIMEOUT_MS: Default timeout for page operations
    """
    launch = dict(data.get("launch") or {})
    context = dict(data.get("context") or {})

    if base_url := os.environ.get("HARNESS_BASE_URL"):
        data["base_url"] = base_url
        logger.info(f"Base URL overridden via environment: {base_url}")

    if browser := os.environ.get("HARNESS_BROWSER"):
        data["browser"] = browser.strip().lower()
        logger.info(f"Browser overridden via environment: {data['browser']}")

    if headless := os.environ.get("HARNESS_HEADLESS"):
        launch["headless"] = _parse_bool("HARNESS_HEADLESS", headless)

    if slow_mo := os.environ.get("HARNESS_SLOW_MO"):
        launch["slow_mo_ms"] = _parse_int("HARNESS_SLOW_MO", slow_mo)
        logger.info(f"Operation delay overridden via environment: {slow_mo}ms")

    if device := os.environ.get("HARNESS_DEVICE"):
        context["device"] = None if device.strip().lower() == "none" else device

    if timeout := os.environ.get("HARNESS_TIMEOUT_MS"):
        data["default_timeout_ms"] = _parse_int("HARNESS_TIMEOUT_MS", timeout)

    data["launch"] = launch
    data["context"] = context
    return data


def build_config(data: Dict[str, Any]) -> HarnessConfig:
    """
    Build a HarnessConfig from a raw configuration mapping.

    Missing keys fall back to the HarnessConfig defaults.

    Raises:
        ConfigError: If any value is invalid
    """
    defaults = HarnessConfig()
    launch = data.get("launch") or {}
    context = data.get("context") or {}

    launch_options = LaunchOptions(
        headless=_parse_bool("launch.headless", launch.get("headless", defaults.launch.headless)),
        slow_mo_ms=_parse_int(
            "launch.slow_mo_ms", launch.get("slow_mo_ms", defaults.launch.slow_mo_ms)
        ),
    )

    viewport = context.get("viewport")
    if viewport is not None:
        try:
            viewport = {
                "width": _parse_int("context.viewport.width", viewport["width"]),
                "height": _parse_int("context.viewport.height", viewport["height"]),
            }
        except (KeyError, TypeError):
            raise ConfigError(f"context.viewport needs width and height: {viewport!r}") from None

    context_options = ContextOptions(
        device=context.get("device", defaults.context.device),
        viewport=viewport,
        user_agent=context.get("user_agent"),
    )

    timeout = data.get("default_timeout_ms")

    return HarnessConfig(
        base_url=str(data.get("base_url", defaults.base_url)),
        browser=str(data.get("browser", defaults.browser)),
        launch=launch_options,
        context=context_options,
        default_timeout_ms=None if timeout is None else _parse_int("default_timeout_ms", timeout),
    )


def load_config(config_path: Optional[Union[str, Path]] = None) -> HarnessConfig:
    """
    Load harness configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to YAML file (default: config/harness.yaml)

    Returns:
        Immutable HarnessConfig

    Raises:
        ConfigError: If the file cannot be parsed or a value is invalid
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    data = _apply_env_overrides(_read_yaml(path))
    config = build_config(data)

    logger.debug(
        f"Loaded harness config: browser={config.browser}, base_url={config.base_url}, "
        f"device={config.context.device}, slow_mo={config.launch.slow_mo_ms}ms"
    )
    return config
