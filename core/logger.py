"""
Logging system for the e2e harness.

This module provides a centralized logging configuration that:
- Outputs to both file (with rotation) and stderr (captured by pytest)
- Supports different log levels (DEBUG, INFO, WARNING, ERROR)
- Formats logs with timestamp, level, module name, and message
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "react_e2e"


def _writable_log_dir(log_dir: Path) -> bool:
    """Create log_dir if needed and check that it accepts files."""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        test_file = log_dir / ".test_write"
        test_file.touch()
        test_file.unlink()
        return True
    except (OSError, PermissionError):
        return False


def _default_log_file() -> Optional[str]:
    """
    Pick the default log file location.

    Tries the project root first, then the user home directory.
    Returns None when neither is writable, in which case only
    stderr output is used.
    """
    project_root = Path(__file__).parent.parent.absolute()
    for log_dir in (project_root / "logs", Path.home() / ".react_e2e" / "logs"):
        if _writable_log_dir(log_dir):
            return str(log_dir / "react_e2e.log")
    return None


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_file: Optional[str] = None,
    log_level: int = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    force_reconfigure: bool = False,
) -> logging.Logger:
    """
    Setup and configure logger with file and console handlers.

    This function configures a logger that:
    1. Writes to a file with rotation (RotatingFileHandler)
    2. Writes to stderr with a StreamHandler
    3. Uses consistent formatting across all handlers

    Args:
        name: Logger name (default: "react_e2e")
        log_file: Path to log file (default: "logs/react_e2e.log")
        log_level: Logging level (default: INFO)
        max_bytes: Maximum log file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        force_reconfigure: Force reconfiguration even if handlers exist (default: False)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers and not force_reconfigure:
        return logger

    if force_reconfigure and logger.handlers:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    logger.setLevel(log_level)

    if log_file is None:
        log_file = _default_log_file()

    file_handler = None
    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        except (OSError, PermissionError):
            # Can't create file handler, stderr only
            file_handler = None

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    if file_handler:
        logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get or create a logger instance.

    Child loggers (e.g., "react_e2e.session") propagate to the parent
    logger, which is configured with default settings on first use.

    Args:
        name: Logger name (default: "react_e2e")

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if "." in name:
        parent_name = name.split(".")[0]
        parent_logger = logging.getLogger(parent_name)
        if not parent_logger.handlers:
            setup_logger(name=parent_name)
        logger.propagate = True
        return logger

    if not logger.handlers:
        setup_logger(name=name)

    return logger
