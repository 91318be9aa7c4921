# pwnedcheck/utils/logger.py
"""
Logging configuration for pwnedcheck.
Log records only ever carry the 5-character hash prefix, never a password,
a full hash, or a suffix.
"""

import logging
import sys
from typing import Optional
from pathlib import Path


# Third-party loggers that are chatty at DEBUG/INFO
QUIET_LOGGERS = {
    "requests": logging.WARNING,
    "urllib3": logging.WARNING,
    "aiohttp": logging.WARNING,
    "httpx": logging.WARNING,
    "gradio": logging.INFO,
}

CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger for the CLI and web interface.

    Console output goes to stderr so stdout carries only lookup results.
    When log_file is given, a DEBUG-level file handler is added as well.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(numeric_level)
    handlers = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    logger = get_logger(__name__)
    logger.debug(f"Logging initialized at {level.upper()} level")
    if log_file:
        logger.info(f"Logs will be written to: {log_file}")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name or __name__)


def log_range_request(prefix: str, status: str, duration_ms: float) -> None:
    """
    Log a range endpoint request for monitoring.

    Args:
        prefix: 5-character hash prefix that was queried
        status: Request status (success, http_<code>, transport_error)
        duration_ms: Request duration in milliseconds
    """
    logger = get_logger("pwnedcheck.api")
    logger.info(
        f"Range Request - Prefix: {prefix}, "
        f"Status: {status}, Duration: {duration_ms:.2f}ms"
    )


def log_breach_check(prefix: str, is_breached: bool, source: str) -> None:
    """
    Log the outcome of a breach lookup.

    Args:
        prefix: 5-character hash prefix of the checked password
        is_breached: Whether the password was found in breaches
        source: Which lookup produced the result (is_compromised, breach_count)
    """
    logger = get_logger("pwnedcheck.breach")

    if is_breached:
        logger.warning(f"Breach detected - Prefix: {prefix}, Source: {source}")
    else:
        logger.info(f"No breach found - Prefix: {prefix}, Source: {source}")
