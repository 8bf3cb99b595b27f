# chemistry_importer/utils/logging.py
import logging
import platform
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configure logging only once
_logger_configured = False


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
    force: bool = False,
) -> None:
    """
    Configure the root logger for command-line use.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file to log into
        console: Whether to log to stderr (stdout carries command output)
        log_format: Format string for all handlers
        force: Reconfigure even if logging has already been configured
    """
    global _logger_configured

    if _logger_configured and not force:
        return

    # Convert string log level to actual level
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    _logger_configured = True

    logger = logging.getLogger(__name__)
    logger.debug("Logging system configured")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name (typically the module name)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


def log_system_info() -> None:
    """Log interpreter, platform and library versions at DEBUG level."""
    import numpy as np

    from .. import __version__

    logger = logging.getLogger(__name__)
    logger.debug(f"chemistry-importer {__version__}")
    logger.debug(f"Python {platform.python_version()} on {platform.platform()}")
    logger.debug(f"numpy {np.__version__}")
