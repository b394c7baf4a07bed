"""
Logging configuration for tfcomponents.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(log_level: str = "WARNING", log_file: bool = False) -> logging.Logger:
    """
    Configure application logging.

    Console logging goes to stderr: stdout is reserved for terraform's
    own output and the status table.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log everything to a file

    Returns:
        Root logger instance
    """
    level = logging.getLevelName(str(log_level).upper())
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if unknown_level:
        logger.warning(f"Unknown log level {log_level!r}, using WARNING")

    if log_file:
        log_file_path = _open_log_file_path()
        if log_file_path is not None:
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            logger.addHandler(file_handler)
            logger.debug(f"Logging to file: {log_file_path}")

    return logger


def _open_log_file_path() -> Optional[Path]:
    """Create the log directory and return a fresh log file path."""
    log_dir = get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logging.getLogger(__name__).warning(f"Cannot create log directory {log_dir}: {e}")
        return None

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"tfcomponents_{timestamp}.log"


def get_log_dir() -> Path:
    """
    Get platform-specific log directory.

    Returns:
        Path to log directory
    """
    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))

    return Path(base) / 'tfcomponents' / 'logs'
