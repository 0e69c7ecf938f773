"""
Logging configuration for the movie catalog UI.

Console logging plus an optional rotating log file, both driven by the
LOG_LEVEL and LOG_FILE settings unless overridden by the caller.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from app.config import get_log_file, get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Chatty third-party loggers capped at WARNING
NOISY_LOGGERS = ('urllib3', 'watchdog', 'streamlit.runtime')


def setup_logging(
    log_file: Optional[str] = None,
    level: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> Optional[Path]:
    """
    Configure root logging for the Streamlit app and the API client.

    Args:
        log_file: Log file name under `log_dir` (default: LOG_FILE setting;
            console only when unset)
        level: Logging level name (default: LOG_LEVEL setting)
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        Path of the log file, or None when logging to console only.
    """
    log_file = log_file or get_log_file()
    numeric_level = getattr(logging, (level or get_log_level()).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    full_log_path = None
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        full_log_path = log_path / log_file
        file_handler = RotatingFileHandler(
            full_log_path,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        root_logger.info("Logging to file: %s", full_log_path)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return full_log_path
