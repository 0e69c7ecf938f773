"""
Application configuration loaded from environment or defaults.
"""

import os

DEFAULT_API_URL = "https://postbackend-y79c.onrender.com"


def get_api_base_url() -> str:
    """Get movie backend base URL from env or default."""
    return (os.getenv("MOVIE_API_URL") or DEFAULT_API_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get HTTP request timeout in seconds."""
    return float(os.getenv("MOVIE_API_TIMEOUT", "10"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None
