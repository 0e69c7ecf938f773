"""
Shared utilities package.

Logging configuration shared by the UI and the API client.
"""

from app.utils.logging_config import setup_logging

__all__ = ['setup_logging']
