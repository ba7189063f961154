"""Utility modules for socialscan.

Provides:
- logger: get_logger for logging
"""

from socialscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
