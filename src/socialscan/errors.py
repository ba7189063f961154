"""Exception classes for socialscan.

Scanning itself never raises: every text input produces a result.
Errors are reserved for invalid configuration.
"""

from __future__ import annotations


class SocialScanError(Exception):
    """Base exception for all socialscan errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(SocialScanError):
    """Error in scan configuration.
    
    Raised when a ScanConfig is built with markers, prefixes or
    whitespace that cannot form an unambiguous scanner.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            field: Name of the offending ScanConfig field
            message: Description of the problem
        """
        self.field = field
        self.message = message
        super().__init__(f"Invalid config field '{field}': {message}")
