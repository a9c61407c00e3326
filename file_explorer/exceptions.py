"""
Custom exceptions for the file explorer.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when a native filesystem call fails."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class InvalidModeError(BaseAppError):
    """Exception raised for permission strings that are not octal."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
