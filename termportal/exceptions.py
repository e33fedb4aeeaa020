# termportal/exceptions.py

"""
Custom exceptions for the termportal package.

These exceptions cover the few error cases that can occur around a session:
bad configuration, missing content, or a terminal that cannot host the
session. The view controller and game engine never raise them; out-of-context
input is simply ignored there.
"""

from typing import Optional, Tuple


class PortalError(Exception):
    """Base exception for all termportal errors."""


class ConfigurationError(PortalError):
    """Raised when there are issues with the provided configuration."""
    def __init__(self, message: str, field: Optional[str] = None):
        msg = "Configuration error"
        if field:
            msg = f"{msg} in '{field}'"
        msg = f"{msg}: {message}"
        super().__init__(msg)
        self.field = field


class ContentError(PortalError):
    """Raised when a content source is unknown or empty."""
    def __init__(self, message: Optional[str] = None, source: Optional[str] = None):
        msg = message or "Content error"
        if source:
            msg = f"{msg} (source: {source})"
        super().__init__(msg)
        self.source = source


class TerminalError(PortalError):
    """Raised when the terminal cannot host the session."""
    def __init__(self, message: Optional[str] = None, size: Optional[Tuple[int, int]] = None):
        msg = message or "Terminal error"
        if size is not None:
            msg = f"{msg} (terminal is {size[0]}x{size[1]})"
        super().__init__(msg)
        self.size = size
