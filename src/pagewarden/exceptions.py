"""
Pagewarden Exceptions.

Centralized exception hierarchy for the application.
"""

class PagewardenError(Exception):
    """Base exception for all Pagewarden errors."""
    pass


class ConfigurationError(PagewardenError):
    """Raised when configuration is invalid or missing."""
    pass


class BrowserError(PagewardenError):
    """Raised when browser operations fail."""
    pass


class BrowserClosedError(BrowserError):
    """Raised when an operation is attempted on a closed browser."""
    pass


class InvalidCheckerError(PagewardenError, TypeError):
    """Raised when registering a checker that cannot be called."""
    pass


class CheckerFailure(PagewardenError):
    """Raised by checkers when a page does not satisfy their condition."""
    pass


class WaitTimeoutError(PagewardenError, TimeoutError):
    """Raised when a wait condition is not met in time."""
    pass
