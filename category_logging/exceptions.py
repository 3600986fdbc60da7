"""
Logger Exceptions
Fatal conditions raised by Logger.error and Logger.assert_
"""

from typing import Optional


class LoggerError(Exception):
    """Base class for conditions raised by a Logger"""

    def __init__(self, message: str, category: Optional[str] = None, location: Optional[str] = None):
        """
        Args:
            message: Fully formatted message (prefix, values and location)
            category: Category of the logger that raised
            location: Caller location annotation
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.location = location

    def __str__(self) -> str:
        return self.message


class FatalError(LoggerError):
    """Raised by Logger.error"""


class AssertionFailure(LoggerError, AssertionError):
    """Raised by Logger.assert_ when the condition is falsy"""
