"""
Custom exceptions for encodex.

This module defines the exception classes raised by translation units
and input sources.
"""
from typing import Optional


class EncodexException(Exception):
    """Base exception for all encodex errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class TranslationError(EncodexException):
    """Exception raised when input data cannot be translated."""
    pass


class LengthValidationError(TranslationError):
    """Exception raised when encoded input has an invalid length."""

    def __init__(
        self,
        message: str,
        length: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            length: Length of the rejected input
            error_code: Numeric error code (if available)
        """
        self.length = length
        super().__init__(message, error_code)


class AlphabetValidationError(TranslationError):
    """Exception raised when a symbol is not part of the active alphabet."""

    def __init__(
        self,
        message: str,
        symbol: Optional[int] = None,
        position: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            symbol: Offending byte value
            position: Offset of the symbol in the encoded input
            error_code: Numeric error code (if available)
        """
        self.symbol = symbol
        self.position = position
        super().__init__(message, error_code)


class PaddingValidationError(TranslationError):
    """Exception raised when padding appears where RFC 4648 forbids it."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        self.position = position
        super().__init__(message, error_code)


class UnsupportedBaseError(TranslationError):
    """Exception raised when the selected base has no codec."""

    def __init__(self, message: str, base=None, error_code: Optional[int] = None) -> None:
        self.base = base
        super().__init__(message, error_code)


class TranslationStateError(EncodexException):
    """Exception raised when a translation unit is used out of contract."""
    pass


class InputError(EncodexException):
    """Exception raised for input collection errors."""
    pass


class InputReadError(InputError):
    """Exception raised when an input file cannot be read."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        reason: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            path: Path of the file that failed to read
            reason: Short reason ("not found", "permission denied", ...)
            error_code: Numeric error code (if available)
        """
        self.path = path
        self.reason = reason
        super().__init__(message, error_code)
