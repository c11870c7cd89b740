"""Custom exceptions and error codes for the catalog metadata cache.

This module defines a hierarchy of exceptions for different error scenarios
and error codes for structured error reporting.
"""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the cache."""

    INVALID_ARGUMENT = "invalid_argument"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"


class ErrorDetail:
    """Structured error detail information."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize error detail.

        Args:
            code: Error code identifier.
            message: Human-readable error message.
            details: Optional additional context.
        """
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            dict: Dictionary containing error information.
        """
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"ErrorDetail(code={self.code}, message={self.message!r})"


class CatalogCacheError(Exception):
    """Base exception for all catalog cache errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize base error.

        Args:
            message: Human-readable error message.
            code: Error code identifier.
            details: Optional additional context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_detail(self) -> ErrorDetail:
        """Convert exception to ErrorDetail.

        Returns:
            ErrorDetail: Structured error detail.
        """
        return ErrorDetail(code=self.code, message=self.message, details=self.details)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code}, message={self.message!r})"


class InvalidArgumentError(CatalogCacheError, ValueError):
    """Exception raised when a required name is missing or not a string.

    Subclasses ``ValueError`` so callers that only know the standard
    exception types still see an invalid-argument condition.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code=ErrorCode.INVALID_ARGUMENT, details=details)


class ConfigurationError(CatalogCacheError):
    """Exception raised when a cache or store configuration is inconsistent."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code=ErrorCode.CONFIGURATION_ERROR, details=details)
