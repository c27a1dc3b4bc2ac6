"""
Error Definitions

Defines custom exception classes used by the normalization layer for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for API response)

        Args:
            include_details: Whether to include the details mapping

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if include_details and self.details:
            result["error"]["details"] = self.details
        return result


class InvalidInputError(AppError):
    """
    Invalid Input Error

    Raised when a caller breaks the input contract, e.g. measuring an unset body
    or passing headers that are not a mapping. Never recovered locally.
    """

    def __init__(
        self,
        message: str = "Invalid input",
        code: str = "invalid_input",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="invalid_input_error",
            code=code,
            details=details,
            status_code=500,
        )


class InternalProcessingError(AppError):
    """
    Internal Processing Error

    Raised for unexpected faults while assembling headers (fail-closed mode only)
    or while writing a response envelope.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="internal_error",
            code=code,
            details=details,
            status_code=500,
        )


class ResponseAlreadySentError(InternalProcessingError):
    """
    Response Already Sent Error

    Raised when a second envelope is emitted on the same request path.
    """

    def __init__(
        self,
        message: str = "Response already emitted",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, code="response_already_sent", details=details)
