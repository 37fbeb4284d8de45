"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
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
            include_details: Whether to render the details block

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


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when the requested entity does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class ConflictError(AppError):
    """
    Resource Conflict Error

    Raised when a resource already exists (e.g., duplicate name).
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "conflict",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="conflict_error",
            code=code,
            details=details,
            status_code=409,
        )


class ValidationError(AppError):
    """
    Parameter Validation Error

    Raised when request parameters do not meet requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
            status_code=422,
        )


class UpstreamError(AppError):
    """
    Upstream Service Error

    Raised when a remote service or the service registry fails.
    """

    def __init__(
        self,
        message: str = "Upstream service error",
        code: str = "upstream_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 502,
    ):
        super().__init__(
            message=message,
            error_type="upstream_error",
            code=code,
            details=details,
            status_code=status_code,
        )


class RemoteCallError(UpstreamError):
    """
    Remote Call Error

    Raised when a remote service answers with a client error (status code < 500).
    The remote status code is propagated so callers see the same 404/409/422.
    """

    def __init__(
        self,
        message: str = "Remote call failed",
        code: str = "remote_call_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 400,
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=status_code,
        )


class RegistryError(UpstreamError):
    """Service registry returned an unexpected response"""

    def __init__(
        self,
        message: str = "Service registry error",
        code: str = "registry_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class ServiceError(AppError):
    """
    Service Error

    Raised when internal service processing fails (e.g., no available instance).
    """

    def __init__(
        self,
        message: str = "Service error",
        code: str = "service_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="service_error",
            code=code,
            details=details,
            status_code=503,
        )
