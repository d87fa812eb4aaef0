"""
Custom exceptions for the location discovery service.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Query errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Lookup errors
    PLACE_NOT_FOUND = "PLACE_NOT_FOUND"
    NOT_FOUND = "NOT_FOUND"

    # Rate limiting errors
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class DiscoveryServiceException(Exception):
    """Base exception for the discovery service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class InvalidArgumentError(DiscoveryServiceException):
    """Raised when a discovery query parameter is out of range or unknown."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_ARGUMENT,
            details={"field": field, "value": value},
            status_code=400
        )
        self.field = field


class PlaceNotFoundError(DiscoveryServiceException):
    """Raised when a place id does not exist in the repository."""

    def __init__(self, place_id: str):
        super().__init__(
            message=f"Place '{place_id}' not found",
            error_code=ErrorCode.PLACE_NOT_FOUND,
            details={"place_id": place_id},
            status_code=404
        )
