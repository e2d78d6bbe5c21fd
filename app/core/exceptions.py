"""
Base exception classes for application-wide error handling.

This module provides the root of the exception hierarchy used by the
payment plugin. Domain apps subclass BaseApplicationError so that every
error carries:
- A human-readable message
- A machine-readable error code for client handling
- Detailed context for debugging and logs

Exception Hierarchy:
    BaseApplicationError (base)
    └── payments.exceptions.PaymentError - Payment domain errors

Usage:
    from core.exceptions import BaseApplicationError

    class PaymentError(BaseApplicationError):
        default_error_code = "PAYMENT_ERROR"

    raise PaymentError(
        "Gateway payload has no result code",
        error_code="INVALID_RESPONSE",
        details={"payload_keys": ["pspReference"]},
    )

Note:
    These exceptions are for domain/business logic errors raised inside
    the plugin. Services convert them to ServiceResult failures before
    anything reaches the host platform.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Provides a consistent interface for error handling across the application.
    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (payload keys, identifiers, etc.)

    Example:
        try:
            response = GatewayResponse.from_payload(payload)
        except BaseApplicationError as e:
            logger.error(f"Rejected payload: {e.error_code}")
            return ServiceResult.failure(e.message, error_code=e.error_code)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dict with error, error_code, and details keys

        Example:
            {
                "error": "Gateway payload is empty",
                "error_code": "INVALID_RESPONSE",
                "details": {"payload_keys": []}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )
