"""
Payment-specific exceptions for gateway result handling.

Exception Hierarchy:
    PaymentError (base for payment domain)
    └── PaymentValidationError - Payment data validation failures
        └── InvalidGatewayResponseError - Empty or indicator-less gateway payload

Usage:
    from payments.exceptions import InvalidGatewayResponseError

    if not payload:
        raise InvalidGatewayResponseError(
            "Payment details call failed, gateway response is empty",
            details={"payload": payload},
        )

Note:
    These exceptions never leave the payments app. The result processor
    catches them and reports a ServiceResult failure with the same
    error_code, so the host only ever sees a boolean outcome.
"""

from __future__ import annotations

from core.exceptions import BaseApplicationError


class PaymentError(BaseApplicationError):
    """
    Base exception for all payment operations.

    All payment-specific exceptions inherit from this class,
    which itself inherits from BaseApplicationError for
    consistent error reporting.
    """

    default_error_code: str = "PAYMENT_ERROR"


class PaymentValidationError(PaymentError):
    """
    Raised when payment data fails validation.

    Use for:
    - Malformed vault token details
    - Gateway payload fields with the wrong shape
    """

    default_error_code: str = "PAYMENT_VALIDATION_ERROR"


class InvalidGatewayResponseError(PaymentValidationError):
    """
    Raised when a gateway response cannot be processed at all.

    The payload is either empty or carries neither an ``authResult``
    nor a ``resultCode``. Processing stops before any order mutation.

    Example:
        raise InvalidGatewayResponseError(
            "Unexpected result query parameter",
            details={"payload": {"pspReference": "8515..."}},
        )
    """

    default_error_code: str = "INVALID_RESPONSE"


__all__ = [
    "InvalidGatewayResponseError",
    "PaymentError",
    "PaymentValidationError",
]
