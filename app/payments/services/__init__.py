"""
Payment services for gateway result handling.

This module provides:
- normalize: Maps a result code to the storefront response
- PaymentResultProcessor: Applies a gateway response to an order
- PaymentDetailsService: Processor + normalizer for the checkout channel
- Factory functions building them from settings

Usage:
    from payments.services import get_payment_details_service

    service = get_payment_details_service()
    result = service.handle(details_response, order)
    if result.success:
        payload = result.data.to_dict()

    # Normalize without touching the order
    from payments.services import normalize

    normalize("Refused").to_dict()  # {"isFinal": True, "resultCode": "Refused"}
"""

from payments.services.factory import (
    get_payment_details_service,
    get_payment_result_processor,
    get_recurring_vault_data_builder,
)
from payments.services.outcomes import ResultBranch, ResultDecision, decide
from payments.services.payment_details import PaymentDetailsService
from payments.services.response_normalizer import normalize
from payments.services.result_processor import PaymentResultProcessor

__all__ = [
    "PaymentDetailsService",
    "PaymentResultProcessor",
    "ResultBranch",
    "ResultDecision",
    "decide",
    "get_payment_details_service",
    "get_payment_result_processor",
    "get_recurring_vault_data_builder",
    "normalize",
]
