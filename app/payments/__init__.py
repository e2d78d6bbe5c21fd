"""
Payments app for gateway result handling.

This app handles:
- Normalizing gateway result codes for the storefront
- Applying /payments/details responses to orders (status, cancellation,
  transaction ids, audit history)
- Building recurring payment requests for vaulted payment methods
- Storing checkout state data between payment calls

Orders, quotes, order history and vault tokens belong to the host
platform; the app reaches them through payments.protocols.

Usage:
    from payments.services import get_payment_details_service

    result = get_payment_details_service().handle(details_response, order)
"""
