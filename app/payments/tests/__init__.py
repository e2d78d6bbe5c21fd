"""
Tests for payments app.

This package contains test modules for:
- test_result_codes.py: ResultCode enum and finality predicates
- test_types.py: GatewayResponse parsing and NormalizedResponse
- test_response_normalizer.py: Storefront response mapping
- test_outcomes.py: Per-result-code decisions and audit comments
- test_result_processor.py: Order updates from gateway responses
- test_payment_details.py: Checkout-facing service
- test_state_store.py: Cache-backed checkout state data
- test_vault_builder.py: Recurring vault request building
- test_factory.py: Collaborator wiring from settings

Usage:
    pytest payments/tests/
    pytest payments/tests/test_result_processor.py
"""
