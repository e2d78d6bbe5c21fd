"""
Factory functions wiring payment services to the host's collaborators.

The host platform declares its implementations in settings:

    PAYMENT_RESULT_HANDLER = {
        "ORDER_LIFECYCLE": "shop.orders.payments.OrderLifecycle",
        "ORDER_REPOSITORY": "shop.orders.payments.OrderRepository",
        "HISTORY_LOG": "shop.orders.payments.OrderHistoryLog",
        "VAULT_RECORDER": "shop.vault.VaultRecorder",
        "QUOTE_MANAGER": "shop.checkout.QuoteManager",
        "TRANSIENT_STATE_STORE": "payments.adapters.CacheTransientStateStore",
    }

Each entry is a dotted path to a class (or any zero-argument callable)
returning the collaborator.

Usage:
    processor = get_payment_result_processor()
    result = processor.process(details_response, order)
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from payments.services.payment_details import PaymentDetailsService
from payments.services.result_processor import PaymentResultProcessor
from payments.vault.builder import RecurringVaultDataBuilder

REQUIRED_COLLABORATORS = (
    "ORDER_LIFECYCLE",
    "ORDER_REPOSITORY",
    "HISTORY_LOG",
    "VAULT_RECORDER",
    "QUOTE_MANAGER",
)

DEFAULT_COLLABORATORS = {
    "TRANSIENT_STATE_STORE": "payments.adapters.CacheTransientStateStore",
}


def get_collaborator(name: str) -> Any:
    """
    Instantiate the collaborator configured under ``name``.

    Raises:
        ImproperlyConfigured: If the entry is missing or cannot be imported
    """
    config = {**DEFAULT_COLLABORATORS, **getattr(settings, "PAYMENT_RESULT_HANDLER", {})}
    path = config.get(name)
    if not path:
        raise ImproperlyConfigured(
            f"PAYMENT_RESULT_HANDLER['{name}'] must be set to a dotted path"
        )

    try:
        factory = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"PAYMENT_RESULT_HANDLER['{name}'] could not be imported: {path}"
        ) from e

    return factory()


def get_payment_result_processor() -> PaymentResultProcessor:
    """
    Build a PaymentResultProcessor from settings.

    Returns:
        PaymentResultProcessor with all collaborators instantiated
    """
    missing = [
        name
        for name in REQUIRED_COLLABORATORS
        if not getattr(settings, "PAYMENT_RESULT_HANDLER", {}).get(name)
    ]
    if missing:
        raise ImproperlyConfigured(
            f"PAYMENT_RESULT_HANDLER is missing: {', '.join(missing)}"
        )

    return PaymentResultProcessor(
        order_lifecycle=get_collaborator("ORDER_LIFECYCLE"),
        order_repository=get_collaborator("ORDER_REPOSITORY"),
        history_log=get_collaborator("HISTORY_LOG"),
        vault_recorder=get_collaborator("VAULT_RECORDER"),
        state_store=get_collaborator("TRANSIENT_STATE_STORE"),
        quote_manager=get_collaborator("QUOTE_MANAGER"),
    )


def get_payment_details_service() -> PaymentDetailsService:
    """Build the checkout-facing service on top of the configured processor."""
    return PaymentDetailsService(get_payment_result_processor())


def get_recurring_vault_data_builder() -> RecurringVaultDataBuilder:
    """Build the vault request builder with the configured state store."""
    return RecurringVaultDataBuilder(get_collaborator("TRANSIENT_STATE_STORE"))
