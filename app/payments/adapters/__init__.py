"""
Payment adapters backed by Django infrastructure.

This module provides default implementations of the payment collaborator
protocols that the plugin can supply itself. Everything order related is
provided by the host platform.

Usage:
    from payments.adapters import CacheTransientStateStore

    store = CacheTransientStateStore()
    state_data = store.get(order.quote_id)
"""

from payments.adapters.state_store import (
    CLEANUP_RESULT_CODES,
    CacheTransientStateStore,
)

__all__ = [
    "CLEANUP_RESULT_CODES",
    "CacheTransientStateStore",
]
