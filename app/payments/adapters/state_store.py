"""
Cache-backed storage for checkout state data.

The storefront posts the shopper's payment state data (selected method,
encrypted card fields, browser info) before the order is placed. It is
kept per quote until the payment result makes it obsolete, and reused
to build recurring vault requests.

Configuration (via settings):
- PAYMENT_STATE_DATA_TIMEOUT: Seconds to keep state data (default: 86400)

Usage:
    from payments.adapters import CacheTransientStateStore

    store = CacheTransientStateStore()
    store.set(quote_id, {"paymentMethod": {"type": "scheme"}})
    store.get(quote_id)          # {"paymentMethod": {"type": "scheme"}}
    store.clear(quote_id, "Authorised")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.conf import settings
from django.core.cache import cache as default_cache

from payments.state_machines import ResultCode

if TYPE_CHECKING:
    from core.protocols import CacheBackend


logger = logging.getLogger(__name__)

# State data is only dropped once the payment cannot be retried with it.
CLEANUP_RESULT_CODES = frozenset({ResultCode.AUTHORISED})

KEY_PREFIX = "payments:state_data"


class CacheTransientStateStore:
    """
    TransientStateStore implementation on top of Django's cache.

    Dependency Injection:
        A cache backend can be injected for testing. If not provided,
        uses django.core.cache.cache.
    """

    def __init__(
        self,
        cache: CacheBackend | None = None,
        timeout: int | None = None,
    ):
        self.cache = cache or default_cache
        self.timeout = (
            timeout
            if timeout is not None
            else getattr(settings, "PAYMENT_STATE_DATA_TIMEOUT", 86400)
        )

    @staticmethod
    def key_for(quote_id: Any) -> str:
        return f"{KEY_PREFIX}:{quote_id}"

    def get(self, quote_id: Any) -> dict[str, Any]:
        """Return a copy of the stored state data, {} when nothing is stored."""
        data = self.cache.get(self.key_for(quote_id))
        return dict(data) if data else {}

    def set(self, quote_id: Any, data: dict[str, Any]) -> None:
        self.cache.set(self.key_for(quote_id), dict(data), timeout=self.timeout)

    def clear(self, quote_id: Any, auth_result: str | None) -> None:
        """Delete the quote's state data if the result code makes it obsolete."""
        if ResultCode.parse(auth_result) not in CLEANUP_RESULT_CODES:
            return

        self.cache.delete(self.key_for(quote_id))
        logger.debug(
            "Cleared payment state data",
            extra={"quote_id": quote_id, "auth_result": auth_result},
        )
