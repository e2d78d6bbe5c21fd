"""
Tests for CacheTransientStateStore.

Uses Django's local-memory cache configured in settings; the root
conftest clears it around every test.
"""

from unittest.mock import MagicMock

import pytest
from django.core.cache import cache

from payments.adapters import CacheTransientStateStore
from payments.protocols import TransientStateStore

STATE_DATA = {
    "paymentMethod": {"type": "scheme", "encryptedCardNumber": "adyenjs_0_1_25$..."},
    "browserInfo": {"language": "en-US"},
}


@pytest.fixture
def store():
    return CacheTransientStateStore()


class TestCacheTransientStateStore:
    def test_implements_protocol(self, store):
        assert isinstance(store, TransientStateStore)

    def test_get_returns_empty_dict_when_nothing_stored(self, store):
        assert store.get(42) == {}

    def test_set_then_get(self, store):
        store.set(42, STATE_DATA)

        assert store.get(42) == STATE_DATA
        assert cache.get("payments:state_data:42") == STATE_DATA

    def test_get_returns_a_copy(self, store):
        store.set(42, STATE_DATA)

        store.get(42)["browserInfo"] = None

        assert store.get(42) == STATE_DATA

    def test_quotes_are_isolated(self, store):
        store.set(42, STATE_DATA)

        assert store.get(43) == {}

    def test_clear_on_authorised(self, store):
        store.set(42, STATE_DATA)

        store.clear(42, "Authorised")

        assert store.get(42) == {}

    @pytest.mark.parametrize(
        "auth_result",
        ["Refused", "Pending", "RedirectShopper", "Mystery", None],
    )
    def test_clear_keeps_data_for_other_results(self, store, auth_result):
        store.set(42, STATE_DATA)

        store.clear(42, auth_result)

        assert store.get(42) == STATE_DATA

    def test_uses_configured_timeout(self, settings):
        settings.PAYMENT_STATE_DATA_TIMEOUT = 600
        backend = MagicMock()

        CacheTransientStateStore(cache=backend).set(42, STATE_DATA)

        backend.set.assert_called_once_with(
            "payments:state_data:42", STATE_DATA, timeout=600
        )

    def test_explicit_timeout_wins(self):
        backend = MagicMock()

        CacheTransientStateStore(cache=backend, timeout=30).set(42, STATE_DATA)

        assert backend.set.call_args.kwargs["timeout"] == 30
