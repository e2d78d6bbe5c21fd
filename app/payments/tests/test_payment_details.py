"""
Tests for PaymentDetailsService.

Tests cover:
- Normalized response returned for every processable result
- Order processed exactly once per call
- Invalid payloads reported without touching the order
"""

import pytest

from payments.services import PaymentDetailsService
from payments.tests.factories import (
    GatewayPayloadFactory,
    ReceivedPayloadFactory,
    RedirectPayloadFactory,
)
from payments.types import NormalizedResponse


@pytest.fixture
def service(processor):
    return PaymentDetailsService(processor)


class TestHandle:
    """Tests for PaymentDetailsService.handle."""

    def test_authorised(self, service, order, history_log):
        result = service.handle(GatewayPayloadFactory(), order)

        assert result.success is True
        assert isinstance(result.data, NormalizedResponse)
        assert result.data.to_dict() == {"isFinal": True, "resultCode": "Authorised"}
        assert order.auth_result == "Authorised"
        assert len(history_log.entries) == 1

    def test_redirect_returns_action(self, service, order):
        payload = RedirectPayloadFactory()

        result = service.handle(payload, order)

        assert result.data.to_dict() == {
            "isFinal": False,
            "resultCode": "RedirectShopper",
            "action": payload["action"],
        }
        assert order.status == "pending_payment"

    def test_received_returns_additional_data(self, service, order):
        result = service.handle(ReceivedPayloadFactory(), order)

        assert result.data.to_dict() == {
            "isFinal": True,
            "resultCode": "Received",
            "additionalData": {"bankName": "Test Bank"},
        }

    def test_refused_is_still_normalized(self, service, order, lifecycle):
        result = service.handle({"resultCode": "Refused"}, order)

        assert result.success is True
        assert result.data.to_dict() == {"isFinal": True, "resultCode": "Refused"}
        assert lifecycle.calls["cancel"] == [order]

    @pytest.mark.parametrize("code", ["Cancelled", "Mystery"])
    def test_other_codes_normalize_to_error(self, service, order, code):
        result = service.handle({"resultCode": code}, order)

        assert result.data.to_dict() == {"isFinal": True, "resultCode": "Error"}

    def test_invalid_payload_fails_without_processing(self, service, order, repository):
        result = service.handle({"pspReference": "8515131751004933"}, order)

        assert result.success is False
        assert result.error_code == "INVALID_RESPONSE"
        assert result.to_response()["error_code"] == "INVALID_RESPONSE"
        assert repository.saved == []
