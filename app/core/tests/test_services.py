"""
Tests for ServiceResult, BaseService and BaseApplicationError.
"""

from __future__ import annotations

import logging

from core.exceptions import BaseApplicationError
from core.services import BaseService, ServiceResult


class QuoteService(BaseService):
    pass


class TestServiceResult:
    """Test ServiceResult construction and helpers."""

    def test_success(self):
        result = ServiceResult.success("Authorised")

        assert result.success is True
        assert bool(result) is True
        assert result.data == "Authorised"
        assert result.to_response() == {"success": True, "data": "Authorised"}

    def test_failure(self):
        result = ServiceResult.failure("Payment was refused", "PAYMENT_REFUSED")

        assert bool(result) is False
        assert result.to_response() == {
            "success": False,
            "error": "Payment was refused",
            "error_code": "PAYMENT_REFUSED",
        }

    def test_from_exception_defaults_code_to_class_name(self):
        result = ServiceResult.from_exception(KeyError("quote"))

        assert result.error_code == "KEYERROR"


class TestBaseService:
    """Test BaseService utilities."""

    def test_logger_named_after_service(self):
        assert QuoteService.get_logger().name == f"{__name__}.QuoteService"

    def test_handle_exception_logs_and_wraps(self, caplog):
        with caplog.at_level(logging.ERROR):
            result = QuoteService.handle_exception(
                RuntimeError("quote is locked"),
                "Failed to disable quote",
                error_code="BEST_EFFORT_FAILURE",
                extra={"quote_id": 42},
            )

        assert result.success is False
        assert result.error == "quote is locked"
        assert result.error_code == "BEST_EFFORT_FAILURE"

        record = caplog.records[-1]
        assert record.getMessage() == "Failed to disable quote: quote is locked"
        assert record.quote_id == 42
        assert record.exc_info is not None

    def test_handle_exception_respects_log_level(self, caplog):
        with caplog.at_level(logging.DEBUG):
            QuoteService.handle_exception(ValueError("x"), log_level=logging.WARNING)

        assert caplog.records[-1].levelno == logging.WARNING


class TestBaseApplicationError:
    def test_defaults_and_serialization(self):
        exc = BaseApplicationError("Gateway payload is empty")

        assert exc.error_code == "APPLICATION_ERROR"
        assert str(exc) == "[APPLICATION_ERROR] Gateway payload is empty"
        assert exc.to_dict() == {
            "error": "Gateway payload is empty",
            "error_code": "APPLICATION_ERROR",
        }

    def test_details_are_serialized(self):
        exc = BaseApplicationError(
            "Gateway payload is empty",
            error_code="INVALID_RESPONSE",
            details={"payload_keys": []},
        )

        assert exc.to_dict()["details"] == {"payload_keys": []}
