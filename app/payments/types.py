"""
Data types for gateway result handling.

This module defines dataclasses used throughout the payments app
for type-safe data transfer between layers.

Types:
    GatewayResponse: Parsed /payments/details response from the gateway
    NormalizedResponse: Shape returned to the storefront
    VaultPaymentToken: Stored payment method used for recurring charges

Usage:
    from payments.types import GatewayResponse

    response = GatewayResponse.from_payload({
        "resultCode": "Authorised",
        "pspReference": "8515131751004933",
        "paymentMethod": {"brand": "visa", "type": "scheme"},
    })
    response.payment_method_name  # "visa"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from payments.exceptions import InvalidGatewayResponseError
from payments.serializers import GatewayResponseSerializer
from payments.state_machines import ResultCode, is_final


@dataclass(frozen=True)
class GatewayResponse:
    """
    A gateway payment response.

    Attributes:
        result_code: Raw result code string (may be unrecognized)
        auth_result: Result passed on redirect returns, preferred as indicator
        action: Opaque action the storefront must perform
        additional_data: Free-form gateway metadata
        psp_reference: Gateway transaction identifier as sent ("" if absent)
        payment_method: Descriptor mapping with ``brand`` and/or ``type``
        details: Details echoed back by the gateway
        donation_token: Token for the donation flow
        raw: The original payload, kept for diagnostics
    """

    result_code: str | None = None
    auth_result: str | None = None
    action: Any = None
    additional_data: Any = None
    psp_reference: str = ""
    payment_method: dict[str, Any] = field(default_factory=dict)
    details: Any = None
    donation_token: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any] | None) -> GatewayResponse:
        """
        Build a GatewayResponse from the gateway's JSON payload.

        Raises:
            InvalidGatewayResponseError: If the payload is empty, is not a
                mapping, or has neither ``authResult`` nor ``resultCode``.
        """
        if not payload:
            raise InvalidGatewayResponseError(
                "Payment details call failed, gateway response is empty",
                details={"payload": payload},
            )
        if not isinstance(payload, dict):
            raise InvalidGatewayResponseError(
                "Gateway response must be a mapping",
                details={"payload": payload, "payload_type": type(payload).__name__},
            )

        serializer = GatewayResponseSerializer(data=payload)
        if not serializer.is_valid():
            raise InvalidGatewayResponseError(
                "Unexpected result query parameter",
                details={"payload": payload, "errors": serializer.errors},
            )

        data = serializer.validated_data
        return cls(
            result_code=data.get("result_code") or None,
            auth_result=data.get("auth_result") or None,
            action=data.get("action"),
            additional_data=data.get("additional_data"),
            psp_reference=_as_text(data.get("psp_reference")),
            payment_method=data.get("payment_method") or {},
            details=data.get("details"),
            donation_token=_as_text(data.get("donation_token")) or None,
            raw=dict(payload),
        )

    @property
    def indicator(self) -> str | None:
        """The code stored on the order: ``authResult`` first, then ``resultCode``."""
        return self.auth_result or self.result_code

    @property
    def code(self) -> ResultCode | None:
        """The recognized result code, or None when unrecognized or absent."""
        return ResultCode.parse(self.result_code)

    @property
    def payment_method_name(self) -> str:
        """Brand of the payment method, falling back to its type."""
        return str(
            self.payment_method.get("brand") or self.payment_method.get("type") or ""
        )

    def payment_information(self) -> dict[str, Any]:
        """
        Metadata to copy onto the order's payment record.

        Only keys with a non-empty value are returned.
        """
        candidates = {
            "resultCode": self.result_code,
            "action": self.action,
            "additionalData": self.additional_data,
            "pspReference": self.psp_reference,
            "details": self.details,
            "donationToken": self.donation_token,
        }
        return {key: value for key, value in candidates.items() if value}


def _as_text(value: Any) -> str:
    """Render a gateway identifier as a string, "" when absent."""
    return "" if value is None else str(value)


@dataclass(frozen=True)
class NormalizedResponse:
    """
    Result of a payment call as returned to the storefront.

    ``action`` and ``additional_data`` are only part of the contract for
    the result codes that define them; ``include_action`` and
    ``include_additional_data`` record which keys to emit.
    """

    is_final: bool
    result_code: str
    action: Any = None
    additional_data: Any = None
    include_action: bool = False
    include_additional_data: bool = False

    def __post_init__(self) -> None:
        """Keep finality consistent with the result code."""
        if self.is_final != is_final(self.result_code):
            raise ValueError(
                f"is_final={self.is_final} does not match result code {self.result_code!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON contract."""
        data: dict[str, Any] = {
            "isFinal": self.is_final,
            "resultCode": self.result_code,
        }
        if self.include_action:
            data["action"] = self.action
        if self.include_additional_data:
            data["additionalData"] = self.additional_data
        return data


@dataclass(frozen=True)
class VaultPaymentToken:
    """
    A stored payment method.

    Attributes:
        gateway_token: The gateway's stored payment method id
        token_details: JSON string with token metadata (``type``, ``tokenType``)
    """

    gateway_token: str
    token_details: str | None = None
