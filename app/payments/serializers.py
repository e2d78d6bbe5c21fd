"""
DRF serializers for gateway payloads.

This module provides serializers for:
- Validating the raw /payments/details response handed over by the host

Related files:
    - types.py: GatewayResponse built from the validated data
    - services/result_processor.py: consumes GatewayResponse

Usage:
    serializer = GatewayResponseSerializer(data=payload)
    if serializer.is_valid():
        fields = serializer.validated_data
"""

from __future__ import annotations

from rest_framework import serializers


class GatewayResponseSerializer(serializers.Serializer):
    """
    Serializer for a gateway payment response.

    Input keys are the gateway's camelCase names; validated_data uses
    snake_case keys matching GatewayResponse attributes. Every field is
    optional and loosely typed; a missing ``authResult`` / ``resultCode``
    is the only validation failure.

    Fields:
        resultCode: Result code of the payment attempt
        authResult: Result passed back on redirect returns
        action: Opaque shopper action (redirect, 3DS, voucher)
        additionalData: Free-form gateway metadata
        pspReference: Gateway transaction identifier, kept as sent
        paymentMethod: Payment method descriptor with brand/type
        details: Details echoed back for follow-up calls
        donationToken: Token for the donation flow

    Usage:
        serializer = GatewayResponseSerializer(data=request_payload)
        serializer.is_valid(raise_exception=True)
    """

    resultCode = serializers.JSONField(
        source="result_code",
        required=False,
        allow_null=True,
    )
    authResult = serializers.JSONField(
        source="auth_result",
        required=False,
        allow_null=True,
    )
    action = serializers.JSONField(required=False, allow_null=True)
    additionalData = serializers.JSONField(
        source="additional_data",
        required=False,
        allow_null=True,
    )
    pspReference = serializers.JSONField(
        source="psp_reference",
        required=False,
        allow_null=True,
    )
    paymentMethod = serializers.JSONField(
        source="payment_method",
        required=False,
        allow_null=True,
    )
    details = serializers.JSONField(required=False, allow_null=True)
    donationToken = serializers.JSONField(
        source="donation_token",
        required=False,
        allow_null=True,
    )

    def validate_resultCode(self, value):
        return _indicator(value)

    def validate_authResult(self, value):
        return _indicator(value)

    def validate_paymentMethod(self, value):
        """Accept a descriptor mapping or a bare method name; drop anything else."""
        if value is None or isinstance(value, dict):
            return value
        if isinstance(value, str):
            return {"type": value}
        return {}

    def validate(self, attrs):
        """Require a result indicator."""
        if not attrs.get("auth_result") and not attrs.get("result_code"):
            raise serializers.ValidationError(
                "Either authResult or resultCode is required.",
                code="missing_result",
            )
        return attrs


def _indicator(value):
    """Result codes are strings; structured values count as missing."""
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    return str(value).strip() or None
