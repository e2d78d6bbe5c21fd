"""
Request builder for recurring charges on vaulted payment methods.

When a stored payment method is charged again (subscriptions, one-click
reorders), the /payments request body starts from the checkout state
data and is completed with the recurring processing model and a
reference to the stored method.

Configuration (via settings):
- PAYMENT_RECURRING_PROCESSING_MODELS: provider code -> model
  (e.g. {"ideal": "UnscheduledCardOnFile"})
- PAYMENT_DEFAULT_RECURRING_PROCESSING_MODEL: fallback (default: "Subscription")

Usage:
    from payments.vault import RecurringVaultDataBuilder

    builder = RecurringVaultDataBuilder(state_store)
    request = builder.build(
        token,
        method_code="gateway_hpp_vault",
        provider_code="ideal",
        quote_id=order.quote_id,
    )
    request["body"]["paymentMethod"]
    # {"type": "ideal", "storedPaymentMethodId": "8416..."}
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from django.conf import settings

from payments.exceptions import PaymentValidationError

if TYPE_CHECKING:
    from payments.protocols import TransientStateStore
    from payments.types import VaultPaymentToken


# Card tokens go through the native 3DS2 flow instead of a stored method reference.
CC_VAULT_CODE = "gateway_cc_vault"

# Key in token details holding the model the token was created for.
TOKEN_TYPE = "tokenType"

DEFAULT_RECURRING_PROCESSING_MODEL = "Subscription"


class RecurringVaultDataBuilder:
    """
    Builds the request body for a recurring vault payment.

    Dependency Injection:
        The state store and the provider-to-model mapping can be injected.
        If the mapping is not provided, it is read from settings.
    """

    def __init__(
        self,
        state_store: TransientStateStore,
        recurring_processing_models: dict[str, str] | None = None,
        default_model: str | None = None,
    ):
        self.state_store = state_store
        self.recurring_processing_models = (
            recurring_processing_models
            if recurring_processing_models is not None
            else getattr(settings, "PAYMENT_RECURRING_PROCESSING_MODELS", {})
        )
        self.default_model = default_model or getattr(
            settings,
            "PAYMENT_DEFAULT_RECURRING_PROCESSING_MODEL",
            DEFAULT_RECURRING_PROCESSING_MODEL,
        )

    def build(
        self,
        token: VaultPaymentToken,
        method_code: str,
        provider_code: str,
        quote_id: Any,
    ) -> dict[str, Any]:
        """
        Build the gateway request for charging a stored payment method.

        Args:
            token: The vaulted payment token
            method_code: Code of the vault payment method being charged
            provider_code: Code of the payment method the token was created with
            quote_id: Quote whose state data seeds the request body

        Returns:
            {"body": {...}} ready for the gateway client

        Raises:
            PaymentValidationError: If the token details are not valid JSON
        """
        details = self.parse_token_details(token)
        body = dict(self.state_store.get(quote_id))

        if TOKEN_TYPE in details:
            body["recurringProcessingModel"] = details[TOKEN_TYPE]
        else:
            body["recurringProcessingModel"] = self.recurring_processing_model(
                provider_code
            )

        if method_code == CC_VAULT_CODE:
            additional_data = dict(body.get("additionalData") or {})
            additional_data["allow3DS2"] = True
            body["additionalData"] = additional_data
        else:
            body["paymentMethod"] = {
                "type": details.get("type"),
                "storedPaymentMethodId": token.gateway_token,
            }

        return {"body": body}

    def recurring_processing_model(self, provider_code: str) -> str:
        return self.recurring_processing_models.get(provider_code, self.default_model)

    @staticmethod
    def parse_token_details(token: VaultPaymentToken) -> dict[str, Any]:
        raw = token.token_details or "{}"
        try:
            details = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PaymentValidationError(
                "Vault token details are not valid JSON",
                details={"error": str(e)},
            ) from e
        if not isinstance(details, dict):
            raise PaymentValidationError(
                "Vault token details must be a JSON object",
                details={"type": type(details).__name__},
            )
        return details
