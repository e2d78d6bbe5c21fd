"""
Payment details service for the checkout channel.

After the storefront returns from a redirect or 3DS step, the host
fetches /payments/details from the gateway and hands the response to
this service. It applies the response to the order and builds the
normalized response the storefront renders.

Usage:
    from payments.services import PaymentDetailsService, get_payment_result_processor

    service = PaymentDetailsService(get_payment_result_processor())
    result = service.handle(details_response, order)
    if result.success:
        return JsonResponse(result.data.to_dict())
    return JsonResponse(result.to_response(), status=400)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from core.services import ServiceResult

from payments.exceptions import InvalidGatewayResponseError
from payments.services.response_normalizer import normalize
from payments.types import GatewayResponse, NormalizedResponse

if TYPE_CHECKING:
    from payments.protocols import Order
    from payments.services.result_processor import PaymentResultProcessor


logger = logging.getLogger(__name__)


class PaymentDetailsService:
    """
    Processes a payment details response and normalizes it for the storefront.

    A refused or unrecognized result is still a successful call from the
    storefront's point of view: it receives the normalized resultCode and
    shows the matching message. Only payloads that cannot be parsed fail.
    """

    def __init__(self, processor: PaymentResultProcessor):
        self.processor = processor

    def handle(
        self,
        payload: dict[str, Any] | None,
        order: Order,
    ) -> ServiceResult[NormalizedResponse]:
        """
        Apply the gateway response to the order and normalize it.

        Args:
            payload: Raw /payments/details response
            order: The order the payment belongs to

        Returns:
            ServiceResult with the NormalizedResponse, or an
            INVALID_RESPONSE failure for unusable payloads.
        """
        try:
            response = GatewayResponse.from_payload(payload)
        except InvalidGatewayResponseError:
            # The processor logs and reports the rejected payload.
            return self.processor.process(payload, order)

        outcome = self.processor.process(response, order)
        if not outcome:
            logger.info(
                f"Payment details result not successful: {outcome.error_code}",
                extra={"quote_id": order.quote_id, "result_code": response.result_code},
            )

        return ServiceResult.success(
            normalize(
                response.result_code,
                action=response.action,
                additional_data=response.additional_data,
            )
        )
