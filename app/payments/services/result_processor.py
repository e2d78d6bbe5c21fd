"""
Processing of gateway payment results against an order.

PaymentResultProcessor applies a /payments/details response to the order
it belongs to. Processing is a fixed sequence:

1. Copy response metadata onto the payment record
2. Hand recurring details to the vault (best effort)
3. Advance the order from pending payment to new, unless the shopper
   still has to act; the authorisation webhook expects a "new" order
4. Clear checkout state data for the quote (best effort)
5. Apply the per-result-code side effects (see payments.services.outcomes)
6. Write the audit history entry and persist the order

Only an empty or indicator-less payload stops processing early, before
any mutation. Best-effort calls are logged and never abort processing.

Usage:
    from payments.services import get_payment_result_processor

    processor = get_payment_result_processor()
    result = processor.process(details_response, order)
    if not result:
        logger.info(f"Payment not successful: {result.error_code}")
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable

from core.services import BaseService, ServiceResult

from payments.exceptions import InvalidGatewayResponseError
from payments.services.outcomes import ResultBranch, ResultDecision, decide
from payments.state_machines import is_action_required
from payments.types import GatewayResponse

if TYPE_CHECKING:
    from payments.protocols import (
        HistoryLog,
        Order,
        OrderLifecycle,
        OrderRepository,
        QuoteManager,
        TransientStateStore,
        VaultRecorder,
    )


HISTORY_ENTITY_NAME = "order"
CANCEL_ACTION = "cancel"


class PaymentResultProcessor(BaseService):
    """
    Applies gateway results to orders.

    Dependency Injection:
        All host collaborators are passed in; use
        payments.services.factory.get_payment_result_processor() to build
        one from settings.

    Usage:
        processor = PaymentResultProcessor(
            order_lifecycle=lifecycle,
            order_repository=repository,
            history_log=history,
            vault_recorder=vault,
            state_store=state_store,
            quote_manager=quotes,
        )
        result = processor.process({"resultCode": "Authorised", ...}, order)
    """

    def __init__(
        self,
        order_lifecycle: OrderLifecycle,
        order_repository: OrderRepository,
        history_log: HistoryLog,
        vault_recorder: VaultRecorder,
        state_store: TransientStateStore,
        quote_manager: QuoteManager,
    ):
        self.order_lifecycle = order_lifecycle
        self.order_repository = order_repository
        self.history_log = history_log
        self.vault_recorder = vault_recorder
        self.state_store = state_store
        self.quote_manager = quote_manager

    def process(
        self,
        response: GatewayResponse | dict[str, Any] | None,
        order: Order,
    ) -> ServiceResult[str]:
        """
        Apply a gateway response to an order.

        Args:
            response: Raw gateway payload or an already parsed GatewayResponse
            order: The order the payment belongs to

        Returns:
            ServiceResult whose truthiness is the payment outcome. On
            success, data is the processed result indicator. On failure,
            error_code is one of INVALID_RESPONSE, PAYMENT_REFUSED,
            PAYMENT_NOT_CONFIRMED, UNKNOWN_RESULT_CODE or PROCESSING_ERROR.
        """
        logger = self.get_logger()

        try:
            if not isinstance(response, GatewayResponse):
                response = GatewayResponse.from_payload(response)
        except InvalidGatewayResponseError as e:
            logger.error(
                f"{e.message}. Response: {_dump(e.details.get('payload'))}",
                extra={"error_code": e.error_code},
            )
            return ServiceResult.failure(e.message, error_code=e.error_code)

        try:
            decision = self._apply(response, order)
        except Exception as e:
            return self.handle_exception(
                e,
                "Processing gateway response failed",
                error_code="PROCESSING_ERROR",
                extra={
                    "quote_id": order.quote_id,
                    "result_code": response.result_code,
                },
            )

        if decision.success:
            return ServiceResult.success(response.indicator)
        return ServiceResult.failure(
            f"Payment result {response.result_code!r} was not successful",
            error_code=decision.error_code,
        )

    # -------------------------------------------------------------------------
    # Processing steps
    # -------------------------------------------------------------------------

    def _apply(self, response: GatewayResponse, order: Order) -> ResultDecision:
        logger = self.get_logger()
        log_context = {
            "quote_id": order.quote_id,
            "result_code": response.result_code,
            "psp_reference": response.psp_reference,
        }
        logger.info("Updating the order", extra=log_context)

        payment = order.payment
        for key, value in response.payment_information().items():
            payment.set_additional_information(key, value)

        self._best_effort(
            "Error storing recurring details",
            self.vault_recorder.record_recurring_details,
            payment,
            response,
            extra=log_context,
        )

        # Keep pending_payment while the shopper still has to act.
        if not is_action_required(response.result_code):
            order = self._advance_to_new(order)

        self._best_effort(
            "Error cleaning the payment state data",
            self.state_store.clear,
            order.quote_id,
            response.indicator,
            extra=log_context,
        )

        decision = decide(response)
        order = self._apply_branch(decision, response, order, log_context)

        self.history_log.append(
            order,
            status=order.status,
            comment=decision.comment,
            entity_name=HISTORY_ENTITY_NAME,
        )
        order.auth_result = response.indicator
        self.order_repository.save(order)

        return decision

    def _apply_branch(
        self,
        decision: ResultDecision,
        response: GatewayResponse,
        order: Order,
        log_context: dict[str, Any],
    ) -> Order:
        logger = self.get_logger()
        branch = decision.branch

        if branch is ResultBranch.AUTHORISED:
            if response.psp_reference:
                payment = order.payment
                payment.cc_trans_id = response.psp_reference
                payment.last_trans_id = response.psp_reference
                payment.transaction_id = response.psp_reference
            self._best_effort(
                "Failed to disable quote",
                self.quote_manager.disable,
                order.quote_id,
                extra=log_context,
            )

        elif branch is ResultBranch.PENDING:
            order = self._advance_to_new(order)
            logger.info("Do nothing, wait for the notification", extra=log_context)

        elif branch is ResultBranch.ACTION_REQUIRED:
            logger.info(
                "Additional action is required for the payment",
                extra=log_context,
            )

        elif branch is ResultBranch.RECEIVED:
            logger.info("Do nothing, wait for the notification", extra=log_context)

        elif branch is ResultBranch.CANCELLATION:
            if self.order_lifecycle.is_cancellable(order):
                order.set_action_flag(CANCEL_ACTION, True)
                self.order_lifecycle.cancel(order)
            else:
                logger.info("The order cannot be cancelled", extra=log_context)

        else:
            # No terminal state here; the OFFER_CLOSED webhook settles the order.
            logger.error(
                f"Payment details call failed for action, resultCode is "
                f"{response.result_code}. Raw API response: {_dump(response.raw)}. "
                "Cancel or hold the order on the OFFER_CLOSED notification.",
                extra=log_context,
            )

        return order

    def _advance_to_new(self, order: Order) -> Order:
        order = self.order_lifecycle.advance_to_new(order)
        self.order_repository.save(order)
        return order

    def _best_effort(
        self,
        context: str,
        func: Callable[..., Any],
        *args: Any,
        extra: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Call a collaborator whose failure must not abort processing."""
        try:
            return ServiceResult.success(func(*args))
        except Exception as e:
            return self.handle_exception(
                e,
                context,
                error_code="BEST_EFFORT_FAILURE",
                extra=extra,
            )


def _dump(payload: Any) -> str:
    return json.dumps(payload, default=str)
