"""
Per-result-code decisions for gateway responses.

A gateway response falls into exactly one ResultBranch. The branch fixes
the boolean outcome, the error code reported on failure and the audit
comment written to the order history. The side effects belonging to each
branch are carried out by PaymentResultProcessor; this module stays pure
so every branch can be checked without collaborators.

Branches:
    AUTHORISED      -> success, transaction ids + quote disable
    PENDING         -> success, order advanced to new, waiting for webhook
    ACTION_REQUIRED -> success, shopper must act (PresentToShopper included)
    RECEIVED        -> success unless paid with an alipay_hk method
    CANCELLATION    -> failure, order cancelled when possible
    UNRECOGNIZED    -> failure, logged with the raw payload
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments.state_machines import ResultCode

if TYPE_CHECKING:
    from payments.types import GatewayResponse


COMMENT_HEADER = "Gateway payments details response:"

BANK_TRANSFER_COMMENT = "Waiting for the customer to transfer the money."
DIRECT_DEBIT_COMMENT = "This request will be sent to the bank at the end of the day."
AWAITING_WEBHOOK_COMMENT = (
    "The payment result is not confirmed (yet).\n"
    "Once the payment is authorised, the order status will be updated accordingly.\n"
    "If the order is stuck on this status, the payment can be seen as unsuccessful.\n"
    "The order can be automatically cancelled based on the OFFER_CLOSED notification."
)

BANK_TRANSFER_MARKER = "bankTransfer"
DIRECT_DEBIT_METHOD = "sepadirectdebit"
UNCONFIRMED_RECEIVED_MARKER = "alipay_hk"


class ResultBranch(enum.Enum):
    AUTHORISED = "authorised"
    PENDING = "pending"
    ACTION_REQUIRED = "action_required"
    RECEIVED = "received"
    CANCELLATION = "cancellation"
    UNRECOGNIZED = "unrecognized"


BRANCH_BY_CODE: dict[ResultCode, ResultBranch] = {
    ResultCode.AUTHORISED: ResultBranch.AUTHORISED,
    ResultCode.PENDING: ResultBranch.PENDING,
    ResultCode.PRESENT_TO_SHOPPER: ResultBranch.ACTION_REQUIRED,
    ResultCode.IDENTIFY_SHOPPER: ResultBranch.ACTION_REQUIRED,
    ResultCode.CHALLENGE_SHOPPER: ResultBranch.ACTION_REQUIRED,
    ResultCode.REDIRECT_SHOPPER: ResultBranch.ACTION_REQUIRED,
    ResultCode.RECEIVED: ResultBranch.RECEIVED,
    ResultCode.REFUSED: ResultBranch.CANCELLATION,
    ResultCode.CANCELLED: ResultBranch.CANCELLATION,
}


@dataclass(frozen=True)
class ResultDecision:
    """
    Outcome of a gateway response.

    Attributes:
        branch: Which side effects apply
        success: Boolean outcome reported to the caller
        comment: Audit comment for the order history
        error_code: Machine-readable reason when success is False
    """

    branch: ResultBranch
    success: bool
    comment: str
    error_code: str | None = None


def classify(result_code: str | None) -> ResultBranch:
    """Return the branch for a raw result code."""
    code = ResultCode.parse(result_code)
    return BRANCH_BY_CODE.get(code, ResultBranch.UNRECOGNIZED)


def format_comment(response: GatewayResponse) -> str:
    """Audit comment header shared by every branch."""
    return (
        f"{COMMENT_HEADER}\n"
        f"authResult: {response.indicator}\n"
        f"pspReference: {response.psp_reference.strip()}\n"
        f"paymentMethod: {response.payment_method_name}"
    )


def pending_comment(payment_method: str) -> str:
    """Explain what the shopper or merchant waits for on a pending payment."""
    if BANK_TRANSFER_MARKER in payment_method:
        return BANK_TRANSFER_COMMENT
    if payment_method == DIRECT_DEBIT_METHOD:
        return DIRECT_DEBIT_COMMENT
    return AWAITING_WEBHOOK_COMMENT


def decide(response: GatewayResponse) -> ResultDecision:
    """
    Decide the outcome for a gateway response.

    Args:
        response: Parsed gateway response

    Returns:
        ResultDecision with branch, outcome and audit comment
    """
    branch = classify(response.result_code)
    comment = format_comment(response)
    payment_method = response.payment_method_name

    if branch is ResultBranch.PENDING:
        comment = f"{comment}\n\n{pending_comment(payment_method)}"
        return ResultDecision(branch, True, comment)

    if branch is ResultBranch.RECEIVED:
        if UNCONFIRMED_RECEIVED_MARKER in payment_method:
            return ResultDecision(branch, False, comment, "PAYMENT_NOT_CONFIRMED")
        return ResultDecision(branch, True, comment)

    if branch is ResultBranch.CANCELLATION:
        return ResultDecision(branch, False, comment, "PAYMENT_REFUSED")

    if branch is ResultBranch.UNRECOGNIZED:
        return ResultDecision(branch, False, comment, "UNKNOWN_RESULT_CODE")

    return ResultDecision(branch, True, comment)
