"""
Result code enum and membership predicates for gateway responses.

The payment gateway answers every /payments and /payments/details call
with a result code. Some codes settle the payment attempt, others ask the
shopper to do something first (redirect, 3DS challenge, voucher).

Result Code Overview:

    Final (no further shopper interaction):
        Authorised, Refused, Received, PresentToShopper, Error, Cancelled,
        Success (point-of-sale terminals)

    Action required (shopper must act, order stays pending payment):
        RedirectShopper, IdentifyShopper, ChallengeShopper, Pending

Anything the gateway sends that is not in ResultCode is treated as
unrecognized: it is final and normalized to Error.
"""

from __future__ import annotations

from django.db import models


class ResultCode(models.TextChoices):
    """
    Result codes returned by the payment gateway.

    Values are the exact strings used on the wire.
    """

    AUTHORISED = "Authorised", "Authorised"
    REFUSED = "Refused", "Refused"
    REDIRECT_SHOPPER = "RedirectShopper", "Redirect Shopper"
    IDENTIFY_SHOPPER = "IdentifyShopper", "Identify Shopper"
    CHALLENGE_SHOPPER = "ChallengeShopper", "Challenge Shopper"
    RECEIVED = "Received", "Received"
    PENDING = "Pending", "Pending"
    PRESENT_TO_SHOPPER = "PresentToShopper", "Present To Shopper"
    ERROR = "Error", "Error"
    CANCELLED = "Cancelled", "Cancelled"
    POS_SUCCESS = "Success", "Success"

    @classmethod
    def parse(cls, value: object) -> ResultCode | None:
        """
        Look up a result code by its wire value.

        Returns None for unrecognized values instead of raising, so callers
        can route unknown codes to their fallback branch.
        """
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Codes that keep the payment open until the shopper completes an action.
ACTION_REQUIRED_STATUSES: frozenset[ResultCode] = frozenset(
    {
        ResultCode.REDIRECT_SHOPPER,
        ResultCode.IDENTIFY_SHOPPER,
        ResultCode.CHALLENGE_SHOPPER,
        ResultCode.PENDING,
    }
)


def is_action_required(result_code: object) -> bool:
    """Return True if the code asks the shopper for another step."""
    return ResultCode.parse(result_code) in ACTION_REQUIRED_STATUSES


def is_final(result_code: object) -> bool:
    """Return True for every code, known or not, outside the action-required set."""
    return not is_action_required(result_code)


__all__ = [
    "ACTION_REQUIRED_STATUSES",
    "ResultCode",
    "is_action_required",
    "is_final",
]
