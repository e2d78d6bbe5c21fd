"""
Normalization of gateway result codes for the storefront.

The storefront only needs to know whether the payment attempt is over
and, if not, which action to run next. Unknown codes are never passed
through: they are reported as Error.

Usage:
    from payments.services.response_normalizer import normalize

    normalize("RedirectShopper", action={"type": "redirect", "url": "..."}).to_dict()
    # {"isFinal": False, "resultCode": "RedirectShopper", "action": {...}}
"""

from __future__ import annotations

from typing import Any

from payments.state_machines import ACTION_REQUIRED_STATUSES, ResultCode
from payments.types import NormalizedResponse

# Final codes returned without a payload.
BARE_FINAL_CODES = frozenset(
    {
        ResultCode.AUTHORISED,
        ResultCode.REFUSED,
        ResultCode.ERROR,
        ResultCode.POS_SUCCESS,
    }
)


def normalize(
    result_code: Any,
    action: Any = None,
    additional_data: Any = None,
) -> NormalizedResponse:
    """
    Map a gateway result code to the storefront response.

    Args:
        result_code: Result code as received (any value)
        action: Shopper action from the gateway response
        additional_data: Additional data from the gateway response

    Returns:
        NormalizedResponse; unrecognized codes and Cancelled become a
        final Error response.
    """
    code = ResultCode.parse(result_code)

    if code in BARE_FINAL_CODES:
        return NormalizedResponse(is_final=True, result_code=code.value)

    if code in ACTION_REQUIRED_STATUSES:
        return NormalizedResponse(
            is_final=False,
            result_code=code.value,
            action=action,
            include_action=True,
        )

    if code == ResultCode.PRESENT_TO_SHOPPER:
        return NormalizedResponse(
            is_final=True,
            result_code=code.value,
            action=action,
            include_action=True,
        )

    if code == ResultCode.RECEIVED:
        return NormalizedResponse(
            is_final=True,
            result_code=code.value,
            additional_data=additional_data,
            include_additional_data=True,
        )

    return NormalizedResponse(is_final=True, result_code=ResultCode.ERROR.value)
