"""
Result code enum and helpers for gateway payment responses.
"""

from payments.state_machines.states import (
    ACTION_REQUIRED_STATUSES,
    ResultCode,
    is_action_required,
    is_final,
)

__all__ = [
    "ACTION_REQUIRED_STATUSES",
    "ResultCode",
    "is_action_required",
    "is_final",
]
