"""
Tests for the ResultCode enum and finality predicates.
"""

import pytest

from payments.state_machines import (
    ACTION_REQUIRED_STATUSES,
    ResultCode,
    is_action_required,
    is_final,
)


class TestResultCodeParse:
    """Tests for ResultCode.parse."""

    @pytest.mark.parametrize("code", list(ResultCode))
    def test_parses_wire_values(self, code):
        """Should return the member for every known wire value."""
        assert ResultCode.parse(code.value) is code

    @pytest.mark.parametrize(
        "value",
        ["authorised", "AUTHORISED", "Unknown", "", None, 3, {"resultCode": "Authorised"}],
    )
    def test_unrecognized_values_return_none(self, value):
        """Should not raise for unknown or non-string values."""
        assert ResultCode.parse(value) is None

    def test_pos_success_is_known(self):
        """Point-of-sale terminals report success as 'Success'."""
        assert ResultCode.parse("Success") == ResultCode.POS_SUCCESS


class TestFinality:
    """Tests for is_action_required / is_final."""

    def test_action_required_set(self):
        """Should contain exactly the four shopper-action codes."""
        assert ACTION_REQUIRED_STATUSES == {
            ResultCode.REDIRECT_SHOPPER,
            ResultCode.IDENTIFY_SHOPPER,
            ResultCode.CHALLENGE_SHOPPER,
            ResultCode.PENDING,
        }

    @pytest.mark.parametrize("code", list(ResultCode))
    def test_final_is_negation_of_action_required(self, code):
        assert is_final(code.value) is not is_action_required(code.value)
        assert is_final(code.value) is (code not in ACTION_REQUIRED_STATUSES)

    def test_unknown_codes_are_final(self):
        assert is_final("SomethingNew") is True
        assert is_action_required(None) is False
