"""
Tests for the storefront response normalizer.

Tests cover:
- Final codes without payload
- Action-required codes carrying the action
- PresentToShopper and Received payloads
- Unrecognized codes collapsing to Error
"""

import pytest

from payments.services import normalize
from payments.state_machines import ACTION_REQUIRED_STATUSES, ResultCode

ACTION = {"type": "threeDS2", "token": "eyJ0aHJlZURT..."}
ADDITIONAL_DATA = {"bankName": "Test Bank"}


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.parametrize("code", ["Authorised", "Refused", "Error", "Success"])
    def test_bare_final_codes(self, code):
        """Should return only isFinal and resultCode."""
        response = normalize(code, action=ACTION, additional_data=ADDITIONAL_DATA)

        assert response.to_dict() == {"isFinal": True, "resultCode": code}

    @pytest.mark.parametrize(
        "code",
        ["RedirectShopper", "IdentifyShopper", "ChallengeShopper", "Pending"],
    )
    def test_action_required_codes_include_action(self, code):
        """Should not be final and should carry the action."""
        response = normalize(code, action=ACTION)

        assert response.to_dict() == {
            "isFinal": False,
            "resultCode": code,
            "action": ACTION,
        }

    def test_action_key_present_without_action(self):
        """Should keep the action key even when the gateway sent none."""
        assert normalize("Pending").to_dict() == {
            "isFinal": False,
            "resultCode": "Pending",
            "action": None,
        }

    def test_present_to_shopper_is_final_with_action(self):
        response = normalize("PresentToShopper", action=ACTION)

        assert response.to_dict() == {
            "isFinal": True,
            "resultCode": "PresentToShopper",
            "action": ACTION,
        }

    def test_received_includes_additional_data(self):
        response = normalize("Received", action=ACTION, additional_data=ADDITIONAL_DATA)

        assert response.to_dict() == {
            "isFinal": True,
            "resultCode": "Received",
            "additionalData": ADDITIONAL_DATA,
        }

    @pytest.mark.parametrize(
        "code",
        ["Cancelled", "Unknown", "", "authorised", None, 500],
    )
    def test_unrecognized_codes_become_error(self, code):
        """Should never pass an unknown code through."""
        assert normalize(code, action=ACTION).to_dict() == {
            "isFinal": True,
            "resultCode": "Error",
        }

    @pytest.mark.parametrize("code", list(ResultCode))
    def test_finality_follows_action_required_set(self, code):
        response = normalize(code.value)

        assert response.is_final is (code not in ACTION_REQUIRED_STATUSES)

    def test_is_deterministic(self):
        assert normalize("Pending", action=ACTION) == normalize("Pending", action=ACTION)
