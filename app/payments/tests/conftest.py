"""
Pytest fixtures for payment result tests.

This module provides in-memory stand-ins for the host platform's
collaborators (orders, lifecycle, repository, history) and a processor
wired to them.
"""

from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock

import pytest

from payments.services import PaymentResultProcessor


# =============================================================================
# Host Entities
# =============================================================================


@dataclass
class FakePayment:
    """Payment record that remembers every piece of additional information."""

    cc_trans_id: str | None = None
    last_trans_id: str | None = None
    transaction_id: str | None = None
    additional_information: dict[str, Any] = field(default_factory=dict)

    def set_additional_information(self, key, value):
        self.additional_information[key] = value


@dataclass
class FakeOrder:
    """Order in pending payment, as placed by the storefront."""

    quote_id: int = 42
    status: str = "pending_payment"
    auth_result: str | None = None
    payment: FakePayment = field(default_factory=FakePayment)
    action_flags: dict[str, bool] = field(default_factory=dict)

    def set_action_flag(self, action, flag):
        self.action_flags[action] = flag


# =============================================================================
# Host Collaborators
# =============================================================================


class FakeOrderLifecycle:
    """
    Order lifecycle that records calls.

    Set ``cancellable`` to control is_cancellable().
    """

    def __init__(self, cancellable: bool = True):
        self.cancellable = cancellable
        self.calls: dict[str, list[Any]] = {"advance_to_new": [], "cancel": []}

    def advance_to_new(self, order):
        self.calls["advance_to_new"].append(order)
        if order.status == "pending_payment":
            order.status = "new"
        return order

    def cancel(self, order):
        self.calls["cancel"].append(order)
        order.status = "canceled"

    def is_cancellable(self, order):
        return self.cancellable


class FakeOrderRepository:
    """Repository that keeps a snapshot of the status at every save."""

    def __init__(self):
        self.saved: list[tuple[Any, str]] = []

    def save(self, order):
        self.saved.append((order, order.status))


class FakeHistoryLog:
    def __init__(self):
        self.entries: list[dict[str, Any]] = []

    def append(self, order, *, status, comment, entity_name):
        self.entries.append(
            {
                "order": order,
                "status": status,
                "comment": comment,
                "entity_name": entity_name,
            }
        )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def order():
    return FakeOrder()


@pytest.fixture
def lifecycle():
    return FakeOrderLifecycle()


@pytest.fixture
def repository():
    return FakeOrderRepository()


@pytest.fixture
def history_log():
    return FakeHistoryLog()


@pytest.fixture
def vault_recorder():
    return MagicMock(name="vault_recorder")


@pytest.fixture
def state_store():
    return MagicMock(name="state_store")


@pytest.fixture
def quote_manager():
    return MagicMock(name="quote_manager")


@pytest.fixture
def processor(
    lifecycle,
    repository,
    history_log,
    vault_recorder,
    state_store,
    quote_manager,
):
    """PaymentResultProcessor wired to the fakes above."""
    return PaymentResultProcessor(
        order_lifecycle=lifecycle,
        order_repository=repository,
        history_log=history_log,
        vault_recorder=vault_recorder,
        state_store=state_store,
        quote_manager=quote_manager,
    )
