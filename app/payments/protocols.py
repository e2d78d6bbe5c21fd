"""
Protocol definitions for the host platform's payment collaborators.

The payments app does not own orders, quotes, history or vault storage.
The host platform provides them through these narrow interfaces and
wires concrete implementations in settings (see payments.services.factory).

Available Protocols:
    PaymentRecord: Payment attached to an order
    Order: Order entity mutated by result processing
    OrderLifecycle: Status transitions and cancellation
    OrderRepository: Order persistence
    HistoryLog: Append-only order audit trail
    VaultRecorder: Recurring token persistence
    TransientStateStore: Per-checkout scratch data keyed by quote id
    QuoteManager: Checkout quote deactivation

Concurrency:
    The result processor takes no locks. Implementations of
    OrderLifecycle and OrderRepository must serialize writes per order:
    at most one status transition may run concurrently for a given
    order id. Concurrent webhooks and storefront returns for the same
    order rely on that guarantee.

Usage:
    class MagentoStyleLifecycle:
        def advance_to_new(self, order): ...
        def cancel(self, order): ...
        def is_cancellable(self, order): ...

    lifecycle: OrderLifecycle = MagentoStyleLifecycle()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

    from payments.types import GatewayResponse


@runtime_checkable
class PaymentRecord(Protocol):
    """
    Payment attached to an order.

    The three transaction id attributes are aliases kept in sync with the
    gateway reference once a payment is authorised.
    """

    cc_trans_id: str | None
    last_trans_id: str | None
    transaction_id: str | None

    def set_additional_information(self, key: str, value: Any) -> None:
        """Store gateway metadata on the payment."""
        ...


@runtime_checkable
class Order(Protocol):
    """
    Order entity owned by the host.

    Attributes:
        status: Current order status (e.g. "pending_payment", "new")
        quote_id: Id of the checkout quote the order was placed from
        payment: Payment record for the order
        auth_result: Last processed result code, used for idempotency checks
    """

    status: str
    quote_id: Any
    payment: PaymentRecord
    auth_result: str | None

    def set_action_flag(self, action: str, flag: bool) -> None:
        """Allow or forbid an order action (e.g. "cancel")."""
        ...


@runtime_checkable
class OrderLifecycle(Protocol):
    """
    Order status transitions.

    advance_to_new must be idempotent: calling it on an order that is
    already "new" leaves it unchanged.
    """

    def advance_to_new(self, order: Order) -> Order:
        """Move the order from pending payment to new and return it."""
        ...

    def cancel(self, order: Order) -> None:
        """Cancel the order."""
        ...

    def is_cancellable(self, order: Order) -> bool:
        """Return True if the order's current state allows cancellation."""
        ...


@runtime_checkable
class OrderRepository(Protocol):
    """Order persistence."""

    def save(self, order: Order) -> None:
        """Persist the order."""
        ...


@runtime_checkable
class HistoryLog(Protocol):
    """Append-only audit trail for orders."""

    def append(
        self,
        order: Order,
        *,
        status: str,
        comment: str,
        entity_name: str,
    ) -> None:
        """Persist a history entry for the order."""
        ...


@runtime_checkable
class VaultRecorder(Protocol):
    """Stores recurring payment tokens returned by the gateway."""

    def record_recurring_details(
        self,
        payment: PaymentRecord,
        response: GatewayResponse,
    ) -> None:
        """Persist recurring details from the response, if any."""
        ...


@runtime_checkable
class TransientStateStore(Protocol):
    """Checkout state data kept between payment calls, keyed by quote id."""

    def get(self, quote_id: Any) -> dict[str, Any]:
        """Return stored state data for the quote ({} if none)."""
        ...

    def set(self, quote_id: Any, data: dict[str, Any]) -> None:
        """Store state data for the quote."""
        ...

    def clear(self, quote_id: Any, auth_result: str | None) -> None:
        """Drop state data once the payment result makes it obsolete."""
        ...


@runtime_checkable
class QuoteManager(Protocol):
    """Checkout quote management."""

    def disable(self, quote_id: Any) -> None:
        """Deactivate the quote so it cannot be checked out again."""
        ...


__all__ = [
    "HistoryLog",
    "Order",
    "OrderLifecycle",
    "OrderRepository",
    "PaymentRecord",
    "QuoteManager",
    "TransientStateStore",
    "VaultRecorder",
]
