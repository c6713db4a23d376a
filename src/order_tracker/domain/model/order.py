"""Order aggregate — the core of the domain.

An Order owns its customer and line items, tracks whether it is still
completed or has been cancelled, and knows how to total and describe itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from order_tracker.domain.exceptions import InvalidItemError
from order_tracker.domain.model.customer import Customer
from order_tracker.domain.model.value_objects import Money, to_decimal
from order_tracker.domain.service.refund_notifier import RefundNotifier

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class OrderItem:
    """A single product line: name, quantity and unit price.

    Use ``OrderItem.create()`` for raw user input; it accepts any numeric
    price and reports negative values as InvalidItemError.
    """

    product_name: str
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise InvalidItemError("Quantity and price must be non-negative.")

    @staticmethod
    def create(
        product_name: str,
        quantity: int,
        unit_price: str | float | int | Money,
    ) -> OrderItem:
        if isinstance(unit_price, Money):
            amount = unit_price.amount
        else:
            amount = to_decimal(unit_price)
        if quantity < 0 or amount < 0:
            raise InvalidItemError("Quantity and price must be non-negative.")
        return OrderItem(product_name, quantity, Money(amount))

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    def render(self) -> str:
        return f"- {self.product_name} x{self.quantity} @ {self.unit_price.exact()}"


@dataclass(eq=False)
class Order:
    """Aggregate root for a customer's purchase.

    Orders start out COMPLETED. The only transition is to CANCELLED, which
    is terminal. Items may still be appended after cancellation; nothing in
    the workflow does so, but it is not prevented.
    """

    customer: Customer
    items: list[OrderItem] = field(default_factory=list)
    _status: OrderStatus = field(default=OrderStatus.COMPLETED, init=False, repr=False)

    def add_item(self, item: OrderItem) -> None:
        self.items.append(item)

    # --- State transitions ----------------------------------------------------

    def cancel(self) -> None:
        """Transition COMPLETED -> CANCELLED. Cancelling twice is a no-op."""
        self._status = OrderStatus.CANCELLED

    def process_refund(self, notifier: RefundNotifier) -> bool:
        """Cancel the order and notify that its refund went through.

        Returns False, without notifying, when the order was already
        cancelled. Refunds cover the whole order.
        """
        if self.is_cancelled:
            logger.debug("refund skipped, order for %s already cancelled", self.customer.name)
            return False
        self.cancel()
        logger.info("refund processed: customer=%s total=%s", self.customer.name, self.total)
        notifier.refund_processed(self)
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    # --- Display --------------------------------------------------------------

    def render(self) -> str:
        lines = [f"Customer: {self.customer}"]
        lines.extend(item.render() for item in self.items)
        lines.append(f"Status: {self.status.value}")
        lines.append(f"Total: {self.total}")
        return "\n".join(lines)
