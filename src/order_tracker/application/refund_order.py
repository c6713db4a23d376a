"""Application service: Cancel & Refund Order use case.

The driver lists a customer's orders numbered from 1 and the user picks
one of them by that number.
"""

from __future__ import annotations

from order_tracker.domain.exceptions import EntityNotFoundError
from order_tracker.domain.service.order_manager import OrderManager
from order_tracker.domain.service.refund_notifier import RefundNotifier


class RefundOrderHandler:

    def __init__(self, manager: OrderManager, notifier: RefundNotifier) -> None:
        self._manager = manager
        self._notifier = notifier

    def handle(self, customer_name: str, selection: int) -> bool:
        """Refund the *selection*-th order of *customer_name*.

        Returns True if the order was cancelled now, False if it already was.
        """
        orders = self._manager.orders_by_customer(customer_name)
        if not orders:
            raise EntityNotFoundError(f"No orders found for customer '{customer_name}'")
        if not 1 <= selection <= len(orders):
            raise EntityNotFoundError(
                f"Invalid order number {selection} (expected 1-{len(orders)})"
            )
        return orders[selection - 1].process_refund(self._notifier)
