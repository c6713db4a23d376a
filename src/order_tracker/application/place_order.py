"""Application service: Place Order use case.

Items arrive already validated; the driver rejects bad items one at a time
while the order is being entered, so an invalid line never aborts the order.
"""

from __future__ import annotations

from order_tracker.domain.model.customer import Customer
from order_tracker.domain.model.order import Order, OrderItem
from order_tracker.domain.service.order_manager import OrderManager


class PlaceOrderHandler:

    def __init__(self, manager: OrderManager) -> None:
        self._manager = manager

    def handle(
        self,
        customer_name: str,
        customer_id: str,
        items: list[OrderItem],
    ) -> Order:
        order = Order(customer=Customer(name=customer_name, customer_id=customer_id))
        for item in items:
            order.add_item(item)
        self._manager.add_order(order)
        return order
