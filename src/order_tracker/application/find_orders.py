"""Application service: order queries (read side)."""

from __future__ import annotations

from order_tracker.domain.model.order import Order
from order_tracker.domain.service.order_manager import OrderManager


class FindOrdersHandler:

    def __init__(self, manager: OrderManager) -> None:
        self._manager = manager

    def by_customer(self, customer_name: str) -> list[Order]:
        return self._manager.orders_by_customer(customer_name)

    def by_status(self, status: str) -> list[Order]:
        return self._manager.orders_by_status(status.strip())

    def most_ordered_product(self) -> str:
        return self._manager.most_ordered_product()
