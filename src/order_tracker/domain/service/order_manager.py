"""Domain service: OrderManager.

Holds every order recorded during the session, in submission order, and
answers the filtering and aggregation queries over them. Orders are never
removed; a cancellation changes the order's status in place.

Callers only ever receive copies of the internal list, so a query result
can be iterated while new orders are being added.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterator

from order_tracker.domain.model.order import Order, OrderStatus

logger = logging.getLogger(__name__)

NO_PRODUCTS_ORDERED = "No products ordered"
LOG_SEPARATOR = "-------------------------"


class OrderManager:

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: list[Order] = list(orders or [])

    def add_order(self, order: Order) -> None:
        self._orders.append(order)
        logger.info(
            "order added: customer=%s items=%d total=%s",
            order.customer.name,
            len(order.items),
            order.total,
        )

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    # --- Queries --------------------------------------------------------------

    def orders_by_customer(self, customer_name: str) -> list[Order]:
        """Orders whose customer name equals *customer_name*, ignoring case."""
        wanted = customer_name.lower()
        return [o for o in self._orders if o.customer.name.lower() == wanted]

    def orders_by_status(self, status: str | OrderStatus) -> list[Order]:
        """Orders whose status text equals *status*, ignoring case.

        Unknown status text simply matches nothing.
        """
        text = status.value if isinstance(status, OrderStatus) else status
        wanted = text.lower()
        return [o for o in self._orders if o.status.value.lower() == wanted]

    # --- Aggregation ----------------------------------------------------------

    def product_totals(self) -> dict[str, int]:
        """Cumulative quantity per product name.

        Cancelled orders count too: a refund does not take items back.
        """
        totals: Counter[str] = Counter()
        for order in self._orders:
            for item in order.items:
                totals[item.product_name] += item.quantity
        return dict(totals)

    def most_ordered_product(self) -> str:
        """Describe the product with the highest cumulative quantity.

        Ties go to the alphabetically first product name.
        """
        totals = self.product_totals()
        if not totals:
            return NO_PRODUCTS_ORDERED
        name, quantity = min(totals.items(), key=lambda kv: (-kv[1], kv[0]))
        return f"{name} ({quantity} units)"

    # --- Persistence hand-off -------------------------------------------------

    def log_entries(self) -> Iterator[str]:
        """Yield each order's rendering followed by a separator line."""
        for order in self.orders:
            yield order.render()
            yield LOG_SEPARATOR
