"""Interactive menu driving the tracker for one session.

Every action reads its input with ``click.prompt`` and delegates to an
application handler. Numeric prompts are typed, so click re-prompts on
malformed numbers before anything reaches the domain.
"""

from __future__ import annotations

import logging
from typing import Callable

import click

from order_tracker.application.find_orders import FindOrdersHandler
from order_tracker.application.place_order import PlaceOrderHandler
from order_tracker.application.refund_order import RefundOrderHandler
from order_tracker.application.save_orders import SaveOrdersHandler
from order_tracker.domain.exceptions import DomainException, ValidationError
from order_tracker.domain.model.order import Order, OrderItem
from order_tracker.domain.repository.order_log_writer import OrderLogWriter
from order_tracker.domain.service.order_manager import LOG_SEPARATOR, OrderManager
from order_tracker.domain.service.refund_notifier import RefundNotifier

logger = logging.getLogger(__name__)

MENU = """
--- Customer Order Tracker ---
1. Add New Order
2. Cancel & Refund Order
3. View Customer Orders
4. Filter Orders by Status
5. Most Ordered Product
6. Save Orders to File
7. Exit"""

EXIT_CHOICE = "7"


class TrackerMenu:

    def __init__(
        self,
        manager: OrderManager,
        notifier: RefundNotifier,
        writer: OrderLogWriter,
        destination: str,
    ) -> None:
        self._place = PlaceOrderHandler(manager)
        self._refund = RefundOrderHandler(manager, notifier)
        self._find = FindOrdersHandler(manager)
        self._save = SaveOrdersHandler(manager, writer)
        self._destination = destination
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_order,
            "2": self.refund_order,
            "3": self.view_orders_by_customer,
            "4": self.view_orders_by_status,
            "5": self.show_most_ordered_product,
            "6": self.save_orders,
        }

    def run(self) -> None:
        while True:
            click.echo(MENU)
            choice = click.prompt("Choose an option", default="", show_default=False).strip()
            if choice == EXIT_CHOICE:
                return
            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid option.")
                continue
            action()

    # --- Actions --------------------------------------------------------------

    def add_order(self) -> None:
        name = click.prompt("Enter customer name")
        customer_id = click.prompt("Enter customer ID")

        items: list[OrderItem] = []
        while True:
            product = click.prompt(
                "Enter product name (or 'done')", default="", show_default=False
            )
            if product.strip().lower() == "done":
                break
            quantity = click.prompt("Quantity", type=int)
            price = click.prompt("Price")
            try:
                items.append(OrderItem.create(product, quantity, price))
            except ValidationError as exc:
                logger.debug("rejected item %r: %s", product, exc)
                click.echo(f"Invalid input: {exc}")

        self._place.handle(name, customer_id, items)
        click.echo("Order added successfully.")

    def refund_order(self) -> None:
        name = click.prompt("Enter customer name to refund order")
        orders = self._find.by_customer(name)
        if not orders:
            click.echo("No orders found.")
            return

        for number, order in enumerate(orders, start=1):
            click.echo(f"\nOrder #{number}")
            click.echo(order.render())

        selection = click.prompt("Select order number to cancel", type=int)
        try:
            refunded = self._refund.handle(name, selection)
        except DomainException as exc:
            click.echo(str(exc))
            return

        if refunded:
            click.echo("Order cancelled and refunded.")
        else:
            click.echo("Order was already cancelled.")

    def view_orders_by_customer(self) -> None:
        name = click.prompt("Enter customer name")
        orders = self._find.by_customer(name)
        if not orders:
            click.echo("No orders found for this customer.")
            return
        _echo_orders(orders)

    def view_orders_by_status(self) -> None:
        status = click.prompt("Enter status (Completed/Cancelled)")
        orders = self._find.by_status(status)
        if not orders:
            click.echo("No orders with this status.")
            return
        _echo_orders(orders)

    def show_most_ordered_product(self) -> None:
        click.echo(f"Most ordered product: {self._find.most_ordered_product()}")

    def save_orders(self) -> None:
        try:
            self._save.handle()
        except OSError as exc:
            logger.warning("saving orders to %s failed: %s", self._destination, exc)
            click.echo(f"Error saving file: {exc}")
            return
        click.echo(f"Orders saved to {self._destination}")


def _echo_orders(orders: list[Order]) -> None:
    for order in orders:
        click.echo(order.render())
        click.echo(LOG_SEPARATOR)
