"""Unit tests for the Order aggregate: totals, refunds and rendering."""

import pytest

from order_tracker.domain.model.customer import Customer
from order_tracker.domain.model.order import Order, OrderItem, OrderStatus
from order_tracker.domain.model.value_objects import Money
from tests.fakes import RecordingRefundNotifier


def _make_order(*items: tuple[str, int, str], name: str = "Bob", customer_id: str = "C1") -> Order:
    order = Order(customer=Customer(name, customer_id))
    for product, qty, price in items:
        order.add_item(OrderItem.create(product, qty, price))
    return order


class TestOrderTotal:

    def test_empty_order_totals_zero(self):
        assert _make_order().total == Money.zero()

    def test_total_is_sum_of_line_items(self):
        order = _make_order(("Widget", 3, "15.00"), ("Gadget", 5, "25.00"))
        assert order.total == Money.of("170.00")

    def test_total_is_exact_for_decimal_prices(self):
        order = _make_order(("Pen", 2, "1.50"), ("Book", 1, "9.99"))
        assert order.total == Money.of("12.99")

    def test_zero_quantity_contributes_nothing(self):
        order = _make_order(("Widget", 0, "15.00"))
        assert order.total == Money.zero()


class TestOrderItems:

    def test_items_keep_insertion_order(self):
        order = _make_order(("B", 1, "1"), ("A", 1, "1"), ("C", 1, "1"))
        assert [i.product_name for i in order.items] == ["B", "A", "C"]

    def test_add_item_allowed_after_cancellation(self):
        order = _make_order(("Pen", 1, "1.00"))
        order.cancel()
        order.add_item(OrderItem.create("Book", 1, "2.00"))
        assert len(order.items) == 2
        assert order.status == OrderStatus.CANCELLED


class TestOrderCancel:

    def test_new_order_is_completed(self):
        order = _make_order()
        assert order.status == OrderStatus.COMPLETED
        assert not order.is_cancelled

    def test_cancel_moves_to_cancelled(self):
        order = _make_order()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED

    def test_cancel_is_idempotent(self):
        order = _make_order()
        order.cancel()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED


class TestOrderRefund:

    def test_refund_cancels_and_notifies_once(self):
        order = _make_order(("Pen", 1, "1.00"))
        notifier = RecordingRefundNotifier()

        assert order.process_refund(notifier) is True

        assert order.status == OrderStatus.CANCELLED
        assert notifier.messages == ["Refund processed for order of customer: Bob"]

    def test_second_refund_is_a_no_op(self):
        order = _make_order(("Pen", 1, "1.00"))
        notifier = RecordingRefundNotifier()
        order.process_refund(notifier)

        assert order.process_refund(notifier) is False

        assert order.status == OrderStatus.CANCELLED
        assert len(notifier.messages) == 1

    def test_refund_of_cancelled_order_does_not_notify(self):
        order = _make_order()
        order.cancel()
        notifier = RecordingRefundNotifier()

        assert order.process_refund(notifier) is False
        assert notifier.messages == []

    def test_refund_keeps_items_and_total(self):
        order = _make_order(("Pen", 2, "1.50"))
        order.process_refund(RecordingRefundNotifier())
        assert len(order.items) == 1
        assert order.total == Money.of("3.00")


class TestOrderRender:

    def test_render_empty_order(self):
        order = _make_order(name="Alice", customer_id="A9")
        assert order.render() == (
            "Customer: Alice (ID: A9)\n"
            "Status: Completed\n"
            "Total: $0.00"
        )

    def test_render_is_deterministic(self):
        order = _make_order(("Pen", 2, "1.50"))
        assert order.render() == order.render()


class TestBobScenario:

    def test_place_then_refund(self):
        order = _make_order(("Pen", 2, "1.50"), ("Book", 1, "9.99"))

        assert order.total == Money.of("12.99")
        assert order.render() == (
            "Customer: Bob (ID: C1)\n"
            "- Pen x2 @ 1.50\n"
            "- Book x1 @ 9.99\n"
            "Status: Completed\n"
            "Total: $12.99"
        )

        order.process_refund(RecordingRefundNotifier())

        rendered = order.render()
        assert "Status: Cancelled" in rendered
        assert "- Pen x2 @ 1.50" in rendered
        assert "- Book x1 @ 9.99" in rendered
        assert order.total == Money.of("12.99")

    def test_render_item_price_unrounded_total_in_cents(self):
        order = _make_order(("Bolt", 3, "0.333"))
        assert order.render() == (
            "Customer: Bob (ID: C1)\n"
            "- Bolt x3 @ 0.333\n"
            "Status: Completed\n"
            "Total: $1.00"
        )


class TestOrderStatusGuard:

    def test_status_cannot_be_reassigned(self):
        order = _make_order()
        order.cancel()
        with pytest.raises(AttributeError):
            order.status = OrderStatus.COMPLETED
        assert order.status == OrderStatus.CANCELLED

    def test_status_is_not_a_constructor_argument(self):
        with pytest.raises(TypeError):
            Order(customer=Customer("Bob", "C1"), status=OrderStatus.CANCELLED)


class TestOrderIdentity:

    def test_identical_orders_are_distinct(self):
        assert _make_order(("Pen", 1, "1.00")) != _make_order(("Pen", 1, "1.00"))
