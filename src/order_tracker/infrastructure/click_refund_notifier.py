"""RefundNotifier that prints the confirmation to the terminal."""

from __future__ import annotations

import click

from order_tracker.domain.model.order import Order
from order_tracker.domain.service.refund_notifier import RefundNotifier, refund_message


class ClickRefundNotifier(RefundNotifier):

    def refund_processed(self, order: Order) -> None:
        click.echo(refund_message(order))
