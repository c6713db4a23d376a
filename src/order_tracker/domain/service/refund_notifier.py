"""Abstract notifier told about every refund that actually happens.

Defined in the domain layer so the Order aggregate never depends on how the
message reaches the user. The terminal implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_tracker.domain.model.order import Order


def refund_message(order: Order) -> str:
    return f"Refund processed for order of customer: {order.customer.name}"


class RefundNotifier(ABC):

    @abstractmethod
    def refund_processed(self, order: Order) -> None:
        """Called once, right after *order* moved to CANCELLED by a refund."""
