"""Application service: Save Orders use case.

Dumps every order's description to the configured writer. Write failures
are not retried; the OSError reaches the caller.
"""

from __future__ import annotations

import logging

from order_tracker.domain.repository.order_log_writer import OrderLogWriter
from order_tracker.domain.service.order_manager import OrderManager

logger = logging.getLogger(__name__)


class SaveOrdersHandler:

    def __init__(self, manager: OrderManager, writer: OrderLogWriter) -> None:
        self._manager = manager
        self._writer = writer

    def handle(self) -> int:
        """Write all orders and return how many were written."""
        count = len(self._manager)
        self._writer.write(self._manager.log_entries())
        logger.info("saved %d order(s)", count)
        return count
