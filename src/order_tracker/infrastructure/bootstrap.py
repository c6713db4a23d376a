"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from order_tracker.domain.service.order_manager import OrderManager
from order_tracker.infrastructure.click_refund_notifier import ClickRefundNotifier
from order_tracker.infrastructure.persistence.text_order_log_writer import (
    TextOrderLogWriter,
)

# Relative to the working directory the tracker is started from.
DEFAULT_LOG_FILE = Path("order_logs.txt")


def order_manager() -> OrderManager:
    return OrderManager()


def refund_notifier() -> ClickRefundNotifier:
    return ClickRefundNotifier()


def order_log_writer(file_path: Path = DEFAULT_LOG_FILE) -> TextOrderLogWriter:
    return TextOrderLogWriter(file_path)
