"""Plain-text implementation of OrderLogWriter."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from order_tracker.domain.repository.order_log_writer import OrderLogWriter


class TextOrderLogWriter(OrderLogWriter):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def write(self, entries: Iterable[str]) -> None:
        # Render everything before the old file is truncated.
        text = "".join(entry + "\n" for entry in entries)
        self._file_path.write_text(text, encoding="utf-8")
