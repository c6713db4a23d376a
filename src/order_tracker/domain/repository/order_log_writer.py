"""Abstract destination for the order log dump.

Defined in the domain layer so the domain never depends on infrastructure.
The text file implementation lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class OrderLogWriter(ABC):

    @abstractmethod
    def write(self, entries: Iterable[str]) -> None:
        """Write every entry, one per line block, replacing previous content.

        I/O failures propagate as OSError.
        """
