"""Customer value: who placed an order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Identity of the person an order belongs to.

    IDs are supplied by the caller and are not checked for uniqueness;
    two orders may carry customers with the same ID.
    """

    name: str
    customer_id: str

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.customer_id})"
