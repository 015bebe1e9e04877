from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: int
    min: int  # low stock threshold
    price: float
    category: str = ""
    description: str = ""

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.min


@dataclass(frozen=True)
class InventoryItemInput:
    """Partial inventory item. None means the field was not supplied."""

    name: str | None = None
    quantity: int | None = None
    min: int | None = None
    price: float | None = None
    category: str | None = None
    description: str | None = None
