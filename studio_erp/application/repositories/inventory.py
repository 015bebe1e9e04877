from __future__ import annotations

import math
from dataclasses import replace
from typing import Any

from studio_erp.application.exceptions import ValidationError
from studio_erp.application.repositories.collection import CollectionRepository, pick
from studio_erp.domain.defaults import DEFAULT_INVENTORY
from studio_erp.domain.entities.inventory_item import InventoryItem, InventoryItemInput


class InventoryRepository(CollectionRepository[InventoryItem, InventoryItemInput]):
    key = "inventory"

    def _defaults(self) -> list[InventoryItem]:
        return list(DEFAULT_INVENTORY)

    def _to_record(self, entity: InventoryItem) -> dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "quantity": entity.quantity,
            "min": entity.min,
            "price": entity.price,
            "category": entity.category,
            "description": entity.description,
        }

    def _from_record(self, record: dict[str, Any]) -> InventoryItem:
        return InventoryItem(
            id=int(record["id"]),
            name=str(record["name"]),
            quantity=int(record["quantity"]),
            min=int(record["min"]),
            price=float(record["price"]),
            category=record.get("category") or "",
            description=record.get("description") or "",
        )

    def _build(self, entity_id: int, data: InventoryItemInput) -> InventoryItem:
        return InventoryItem(
            id=entity_id,
            name=(data.name or "").strip(),
            quantity=pick(data.quantity, 0),
            min=pick(data.min, 1),
            price=pick(data.price, 0.0),
            category=pick(data.category, ""),
            description=pick(data.description, ""),
        )

    def _replace(self, existing: InventoryItem, data: InventoryItemInput) -> InventoryItem:
        return replace(
            existing,
            name=pick(data.name, existing.name).strip(),
            quantity=pick(data.quantity, existing.quantity),
            min=pick(data.min, existing.min),
            price=pick(data.price, existing.price),
            category=pick(data.category, existing.category),
            description=pick(data.description, existing.description),
        )

    def _validate(self, entity: InventoryItem) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not entity.name:
            errors["name"] = "Nome é obrigatório"
        if entity.quantity < 0:
            errors["quantity"] = "Quantidade não pode ser negativa"
        if entity.min < 0:
            errors["min"] = "Quantidade mínima não pode ser negativa"
        if not math.isfinite(entity.price):
            errors["price"] = "Valor numérico inválido"
        elif entity.price < 0:
            errors["price"] = "Preço não pode ser negativo"
        return errors

    def set_quantity(self, entity_id: int, quantity: int) -> InventoryItem:
        """Inline stock adjustment from the inventory table."""
        if quantity < 0:
            raise ValidationError({"quantity": "Quantidade não pode ser negativa"})
        return self.update(entity_id, InventoryItemInput(quantity=quantity))
