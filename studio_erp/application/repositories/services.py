from __future__ import annotations

import math
from dataclasses import replace
from typing import Any

from studio_erp.application.repositories.collection import CollectionRepository, pick
from studio_erp.domain.defaults import DEFAULT_SERVICES
from studio_erp.domain.entities.service import (
    DEFAULT_SERVICE_COLOR,
    DEFAULT_SERVICE_ICON,
    Service,
    ServiceInput,
)


class ServiceRepository(CollectionRepository[Service, ServiceInput]):
    key = "services"

    def _defaults(self) -> list[Service]:
        return list(DEFAULT_SERVICES)

    def _to_record(self, entity: Service) -> dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "price": entity.price,
            "icon": entity.icon,
            "color": entity.color,
            "count": entity.count,
            "description": entity.description,
        }

    def _from_record(self, record: dict[str, Any]) -> Service:
        return Service(
            id=int(record["id"]),
            name=str(record["name"]),
            price=float(record["price"]),
            icon=record.get("icon") or DEFAULT_SERVICE_ICON,
            color=record.get("color") or DEFAULT_SERVICE_COLOR,
            count=int(record.get("count") or 0),
            description=record.get("description") or "",
        )

    def _build(self, entity_id: int, data: ServiceInput) -> Service:
        return Service(
            id=entity_id,
            name=(data.name or "").strip(),
            price=pick(data.price, 0.0),
            icon=data.icon or DEFAULT_SERVICE_ICON,
            color=data.color or DEFAULT_SERVICE_COLOR,
            count=pick(data.count, 0),
            description=pick(data.description, ""),
        )

    def _replace(self, existing: Service, data: ServiceInput) -> Service:
        # The edit form never carries count, so it comes from the stored record.
        return replace(
            existing,
            name=pick(data.name, existing.name).strip(),
            price=pick(data.price, existing.price),
            icon=pick(data.icon, existing.icon) or DEFAULT_SERVICE_ICON,
            color=pick(data.color, existing.color) or DEFAULT_SERVICE_COLOR,
            count=pick(data.count, existing.count),
            description=pick(data.description, existing.description),
        )

    def _validate(self, entity: Service) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not entity.name:
            errors["name"] = "Nome é obrigatório"
        if not math.isfinite(entity.price):
            errors["price"] = "Valor numérico inválido"
        elif entity.price < 0:
            errors["price"] = "Preço não pode ser negativo"
        if entity.count < 0:
            errors["count"] = "Quantidade não pode ser negativa"
        return errors
