from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any

from studio_erp.application.repositories.collection import CollectionRepository, pick
from studio_erp.domain.defaults import DEFAULT_CLIENTS
from studio_erp.domain.entities.client import Client, ClientInput


class ClientRepository(CollectionRepository[Client, ClientInput]):
    key = "clients"

    def _defaults(self) -> list[Client]:
        return list(DEFAULT_CLIENTS)

    def _to_record(self, entity: Client) -> dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "phone": entity.phone,
            "email": entity.email,
            "hairType": entity.hair_type,
            "allergies": list(entity.allergies),
            "lastVisit": entity.last_visit.isoformat() if entity.last_visit else None,
            "totalVisits": entity.total_visits,
            "notes": entity.notes,
        }

    def _from_record(self, record: dict[str, Any]) -> Client:
        last_visit = record.get("lastVisit")
        return Client(
            id=int(record["id"]),
            name=str(record["name"]),
            phone=record.get("phone") or "",
            email=record.get("email") or "",
            hair_type=record.get("hairType") or "",
            allergies=tuple(record.get("allergies") or ()),
            last_visit=date.fromisoformat(last_visit) if last_visit else None,
            total_visits=int(record.get("totalVisits", 1)),
            notes=record.get("notes") or "",
        )

    def _build(self, entity_id: int, data: ClientInput) -> Client:
        return Client(
            id=entity_id,
            name=(data.name or "").strip(),
            phone=pick(data.phone, ""),
            email=pick(data.email, ""),
            hair_type=pick(data.hair_type, ""),
            allergies=tuple(pick(data.allergies, ())),
            last_visit=data.last_visit,
            total_visits=pick(data.total_visits, 1),
            notes=pick(data.notes, ""),
        )

    def _replace(self, existing: Client, data: ClientInput) -> Client:
        # totalVisits is not editable from the form and is carried over.
        return replace(
            existing,
            name=pick(data.name, existing.name).strip(),
            phone=pick(data.phone, existing.phone),
            email=pick(data.email, existing.email),
            hair_type=pick(data.hair_type, existing.hair_type),
            allergies=tuple(pick(data.allergies, existing.allergies)),
            last_visit=None if data.clear_last_visit else pick(data.last_visit, existing.last_visit),
            total_visits=pick(data.total_visits, existing.total_visits),
            notes=pick(data.notes, existing.notes),
        )

    def _validate(self, entity: Client) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not entity.name:
            errors["name"] = "Nome é obrigatório"
        if entity.total_visits < 0:
            errors["totalVisits"] = "Total de visitas não pode ser negativo"
        return errors
