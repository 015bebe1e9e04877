"""
Aggregates computed from repository snapshots.

Everything here is pure: same inputs, same outputs, no store access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from studio_erp.domain.defaults import HAIR_TYPES
from studio_erp.domain.entities.client import Client
from studio_erp.domain.entities.inventory_item import InventoryItem
from studio_erp.domain.entities.service import Service

UNSPECIFIED_HAIR_TYPE = "Não informado"


@dataclass(frozen=True)
class ServiceRevenueRow:
    service_id: int
    name: str
    count: int
    revenue: float
    percentage: float


def total_clients(clients: Sequence[Client]) -> int:
    return len(clients)


def total_service_count_30d(services: Iterable[Service]) -> int:
    return sum(s.count for s in services)


def low_stock_items(inventory: Iterable[InventoryItem]) -> list[InventoryItem]:
    return [item for item in inventory if item.quantity < item.min]


def low_stock_count(inventory: Iterable[InventoryItem]) -> int:
    return len(low_stock_items(inventory))


def service_revenue_report(services: Sequence[Service]) -> list[ServiceRevenueRow]:
    """Rows in stored order; percentages are 0 when nothing was billed."""
    revenues = [s.count * s.price for s in services]
    total = sum(revenues)
    return [
        ServiceRevenueRow(
            service_id=s.id,
            name=s.name,
            count=s.count,
            revenue=revenue,
            percentage=(revenue / total * 100) if total > 0 else 0.0,
        )
        for s, revenue in zip(services, revenues)
    ]


def total_revenue(services: Iterable[Service]) -> float:
    return sum(s.count * s.price for s in services)


def recency_flag(day: date | None, today: date, days: int = 30) -> bool:
    """True if day falls within the last `days` days before today."""
    if day is None:
        return False
    return day > today - timedelta(days=days)


def recent_clients(clients: Sequence[Client], limit: int = 3) -> list[Client]:
    return list(clients[:limit])


def hair_type_distribution(clients: Iterable[Client]) -> list[tuple[str, int]]:
    counts: dict[str, int] = {}
    for client in clients:
        label = client.hair_type or UNSPECIFIED_HAIR_TYPE
        counts[label] = counts.get(label, 0) + 1

    ordered = [(label, counts.pop(label)) for label in HAIR_TYPES if label in counts]
    ordered.extend(counts.items())
    return ordered
