from __future__ import annotations

from datetime import date

from studio_erp.application.utils.derived_views import ServiceRevenueRow, recency_flag
from studio_erp.application.utils.formatting import format_currency, format_date, format_percentage
from studio_erp.domain.entities.client import Client
from studio_erp.domain.entities.inventory_item import InventoryItem
from studio_erp.domain.entities.page import RenderedRow
from studio_erp.domain.entities.service import Service


def stat_card_row(card: tuple[str, str, int]) -> RenderedRow:
    key, title, value = card
    return RenderedRow(key=key, title=title, fields={"value": value})


def service_card_row(service: Service, currency: str = "R$") -> RenderedRow:
    return RenderedRow(
        key=str(service.id),
        title=service.name,
        fields={
            "icon": service.icon,
            "color": service.color,
            "price": format_currency(service.price, currency),
            "count": service.count,
            "description": service.description,
        },
    )


def client_row(client: Client, today: date, recent_days: int = 30) -> RenderedRow:
    return RenderedRow(
        key=str(client.id),
        title=client.name,
        fields={
            "initial": client.name[:1],
            "phone": client.phone,
            "email": client.email,
            "hairType": client.hair_type or "Não informado",
            "allergies": ", ".join(client.allergies),
            "lastVisit": format_date(client.last_visit),
            "recent": recency_flag(client.last_visit, today, recent_days),
            "totalVisits": client.total_visits,
        },
    )


def inventory_row(item: InventoryItem, currency: str = "R$") -> RenderedRow:
    return RenderedRow(
        key=str(item.id),
        title=item.name,
        fields={
            "quantity": item.quantity,
            "min": item.min,
            "price": format_currency(item.price, currency),
            "category": item.category,
            "lowStock": item.is_low_stock,
            "status": "Baixo" if item.is_low_stock else "OK",
        },
    )


def low_stock_alert_row(count: int) -> RenderedRow:
    return RenderedRow(
        key="lowStock",
        title=f"Você tem {count} produto(s) com estoque abaixo do mínimo recomendado.",
        fields={"count": count},
    )


def revenue_report_row(row: ServiceRevenueRow, currency: str = "R$") -> RenderedRow:
    return RenderedRow(
        key=str(row.service_id),
        title=row.name,
        fields={
            "count": row.count,
            "revenue": format_currency(row.revenue, currency),
            "percentage": format_percentage(row.percentage),
        },
    )


def setting_row(setting: tuple[str, str, bool]) -> RenderedRow:
    key, title, enabled = setting
    return RenderedRow(key=key, title=title, fields={"enabled": enabled})
