from __future__ import annotations

from datetime import date


def format_date(day: date | None) -> str:
    """DD/MM/YYYY, or "Nunca" for a client who never visited."""
    if day is None:
        return "Nunca"
    return day.strftime("%d/%m/%Y")


def format_currency(amount: float, symbol: str = "R$") -> str:
    return f"{symbol} {amount:.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def page_title(name: str) -> str:
    name = name or ""
    return name[:1].upper() + name[1:]
