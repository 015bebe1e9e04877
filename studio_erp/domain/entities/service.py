from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SERVICE_ICON = "✂️"
DEFAULT_SERVICE_COLOR = "#7c3aed"


@dataclass(frozen=True)
class Service:
    id: int
    name: str
    price: float
    icon: str = DEFAULT_SERVICE_ICON
    color: str = DEFAULT_SERVICE_COLOR
    count: int = 0  # times performed
    description: str = ""


@dataclass(frozen=True)
class ServiceInput:
    """Partial service. None means the field was not supplied."""

    name: str | None = None
    price: float | None = None
    icon: str | None = None
    color: str | None = None
    count: int | None = None
    description: str | None = None
