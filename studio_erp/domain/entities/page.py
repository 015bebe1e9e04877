from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Page(str, Enum):
    dashboard = "dashboard"
    services = "services"
    clients = "clients"
    inventory = "inventory"
    reports = "reports"
    settings = "settings"
    unknown = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "Page":
        normalized = (name or "").lower().strip()
        for page in cls:
            if page.value == normalized and page is not cls.unknown:
                return page
        return cls.unknown


class NoticeLevel(str, Enum):
    success = "success"
    error = "error"
    info = "info"
    warning = "warning"


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    message: str


@dataclass
class RenderedRow:
    key: str
    title: str  # searchable text of the row
    fields: dict[str, Any] = field(default_factory=dict)
    visible: bool = True


@dataclass(frozen=True)
class ChartSpec:
    chart_type: str
    labels: list[str]
    datasets: list[dict[str, Any]]
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class PageView:
    page: Page
    title: str
    containers: dict[str, list[RenderedRow]] = field(default_factory=dict)
    charts: dict[str, ChartSpec] = field(default_factory=dict)
    placeholder: str | None = None
    notices: list[Notice] = field(default_factory=list)
    dark_mode: bool = False


@dataclass
class FormView:
    kind: str  # "service", "client", "product"
    title: str
    entity_id: int | None
    values: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    notices: list[Notice] = field(default_factory=list)
