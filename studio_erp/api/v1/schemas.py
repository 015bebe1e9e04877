from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from studio_erp.domain.entities.page import FormView, NoticeLevel, PageView


class NoticeSchema(BaseModel):
    level: NoticeLevel
    message: str


class RowSchema(BaseModel):
    key: str
    title: str
    fields: dict[str, Any] = Field(default_factory=dict)
    visible: bool = True


class ChartSchema(BaseModel):
    chart_type: str
    labels: list[str]
    datasets: list[dict[str, Any]]
    options: dict[str, Any] = Field(default_factory=dict)


class PageResponseSchema(BaseModel):
    page: str
    title: str
    containers: dict[str, list[RowSchema]] = Field(default_factory=dict)
    charts: dict[str, ChartSchema] = Field(default_factory=dict)
    placeholder: str | None = None
    notices: list[NoticeSchema] = Field(default_factory=list)
    dark_mode: bool = False

    @classmethod
    def from_view(cls, view: PageView) -> "PageResponseSchema":
        return cls(
            page=view.page.value,
            title=view.title,
            containers={
                cid: [RowSchema(key=r.key, title=r.title, fields=r.fields, visible=r.visible) for r in rows]
                for cid, rows in view.containers.items()
            },
            charts={
                cid: ChartSchema(chart_type=c.chart_type, labels=c.labels, datasets=c.datasets, options=c.options)
                for cid, c in view.charts.items()
            },
            placeholder=view.placeholder,
            notices=[NoticeSchema(level=n.level, message=n.message) for n in view.notices],
            dark_mode=view.dark_mode,
        )


class FormResponseSchema(BaseModel):
    kind: str
    title: str
    entity_id: int | None = None
    values: dict[str, str] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    notices: list[NoticeSchema] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: FormView) -> "FormResponseSchema":
        return cls(
            kind=view.kind,
            title=view.title,
            entity_id=view.entity_id,
            values=view.values,
            errors=view.errors,
            notices=[NoticeSchema(level=n.level, message=n.message) for n in view.notices],
        )


class FilterRequestSchema(BaseModel):
    container_id: str
    term: str = ""


class QuantityRequestSchema(BaseModel):
    quantity: str


class SettingsRequestSchema(BaseModel):
    dark_mode: bool
