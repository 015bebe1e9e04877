from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, TypeVar

from studio_erp.application.exceptions import RenderTargetMissing
from studio_erp.application.ports.renderer import RendererPort
from studio_erp.domain.entities.page import ChartSpec, RenderedRow

T = TypeVar("T")


class MemoryDocument(RendererPort):
    """In-process stand-in for the page DOM: mounted targets, rendered rows and chart specs."""

    def __init__(self) -> None:
        self.title = ""
        self._targets: set[str] = set()
        self._rows: dict[str, list[RenderedRow]] = {}
        self._charts: dict[str, ChartSpec] = {}
        self._logger = logging.getLogger(__name__)

    def mount(self, title: str, targets: Iterable[str]) -> None:
        self.title = title
        self._targets = set(targets)
        self._rows = {}
        self._charts = {}

    def _require(self, target_id: str) -> None:
        if target_id not in self._targets:
            raise RenderTargetMissing(target_id)

    def render_list(self, container_id: str, items: Iterable[T], template_fn: Callable[[T], RenderedRow]) -> None:
        self._require(container_id)
        self._rows[container_id] = [template_fn(item) for item in items]

    def render_chart(
        self,
        canvas_id: str,
        chart_type: str,
        labels: list[str],
        datasets: list[dict[str, Any]],
        options: dict[str, Any] | None = None,
    ) -> None:
        self._require(canvas_id)
        self._charts[canvas_id] = ChartSpec(
            chart_type=chart_type,
            labels=list(labels),
            datasets=[dict(d) for d in datasets],
            options=dict(options or {}),
        )

    def filter_rows(self, container_id: str, term: str) -> None:
        self._require(container_id)
        needle = (term or "").lower()
        for row in self._rows.get(container_id, []):
            row.visible = needle in row.title.lower()

    def charts(self) -> dict[str, ChartSpec]:
        return dict(self._charts)

    def containers(self) -> dict[str, list[RenderedRow]]:
        return {cid: [replace(row) for row in rows] for cid, rows in self._rows.items()}
