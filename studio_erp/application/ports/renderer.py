from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, TypeVar

from studio_erp.domain.entities.page import ChartSpec, RenderedRow

T = TypeVar("T")


class RendererPort(ABC):
    @abstractmethod
    def mount(self, title: str, targets: Iterable[str]) -> None:
        """Replace the main content with a fresh layout exposing the given targets."""
        raise NotImplementedError

    @abstractmethod
    def render_list(self, container_id: str, items: Iterable[T], template_fn: Callable[[T], RenderedRow]) -> None:
        """Render items into a container. Raises RenderTargetMissing if not mounted."""
        raise NotImplementedError

    @abstractmethod
    def render_chart(
        self,
        canvas_id: str,
        chart_type: str,
        labels: list[str],
        datasets: list[dict[str, Any]],
        options: dict[str, Any] | None = None,
    ) -> None:
        """Draw a chart on a canvas. Raises RenderTargetMissing if not mounted."""
        raise NotImplementedError

    @abstractmethod
    def filter_rows(self, container_id: str, term: str) -> None:
        """Toggle row visibility by case-insensitive substring match on the rendered text."""
        raise NotImplementedError

    @abstractmethod
    def charts(self) -> dict[str, ChartSpec]:
        raise NotImplementedError

    @abstractmethod
    def containers(self) -> dict[str, list[RenderedRow]]:
        raise NotImplementedError
