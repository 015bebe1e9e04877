from __future__ import annotations

from typing import Any


def base_chart_options(dark_mode: bool) -> dict[str, Any]:
    tick_color = "#94a3b8" if dark_mode else "#6b7280"
    grid_color = "rgba(255, 255, 255, 0.1)" if dark_mode else "rgba(0, 0, 0, 0.1)"
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "plugins": {
            "tooltip": {
                "backgroundColor": "#1e293b" if dark_mode else "#ffffff",
                "titleColor": "#e2e8f0" if dark_mode else "#111827",
                "bodyColor": "#e2e8f0" if dark_mode else "#111827",
                "borderColor": "#334155" if dark_mode else "#e5e7eb",
            },
        },
        "scales": {
            "x": {"ticks": {"color": tick_color}, "grid": {"color": grid_color}},
            "y": {"ticks": {"color": tick_color}, "grid": {"color": grid_color}, "beginAtZero": True},
        },
    }


def merge_options(base: dict[str, Any], custom: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge, except plugins and scales which merge one level deeper."""
    merged = {**base, **custom}
    merged["plugins"] = {**base.get("plugins", {}), **custom.get("plugins", {})}
    merged["scales"] = {**base.get("scales", {}), **custom.get("scales", {})}
    return merged


def chart_options(dark_mode: bool, custom: dict[str, Any] | None = None, *, axes: bool = True) -> dict[str, Any]:
    options = merge_options(base_chart_options(dark_mode), custom or {})
    if not axes:
        # Doughnut and pie charts have no cartesian scales
        del options["scales"]
    return options
