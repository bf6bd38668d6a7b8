from __future__ import annotations

from typing import Optional

from jobcharts.layout import ChartOptions, LegendPosition
from jobcharts.runtime.container import ChartKind


def chart_options(
    chart: ChartKind,
    *,
    legend: bool = False,
    legend_position: LegendPosition = LegendPosition.RIGHT,
    width: Optional[int] = None,
    height: Optional[int] = None,
    animated: bool = True,
) -> ChartOptions:
    """Options for ``chart``, sized to its default unless overridden."""

    default_width, default_height = chart.default_size
    resolved_width = width or default_width
    resolved_height = height or default_height
    outer = min(resolved_width, resolved_height) * 0.3
    changes: dict[str, object] = {
        "width": resolved_width,
        "height": resolved_height,
        "outer_radius": outer,
        "inner_radius": outer / 2,
        "use_legend": legend,
        "legend_position": legend_position,
    }
    if not animated:
        changes["animation_duration_ms"] = 0
    return ChartOptions(**changes)
