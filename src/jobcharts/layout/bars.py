"""Band layout for per-month application counts."""

from __future__ import annotations

from typing import Sequence

from jobcharts.layout.flow import Margin
from jobcharts.layout.options import DEFAULT_COLOR_SCHEME
from jobcharts.layout.types import Bar, CategoricalDatum, LayoutResult

BAR_MARGIN = Margin(top=20.0, right=30.0, bottom=40.0, left=60.0)
BAND_PADDING = 0.2


def band_positions(count: int, extent: float, padding: float = BAND_PADDING) -> tuple[list[float], float]:
    """Band starts and bandwidth with equal inner and outer padding."""

    if count == 0:
        return [], 0.0
    step = extent / (count + padding)
    return [step * padding + index * step for index in range(count)], step * (1.0 - padding)


def bar_layout(
    data: Sequence[CategoricalDatum],
    *,
    width: float = 600,
    height: float = 400,
    margin: Margin = BAR_MARGIN,
    color_scheme: Sequence[str] = DEFAULT_COLOR_SCHEME,
) -> LayoutResult:
    plot_width = width - margin.left - margin.right
    plot_height = height - margin.top - margin.bottom
    starts, bandwidth = band_positions(len(data), plot_width)
    peak = max((max(datum.value, 0.0) for datum in data), default=0.0)

    bars = []
    for index, (datum, start) in enumerate(zip(data, starts)):
        value = max(datum.value, 0.0)
        bar_height = value / peak * plot_height if peak > 0 else 0.0
        bars.append(
            Bar(
                label=datum.label,
                value=value,
                x=margin.left + start,
                y=margin.top + plot_height - bar_height,
                width=bandwidth,
                height=bar_height,
                color=datum.color or color_scheme[index % len(color_scheme)],
            )
        )
    return LayoutResult(
        width=width,
        height=height,
        total=sum(bar.value for bar in bars),
        bars=tuple(bars),
    )
