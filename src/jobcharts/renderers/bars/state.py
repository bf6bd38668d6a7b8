from __future__ import annotations

from dataclasses import dataclass

from jobcharts.layout import LayoutResult


@dataclass(frozen=True)
class BarChartState:
    layout: LayoutResult
    animation_duration_ms: int = 0
