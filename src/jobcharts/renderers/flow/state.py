from __future__ import annotations

from dataclasses import dataclass

from jobcharts.layout import LayoutResult


@dataclass(frozen=True)
class FlowChartState:
    layout: LayoutResult
    animation_duration_ms: int = 0
    title: str = "Application Journey Flow"

    @property
    def animated(self) -> bool:
        return self.animation_duration_ms > 0
