from __future__ import annotations

import reactivex
from reactivex import operators as ops

from jobcharts.layout import flow_layout
from jobcharts.layout.flow import DEFAULT_HEIGHT, DEFAULT_WIDTH
from jobcharts.providers import ObservableProvider
from jobcharts.renderers.flow.state import FlowChartState
from jobcharts.stats import ApplicationStatistics
from jobcharts.utilities.env import Configuration


class FlowStateProvider(ObservableProvider[FlowChartState]):
    def __init__(
        self,
        statistics: ObservableProvider[ApplicationStatistics],
        *,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        animation_duration_ms: int | None = None,
    ) -> None:
        self._statistics = statistics
        self._width = width
        self._height = height
        self._animation_duration_ms = (
            Configuration.animation_duration_ms()
            if animation_duration_ms is None
            else animation_duration_ms
        )

    def build(self, statistics: ApplicationStatistics) -> FlowChartState:
        return FlowChartState(
            layout=flow_layout(statistics, width=self._width, height=self._height),
            animation_duration_ms=self._animation_duration_ms,
        )

    def observable(self) -> reactivex.Observable[FlowChartState]:
        return self._statistics.observable().pipe(
            ops.map(self.build),
            ops.share(),
        )
