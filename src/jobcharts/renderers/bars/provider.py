from __future__ import annotations

from typing import Callable, Sequence

import reactivex
from reactivex import operators as ops

from jobcharts.layout import CategoricalDatum, bar_layout
from jobcharts.providers import ObservableProvider
from jobcharts.renderers.bars.state import BarChartState
from jobcharts.stats import ApplicationStatistics
from jobcharts.utilities.env import Configuration


class BarStateProvider(ObservableProvider[BarChartState]):
    """Bar chart of monthly application counts by default."""

    def __init__(
        self,
        statistics: ObservableProvider[ApplicationStatistics],
        *,
        width: float = 600,
        height: float = 400,
        select: Callable[[ApplicationStatistics], Sequence[CategoricalDatum]] = ApplicationStatistics.monthly,
        animation_duration_ms: int | None = None,
    ) -> None:
        self._statistics = statistics
        self._width = width
        self._height = height
        self._select = select
        self._animation_duration_ms = (
            Configuration.animation_duration_ms()
            if animation_duration_ms is None
            else animation_duration_ms
        )

    def build(self, statistics: ApplicationStatistics) -> BarChartState:
        return BarChartState(
            layout=bar_layout(
                list(self._select(statistics)), width=self._width, height=self._height
            ),
            animation_duration_ms=self._animation_duration_ms,
        )

    def observable(self) -> reactivex.Observable[BarChartState]:
        return self._statistics.observable().pipe(
            ops.map(self.build),
            ops.share(),
        )
