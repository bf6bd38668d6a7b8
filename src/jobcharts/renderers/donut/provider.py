from __future__ import annotations

from typing import Callable, Sequence

import reactivex
from reactivex import operators as ops

from jobcharts.layout import CategoricalDatum, ChartOptions, donut_layout, should_use_legend
from jobcharts.layout.categorical import visible_data
from jobcharts.providers import LatestValueProvider, ObservableProvider
from jobcharts.renderers.donut.state import DonutChartState
from jobcharts.stats import ApplicationStatistics

DataSelector = Callable[[ApplicationStatistics], Sequence[CategoricalDatum]]


class DonutStateProvider(ObservableProvider[DonutChartState]):
    """Rebuilds the donut layout whenever statistics or options change.

    With ``auto_legend`` the legend replaces outside labels once the number of
    visible slices passes the configured threshold.
    """

    def __init__(
        self,
        statistics: ObservableProvider[ApplicationStatistics],
        options: ChartOptions | None = None,
        *,
        select: DataSelector = ApplicationStatistics.status_distribution,
        auto_legend: bool = False,
    ) -> None:
        self._statistics = statistics
        self._options = LatestValueProvider(options or ChartOptions())
        self._select = select
        self._auto_legend = auto_legend

    @property
    def options(self) -> ChartOptions:
        return self._options.value

    def set_options(self, options: ChartOptions) -> None:
        self._options.publish(options)

    def build(self, statistics: ApplicationStatistics, options: ChartOptions) -> DonutChartState:
        data = list(self._select(statistics))
        if self._auto_legend:
            options = options.with_changes(
                use_legend=should_use_legend(len(visible_data(data)))
            )
        return DonutChartState(
            layout=donut_layout(data, options),
            options=options,
            warnings=statistics.warnings,
        )

    def observable(self) -> reactivex.Observable[DonutChartState]:
        return reactivex.combine_latest(
            self._statistics.observable(),
            self._options.observable(),
        ).pipe(
            ops.map(lambda latest: self.build(*latest)),
            ops.share(),
        )
