from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from jobcharts.layout import CategoricalDatum, ChartOptions, LayoutResult, donut_layout
from jobcharts.stats import DataShapeWarning


@dataclass(frozen=True)
class DonutChartState:
    layout: LayoutResult
    options: ChartOptions
    warnings: tuple[DataShapeWarning, ...] = ()

    @classmethod
    def from_data(
        cls, data: Sequence[CategoricalDatum], options: ChartOptions | None = None
    ) -> "DonutChartState":
        options = options or ChartOptions()
        return cls(layout=donut_layout(data, options), options=options)
