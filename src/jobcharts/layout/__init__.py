from jobcharts.layout.bars import bar_layout
from jobcharts.layout.categorical import (compute_percentages, layout_wedges,
                                          total_value)
from jobcharts.layout.curves import RibbonPath, curve_path
from jobcharts.layout.donut import donut_layout, should_use_legend
from jobcharts.layout.flow import (FunnelCounts, derive_funnel, flow_layout,
                                   stroke_width)
from jobcharts.layout.labels import place_labels
from jobcharts.layout.legend import legend_layout
from jobcharts.layout.options import ChartOptions
from jobcharts.layout.types import (Bar, CategoricalDatum, FlowLink,
                                    FlowMetric, FlowNode, LabelCandidate,
                                    LayoutResult, LegendEntry, LegendPosition,
                                    LinkKind, Side, Stage, Wedge)

__all__ = [
    "Bar",
    "CategoricalDatum",
    "ChartOptions",
    "FlowLink",
    "FlowMetric",
    "FlowNode",
    "FunnelCounts",
    "LabelCandidate",
    "LayoutResult",
    "LegendEntry",
    "LegendPosition",
    "LinkKind",
    "RibbonPath",
    "Side",
    "Stage",
    "Wedge",
    "bar_layout",
    "compute_percentages",
    "curve_path",
    "derive_funnel",
    "donut_layout",
    "flow_layout",
    "layout_wedges",
    "legend_layout",
    "place_labels",
    "should_use_legend",
    "stroke_width",
    "total_value",
]
