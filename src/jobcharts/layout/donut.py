from __future__ import annotations

from typing import Sequence

from jobcharts.geometry import clamp
from jobcharts.layout.categorical import layout_wedges, total_value
from jobcharts.layout.labels import DEFAULT_ALIGN_OFFSET, place_labels
from jobcharts.layout.legend import legend_layout
from jobcharts.layout.options import ChartOptions
from jobcharts.layout.types import CategoricalDatum, LayoutResult, Wedge
from jobcharts.utilities.env import Configuration
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)

HOVER_RADIUS_GROWTH = 8.0
LABEL_SPACING_PADDING = 4.0


def label_font_size(outer_radius: float) -> float:
    return clamp(outer_radius / 8.0, 10.0, 14.0)


def label_radius(outer_radius: float) -> float:
    return outer_radius + max(30.0, outer_radius * 0.3)


def min_vertical_spacing(outer_radius: float) -> float:
    return label_font_size(outer_radius) + LABEL_SPACING_PADDING


def should_use_legend(slice_count: int, threshold: int | None = None) -> bool:
    """Whether a caller should switch from direct labels to a legend."""
    if threshold is None:
        threshold = Configuration.legend_threshold()
    return slice_count > threshold


def wedge_text(wedge: Wedge, *, show_percentages: bool) -> str:
    if show_percentages:
        return f"{wedge.key} ({wedge.percentage:.1f}%)"
    return wedge.key


def donut_layout(
    data: Sequence[CategoricalDatum], options: ChartOptions
) -> LayoutResult:
    wedges = layout_wedges(
        data,
        pad_angle=options.pad_angle,
        color_scheme=options.color_scheme,
    )

    def text_for(wedge: Wedge) -> str:
        return wedge_text(wedge, show_percentages=options.show_percentages)

    labels = ()
    if options.show_labels and not options.use_legend:
        labels = place_labels(
            wedges,
            label_radius=label_radius(options.outer_radius),
            min_slice_angle=options.min_slice_angle,
            min_vertical_spacing=min_vertical_spacing(options.outer_radius),
            edge_radius=options.outer_radius,
            center=options.center,
            text_for=text_for,
            align_offset=DEFAULT_ALIGN_OFFSET,
        )
    legend = legend_layout(wedges, options, text_for) if options.use_legend else ()

    result = LayoutResult(
        width=options.width,
        height=options.height,
        total=total_value(data),
        wedges=wedges,
        labels=labels,
        legend=legend,
    )
    logger.debug(
        "layout.donut",
        extra={
            "wedges": len(result.wedges),
            "labels": len(result.labels),
            "legend": len(result.legend),
            "total": result.total,
        },
    )
    return result
