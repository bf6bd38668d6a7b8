"""Map pointer positions to the interactive element underneath them."""

from __future__ import annotations

import numpy as np

from jobcharts.geometry import Point, point_in_polygon, point_in_wedge
from jobcharts.interaction import ElementKind, ElementRef
from jobcharts.layout import ChartOptions, FlowLink, LayoutResult, curve_path
from jobcharts.layout.donut import HOVER_RADIUS_GROWTH

# Thin links are still hoverable across at least this many pixels.
LINK_HIT_MIN_WIDTH = 20.0


def _in_box(point: Point, x: float, y: float, width: float, height: float) -> bool:
    return x <= point[0] <= x + width and y <= point[1] <= y + height


def hit_test_donut(
    layout: LayoutResult,
    options: ChartOptions,
    point: Point,
    hovered: ElementRef | None = None,
) -> ElementRef | None:
    for entry in layout.legend:
        if _in_box(point, entry.x, entry.y, entry.width, entry.height):
            return ElementRef.for_legend(entry)

    for wedge in layout.wedges:
        outer = options.outer_radius
        if hovered is not None and hovered.kind is ElementKind.WEDGE and hovered.key == wedge.key:
            outer += HOVER_RADIUS_GROWTH
        if point_in_wedge(
            point,
            wedge.start_angle,
            wedge.end_angle,
            options.inner_radius,
            outer,
            options.center,
        ):
            return ElementRef.for_wedge(wedge)
    return None


def link_hit_polygon(link: FlowLink) -> np.ndarray:
    width = max(LINK_HIT_MIN_WIDTH, link.stroke_width)
    return curve_path(link.source_point, link.target_point, width).polygon()


def hit_test_flow(layout: LayoutResult, point: Point) -> ElementRef | None:
    for node in layout.nodes:
        if _in_box(point, node.x, node.y, node.width, node.height):
            return ElementRef.for_node(node)
    # Later links are drawn on top.
    for link in reversed(layout.links):
        if point_in_polygon(point, link_hit_polygon(link)):
            return ElementRef.for_link(link)
    return None


def hit_test_bars(layout: LayoutResult, point: Point) -> ElementRef | None:
    for bar in layout.bars:
        if _in_box(point, bar.x, bar.y, bar.width, bar.height):
            return ElementRef.for_bar(bar)
    return None
