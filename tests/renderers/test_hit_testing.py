"""Tests for mapping pointer positions to chart elements."""

from __future__ import annotations

from jobcharts.geometry import arc_centroid, polar_to_cartesian
from jobcharts.interaction import ElementKind, ElementRef
from jobcharts.layout import (CategoricalDatum, ChartOptions, LinkKind,
                              bar_layout, donut_layout, flow_layout)
from jobcharts.layout.flow import FunnelCounts
from jobcharts.renderers.hit_testing import (LINK_HIT_MIN_WIDTH,
                                             hit_test_bars, hit_test_donut,
                                             hit_test_flow)


def _funnel() -> FunnelCounts:
    return FunnelCounts(total=100, rejected=70, pending=10, interviewing=15, offers=5, declined=1, accepted=2)


class TestDonutHits:
    """Verify wedge hits follow the drawn ring so hover matches what the user sees."""

    def test_centroid_hits_wedge(self, status_data: list[CategoricalDatum]) -> None:
        options = ChartOptions()
        layout = donut_layout(status_data, options)
        wedge = layout.wedge("Offered")
        point = arc_centroid(wedge.start_angle, wedge.end_angle, 60.0, 120.0, options.center)

        hit = hit_test_donut(layout, options, point)

        assert hit == ElementRef(ElementKind.WEDGE, "Offered")
        assert hit.value == 5

    def test_hole_and_outside_miss(self, status_data: list[CategoricalDatum]) -> None:
        options = ChartOptions()
        layout = donut_layout(status_data, options)

        assert hit_test_donut(layout, options, options.center) is None
        assert hit_test_donut(layout, options, (2.0, 2.0)) is None

    def test_hovered_wedge_keeps_grown_radius(self, status_data: list[CategoricalDatum]) -> None:
        options = ChartOptions()
        layout = donut_layout(status_data, options)
        wedge = layout.wedge("Applied")
        point = polar_to_cartesian(wedge.mid_angle, 124.0, options.center)

        assert hit_test_donut(layout, options, point) is None
        assert hit_test_donut(layout, options, point, ElementRef.for_wedge(wedge)) == ElementRef.for_wedge(wedge)

    def test_legend_entries(self, status_data: list[CategoricalDatum]) -> None:
        options = ChartOptions(use_legend=True)
        layout = donut_layout(status_data, options)
        entry = layout.legend[2]

        hit = hit_test_donut(layout, options, (entry.x + 2, entry.y + entry.height / 2))

        assert hit == ElementRef(ElementKind.LEGEND, entry.label)


class TestFlowHits:
    """Verify thin ribbons stay hoverable and nodes win over the links beneath them."""

    def test_node_hit(self) -> None:
        layout = flow_layout(_funnel())
        node = layout.node("offers")

        hit = hit_test_flow(layout, (node.x + node.width / 2, node.center_y))

        assert hit == ElementRef(ElementKind.NODE, "offers")

    def test_thin_link_has_minimum_hit_width(self) -> None:
        layout = flow_layout(_funnel())
        link = next(link for link in layout.links if link.kind is LinkKind.OFFERS_ACCEPTED)
        assert link.stroke_width < LINK_HIT_MIN_WIDTH

        x, y = link.source_point
        hit = hit_test_flow(layout, (x + 2.0, y + LINK_HIT_MIN_WIDTH / 2 - 2.0))

        assert hit == ElementRef.for_link(link)
        assert hit.link_kind is LinkKind.OFFERS_ACCEPTED

    def test_empty_space_misses(self) -> None:
        layout = flow_layout(_funnel())

        assert hit_test_flow(layout, (layout.width - 1, 1.0)) is None


class TestBarHits:
    """Verify bars hit inside their rectangles only."""

    def test_bar_hit(self) -> None:
        layout = bar_layout([CategoricalDatum("Jan", 5), CategoricalDatum("Feb", 10)])
        bar = layout.bars[1]

        assert hit_test_bars(layout, (bar.x + 1, bar.y + 1)) == ElementRef(ElementKind.BAR, "Feb")
        assert hit_test_bars(layout, (bar.x - 1, bar.y + 1)) is None
