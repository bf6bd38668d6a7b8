"""Headless tests for the pygame chart renderers."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import pygame
import pytest

from jobcharts.display.color import Color
from jobcharts.geometry import arc_centroid, polar_to_cartesian
from jobcharts.interaction import ElementKind
from jobcharts.layout import CategoricalDatum, ChartOptions
from jobcharts.providers import LatestValueProvider
from jobcharts.renderers import (AnimationScheduler, BarChartRenderer,
                                 DonutChartRenderer, FlowChartRenderer,
                                 animation_key)
from jobcharts.renderers.bars.provider import BarStateProvider
from jobcharts.renderers.donut.provider import DonutStateProvider
from jobcharts.renderers.donut.state import DonutChartState
from jobcharts.renderers.flow.provider import FlowStateProvider
from jobcharts.renderers.flow.renderer import spark_count
from jobcharts.runtime.headless import render_to_surface
from jobcharts.stats import ApplicationStatistics

if TYPE_CHECKING:
    from reactivex.testing import TestScheduler

WHITE = (255, 255, 255)


def _pixel(surface: pygame.Surface, point: tuple[float, float]) -> tuple[int, int, int]:
    color = surface.get_at((int(round(point[0])), int(round(point[1]))))
    return (color.r, color.g, color.b)


def _donut(data: list[CategoricalDatum], **changes: Any) -> DonutChartRenderer:
    options = ChartOptions(animation_duration_ms=0, **changes)
    return DonutChartRenderer(state=DonutChartState.from_data(data, options))


class TestDonutChartRenderer:
    """Verify the donut draws its layout and reacts to hover so the headless output matches the window."""

    def test_surface_matches_options(self, status_data: list[CategoricalDatum]) -> None:
        surface = render_to_surface(_donut(status_data, width=300, height=320, outer_radius=100))

        assert surface.get_size() == (300, 320)

    def test_legend_extends_surface(self, status_data: list[CategoricalDatum]) -> None:
        surface = render_to_surface(_donut(status_data, use_legend=True))

        assert surface.get_size() == (400 + 24 + 200, 400)

    def test_wedges_use_their_colors(self, status_data: list[CategoricalDatum]) -> None:
        renderer = _donut(status_data)
        surface = render_to_surface(renderer)
        for wedge in renderer.state.layout.wedges:
            # Off the mid angle, where the label connector starts.
            point = polar_to_cartesian(wedge.start_angle + wedge.span / 4, 80.0, (200.0, 200.0))

            assert _pixel(surface, point) == Color.from_hex(wedge.color).tuple()

    def test_empty_data_draws_placeholder_ring(self) -> None:
        renderer = _donut([CategoricalDatum("A", 0)])
        surface = render_to_surface(renderer)

        assert _pixel(surface, (200.0, 110.0)) == Color.from_hex("#e5e7eb").tuple()

    def test_hover_grows_wedge_and_shows_tooltip(self, status_data: list[CategoricalDatum]) -> None:
        renderer = _donut(status_data)
        renderer.initialize()
        wedge_color = Color.from_hex(renderer.state.layout.wedge("Applied").color).tuple()
        sample = polar_to_cartesian(0.2, 124.0, (200.0, 200.0))
        assert _pixel(render_to_surface(renderer), sample) == WHITE

        wedge = renderer.state.layout.wedge("Applied")
        renderer.handle_pointer(arc_centroid(wedge.start_angle, wedge.end_angle, 60.0, 120.0, (200.0, 200.0)))
        surface = render_to_surface(renderer)

        assert renderer.controller.hovered.key == "Applied"
        assert renderer.controller.tooltip.content.title == "Applied: 10 (40.0%)"
        assert _pixel(surface, sample) == wedge_color

    def test_legend_hover_dims_other_wedges(self, status_data: list[CategoricalDatum]) -> None:
        renderer = _donut(status_data, use_legend=True)
        renderer.initialize()
        layout = renderer.state.layout
        entry = layout.legend[0]
        rejected = layout.wedge("Rejected")
        sample = arc_centroid(rejected.start_angle, rejected.end_angle, 60.0, 120.0, (200.0, 200.0))

        renderer.handle_pointer((entry.x + 2, entry.y + entry.height / 2))
        surface = render_to_surface(renderer)

        assert renderer.controller.hovered.kind is ElementKind.LEGEND
        pixel = _pixel(surface, sample)
        assert pixel != Color.from_hex(rejected.color).tuple()
        assert pixel != WHITE

    def test_pointer_exit_clears_hover(self, status_data: list[CategoricalDatum]) -> None:
        renderer = _donut(status_data)
        renderer.initialize()
        wedge = renderer.state.layout.wedge("Interviewing")
        renderer.handle_pointer(
            arc_centroid(wedge.start_angle, wedge.end_angle, 60.0, 120.0, (200.0, 200.0))
        )
        assert renderer.controller.hovered is not None

        renderer.handle_pointer_exit()

        assert renderer.controller.hovered is None

    def test_new_values_refresh_hovered_tooltip(self, status_data: list[CategoricalDatum]) -> None:
        renderer = _donut(status_data)
        renderer.initialize()
        wedge = renderer.state.layout.wedge("Applied")
        renderer.handle_pointer(arc_centroid(wedge.start_angle, wedge.end_angle, 60.0, 120.0, (200.0, 200.0)))
        assert renderer.controller.tooltip.content.title == "Applied: 10 (40.0%)"

        status_data[0] = CategoricalDatum("Applied", 999)
        renderer.set_state(DonutChartState.from_data(status_data, renderer.state.options))

        assert renderer.controller.hovered.value == 999
        assert renderer.controller.tooltip.content.title == "Applied: 999 (98.5%)"

        wedge = renderer.state.layout.wedge("Applied")
        renderer.handle_pointer(arc_centroid(wedge.start_angle, wedge.end_angle, 60.0, 120.0, (200.0, 200.0)))

        assert renderer.controller.tooltip.content.title == "Applied: 999 (98.5%)"

    def test_enter_animation_runs_on_virtual_time(
        self, status_data: list[CategoricalDatum], test_scheduler: TestScheduler
    ) -> None:
        options = ChartOptions(animation_duration_ms=400)
        renderer = DonutChartRenderer(
            state=DonutChartState.from_data(status_data, options),
            animations=AnimationScheduler(test_scheduler, frame_interval_ms=10),
        )
        renderer.initialize()
        grow = animation_key("wedge:Applied", "grow")
        fade = animation_key("label:Applied", "fade")

        assert renderer.animations.value(grow) == pytest.approx(0.0, abs=1e-9)
        assert renderer.animations.value(fade) == 0.0

        test_scheduler.advance_to(2.0)

        assert renderer.animations.value(grow) == pytest.approx(1.0)
        assert renderer.animations.value(fade) == 1.0
        assert renderer.animations.active_keys == frozenset()

    def test_new_statistics_prune_removed_wedges(
        self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler
    ) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        renderer = DonutChartRenderer(
            DonutStateProvider(statistics, ChartOptions(animation_duration_ms=400)),
            animations=AnimationScheduler(test_scheduler, frame_interval_ms=10),
        )
        renderer.initialize()
        rejected = renderer.state.layout.wedge("Rejected")
        renderer.handle_pointer(
            arc_centroid(rejected.start_angle, rejected.end_angle, 60.0, 120.0, (200.0, 200.0))
        )
        assert renderer.controller.hovered.key == "Rejected"

        statistics_payload["currentStatusDistribution"]["Rejected"] = 0
        statistics.publish(ApplicationStatistics.from_mapping(statistics_payload))

        assert renderer.state.layout.wedge("Rejected") is None
        assert renderer.controller.hovered is None
        assert animation_key("wedge:Rejected", "grow") not in renderer.animations.active_keys
        assert animation_key("wedge:Applied", "grow") in renderer.animations.active_keys

    def test_options_change_rebuilds_layout(self, statistics_payload: dict[str, Any]) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        provider = DonutStateProvider(statistics, ChartOptions(animation_duration_ms=0))
        renderer = DonutChartRenderer(provider)
        renderer.initialize()
        assert renderer.state.layout.legend == ()

        provider.set_options(provider.options.with_changes(use_legend=True))

        assert len(renderer.state.layout.legend) == 4
        assert renderer.surface_size() == (624, 400)

    def test_auto_legend_above_threshold(self, statistics_payload: dict[str, Any]) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        provider = DonutStateProvider(
            statistics,
            ChartOptions(animation_duration_ms=0),
            select=lambda stats: [CategoricalDatum(f"s{i}", i + 1) for i in range(6)],
            auto_legend=True,
        )
        renderer = DonutChartRenderer(provider)
        renderer.initialize()

        assert renderer.state.options.use_legend
        assert renderer.state.layout.labels == ()

    def test_reset_disposes_subscription(self, statistics_payload: dict[str, Any]) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        renderer = DonutChartRenderer(DonutStateProvider(statistics, ChartOptions(animation_duration_ms=0)))
        renderer.initialize()
        before = renderer.state

        renderer.reset()
        statistics_payload["total"] = 99
        statistics.publish(ApplicationStatistics.from_mapping(statistics_payload))

        assert renderer.state is before
        assert not renderer.initialized

    def test_builder_or_state_required(self) -> None:
        with pytest.raises(ValueError):
            DonutChartRenderer()


class TestFlowChartRenderer:
    """Verify the funnel renderer draws ribbons and keeps its looping effects tied to live links."""

    def _renderer(
        self, payload: dict[str, Any], scheduler: TestScheduler, duration: int = 400
    ) -> tuple[FlowChartRenderer, LatestValueProvider[ApplicationStatistics]]:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(payload))
        renderer = FlowChartRenderer(
            FlowStateProvider(statistics, animation_duration_ms=duration),
            animations=AnimationScheduler(scheduler, frame_interval_ms=10),
        )
        renderer.initialize()
        return renderer, statistics

    def test_pulse_and_sparks_loop_per_link(
        self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler
    ) -> None:
        renderer, _ = self._renderer(statistics_payload, test_scheduler)
        test_scheduler.advance_to(5.0)

        for link in renderer.state.layout.links:
            element = f"link:{link.key}"
            assert renderer.animations.is_running(animation_key(element, "pulse"))
            sparks = [
                key
                for key in renderer.animations.active_keys
                if key.startswith(f"{element}#spark")
            ]
            assert len(sparks) == spark_count(link.value)

    def test_removed_link_stops_looping(
        self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler
    ) -> None:
        renderer, statistics = self._renderer(statistics_payload, test_scheduler)
        declined = animation_key("link:offers->declined", "pulse")
        assert renderer.animations.is_running(declined)

        statistics_payload["offerStatusDistribution"]["DECLINED"] = 0
        statistics.publish(ApplicationStatistics.from_mapping(statistics_payload))

        assert not renderer.animations.is_running(declined)
        assert renderer.animations.is_running(animation_key("link:offers->accepted", "pulse"))

    def test_renders_full_surface(self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler) -> None:
        renderer, _ = self._renderer(statistics_payload, test_scheduler)
        test_scheduler.advance_to(3.0)

        surface = render_to_surface(renderer)
        node = renderer.state.layout.node("applications")

        assert surface.get_size() == (800, 450)
        assert _pixel(surface, (node.x + 5, node.y + 30)) != WHITE

    def test_static_render_has_no_loops(self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler) -> None:
        renderer, _ = self._renderer(statistics_payload, test_scheduler, duration=0)

        render_to_surface(renderer)

        assert renderer.animations.active_keys == frozenset()

    def test_link_hover_tooltip(self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler) -> None:
        renderer, _ = self._renderer(statistics_payload, test_scheduler, duration=0)
        link = next(link for link in renderer.state.layout.links if link.key == "applications->interviewing")
        x, y = link.source_point

        renderer.handle_pointer((x + 3.0, y))

        assert renderer.controller.tooltip.content.title == "Applications → Interviewing"

    def test_smaller_link_drops_extra_sparks(
        self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler
    ) -> None:
        statistics_payload["total"] = 200
        statistics_payload["currentStatusDistribution"]["Applied"] = 100
        renderer, statistics = self._renderer(statistics_payload, test_scheduler)
        element = "link:applications->pending"

        def sparks() -> set[str]:
            return {key for key in renderer.animations.active_keys if key.startswith(f"{element}#spark")}

        assert len(sparks()) == 5

        statistics_payload["currentStatusDistribution"]["Applied"] = 60
        statistics.publish(ApplicationStatistics.from_mapping(statistics_payload))
        test_scheduler.advance_to(10.0)

        assert sparks() == {animation_key(element, f"spark{index}") for index in range(3)}

    def test_static_update_stops_running_loops(
        self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler
    ) -> None:
        renderer, _ = self._renderer(statistics_payload, test_scheduler)
        assert renderer.animations.active_keys != frozenset()

        renderer.set_state(replace(renderer.state, animation_duration_ms=0))

        assert renderer.animations.active_keys == frozenset()

    def test_spark_count_bounds(self) -> None:
        assert spark_count(0) == 3
        assert spark_count(80) == 4
        assert spark_count(10_000) == 5


class TestBarChartRenderer:
    """Verify bars grow from the baseline and report their value on hover."""

    def test_render_and_hover(self, statistics_payload: dict[str, Any]) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        renderer = BarChartRenderer(BarStateProvider(statistics, animation_duration_ms=0))
        surface = render_to_surface(renderer)
        bar = renderer.state.layout.bars[2]

        assert surface.get_size() == (600, 400)
        assert _pixel(surface, (bar.x + bar.width / 2, bar.y + bar.height / 2)) == Color.from_hex(bar.color).tuple()

        renderer.handle_pointer((bar.x + 2, bar.y + 2))

        assert renderer.controller.tooltip.content.lines == ("12 applications",)

    def test_bars_grow_on_virtual_time(self, statistics_payload: dict[str, Any], test_scheduler: TestScheduler) -> None:
        statistics = LatestValueProvider(ApplicationStatistics.from_mapping(statistics_payload))
        renderer = BarChartRenderer(
            BarStateProvider(statistics, animation_duration_ms=300),
            animations=AnimationScheduler(test_scheduler, frame_interval_ms=10),
        )
        renderer.initialize()
        key = animation_key("bar:Mar 2024", "grow")

        assert renderer.animations.value(key) == 0.0
        test_scheduler.advance_to(0.2)
        assert 0.0 < renderer.animations.value(key) < 1.0
        test_scheduler.advance_to(2.0)
        assert renderer.animations.value(key) == 1.0
