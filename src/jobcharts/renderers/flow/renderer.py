"""Funnel renderer: translucent ribbons with an electric pulse and sparks.

The pulse and the sparks loop for as long as their link is in the layout;
``AnimationScheduler.retain`` stops them when a new layout drops the link.
"""

from __future__ import annotations

import pygame

from jobcharts.display.color import TEXT_MUTED, TEXT_STRONG, WHITE, Color
from jobcharts.geometry import Easing, Point, clamp
from jobcharts.interaction import ElementRef, Emphasis
from jobcharts.interaction.tooltips import format_count
from jobcharts.layout import FlowLink, FlowNode, curve_path
from jobcharts.layout.flow import MARGIN
from jobcharts.renderers.animation import AnimationSpec, animation_key
from jobcharts.renderers.base import ChartRenderer
from jobcharts.renderers.drawing import (Anchor, draw_box, draw_circle,
                                         draw_polygon, draw_polyline,
                                         draw_text, draw_tooltip)
from jobcharts.renderers.flow.state import FlowChartState
from jobcharts.renderers.hit_testing import hit_test_flow

FADE = "fade"
PULSE = "pulse"
LINK_OPACITY = 0.6
LINK_HOVER_OPACITY = 0.9
NODE_OPACITY = 0.9
NODE_STROKE = 2
NODE_HOVER_STROKE = 3
LINK_FADE_MS = 500
LINK_STAGGER_MS = 100
# Half of the 3 s pulse cycle; the pulse alternates direction.
PULSE_HALF_PERIOD_MS = 1500
PULSE_BRIGHT = 0.8
PULSE_DIM = 0.4
SPARK_PERIOD_MS = 4000
SPARK_STAGGER_MS = 800
SPARK_RADIUS = 3.0
MIN_SPARKS = 3
MAX_SPARKS = 5
TITLE_FONT_SIZE = 20


def spark_count(value: float) -> int:
    return int(clamp(value // 20, MIN_SPARKS, MAX_SPARKS))


def spark_channel(index: int) -> str:
    return f"spark{index}"


class FlowChartRenderer(ChartRenderer[FlowChartState]):
    def surface_size(self) -> tuple[int, int]:
        layout = self.state.layout
        return (int(layout.width), int(layout.height))

    def elements(self) -> list[ElementRef]:
        layout = self.state.layout
        return [ElementRef.for_node(node) for node in layout.nodes] + [
            ElementRef.for_link(link) for link in layout.links
        ]

    def on_state_changed(self, state: FlowChartState) -> None:
        layout = state.layout
        self.controller.set_total(layout.total)
        self.controller.sync(self.elements())
        self.animations.retain(layout.element_keys())

        fade_ms = LINK_FADE_MS if state.animated else 0
        for index, link in enumerate(layout.links):
            element = f"link:{link.key}"
            self.animations.start(
                animation_key(element, FADE),
                AnimationSpec(
                    duration_ms=fade_ms,
                    delay_ms=index * LINK_STAGGER_MS if state.animated else 0,
                ),
            )
            sparks = spark_count(link.value) if state.animated else 0
            for stale in range(sparks, MAX_SPARKS):
                self.animations.cancel(animation_key(element, spark_channel(stale)))
            if not state.animated:
                self.animations.cancel(animation_key(element, PULSE))
                continue
            self.animations.start(
                animation_key(element, PULSE),
                AnimationSpec(
                    duration_ms=PULSE_HALF_PERIOD_MS,
                    start=PULSE_BRIGHT,
                    end=PULSE_DIM,
                    easing=Easing.SIN_IN_OUT,
                    loop=True,
                    alternate=True,
                ),
            )
            for spark in range(sparks):
                self.animations.start(
                    animation_key(element, spark_channel(spark)),
                    AnimationSpec(
                        duration_ms=SPARK_PERIOD_MS,
                        delay_ms=spark * SPARK_STAGGER_MS,
                        loop=True,
                    ),
                )
        for node in layout.nodes:
            self.animations.start(
                animation_key(f"node:{node.id}", FADE),
                AnimationSpec(duration_ms=fade_ms),
            )

    def hit_test(self, position: Point) -> ElementRef | None:
        return hit_test_flow(self.state.layout, position)

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock | None) -> None:
        state = self.state
        draw_text(
            window,
            state.title,
            (state.layout.width / 2, MARGIN.top / 2),
            size=TITLE_FONT_SIZE,
            color=TEXT_STRONG,
            anchor=Anchor.MIDDLE,
            bold=True,
        )
        for link in state.layout.links:
            self._draw_link(window, link)
        for node in state.layout.nodes:
            self._draw_node(window, node)
        for metric in state.layout.metrics:
            draw_text(window, metric.label, (metric.x, metric.y - 8), size=13,
                      color=TEXT_MUTED, anchor=Anchor.MIDDLE)
            draw_text(window, metric.value_text, (metric.x, metric.y + 10), size=18,
                      color=TEXT_STRONG, anchor=Anchor.MIDDLE, bold=True)
        if self.controller.tooltip is not None:
            draw_tooltip(window, self.controller.tooltip)

    def _draw_link(self, window: pygame.Surface, link: FlowLink) -> None:
        ref = ElementRef.for_link(link)
        fade = self.animations.value(animation_key(ref.animation_key, FADE))
        if fade <= 0:
            return
        hovered = self.controller.emphasis(ref) is Emphasis.INTENSIFIED
        opacity = (LINK_HOVER_OPACITY if hovered else LINK_OPACITY) * fade
        ribbon = curve_path(link.source_point, link.target_point, link.stroke_width)
        draw_polygon(window, link.color, ribbon.polygon(), alpha=opacity)

        centerline = ribbon.centerline()
        pulse_key = animation_key(ref.animation_key, PULSE)
        if self.animations.is_running(pulse_key):
            glow = Color.coerce(link.color).brighter()
            draw_polyline(window, glow, centerline, width=2,
                          alpha=self.animations.value(pulse_key) * fade)
        for spark in range(spark_count(link.value)):
            spark_key = animation_key(ref.animation_key, spark_channel(spark))
            if not self.animations.is_running(spark_key):
                continue
            progress = self.animations.value(spark_key, 0.0)
            x, y = centerline[int(round(progress * (len(centerline) - 1)))]
            draw_circle(window, WHITE, (float(x), float(y)), SPARK_RADIUS, alpha=0.9 * fade)

    def _draw_node(self, window: pygame.Surface, node: FlowNode) -> None:
        ref = ElementRef.for_node(node)
        fade = self.animations.value(animation_key(ref.animation_key, FADE))
        hovered = self.controller.emphasis(ref) is Emphasis.INTENSIFIED
        rect = pygame.Rect(round(node.x), round(node.y), round(node.width), round(node.height))
        draw_box(
            window,
            rect,
            node.color,
            alpha=(1.0 if hovered else NODE_OPACITY) * fade,
            border_radius=8,
            border_color=Color.coerce(node.color).darker(),
            border_width=NODE_HOVER_STROKE if hovered else NODE_STROKE,
        )
        cx = node.x + node.width / 2
        draw_text(window, node.name, (cx, node.center_y - 9), size=14,
                  color=WHITE, anchor=Anchor.MIDDLE, bold=True, alpha=fade)
        draw_text(window, format_count(node.value), (cx, node.center_y + 10), size=18,
                  color=WHITE, anchor=Anchor.MIDDLE, bold=True, alpha=fade)
