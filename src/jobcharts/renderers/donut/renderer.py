from __future__ import annotations

import math

import pygame

from jobcharts.display.color import (CONNECTOR, EMPTY_RING, TEXT, TEXT_MUTED,
                                     TEXT_STRONG, WHITE)
from jobcharts.geometry import Easing, Point, wedge_outline
from jobcharts.interaction import ElementRef, Emphasis
from jobcharts.interaction.tooltips import format_count
from jobcharts.layout import ChartOptions, LayoutResult, Side
from jobcharts.layout.donut import HOVER_RADIUS_GROWTH, label_font_size
from jobcharts.layout.legend import (LEGEND_FONT_SIZE, SWATCH_GAP,
                                     legend_region_size)
from jobcharts.renderers.animation import AnimationSpec, animation_key
from jobcharts.renderers.base import ChartRenderer
from jobcharts.renderers.donut.state import DonutChartState
from jobcharts.renderers.drawing import (Anchor, draw_box, draw_polygon,
                                         draw_polyline, draw_text,
                                         draw_tooltip)
from jobcharts.renderers.hit_testing import hit_test_donut

GROW = "grow"
FADE = "fade"
CENTER_KEY = "center"
LABEL_FADE_MS = 300
DIMMED_OPACITY = 0.3
WEDGE_STROKE_WIDTH = 2
TOTAL_FONT_SIZE = 28
CAPTION_FONT_SIZE = 14


class DonutChartRenderer(ChartRenderer[DonutChartState]):
    def surface_size(self) -> tuple[int, int]:
        options = self.state.options
        extra_width, extra_height = legend_region_size(self.state.layout.legend, options)
        return (
            int(math.ceil(options.width + extra_width)),
            int(math.ceil(options.height + extra_height)),
        )

    def elements(self) -> list[ElementRef]:
        layout = self.state.layout
        return [ElementRef.for_wedge(wedge) for wedge in layout.wedges] + [
            ElementRef.for_legend(entry) for entry in layout.legend
        ]

    def on_state_changed(self, state: DonutChartState) -> None:
        layout = state.layout
        duration = state.options.animation_duration_ms
        self.controller.set_total(layout.total)
        self.controller.sync(self.elements())
        self.animations.retain(layout.element_keys() | {CENTER_KEY})

        for wedge in layout.wedges:
            self.animations.start(
                animation_key(f"wedge:{wedge.key}", GROW),
                AnimationSpec(duration_ms=duration, easing=Easing.ELASTIC_OUT),
            )
        fade_ms = LABEL_FADE_MS if duration else 0
        for label in layout.labels:
            self.animations.start(
                animation_key(f"label:{label.key}", FADE),
                AnimationSpec(duration_ms=fade_ms, delay_ms=duration // 2),
            )
        self.animations.start(
            animation_key(CENTER_KEY, FADE),
            AnimationSpec(duration_ms=fade_ms, delay_ms=duration),
        )

    def hit_test(self, position: Point) -> ElementRef | None:
        return hit_test_donut(
            self.state.layout, self.state.options, position, self.controller.hovered
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock | None) -> None:
        layout, options = self.state.layout, self.state.options
        if layout.wedges:
            self._draw_wedges(window, layout, options)
        else:
            outline = wedge_outline(
                0.0, 2 * math.pi, options.inner_radius, options.outer_radius, options.center
            )
            draw_polygon(window, EMPTY_RING, outline)
        self._draw_labels(window, layout, options)
        self._draw_legend(window, layout)
        self._draw_center(window, layout, options)
        if self.controller.tooltip is not None:
            draw_tooltip(window, self.controller.tooltip)

    def _draw_wedges(
        self, window: pygame.Surface, layout: LayoutResult, options: ChartOptions
    ) -> None:
        for wedge in layout.wedges:
            ref = ElementRef.for_wedge(wedge)
            progress = self.animations.value(animation_key(ref.animation_key, GROW))
            start, end = wedge.start_angle * progress, wedge.end_angle * progress
            if end <= start:
                continue
            emphasis = self.controller.emphasis(ref)
            outer = options.outer_radius
            if emphasis is Emphasis.INTENSIFIED:
                outer += HOVER_RADIUS_GROWTH
            alpha = DIMMED_OPACITY if emphasis is Emphasis.DIMMED else 1.0
            outline = wedge_outline(start, end, options.inner_radius, outer, options.center)
            draw_polygon(window, wedge.color, outline, alpha=alpha)
            draw_polygon(window, WHITE, outline, alpha=alpha, width=WEDGE_STROKE_WIDTH)

    def _draw_labels(
        self, window: pygame.Surface, layout: LayoutResult, options: ChartOptions
    ) -> None:
        size = label_font_size(options.outer_radius)
        for label in layout.labels:
            alpha = self.animations.value(animation_key(f"label:{label.key}", FADE))
            if alpha <= 0:
                continue
            draw_polyline(window, CONNECTOR, label.connector, alpha=alpha)
            draw_text(
                window,
                label.text,
                (label.anchor_x, label.anchor_y),
                size=size,
                color=TEXT,
                anchor=Anchor.START if label.side is Side.RIGHT else Anchor.END,
                alpha=alpha,
            )

    def _draw_legend(self, window: pygame.Surface, layout: LayoutResult) -> None:
        hovered = self.controller.hovered
        for entry in layout.legend:
            active = hovered is not None and hovered.key == entry.key
            swatch = pygame.Rect(
                round(entry.x),
                round(entry.y + (entry.height - entry.swatch_size) / 2),
                round(entry.swatch_size),
                round(entry.swatch_size),
            )
            draw_box(window, swatch, entry.color, border_radius=2)
            draw_text(
                window,
                entry.text,
                (entry.x + entry.swatch_size + SWATCH_GAP, entry.y + entry.height / 2),
                size=LEGEND_FONT_SIZE,
                color=TEXT_STRONG if active else TEXT,
                bold=active,
            )

    def _draw_center(
        self, window: pygame.Surface, layout: LayoutResult, options: ChartOptions
    ) -> None:
        alpha = self.animations.value(animation_key(CENTER_KEY, FADE))
        cx, cy = options.center
        draw_text(
            window,
            format_count(layout.total),
            (cx, cy - 8),
            size=TOTAL_FONT_SIZE,
            color=TEXT_STRONG,
            anchor=Anchor.MIDDLE,
            bold=True,
            alpha=alpha,
        )
        draw_text(
            window,
            "Total",
            (cx, cy + 14),
            size=CAPTION_FONT_SIZE,
            color=TEXT_MUTED,
            anchor=Anchor.MIDDLE,
            alpha=alpha,
        )
