from __future__ import annotations

import pygame

from jobcharts.display.color import CONNECTOR, TEXT, TEXT_MUTED, Color
from jobcharts.geometry import Easing, Point
from jobcharts.interaction import ElementRef, Emphasis
from jobcharts.interaction.tooltips import format_count
from jobcharts.layout import Bar
from jobcharts.layout.bars import BAR_MARGIN
from jobcharts.renderers.animation import AnimationSpec, animation_key
from jobcharts.renderers.base import ChartRenderer
from jobcharts.renderers.bars.state import BarChartState
from jobcharts.renderers.drawing import (Anchor, draw_box, draw_text,
                                         draw_tooltip)
from jobcharts.renderers.hit_testing import hit_test_bars

GROW = "grow"
AXIS_FONT_SIZE = 13
STAGGER_MS = 60


class BarChartRenderer(ChartRenderer[BarChartState]):
    def surface_size(self) -> tuple[int, int]:
        layout = self.state.layout
        return (int(layout.width), int(layout.height))

    def on_state_changed(self, state: BarChartState) -> None:
        layout = state.layout
        self.controller.set_total(layout.total)
        self.controller.sync(ElementRef.for_bar(bar) for bar in layout.bars)
        self.animations.retain(layout.element_keys())
        for index, bar in enumerate(layout.bars):
            self.animations.start(
                animation_key(f"bar:{bar.key}", GROW),
                AnimationSpec(
                    duration_ms=state.animation_duration_ms,
                    delay_ms=index * STAGGER_MS if state.animation_duration_ms else 0,
                    easing=Easing.CUBIC_IN_OUT,
                ),
            )

    def hit_test(self, position: Point) -> ElementRef | None:
        return hit_test_bars(self.state.layout, position)

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock | None) -> None:
        layout = self.state.layout
        baseline = layout.height - BAR_MARGIN.bottom
        pygame.draw.line(
            window,
            CONNECTOR.tuple(),
            (BAR_MARGIN.left, baseline),
            (layout.width - BAR_MARGIN.right, baseline),
        )
        pygame.draw.line(
            window,
            CONNECTOR.tuple(),
            (BAR_MARGIN.left, BAR_MARGIN.top),
            (BAR_MARGIN.left, baseline),
        )
        peak = max((bar.value for bar in layout.bars), default=0.0)
        draw_text(window, format_count(peak), (BAR_MARGIN.left - 6, BAR_MARGIN.top),
                  size=AXIS_FONT_SIZE, color=TEXT_MUTED, anchor=Anchor.END)
        draw_text(window, "0", (BAR_MARGIN.left - 6, baseline),
                  size=AXIS_FONT_SIZE, color=TEXT_MUTED, anchor=Anchor.END)

        for bar in layout.bars:
            self._draw_bar(window, bar, baseline)
        if self.controller.tooltip is not None:
            draw_tooltip(window, self.controller.tooltip)

    def _draw_bar(self, window: pygame.Surface, bar: Bar, baseline: float) -> None:
        ref = ElementRef.for_bar(bar)
        progress = self.animations.value(animation_key(ref.animation_key, GROW))
        height = max(bar.height * progress, 0.0)
        color = Color.coerce(bar.color)
        if self.controller.emphasis(ref) is Emphasis.INTENSIFIED:
            color = color.brighter(0.5)
        rect = pygame.Rect(round(bar.x), round(baseline - height), round(bar.width), round(height))
        draw_box(window, rect, color, border_radius=3)
        center_x = bar.x + bar.width / 2
        draw_text(window, bar.label, (center_x, baseline + 14),
                  size=AXIS_FONT_SIZE, color=TEXT_MUTED, anchor=Anchor.MIDDLE)
        if progress >= 1 and bar.value > 0:
            draw_text(window, format_count(bar.value), (center_x, baseline - height - 10),
                      size=AXIS_FONT_SIZE, color=TEXT, anchor=Anchor.MIDDLE)
