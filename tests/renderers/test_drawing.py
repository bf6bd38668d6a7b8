"""Tests for the shared pygame drawing helpers."""

from __future__ import annotations

from typing import Callable

import pygame

from jobcharts.display.color import Color
from jobcharts.interaction import Tooltip
from jobcharts.interaction.tooltips import TooltipContent
from jobcharts.renderers.drawing import (Anchor, draw_box, draw_polygon,
                                         draw_text, draw_tooltip, font)

SurfaceFactory = Callable[[int, int], pygame.Surface]


class TestDrawing:
    """Verify translucent shapes blend and text anchors so labels sit on the right side of a point."""

    def test_text_anchors(self, surface_factory: SurfaceFactory) -> None:
        surface = surface_factory(200, 100)

        start = draw_text(surface, "Label", (100, 50), size=14, color="#000000")
        end = draw_text(surface, "Label", (100, 50), size=14, color="#000000", anchor=Anchor.END)
        middle = draw_text(surface, "Label", (100, 50), size=14, color="#000000", anchor=Anchor.MIDDLE)

        assert start.left == 100
        assert end.right == 100
        assert middle.centerx == 100
        assert start.centery == 50

    def test_empty_text_draws_nothing(self, surface_factory: SurfaceFactory) -> None:
        surface = surface_factory(50, 50)

        rect = draw_text(surface, "", (10, 10), size=14, color="#000000")

        assert rect.size == (0, 0)

    def test_polygon_alpha_blends_over_background(self, surface_factory: SurfaceFactory) -> None:
        surface = surface_factory(40, 40)

        draw_polygon(surface, "#000000", [(0, 0), (39, 0), (39, 39), (0, 39)], alpha=0.5)

        pixel = surface.get_at((20, 20))
        assert 120 <= pixel.r <= 135

    def test_opaque_box(self, surface_factory: SurfaceFactory) -> None:
        surface = surface_factory(40, 40)

        draw_box(surface, pygame.Rect(10, 10, 20, 20), Color(255, 0, 0))

        assert tuple(surface.get_at((20, 20)))[:3] == (255, 0, 0)
        assert tuple(surface.get_at((5, 5)))[:3] == (255, 255, 255)

    def test_tooltip_clamped_to_surface(self, surface_factory: SurfaceFactory) -> None:
        surface = surface_factory(200, 100)
        tooltip = Tooltip(TooltipContent("Applied: 10 (40.0%)", ("second line",)), x=190.0, y=95.0)

        rect = draw_tooltip(surface, tooltip)

        assert surface.get_rect().contains(rect)
        assert rect.height > font(14).get_linesize()

    def test_font_cache_survives_reinit(self) -> None:
        first = font(12)
        assert font(12) is first

        pygame.quit()
        pygame.init()

        assert font(12) is not first
        assert font(12).size("x")[0] > 0
