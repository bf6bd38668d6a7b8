"""Thin pygame helpers shared by the chart renderers.

pygame only blends alpha when blitting, so translucent shapes are drawn on a
small SRCALPHA layer covering their bounding box and blitted into place.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Sequence

import numpy as np
import pygame

from jobcharts.display.color import TOOLTIP_BACKGROUND, WHITE, Color
from jobcharts.geometry import Point
from jobcharts.interaction import Tooltip
from jobcharts.utilities.env import Configuration

TOOLTIP_FONT_SIZE = 14
TOOLTIP_PADDING = 8
TOOLTIP_LINE_GAP = 2

_FONT_CACHE: dict[tuple[str | None, int, bool], pygame.font.Font] = {}


class Anchor(StrEnum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


def font(size: float, *, bold: bool = False) -> pygame.font.Font:
    pixel_size = max(1, int(round(size)))
    name = Configuration.font_name()
    key = (name, pixel_size, bold)
    cached = _FONT_CACHE.get(key)
    if cached is None:
        if not pygame.font.get_init():
            pygame.font.init()
        if not _FONT_CACHE:
            # Fonts die with pygame.quit(); drop them so a re-init starts clean.
            pygame.register_quit(_FONT_CACHE.clear)
        if name:
            cached = pygame.font.SysFont(name, pixel_size, bold=bold)
        else:
            cached = pygame.font.Font(None, pixel_size)
            cached.set_bold(bold)
        _FONT_CACHE[key] = cached
    return cached


def draw_text(
    surface: pygame.Surface,
    text: str,
    position: Point,
    *,
    size: float,
    color: Color | str,
    anchor: Anchor = Anchor.START,
    bold: bool = False,
    alpha: float = 1.0,
) -> pygame.Rect:
    """Blit ``text`` vertically centred on ``position``."""

    x, y = round(position[0]), round(position[1])
    if not text or alpha <= 0:
        return pygame.Rect(x, y, 0, 0)
    rendered = font(size, bold=bold).render(text, True, Color.coerce(color).tuple())
    if alpha < 1:
        rendered.set_alpha(int(alpha * 255))
    rect = rendered.get_rect()
    match anchor:
        case Anchor.START:
            rect.midleft = (x, y)
        case Anchor.MIDDLE:
            rect.center = (x, y)
        case Anchor.END:
            rect.midright = (x, y)
    surface.blit(rendered, rect)
    return rect


def _layer(
    vertices: np.ndarray, padding: float
) -> tuple[pygame.Surface, np.ndarray]:
    origin = np.floor(vertices.min(axis=0) - padding - 1)
    extent = np.ceil(vertices.max(axis=0) + padding + 1) - origin
    layer = pygame.Surface((max(int(extent[0]), 1), max(int(extent[1]), 1)), pygame.SRCALPHA)
    return layer, origin


def draw_polygon(
    surface: pygame.Surface,
    color: Color | str,
    points: Sequence[Point] | np.ndarray,
    *,
    alpha: float = 1.0,
    width: int = 0,
) -> None:
    vertices = np.asarray(points, dtype=float)
    if len(vertices) < 3 or alpha <= 0:
        return
    rgb = Color.coerce(color)
    if alpha >= 1:
        pygame.draw.polygon(surface, rgb.tuple(), vertices.tolist(), width)
        return
    layer, origin = _layer(vertices, width)
    pygame.draw.polygon(layer, rgb.rgba(alpha), (vertices - origin).tolist(), width)
    surface.blit(layer, (int(origin[0]), int(origin[1])))


def draw_polyline(
    surface: pygame.Surface,
    color: Color | str,
    points: Sequence[Point] | np.ndarray,
    *,
    width: int = 1,
    alpha: float = 1.0,
) -> None:
    vertices = np.asarray(points, dtype=float)
    if len(vertices) < 2 or alpha <= 0:
        return
    rgb = Color.coerce(color)
    if alpha >= 1:
        pygame.draw.lines(surface, rgb.tuple(), False, vertices.tolist(), width)
        return
    layer, origin = _layer(vertices, width)
    pygame.draw.lines(layer, rgb.rgba(alpha), False, (vertices - origin).tolist(), width)
    surface.blit(layer, (int(origin[0]), int(origin[1])))


def draw_circle(
    surface: pygame.Surface,
    color: Color | str,
    center: Point,
    radius: float,
    *,
    alpha: float = 1.0,
) -> None:
    if radius <= 0 or alpha <= 0:
        return
    vertices = np.array([center], dtype=float)
    layer, origin = _layer(vertices, radius)
    local = (center[0] - origin[0], center[1] - origin[1])
    pygame.draw.circle(layer, Color.coerce(color).rgba(alpha), local, radius)
    surface.blit(layer, (int(origin[0]), int(origin[1])))


def draw_box(
    surface: pygame.Surface,
    rect: pygame.Rect,
    color: Color | str,
    *,
    alpha: float = 1.0,
    border_radius: int = 0,
    border_color: Color | str | None = None,
    border_width: int = 0,
) -> None:
    if rect.width <= 0 or rect.height <= 0 or alpha <= 0:
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    local = layer.get_rect()
    pygame.draw.rect(layer, Color.coerce(color).rgba(alpha), local, border_radius=border_radius)
    if border_color is not None and border_width > 0:
        pygame.draw.rect(
            layer,
            Color.coerce(border_color).rgba(alpha),
            local,
            border_width,
            border_radius=border_radius,
        )
    surface.blit(layer, rect.topleft)


def draw_tooltip(surface: pygame.Surface, tooltip: Tooltip) -> pygame.Rect:
    lines = (tooltip.content.title, *tooltip.content.lines)
    face = font(TOOLTIP_FONT_SIZE)
    rendered = [face.render(line, True, WHITE.tuple()) for line in lines]
    width = max(item.get_width() for item in rendered) + 2 * TOOLTIP_PADDING
    height = (
        sum(item.get_height() for item in rendered)
        + TOOLTIP_LINE_GAP * (len(rendered) - 1)
        + 2 * TOOLTIP_PADDING
    )
    rect = pygame.Rect(round(tooltip.x), round(tooltip.y), width, height)
    # Keep the box on screen; the pointer offset alone can push it past an edge.
    rect.clamp_ip(surface.get_rect())
    draw_box(surface, rect, TOOLTIP_BACKGROUND, alpha=0.95, border_radius=6)
    y = rect.top + TOOLTIP_PADDING
    for item in rendered:
        surface.blit(item, (rect.left + TOOLTIP_PADDING, y))
        y += item.get_height() + TOOLTIP_LINE_GAP
    return rect
