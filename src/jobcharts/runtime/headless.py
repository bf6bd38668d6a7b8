from __future__ import annotations

from pathlib import Path

import pygame

from jobcharts.display.color import WHITE, Color
from jobcharts.renderers.base import ChartRenderer
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)


def render_to_surface(
    renderer: ChartRenderer, *, background: Color = WHITE
) -> pygame.Surface:
    """Draw one frame off screen at the renderer's natural size."""

    if not renderer.initialized:
        renderer.initialize()
    if not renderer.has_state():
        raise RuntimeError(f"{renderer.name} has no chart state to render")
    surface = pygame.Surface(renderer.surface_size())
    surface.fill(background.tuple())
    renderer.process(surface)
    return surface


def save_surface(surface: pygame.Surface, path: str | Path) -> Path:
    target = Path(path)
    if target.parent != Path(""):
        target.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(surface, str(target))
    logger.info("Saved %dx%d chart to %s", *surface.get_size(), target)
    return target
