from __future__ import annotations

import pygame

from jobcharts.renderers.base import ChartRenderer
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    def handle_events(self, renderer: ChartRenderer | None = None) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, closing dashboard")
                running = False
            elif renderer is None:
                continue
            elif event.type == pygame.MOUSEMOTION:
                renderer.handle_pointer(event.pos)
            elif event.type == pygame.WINDOWLEAVE:
                renderer.handle_pointer_exit()
        return running
