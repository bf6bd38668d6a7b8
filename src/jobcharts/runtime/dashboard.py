from __future__ import annotations

import pygame
from reactivex.scheduler.mainloop import PyGameScheduler

from jobcharts.display.color import WHITE
from jobcharts.renderers.base import ChartRenderer
from jobcharts.runtime.pygame_event_handler import PygameEventHandler
from jobcharts.utilities.env import Configuration
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Job Application Statistics"


class Dashboard:
    """Window loop for a single chart.

    Each frame drains pygame events into the renderer, runs the reactivex
    work queued on the pygame scheduler (animation ticks), and redraws.
    """

    def __init__(
        self,
        renderer: ChartRenderer,
        scheduler: PyGameScheduler,
        event_handler: PygameEventHandler,
        *,
        max_fps: int | None = None,
    ) -> None:
        self.renderer = renderer
        self.scheduler = scheduler
        self.event_handler = event_handler
        self.max_fps = Configuration.max_fps() if max_fps is None else max_fps
        self.running = False

    def open_window(self) -> pygame.Surface:
        if not self.renderer.initialized:
            self.renderer.initialize()
        if not self.renderer.has_state():
            raise RuntimeError(f"{self.renderer.name} has no chart state to show")
        pygame.display.set_caption(WINDOW_TITLE)
        size = self.renderer.surface_size()
        logger.info("Opening %dx%d dashboard window", *size)
        return pygame.display.set_mode(size)

    def step(self, window: pygame.Surface, clock: pygame.time.Clock) -> bool:
        running = self.event_handler.handle_events(self.renderer)
        self.scheduler.run()
        window.fill(WHITE.tuple())
        self.renderer.process(window, clock)
        return running

    def start(self) -> None:
        pygame.init()
        clock = pygame.time.Clock()
        try:
            window = self.open_window()
            self.running = True
            while self.running:
                self.running = self.step(window, clock)
                pygame.display.flip()
                clock.tick(self.max_fps)
        finally:
            self.renderer.reset()
            self.renderer.controller.dispose()
            pygame.quit()
