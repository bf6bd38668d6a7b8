from __future__ import annotations

import time
from typing import Generic, TypeVar, final

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from jobcharts.geometry import Point
from jobcharts.interaction import ElementRef, InteractionController
from jobcharts.providers import ObservableProvider, StaticStateProvider
from jobcharts.renderers.animation import AnimationScheduler
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class ChartRenderer(Generic[StateT]):
    """Base renderer that draws the latest immutable chart state.

    State arrives from ``builder`` (or is fixed via ``state``); every new
    snapshot goes through :meth:`on_state_changed` so subclasses can restart
    enter animations and prune hover state for elements that disappeared.
    """

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        state: StateT | None = None,
        *,
        animations: AnimationScheduler | None = None,
        controller: InteractionController | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("ChartRenderer accepts a builder or state, not both")
        if builder is None and state is not None:
            builder = StaticStateProvider(state)
        if builder is None:
            raise ValueError("ChartRenderer requires a builder or state")

        self.builder = builder
        self.animations = animations if animations is not None else AnimationScheduler()
        self.controller = controller if controller is not None else InteractionController()
        self.initialized = False
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def has_state(self) -> bool:
        return self._state is not None

    def set_state(self, state: StateT) -> None:
        self._state = state
        self.on_state_changed(state)

    def state_observable(self) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(self) -> None:
        self._subscription = self.state_observable().subscribe(
            on_next=self.set_state,
            on_error=lambda error: logger.error(
                "State stream for %s failed: %s", self.name, error
            ),
        )
        self.initialized = True

    def surface_size(self) -> tuple[int, int]:
        """Pixel size this renderer needs for its current state."""
        raise NotImplementedError("Please implement")

    @final
    def process(self, window: pygame.Surface, clock: pygame.time.Clock | None = None) -> None:
        if not self.initialized:
            self.initialize()
        if self._state is None:
            return

        start_ns = time.perf_counter_ns()
        try:
            self.real_process(window, clock)
        except pygame.error as error:
            logger.warning("Skipping frame for %s: %s", self.name, error)
            return
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={"renderer": self.name, "duration_ms": duration_ms},
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock | None) -> None:
        raise NotImplementedError("Please implement")

    def on_state_changed(self, state: StateT) -> None:
        pass

    def hit_test(self, position: Point) -> ElementRef | None:
        return None

    def handle_pointer(self, position: Point) -> None:
        if self._state is None:
            return
        self.controller.pointer_at(self.hit_test(position), position)

    def handle_pointer_exit(self) -> None:
        self.controller.pointer_leave()

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.animations.dispose_all()
        self.controller.pointer_leave()
        self.initialized = False
