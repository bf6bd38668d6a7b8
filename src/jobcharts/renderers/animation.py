"""Per-element animations driven by reactivex ticks.

Animations are plain :class:`AnimationSpec` values. The scheduler keeps one
subscription per key (``"<element key>#<channel>"``); starting a new spec for
a key disposes the running one, and :meth:`AnimationScheduler.retain` disposes
everything that belongs to elements no longer in the layout. Looping specs run
until cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import reactivex
from reactivex import abc
from reactivex import operators as ops

from jobcharts.geometry import Easing, lerp
from jobcharts.utilities.env import Configuration
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)

CHANNEL_SEPARATOR = "#"


@dataclass(frozen=True)
class AnimationSpec:
    duration_ms: int
    start: float = 0.0
    end: float = 1.0
    easing: Easing = Easing.LINEAR
    delay_ms: int = 0
    loop: bool = False
    # Looping specs alternate direction every cycle instead of jumping back.
    alternate: bool = False

    def progress_at(self, elapsed_ms: float) -> float:
        if elapsed_ms <= self.delay_ms:
            return 0.0
        if self.duration_ms <= 0:
            return 1.0
        t = (elapsed_ms - self.delay_ms) / self.duration_ms
        if not self.loop:
            return min(t, 1.0)
        cycle, fraction = divmod(t, 1.0)
        if self.alternate and int(cycle) % 2 == 1:
            return 1.0 - fraction
        return fraction

    def value_at(self, elapsed_ms: float) -> float:
        return lerp(self.start, self.end, self.easing.apply(self.progress_at(elapsed_ms)))

    def is_finished(self, elapsed_ms: float) -> bool:
        return not self.loop and elapsed_ms >= self.delay_ms + self.duration_ms


def animation_key(element_key: str, channel: str) -> str:
    return f"{element_key}{CHANNEL_SEPARATOR}{channel}"


def element_of(key: str) -> str:
    return key.split(CHANNEL_SEPARATOR, 1)[0]


class AnimationScheduler:
    def __init__(
        self,
        scheduler: abc.SchedulerBase | None = None,
        *,
        frame_interval_ms: int | None = None,
        enabled: bool = True,
    ) -> None:
        self._scheduler = scheduler
        self._frame_interval_ms = (
            Configuration.frame_interval_ms()
            if frame_interval_ms is None
            else frame_interval_ms
        )
        self.enabled = enabled
        self._values: dict[str, float] = {}
        self._handles: dict[str, tuple[object, abc.DisposableBase]] = {}

    @property
    def active_keys(self) -> frozenset[str]:
        return frozenset(self._handles)

    def is_running(self, key: str) -> bool:
        return key in self._handles

    def value(self, key: str, default: float = 1.0) -> float:
        return self._values.get(key, default)

    def start(self, key: str, spec: AnimationSpec) -> None:
        """Run ``spec`` under ``key``, superseding any animation already there."""

        self.cancel(key)
        if not self.enabled or (spec.duration_ms <= 0 and spec.delay_ms <= 0 and not spec.loop):
            self._values[key] = spec.end
            return

        self._values[key] = spec.value_at(0)
        frame = self._frame_interval_ms
        token = object()

        def on_next(elapsed_ms: float) -> None:
            self._values[key] = spec.value_at(elapsed_ms)

        def on_completed() -> None:
            handle = self._handles.get(key)
            if handle is not None and handle[0] is token:
                del self._handles[key]

        subscription = (
            reactivex.interval(frame / 1000.0, scheduler=self._scheduler)
            .pipe(
                ops.map(lambda tick: (tick + 1) * frame),
                ops.take_while(lambda elapsed: not spec.is_finished(elapsed), inclusive=True),
            )
            .subscribe(on_next=on_next, on_completed=on_completed)
        )
        self._handles[key] = (token, subscription)

    def cancel(self, key: str) -> None:
        handle = self._handles.pop(key, None)
        if handle is not None:
            handle[1].dispose()

    def retain(self, element_keys: Iterable[str]) -> None:
        """Dispose animations (and values) of elements not in ``element_keys``."""

        keep = set(element_keys)
        stale = [key for key in self._handles if element_of(key) not in keep]
        for key in stale:
            self.cancel(key)
        for key in [key for key in self._values if element_of(key) not in keep]:
            del self._values[key]
        if stale:
            logger.debug("Disposed %d stale animations", len(stale))

    def dispose_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key)
        self._values.clear()
