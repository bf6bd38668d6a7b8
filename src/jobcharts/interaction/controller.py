"""Hover state machine shared by every chart renderer.

Each interactive element is either idle or hovered, and at most one element
is hovered at a time. Moving onto a new element without a leave event in
between still emits the leave transition for the old element before the
enter transition for the new one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from reactivex import Observable
from reactivex.subject import Subject

from jobcharts.geometry import Point
from jobcharts.interaction.elements import ElementKind, ElementRef
from jobcharts.interaction.tooltips import TooltipContent, tooltip_for
from jobcharts.utilities.env import Configuration
from jobcharts.utilities.logging import get_logger
from jobcharts.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)


class HoverState(StrEnum):
    IDLE = "idle"
    HOVERED = "hovered"


class Emphasis(StrEnum):
    NORMAL = "normal"
    INTENSIFIED = "intensified"
    DIMMED = "dimmed"


@dataclass(frozen=True)
class HoverTransition:
    element: ElementRef
    state: HoverState
    position: Point | None


@dataclass(frozen=True)
class Tooltip:
    content: TooltipContent
    x: float
    y: float


class InteractionController:
    def __init__(self, *, total: float = 0.0, tooltip_offset: float | None = None) -> None:
        self._total = total
        self._offset = (
            Configuration.tooltip_offset() if tooltip_offset is None else tooltip_offset
        )
        self._hovered: ElementRef | None = None
        self._tooltip: Tooltip | None = None
        self._position: Point | None = None
        self._transitions: Subject[HoverTransition] = Subject()

    @property
    def transitions(self) -> Observable[HoverTransition]:
        return self._transitions

    @property
    def hovered(self) -> ElementRef | None:
        return self._hovered

    @property
    def tooltip(self) -> Tooltip | None:
        return self._tooltip

    def state_of(self, element: ElementRef) -> HoverState:
        return HoverState.HOVERED if element == self._hovered else HoverState.IDLE

    def set_total(self, total: float) -> None:
        self._total = total

    def pointer_enter(self, element: ElementRef, position: Point) -> None:
        if element == self._hovered:
            self.pointer_move(position)
            return
        if self._hovered is not None:
            self.pointer_leave(position)

        self._hovered = element
        self._position = position
        self._tooltip = self._build_tooltip(element, position)
        self._emit(element, HoverState.HOVERED, position)

    def pointer_move(self, position: Point) -> None:
        if self._hovered is None:
            return
        self._position = position
        self._tooltip = self._build_tooltip(self._hovered, position)

    def pointer_leave(self, position: Point | None = None) -> None:
        element = self._hovered
        if element is None:
            return
        self._hovered = None
        self._tooltip = None
        self._position = None
        self._emit(element, HoverState.IDLE, position)

    def pointer_at(self, element: ElementRef | None, position: Point) -> None:
        """Route one pointer sample, as produced by hit testing."""

        if element is None:
            self.pointer_leave(position)
        elif element == self._hovered:
            self._hovered = element
            self.pointer_move(position)
        else:
            self.pointer_enter(element, position)

    def sync(self, elements: Iterable[ElementRef]) -> None:
        """Adopt the new layout's ref for the hovered element, or drop the hover.

        Refs compare by identity only, so the hovered ref is swapped for the
        fresh one and the tooltip rebuilt with its current value and total.
        """

        if self._hovered is None:
            return
        current = next((element for element in elements if element == self._hovered), None)
        if current is None:
            self.pointer_leave()
            return
        self._hovered = current
        if self._position is not None:
            self._tooltip = self._build_tooltip(current, self._position)

    def emphasis(self, element: ElementRef) -> Emphasis:
        hovered = self._hovered
        if hovered is None:
            return Emphasis.NORMAL
        if hovered == element:
            return Emphasis.INTENSIFIED
        if hovered.kind is ElementKind.LEGEND and element.kind is ElementKind.WEDGE:
            return Emphasis.NORMAL if element.key == hovered.key else Emphasis.DIMMED
        return Emphasis.NORMAL

    def dispose(self) -> None:
        self.pointer_leave()
        self._transitions.on_completed()
        self._transitions.dispose()

    def _build_tooltip(self, element: ElementRef, position: Point) -> Tooltip | None:
        content = tooltip_for(element, self._total)
        if content is None:
            return None
        return Tooltip(content=content, x=position[0] + self._offset, y=position[1] - self._offset)

    def _emit(self, element: ElementRef, state: HoverState, position: Point | None) -> None:
        get_logging_controller().log(
            key="interaction.hover",
            logger=logger,
            level=logging.DEBUG,
            msg="interaction.hover %s %s",
            args=(element.animation_key, state.value),
        )
        self._transitions.on_next(HoverTransition(element=element, state=state, position=position))
