from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any, Mapping

import pygame
from lagom import Container, Singleton
from reactivex.scheduler.mainloop import PyGameScheduler

from jobcharts.interaction import InteractionController
from jobcharts.layout import ChartOptions
from jobcharts.renderers import (AnimationScheduler, BarChartRenderer,
                                 ChartRenderer, DonutChartRenderer,
                                 FlowChartRenderer)
from jobcharts.renderers.bars.provider import BarStateProvider
from jobcharts.renderers.donut.provider import DonutStateProvider
from jobcharts.renderers.flow.provider import FlowStateProvider
from jobcharts.runtime.dashboard import Dashboard
from jobcharts.runtime.pygame_event_handler import PygameEventHandler
from jobcharts.stats import ApplicationStatistics, StatisticsProvider
from jobcharts.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


class ChartKind(StrEnum):
    DONUT = "donut"
    OFFERS = "offers"
    FLOW = "flow"
    BARS = "bars"

    @property
    def default_size(self) -> tuple[int, int]:
        match self:
            case ChartKind.FLOW:
                return (800, 450)
            case ChartKind.BARS:
                return (600, 400)
            case _:
                return (400, 400)


def build_renderer(
    chart: ChartKind,
    statistics: StatisticsProvider,
    options: ChartOptions,
    animations: AnimationScheduler,
    controller: InteractionController,
) -> ChartRenderer:
    match chart:
        case ChartKind.DONUT | ChartKind.OFFERS:
            select = (
                ApplicationStatistics.offer_distribution
                if chart is ChartKind.OFFERS
                else ApplicationStatistics.status_distribution
            )
            return DonutChartRenderer(
                DonutStateProvider(statistics, options, select=select),
                animations=animations,
                controller=controller,
            )
        case ChartKind.FLOW:
            return FlowChartRenderer(
                FlowStateProvider(
                    statistics,
                    width=options.width,
                    height=options.height,
                    animation_duration_ms=options.animation_duration_ms,
                ),
                animations=animations,
                controller=controller,
            )
        case ChartKind.BARS:
            return BarChartRenderer(
                BarStateProvider(
                    statistics,
                    width=options.width,
                    height=options.height,
                    animation_duration_ms=options.animation_duration_ms,
                ),
                animations=animations,
                controller=controller,
            )
    raise ValueError(f"Unknown chart kind {chart!r}")


def build_dashboard_container(
    *,
    statistics_path: str | Path,
    chart: ChartKind,
    options: ChartOptions,
    headless: bool = False,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for %s chart.", chart.value)
    _bind(container, overrides, ChartKind, chart)
    _bind(container, overrides, ChartOptions, options)
    _bind(
        container,
        overrides,
        StatisticsProvider,
        Singleton(lambda resolver: StatisticsProvider.from_file(statistics_path)),
    )
    _bind(container, overrides, PyGameScheduler, Singleton(lambda resolver: PyGameScheduler(pygame)))
    _bind(
        container,
        overrides,
        AnimationScheduler,
        Singleton(
            lambda resolver: AnimationScheduler(
                resolver[PyGameScheduler],
                enabled=not headless and options.animated,
            )
        ),
    )
    _bind(container, overrides, InteractionController, Singleton(lambda resolver: InteractionController()))
    _bind(
        container,
        overrides,
        ChartRenderer,
        Singleton(
            lambda resolver: build_renderer(
                resolver[ChartKind],
                resolver[StatisticsProvider],
                resolver[ChartOptions],
                resolver[AnimationScheduler],
                resolver[InteractionController],
            )
        ),
    )
    _bind(container, overrides, PygameEventHandler, Singleton(PygameEventHandler))
    _bind(
        container,
        overrides,
        Dashboard,
        Singleton(
            lambda resolver: Dashboard(
                renderer=resolver[ChartRenderer],
                scheduler=resolver[PyGameScheduler],
                event_handler=resolver[PygameEventHandler],
            )
        ),
    )
    return container


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
