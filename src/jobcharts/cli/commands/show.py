from pathlib import Path
from typing import Annotated

import pygame
import typer

from jobcharts.cli.commands.options import chart_options
from jobcharts.layout import LegendPosition
from jobcharts.runtime.container import ChartKind, build_dashboard_container
from jobcharts.runtime.dashboard import Dashboard
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)


def show_command(
    statistics: Annotated[Path, typer.Argument(help="Statistics JSON file")],
    chart: Annotated[ChartKind, typer.Option("--chart")] = ChartKind.DONUT,
    legend: bool = typer.Option(
        False,
        "--legend",
        help="Show a legend instead of outside labels",
    ),
    legend_position: Annotated[
        LegendPosition, typer.Option("--legend-position")
    ] = LegendPosition.RIGHT,
) -> None:
    """Open an interactive window for one chart."""

    options = chart_options(chart, legend=legend, legend_position=legend_position)
    container = build_dashboard_container(
        statistics_path=statistics,
        chart=chart,
        options=options,
    )
    try:
        dashboard = container[Dashboard]
        dashboard.start()
    except (OSError, ValueError, pygame.error) as error:
        logger.error("Could not show %s: %s", statistics, error)
        raise typer.Exit(code=1)
