import os
from pathlib import Path
from typing import Annotated, Optional

import pygame
import typer

from jobcharts.cli.commands.options import chart_options
from jobcharts.layout import LegendPosition
from jobcharts.renderers import ChartRenderer
from jobcharts.runtime.container import ChartKind, build_dashboard_container
from jobcharts.runtime.headless import render_to_surface, save_surface
from jobcharts.utilities.logging import get_logger

logger = get_logger(__name__)


def render_command(
    statistics: Annotated[Path, typer.Argument(help="Statistics JSON file")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Image file to write")],
    chart: Annotated[ChartKind, typer.Option("--chart")] = ChartKind.DONUT,
    legend: bool = typer.Option(
        False,
        "--legend",
        help="Show a legend instead of outside labels",
    ),
    legend_position: Annotated[
        LegendPosition, typer.Option("--legend-position")
    ] = LegendPosition.RIGHT,
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
) -> None:
    """Render a chart to an image without opening a window."""

    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    options = chart_options(
        chart,
        legend=legend,
        legend_position=legend_position,
        width=width,
        height=height,
        animated=False,
    )
    pygame.init()
    renderer: ChartRenderer | None = None
    try:
        container = build_dashboard_container(
            statistics_path=statistics,
            chart=chart,
            options=options,
            headless=True,
        )
        renderer = container[ChartRenderer]
        surface = render_to_surface(renderer)
        save_surface(surface, output)
    except (OSError, ValueError) as error:
        # json.JSONDecodeError is a ValueError.
        logger.error("Could not render %s: %s", statistics, error)
        raise typer.Exit(code=1)
    finally:
        if renderer is not None:
            renderer.reset()
        pygame.quit()
    typer.echo(str(output))
