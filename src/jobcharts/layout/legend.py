from __future__ import annotations

from typing import Callable, Sequence

from jobcharts.layout.options import ChartOptions
from jobcharts.layout.types import LegendEntry, LegendPosition, Wedge

LEGEND_FONT_SIZE = 12
SWATCH_SIZE = 12.0
SWATCH_GAP = 8.0
ROW_HEIGHT = SWATCH_SIZE + 8.0
RIGHT_GAP = 24.0
RIGHT_MAX_WIDTH = 200.0
BOTTOM_GAP = 16.0
# Average glyph advance relative to font size; good enough for wrapping.
GLYPH_WIDTH_RATIO = 0.6


def estimate_text_width(text: str, font_size: float = LEGEND_FONT_SIZE) -> float:
    return len(text) * font_size * GLYPH_WIDTH_RATIO


def legend_layout(
    wedges: Sequence[Wedge],
    options: ChartOptions,
    text_for: Callable[[Wedge], str],
) -> tuple[LegendEntry, ...]:
    """Place one entry per wedge in a region right of or below the chart."""

    if not wedges:
        return ()
    if options.legend_position is LegendPosition.RIGHT:
        return _stacked(wedges, options, text_for)
    return _wrapped(wedges, options, text_for)


def legend_region_size(
    entries: Sequence[LegendEntry], options: ChartOptions
) -> tuple[float, float]:
    """Extra ``(width, height)`` the legend needs beyond the chart surface."""

    if not entries:
        return (0.0, 0.0)
    if options.legend_position is LegendPosition.RIGHT:
        return (RIGHT_GAP + RIGHT_MAX_WIDTH, 0.0)
    bottom = max(entry.y + entry.height for entry in entries)
    return (0.0, bottom - options.height + BOTTOM_GAP)


def _entry_width(text: str) -> float:
    return SWATCH_SIZE + SWATCH_GAP + estimate_text_width(text)


def _stacked(
    wedges: Sequence[Wedge],
    options: ChartOptions,
    text_for: Callable[[Wedge], str],
) -> tuple[LegendEntry, ...]:
    x = options.width + RIGHT_GAP
    top = options.height / 2.0 - len(wedges) * ROW_HEIGHT / 2.0
    entries = []
    for row, wedge in enumerate(wedges):
        text = text_for(wedge)
        entries.append(
            LegendEntry(
                label=wedge.key,
                color=wedge.color,
                percentage=wedge.percentage,
                text=text,
                x=x,
                y=top + row * ROW_HEIGHT,
                width=min(_entry_width(text), RIGHT_MAX_WIDTH),
                height=SWATCH_SIZE,
                swatch_size=SWATCH_SIZE,
            )
        )
    return tuple(entries)


def _wrapped(
    wedges: Sequence[Wedge],
    options: ChartOptions,
    text_for: Callable[[Wedge], str],
) -> tuple[LegendEntry, ...]:
    rows: list[list[tuple[Wedge, str, float]]] = [[]]
    row_width = 0.0
    for wedge in wedges:
        text = text_for(wedge)
        width = _entry_width(text)
        needed = width if not rows[-1] else row_width + BOTTOM_GAP + width
        if rows[-1] and needed > options.width:
            rows.append([])
            needed = width
        rows[-1].append((wedge, text, width))
        row_width = needed

    entries = []
    for row_index, row in enumerate(rows):
        used = sum(width for _, _, width in row) + BOTTOM_GAP * (len(row) - 1)
        x = max(0.0, (options.width - used) / 2.0)
        y = options.height + BOTTOM_GAP + row_index * ROW_HEIGHT
        for wedge, text, width in row:
            entries.append(
                LegendEntry(
                    label=wedge.key,
                    color=wedge.color,
                    percentage=wedge.percentage,
                    text=text,
                    x=x,
                    y=y,
                    width=width,
                    height=SWATCH_SIZE,
                    swatch_size=SWATCH_SIZE,
                )
            )
            x += width + BOTTOM_GAP
    return tuple(entries)
