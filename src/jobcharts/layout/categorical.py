"""Donut wedge allocation.

Wedges start at twelve o'clock and run clockwise. Each wedge is followed by a
``pad_angle`` gap, so the wedge spans plus ``n * pad_angle`` always add up to a
full turn.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from jobcharts.geometry import TAU
from jobcharts.layout.options import DEFAULT_COLOR_SCHEME, DEFAULT_PAD_ANGLE
from jobcharts.layout.types import CategoricalDatum, Wedge

PERCENT_DECIMALS = 1


def visible_data(
    data: Iterable[CategoricalDatum], *, sort_descending: bool = True
) -> list[CategoricalDatum]:
    """Drop non-positive entries and order by value (stable for ties)."""

    kept = [datum for datum in data if datum.value > 0]
    if sort_descending:
        kept.sort(key=lambda datum: datum.value, reverse=True)
    return kept


def total_value(data: Iterable[CategoricalDatum]) -> float:
    return sum(datum.value for datum in data if datum.value > 0)


def percentage(value: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return round(value / total * 100.0, PERCENT_DECIMALS)


def compute_percentages(
    data: Sequence[CategoricalDatum], *, include_zero: bool = False
) -> dict[str, float]:
    """Percentage per label; zero entries appear (as 0.0) only on request."""

    total = total_value(data)
    return {
        datum.label: percentage(max(datum.value, 0.0), total)
        for datum in data
        if datum.value > 0 or include_zero
    }


def effective_pad_angle(pad_angle: float, count: int) -> float:
    # Padding may never consume more than half of the turn.
    if count == 0:
        return 0.0
    return min(max(pad_angle, 0.0), TAU / (2 * count))


def layout_wedges(
    data: Sequence[CategoricalDatum],
    *,
    pad_angle: float = DEFAULT_PAD_ANGLE,
    sort_descending: bool = True,
    color_scheme: Sequence[str] = DEFAULT_COLOR_SCHEME,
) -> tuple[Wedge, ...]:
    entries = visible_data(data, sort_descending=sort_descending)
    total = total_value(entries)
    if total <= 0:
        return ()

    pad = effective_pad_angle(pad_angle, len(entries))
    available = TAU - pad * len(entries)

    wedges: list[Wedge] = []
    cursor = 0.0
    for index, datum in enumerate(entries):
        span = datum.value / total * available
        wedges.append(
            Wedge(
                datum=datum,
                index=index,
                start_angle=cursor,
                end_angle=cursor + span,
                pad_angle=pad,
                percentage=percentage(datum.value, total),
                color=datum.color or color_scheme[index % len(color_scheme)],
            )
        )
        cursor += span + pad
    return tuple(wedges)
