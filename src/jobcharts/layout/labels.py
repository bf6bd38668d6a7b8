"""Direct-label placement around a donut.

Each hemisphere is resolved on its own with a single greedy top-to-bottom
pass: a label that sits closer than ``min_vertical_spacing`` to the one above
it is pushed down to exactly that spacing. The pass is O(n) and
deterministic; it does not try to find an optimal arrangement.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from jobcharts.geometry import ORIGIN, Point, midpoint, polar_to_cartesian
from jobcharts.layout.types import LabelCandidate, Side, Wedge

DEFAULT_ALIGN_OFFSET = 15.0


@dataclass
class _Draft:
    wedge: Wedge
    y: float
    side: Side
    edge: Point


def side_for_angle(angle: float) -> Side:
    return Side.RIGHT if angle < math.pi else Side.LEFT


def resolve_collisions(positions: Sequence[float], spacing: float) -> list[float]:
    """Greedy single pass over already sorted vertical positions."""

    resolved: list[float] = []
    for y in positions:
        if resolved and y - resolved[-1] < spacing:
            y = resolved[-1] + spacing
        resolved.append(y)
    return resolved


def place_labels(
    wedges: Sequence[Wedge],
    *,
    label_radius: float,
    min_slice_angle: float,
    min_vertical_spacing: float,
    edge_radius: float | None = None,
    center: Point = ORIGIN,
    text_for: Callable[[Wedge], str] | None = None,
    align_offset: float = DEFAULT_ALIGN_OFFSET,
) -> tuple[LabelCandidate, ...]:
    edge_radius = label_radius if edge_radius is None else edge_radius
    drafts: list[_Draft] = []
    for wedge in wedges:
        if wedge.span < min_slice_angle:
            continue
        angle = wedge.mid_angle
        _, anchor_y = polar_to_cartesian(angle, label_radius, center)
        drafts.append(
            _Draft(
                wedge=wedge,
                y=anchor_y,
                side=side_for_angle(angle),
                edge=polar_to_cartesian(angle, edge_radius, center),
            )
        )

    placed: list[LabelCandidate] = []
    for side in (Side.LEFT, Side.RIGHT):
        group = sorted(
            (draft for draft in drafts if draft.side is side),
            key=lambda draft: draft.y,
        )
        direction = 1.0 if side is Side.RIGHT else -1.0
        x = center[0] + direction * (label_radius + align_offset)
        ys = resolve_collisions([draft.y for draft in group], min_vertical_spacing)
        for draft, y in zip(group, ys):
            anchor = (x, y)
            placed.append(
                LabelCandidate(
                    wedge=draft.wedge,
                    anchor_x=x,
                    anchor_y=y,
                    side=side,
                    text=text_for(draft.wedge) if text_for else draft.wedge.key,
                    connector=(draft.edge, midpoint(draft.edge, anchor), anchor),
                )
            )
    return tuple(placed)
