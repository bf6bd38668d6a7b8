"""Sankey-style ribbons between two anchors.

A ribbon is closed by two opposing cubic Beziers offset by half the stroke
width. Both control points sit at the horizontal midpoint so flows read left
to right.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from jobcharts.geometry import CubicCurve, Point, sample_cubic

DEFAULT_SAMPLES = 32


@dataclass(frozen=True)
class RibbonPath:
    source: Point
    target: Point
    width: float
    top: CubicCurve
    bottom: CubicCurve

    @property
    def control_x(self) -> float:
        return self.top[1][0]

    def commands(self) -> tuple[tuple[str, tuple[float, ...]], ...]:
        """Path commands: move, curve, line, curve back, close."""

        top, bottom = self.top, self.bottom
        return (
            ("M", top[0]),
            ("C", (*top[1], *top[2], *top[3])),
            ("L", bottom[0]),
            ("C", (*bottom[1], *bottom[2], *bottom[3])),
            ("Z", ()),
        )

    def to_svg(self) -> str:
        parts = []
        for command, values in self.commands():
            coords = " ".join(f"{value:g}" for value in values)
            parts.append(f"{command} {coords}".strip())
        return " ".join(parts)

    def polygon(self, samples: int = DEFAULT_SAMPLES) -> np.ndarray:
        return np.vstack((sample_cubic(self.top, samples), sample_cubic(self.bottom, samples)))

    def centerline(self, samples: int = DEFAULT_SAMPLES) -> np.ndarray:
        half = self.width / 2.0
        top = sample_cubic(self.top, samples)
        return top + np.array([0.0, half])


def curve_path(source: Point, target: Point, stroke_width: float) -> RibbonPath:
    sx, sy = source
    tx, ty = target
    half = max(stroke_width, 0.0) / 2.0
    control_x = sx + (tx - sx) * 0.5
    top: CubicCurve = (
        (sx, sy - half),
        (control_x, sy - half),
        (control_x, ty - half),
        (tx, ty - half),
    )
    bottom: CubicCurve = (
        (tx, ty + half),
        (control_x, ty + half),
        (control_x, sy + half),
        (sx, sy + half),
    )
    return RibbonPath(source=source, target=target, width=max(stroke_width, 0.0), top=top, bottom=bottom)
