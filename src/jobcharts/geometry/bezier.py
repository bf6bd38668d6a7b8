from __future__ import annotations

import numpy as np

from jobcharts.geometry.primitives import Point

CubicCurve = tuple[Point, Point, Point, Point]


def cubic_point(curve: CubicCurve, t: float) -> Point:
    p0, p1, p2, p3 = curve
    u = 1.0 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def sample_cubic(curve: CubicCurve, samples: int = 32) -> np.ndarray:
    """Return ``samples`` points along ``curve`` including both endpoints."""

    t = np.linspace(0.0, 1.0, max(samples, 2))[:, None]
    u = 1.0 - t
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in curve)
    return (u**3) * p0 + 3 * (u**2) * t * p1 + 3 * u * (t**2) * p2 + (t**3) * p3
