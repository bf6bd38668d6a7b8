"""Polar geometry shared by the donut layout, hit testing and rendering.

Angles follow the dashboard convention: ``0`` points at twelve o'clock and
angles grow clockwise, with screen coordinates where ``y`` grows downward.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

TAU = 2.0 * math.pi
Point = tuple[float, float]
ORIGIN: Point = (0.0, 0.0)

# Arc tessellation density for drawing and polygon hit tests.
SEGMENTS_PER_RADIAN = 24


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def lerp_point(start: Point, end: Point, t: float) -> Point:
    return (lerp(start[0], end[0], t), lerp(start[1], end[1], t))


def midpoint(start: Point, end: Point) -> Point:
    return lerp_point(start, end, 0.5)


def polar_to_cartesian(angle: float, radius: float, center: Point = ORIGIN) -> Point:
    return (
        center[0] + radius * math.sin(angle),
        center[1] - radius * math.cos(angle),
    )


def cartesian_to_polar(point: Point, center: Point = ORIGIN) -> tuple[float, float]:
    """Return ``(angle, radius)`` of ``point`` with the angle in ``[0, TAU)``."""

    dx = point[0] - center[0]
    dy = point[1] - center[1]
    angle = math.atan2(dx, -dy) % TAU
    return angle, math.hypot(dx, dy)


def mid_angle(start_angle: float, end_angle: float) -> float:
    return (start_angle + end_angle) / 2.0


def arc_centroid(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    center: Point = ORIGIN,
) -> Point:
    """Point halfway through the wedge in both angle and radius."""

    return polar_to_cartesian(
        mid_angle(start_angle, end_angle),
        (inner_radius + outer_radius) / 2.0,
        center,
    )


def arc_points(
    start_angle: float,
    end_angle: float,
    radius: float,
    center: Point = ORIGIN,
    segments_per_radian: int = SEGMENTS_PER_RADIAN,
) -> np.ndarray:
    span = max(end_angle - start_angle, 0.0)
    count = max(2, int(math.ceil(span * segments_per_radian)) + 1)
    angles = np.linspace(start_angle, end_angle, count)
    xs = center[0] + radius * np.sin(angles)
    ys = center[1] - radius * np.cos(angles)
    return np.column_stack((xs, ys))


def wedge_outline(
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    center: Point = ORIGIN,
    segments_per_radian: int = SEGMENTS_PER_RADIAN,
) -> np.ndarray:
    """Closed polygon of an annular wedge: outer arc forward, inner arc back."""

    outer = arc_points(start_angle, end_angle, outer_radius, center, segments_per_radian)
    if inner_radius <= 0:
        return np.vstack((outer, np.array([center], dtype=float)))
    inner = arc_points(start_angle, end_angle, inner_radius, center, segments_per_radian)
    return np.vstack((outer, inner[::-1]))


def point_in_wedge(
    point: Point,
    start_angle: float,
    end_angle: float,
    inner_radius: float,
    outer_radius: float,
    center: Point = ORIGIN,
) -> bool:
    angle, radius = cartesian_to_polar(point, center)
    if not inner_radius <= radius <= outer_radius:
        return False
    return start_angle <= angle <= end_angle


def point_in_polygon(point: Point, polygon: Sequence[Point] | np.ndarray) -> bool:
    """Even-odd ray casting test."""

    vertices = np.asarray(polygon, dtype=float)
    if len(vertices) < 3:
        return False
    x, y = point
    xs, ys = vertices[:, 0], vertices[:, 1]
    next_xs, next_ys = np.roll(xs, -1), np.roll(ys, -1)
    straddles = (ys > y) != (next_ys > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        crossing_x = xs + (y - ys) * (next_xs - xs) / (next_ys - ys)
    crossings = straddles & (x < crossing_x)
    return bool(np.count_nonzero(crossings) % 2)
