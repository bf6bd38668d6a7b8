from jobcharts.geometry.bezier import CubicCurve, cubic_point, sample_cubic
from jobcharts.geometry.easing import Easing
from jobcharts.geometry.primitives import (ORIGIN, TAU, Point, arc_centroid,
                                           arc_points, cartesian_to_polar,
                                           clamp, lerp, lerp_point, mid_angle,
                                           midpoint, point_in_polygon,
                                           point_in_wedge, polar_to_cartesian,
                                           wedge_outline)

__all__ = [
    "ORIGIN",
    "TAU",
    "CubicCurve",
    "Easing",
    "Point",
    "arc_centroid",
    "arc_points",
    "cartesian_to_polar",
    "clamp",
    "cubic_point",
    "lerp",
    "lerp_point",
    "mid_angle",
    "midpoint",
    "point_in_polygon",
    "point_in_wedge",
    "polar_to_cartesian",
    "sample_cubic",
    "wedge_outline",
]
