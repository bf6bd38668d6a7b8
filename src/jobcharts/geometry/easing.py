from __future__ import annotations

import math
from enum import StrEnum

ELASTIC_AMPLITUDE = 1.0
ELASTIC_PERIOD = 0.4


def _tpmt(x: float) -> float:
    # 2^-10x scaled so that _tpmt(0) == 1 and _tpmt(1) == 0
    return (math.pow(2.0, -10.0 * x) - 0.0009765625) * 1.0009775171065494


def elastic_out(
    t: float,
    amplitude: float = ELASTIC_AMPLITUDE,
    period: float = ELASTIC_PERIOD,
) -> float:
    amplitude = max(1.0, amplitude)
    p = period / (2.0 * math.pi)
    s = math.asin(1.0 / amplitude) * p
    return 1.0 - amplitude * _tpmt(t) * math.sin((t + s) / p)


def sin_in_out(t: float) -> float:
    return (1.0 - math.cos(math.pi * t)) / 2.0


def cubic_in_out(t: float) -> float:
    t *= 2.0
    if t <= 1.0:
        return t * t * t / 2.0
    t -= 2.0
    return (t * t * t + 2.0) / 2.0


class Easing(StrEnum):
    LINEAR = "linear"
    SIN_IN_OUT = "sin_in_out"
    CUBIC_IN_OUT = "cubic_in_out"
    ELASTIC_OUT = "elastic_out"

    def apply(self, t: float) -> float:
        t = min(1.0, max(0.0, t))
        match self:
            case Easing.LINEAR:
                return t
            case Easing.SIN_IN_OUT:
                return sin_in_out(t)
            case Easing.CUBIC_IN_OUT:
                return cubic_in_out(t)
            case Easing.ELASTIC_OUT:
                return elastic_out(t)
        raise ValueError(f"Unhandled easing {self!r}")
