from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from jobcharts.layout.types import LegendPosition
from jobcharts.utilities.env import Configuration

DEFAULT_COLOR_SCHEME: tuple[str, ...] = (
    "#667eea",
    "#764ba2",
    "#f093fb",
    "#4facfe",
    "#43e97b",
)
DEFAULT_PAD_ANGLE = 0.02
DEFAULT_MIN_SLICE_ANGLE = 0.1  # ~5.7 degrees


@dataclass(frozen=True)
class ChartOptions:
    """Recognised configuration for a single chart instance."""

    width: int = 400
    height: int = 400
    inner_radius: float = 60.0
    outer_radius: float = 120.0
    color_scheme: tuple[str, ...] = DEFAULT_COLOR_SCHEME
    show_labels: bool = True
    show_percentages: bool = True
    animation_duration_ms: int = field(
        default_factory=Configuration.animation_duration_ms
    )
    min_slice_angle: float = DEFAULT_MIN_SLICE_ANGLE
    use_legend: bool = False
    legend_position: LegendPosition = LegendPosition.RIGHT
    pad_angle: float = DEFAULT_PAD_ANGLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Chart width and height must be positive")
        if not 0 <= self.inner_radius <= self.outer_radius:
            raise ValueError("inner_radius must be between 0 and outer_radius")
        if not self.color_scheme:
            raise ValueError("color_scheme must contain at least one color")
        if self.animation_duration_ms < 0:
            raise ValueError("animation_duration_ms must not be negative")
        object.__setattr__(self, "color_scheme", tuple(self.color_scheme))
        object.__setattr__(
            self, "legend_position", LegendPosition(self.legend_position)
        )

    @property
    def animated(self) -> bool:
        return self.animation_duration_ms > 0

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    def with_changes(self, **changes: Any) -> "ChartOptions":
        return replace(self, **changes)
