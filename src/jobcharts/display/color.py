from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DARKER_FACTOR = 0.7


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self.tuple():
            assert 0 <= variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#rrggbb`` or ``#rgb``."""
        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    @classmethod
    def coerce(cls, value: "Color | str") -> "Color":
        return value if isinstance(value, Color) else cls.from_hex(value)

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self, alpha: float) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, _clamp_rgb(alpha * 255))

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    def __getitem__(self, index: int) -> int:
        return self.tuple()[index]

    def darker(self, k: float = 1.0) -> "Color":
        return self.scale(DARKER_FACTOR**k)

    def brighter(self, k: float = 1.0) -> "Color":
        return self.scale((1 / DARKER_FACTOR) ** k)

    def scale(self, factor: float) -> "Color":
        return Color(
            r=_clamp_rgb(self.r * factor),
            g=_clamp_rgb(self.g * factor),
            b=_clamp_rgb(self.b * factor),
        )

    def mix(self, other: "Color", fraction: float) -> "Color":
        return Color(
            r=_clamp_rgb(self.r + (other.r - self.r) * fraction),
            g=_clamp_rgb(self.g + (other.g - self.g) * fraction),
            b=_clamp_rgb(self.b + (other.b - self.b) * fraction),
        )


def _clamp_rgb(value: float) -> int:
    return min(255, max(0, int(round(value))))


WHITE = Color(255, 255, 255)
TEXT = Color.from_hex("#374151")
TEXT_MUTED = Color.from_hex("#6b7280")
TEXT_STRONG = Color.from_hex("#1f2937")
CONNECTOR = Color.from_hex("#9ca3af")
EMPTY_RING = Color.from_hex("#e5e7eb")
TOOLTIP_BACKGROUND = Color.from_hex("#1f2937")
