"""Render-agnostic layout values.

Everything here is a frozen dataclass: layout functions build new values on
every pass and renderers only read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum

from jobcharts.geometry import Point, mid_angle


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class LegendPosition(StrEnum):
    RIGHT = "right"
    BOTTOM = "bottom"


class Stage(StrEnum):
    APPLICATIONS = "applications"
    REJECTED = "rejected"
    PENDING = "pending"
    INTERVIEWING = "interviewing"
    OFFERS = "offers"
    INTERVIEW_RECORDS = "interviewRecords"
    DECLINED = "declined"
    ACCEPTED = "accepted"


class LinkKind(Enum):
    """Known funnel connections; ``FALLBACK`` covers anything else."""

    APPLICATIONS_REJECTED = (Stage.APPLICATIONS, Stage.REJECTED)
    APPLICATIONS_PENDING = (Stage.APPLICATIONS, Stage.PENDING)
    APPLICATIONS_INTERVIEWING = (Stage.APPLICATIONS, Stage.INTERVIEWING)
    APPLICATIONS_OFFERS = (Stage.APPLICATIONS, Stage.OFFERS)
    INTERVIEWING_RECORDS = (Stage.INTERVIEWING, Stage.INTERVIEW_RECORDS)
    OFFERS_DECLINED = (Stage.OFFERS, Stage.DECLINED)
    OFFERS_ACCEPTED = (Stage.OFFERS, Stage.ACCEPTED)
    FALLBACK = None

    @classmethod
    def for_pair(cls, source_id: str, target_id: str) -> "LinkKind":
        for kind in cls:
            if kind.value is not None and kind.value == (source_id, target_id):
                return kind
        return cls.FALLBACK


@dataclass(frozen=True)
class CategoricalDatum:
    label: str
    value: float
    color: str | None = None


@dataclass(frozen=True)
class Wedge:
    datum: CategoricalDatum
    index: int
    start_angle: float
    end_angle: float
    pad_angle: float
    percentage: float
    color: str

    @property
    def key(self) -> str:
        return self.datum.label

    @property
    def value(self) -> float:
        return self.datum.value

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return mid_angle(self.start_angle, self.end_angle)


@dataclass(frozen=True)
class LabelCandidate:
    wedge: Wedge
    anchor_x: float
    anchor_y: float
    side: Side
    text: str
    connector: tuple[Point, Point, Point]

    @property
    def key(self) -> str:
        return self.wedge.key


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str
    percentage: float
    text: str
    x: float
    y: float
    width: float
    height: float
    swatch_size: float = 12.0

    @property
    def key(self) -> str:
        return self.label


@dataclass(frozen=True)
class FlowNode:
    id: str
    name: str
    value: float
    x: float
    y: float
    width: float
    height: float
    color: str

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0


@dataclass(frozen=True)
class FlowLink:
    source_id: str
    target_id: str
    value: float
    source_anchor_x: float
    source_anchor_y: float
    target_anchor_x: float
    target_anchor_y: float
    stroke_width: float
    color: str
    kind: LinkKind = LinkKind.FALLBACK

    @property
    def key(self) -> str:
        return f"{self.source_id}->{self.target_id}"

    @property
    def source_point(self) -> Point:
        return (self.source_anchor_x, self.source_anchor_y)

    @property
    def target_point(self) -> Point:
        return (self.target_anchor_x, self.target_anchor_y)


@dataclass(frozen=True)
class FlowMetric:
    label: str
    value_text: str
    x: float
    y: float


@dataclass(frozen=True)
class Bar:
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float
    color: str

    @property
    def key(self) -> str:
        return self.label


@dataclass(frozen=True)
class LayoutResult:
    width: float
    height: float
    total: float = 0.0
    wedges: tuple[Wedge, ...] = field(default_factory=tuple)
    labels: tuple[LabelCandidate, ...] = field(default_factory=tuple)
    legend: tuple[LegendEntry, ...] = field(default_factory=tuple)
    nodes: tuple[FlowNode, ...] = field(default_factory=tuple)
    links: tuple[FlowLink, ...] = field(default_factory=tuple)
    metrics: tuple[FlowMetric, ...] = field(default_factory=tuple)
    bars: tuple[Bar, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.wedges or self.nodes or self.bars)

    def node(self, node_id: str) -> FlowNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def wedge(self, key: str) -> Wedge | None:
        for wedge in self.wedges:
            if wedge.key == key:
                return wedge
        return None

    def element_keys(self) -> frozenset[str]:
        """Identities of every drawable element, used to prune animations."""
        keys: set[str] = set()
        keys.update(f"wedge:{w.key}" for w in self.wedges)
        keys.update(f"label:{label.key}" for label in self.labels)
        keys.update(f"node:{n.id}" for n in self.nodes)
        keys.update(f"link:{link.key}" for link in self.links)
        keys.update(f"bar:{b.key}" for b in self.bars)
        return frozenset(keys)
