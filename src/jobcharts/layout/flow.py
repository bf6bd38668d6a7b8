"""Application-journey funnel layout.

The funnel has a fixed topology of at most eight stages, so node positions
are fixed per stage as fractions of the plot area rather than packed
automatically. Stages whose value is zero are left out entirely, and any
link touching a missing stage is dropped with them.

All coordinates are absolute surface coordinates (margins included).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from jobcharts.geometry import clamp
from jobcharts.layout.types import (FlowLink, FlowMetric, FlowNode,
                                    LayoutResult, LinkKind, Stage)
from jobcharts.utilities.env import Configuration
from jobcharts.utilities.logging import get_logger

if TYPE_CHECKING:
    from jobcharts.stats.model import ApplicationStatistics

logger = get_logger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 450
NODE_WIDTH = 100.0
NODE_HEIGHT = 60.0
MIN_STROKE_WIDTH = 2.0
MAX_STROKE_WIDTH = 100.0
# Floor for the residual rejected count.
MIN_REJECTED = 1


@dataclass(frozen=True)
class Margin:
    top: float = 40.0
    right: float = 40.0
    bottom: float = 60.0
    left: float = 40.0


MARGIN = Margin()

STAGE_NAMES: Mapping[Stage, str] = {
    Stage.APPLICATIONS: "Applications",
    Stage.REJECTED: "Rejected",
    Stage.PENDING: "Pending",
    Stage.INTERVIEWING: "Interviewing",
    Stage.OFFERS: "Offers",
    Stage.INTERVIEW_RECORDS: "Interview Records",
    Stage.DECLINED: "Declined",
    Stage.ACCEPTED: "Accepted",
}

STAGE_COLORS: Mapping[Stage, str] = {
    Stage.APPLICATIONS: "#667eea",
    Stage.REJECTED: "#ef4444",
    Stage.PENDING: "#fcd34d",
    Stage.INTERVIEWING: "#fb923c",
    Stage.OFFERS: "#43e97b",
    Stage.INTERVIEW_RECORDS: "#e879f9",
    Stage.DECLINED: "#ff6b6b",
    Stage.ACCEPTED: "#51cf66",
}


@dataclass(frozen=True)
class StagePlacement:
    """Node origin as ``fraction * plot size + offset`` on each axis."""

    x_fraction: float
    y_fraction: float
    x_offset: float = 0.0
    y_offset: float = 0.0


STAGE_PLACEMENTS: Mapping[Stage, StagePlacement] = {
    Stage.APPLICATIONS: StagePlacement(0.0, 0.5, x_offset=50.0, y_offset=-NODE_HEIGHT / 2),
    Stage.REJECTED: StagePlacement(0.25, 0.1),
    Stage.PENDING: StagePlacement(0.25, 0.3),
    Stage.INTERVIEWING: StagePlacement(0.25, 0.5),
    Stage.OFFERS: StagePlacement(0.25, 0.7),
    Stage.INTERVIEW_RECORDS: StagePlacement(0.5, 0.45),
    Stage.DECLINED: StagePlacement(0.5, 0.6),
    Stage.ACCEPTED: StagePlacement(0.5, 0.75),
}


@dataclass(frozen=True)
class LinkSpec:
    kind: LinkKind
    # Where the ribbon leaves the source node, as a fraction of its height.
    source_anchor: float

    @property
    def source(self) -> Stage:
        return self.kind.value[0]

    @property
    def target(self) -> Stage:
        return self.kind.value[1]


TOPOLOGY: tuple[LinkSpec, ...] = (
    LinkSpec(LinkKind.APPLICATIONS_REJECTED, 0.1),
    LinkSpec(LinkKind.APPLICATIONS_PENDING, 0.3),
    LinkSpec(LinkKind.APPLICATIONS_INTERVIEWING, 0.7),
    LinkSpec(LinkKind.APPLICATIONS_OFFERS, 0.9),
    LinkSpec(LinkKind.INTERVIEWING_RECORDS, 0.5),
    LinkSpec(LinkKind.OFFERS_DECLINED, 0.3),
    LinkSpec(LinkKind.OFFERS_ACCEPTED, 0.7),
)


@dataclass(frozen=True)
class FunnelCounts:
    total: float
    rejected: float
    pending: float
    interviewing: float
    offers: float
    interview_records: float = 0
    declined: float = 0
    accepted: float = 0

    def value(self, stage: Stage) -> float:
        match stage:
            case Stage.APPLICATIONS:
                return self.total
            case Stage.REJECTED:
                return self.rejected
            case Stage.PENDING:
                return self.pending
            case Stage.INTERVIEWING:
                return self.interviewing
            case Stage.OFFERS:
                return self.offers
            case Stage.INTERVIEW_RECORDS:
                return self.interview_records
            case Stage.DECLINED:
                return self.declined
            case Stage.ACCEPTED:
                return self.accepted
        raise ValueError(f"Unknown stage {stage!r}")


def derive_funnel(stats: ApplicationStatistics) -> FunnelCounts:
    """Stage quantities from aggregate statistics.

    Rejected is the residual of the known statuses floored at one, not the
    reported rejected count; other statuses, if any exist, end up in it.
    """

    current = stats.current_status
    total = stats.total or 1
    return FunnelCounts(
        total=total,
        rejected=max(
            MIN_REJECTED,
            total - current.applied - current.interviewing - current.offered,
        ),
        pending=current.applied,
        interviewing=current.interviewing,
        offers=current.offered,
        interview_records=stats.interview_stats.total_interviews,
        declined=stats.offer_outcomes.declined,
        accepted=stats.offer_outcomes.accepted,
    )


def stroke_width(
    value: float,
    *,
    min_width: float = MIN_STROKE_WIDTH,
    max_width: float = MAX_STROKE_WIDTH,
    cap_value: float | None = None,
) -> float:
    if cap_value is None:
        cap_value = Configuration.stroke_cap_value()
    scale = min(max(value, 0.0) / cap_value, 1.0)
    return clamp(min_width + scale * (max_width - min_width), min_width, max_width)


def layout_nodes(
    counts: FunnelCounts, *, width: float, height: float, margin: Margin = MARGIN
) -> tuple[FlowNode, ...]:
    plot_width = width - margin.left - margin.right
    plot_height = height - margin.top - margin.bottom
    nodes = []
    for stage, placement in STAGE_PLACEMENTS.items():
        value = counts.value(stage)
        if value <= 0:
            continue
        nodes.append(
            FlowNode(
                id=stage.value,
                name=STAGE_NAMES[stage],
                value=value,
                x=margin.left + placement.x_fraction * plot_width + placement.x_offset,
                y=margin.top + placement.y_fraction * plot_height + placement.y_offset,
                width=NODE_WIDTH,
                height=NODE_HEIGHT,
                color=STAGE_COLORS[stage],
            )
        )
    return tuple(nodes)


def layout_links(
    counts: FunnelCounts,
    nodes: tuple[FlowNode, ...],
    *,
    cap_value: float | None = None,
) -> tuple[FlowLink, ...]:
    by_id = {node.id: node for node in nodes}
    links = []
    for spec in TOPOLOGY:
        source = by_id.get(spec.source.value)
        target = by_id.get(spec.target.value)
        value = counts.value(spec.target)
        if source is None or target is None or value <= 0:
            continue
        links.append(
            FlowLink(
                source_id=source.id,
                target_id=target.id,
                value=value,
                source_anchor_x=source.right,
                source_anchor_y=source.y + source.height * spec.source_anchor,
                target_anchor_x=target.x,
                target_anchor_y=target.center_y,
                stroke_width=stroke_width(value, cap_value=cap_value),
                color=target.color,
                kind=spec.kind,
            )
        )
    return tuple(links)


def conversion_metrics(
    counts: FunnelCounts, *, width: float, height: float, margin: Margin = MARGIN
) -> tuple[FlowMetric, ...]:
    plot_width = width - margin.left - margin.right
    y = margin.top + (height - margin.top - margin.bottom) - 10.0

    def rate(value: float) -> str:
        return f"{value / counts.total * 100:.1f}%"

    rows = (
        ("Interview Status Rate", rate(counts.interviewing), 0.25),
        ("Interview Records", f"{counts.interview_records:g}", 0.45),
        ("Offer Rate", rate(counts.offers), 0.65),
        ("Success Rate", rate(counts.accepted), 0.8),
    )
    return tuple(
        FlowMetric(label=label, value_text=text, x=margin.left + fraction * plot_width, y=y)
        for label, text, fraction in rows
    )


def flow_layout(
    source: ApplicationStatistics | FunnelCounts,
    *,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    cap_value: float | None = None,
) -> LayoutResult:
    counts = source if isinstance(source, FunnelCounts) else derive_funnel(source)
    nodes = layout_nodes(counts, width=width, height=height)
    links = layout_links(counts, nodes, cap_value=cap_value)
    result = LayoutResult(
        width=width,
        height=height,
        total=counts.total,
        nodes=nodes,
        links=links,
        metrics=conversion_metrics(counts, width=width, height=height),
    )
    logger.debug(
        "layout.flow",
        extra={"nodes": len(nodes), "links": len(links), "total": counts.total},
    )
    return result
