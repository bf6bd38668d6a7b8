"""Aggregate statistics consumed by the chart layouts.

The payload mirrors what the statistics endpoint returns::

    {
      "total": 25,
      "byStatus": {"Applied": 10, "Interviewing": 8, "Offered": 5, "Rejected": 2},
      "currentStatusDistribution": {...same keys...},
      "offerStatusDistribution": {"ACCEPTED": 1, "DECLINED": 1, "PENDING": 3},
      "interviewStats": {"totalInterviews": 12, "upcoming": 2, "past": 10, ...},
      "byMonth": {"Jan 2024": 5, "Feb 2024": 8},
      "successRate": 20,
      "averageResponseTime": 7
    }

Only ``total`` and ``byStatus`` are expected; every other block has a
fallback. Falling back from ``currentStatusDistribution`` to ``byStatus`` is
reported as a data-shape warning.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from jobcharts.layout.types import CategoricalDatum
from jobcharts.utilities.logging import get_logger
from jobcharts.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

STATUS_LABELS = ("Applied", "Interviewing", "Offered", "Rejected")
STATUS_COLORS = {
    "Applied": "#667eea",
    "Interviewing": "#fb923c",
    "Offered": "#43e97b",
    "Rejected": "#ef4444",
}
OFFER_LABELS = ("ACCEPTED", "DECLINED", "PENDING")


@dataclass(frozen=True)
class DataShapeWarning:
    field: str
    fallback: str
    message: str


@dataclass(frozen=True)
class StatusCounts:
    applied: float = 0
    interviewing: float = 0
    offered: float = 0
    rejected: float = 0

    def as_data(self) -> list[CategoricalDatum]:
        values = (self.applied, self.interviewing, self.offered, self.rejected)
        return [
            CategoricalDatum(label=label, value=value, color=STATUS_COLORS[label])
            for label, value in zip(STATUS_LABELS, values)
        ]


@dataclass(frozen=True)
class OfferOutcomes:
    accepted: float = 0
    declined: float = 0
    pending: float = 0


@dataclass(frozen=True)
class InterviewStats:
    total_interviews: float = 0
    upcoming: float = 0
    past: float = 0
    conversion_rate: float = 0.0
    average_per_application: float = 0.0


@dataclass(frozen=True)
class ApplicationStatistics:
    total: float
    by_status: StatusCounts
    current_status: StatusCounts
    offer_outcomes: OfferOutcomes = field(default_factory=OfferOutcomes)
    interview_stats: InterviewStats = field(default_factory=InterviewStats)
    by_month: tuple[tuple[str, float], ...] = ()
    success_rate: float = 0.0
    average_response_time: float = 0.0
    warnings: tuple[DataShapeWarning, ...] = ()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ApplicationStatistics":
        warnings: list[DataShapeWarning] = []
        by_status = _status_counts(payload.get("byStatus"), "byStatus", warnings)

        current_raw = payload.get("currentStatusDistribution")
        if isinstance(current_raw, Mapping):
            current = _status_counts(current_raw, "currentStatusDistribution", warnings)
        else:
            current = by_status
            warnings.append(
                DataShapeWarning(
                    field="currentStatusDistribution",
                    fallback="byStatus",
                    message="currentStatusDistribution missing; using cumulative byStatus",
                )
            )

        offers = _mapping(payload.get("offerStatusDistribution"))
        interviews = _mapping(payload.get("interviewStats"))
        stats = cls(
            total=_number(payload.get("total"), "total", warnings),
            by_status=by_status,
            current_status=current,
            offer_outcomes=OfferOutcomes(
                accepted=_number(offers.get("ACCEPTED"), "offerStatusDistribution.ACCEPTED", warnings),
                declined=_number(offers.get("DECLINED"), "offerStatusDistribution.DECLINED", warnings),
                pending=_number(offers.get("PENDING"), "offerStatusDistribution.PENDING", warnings),
            ),
            interview_stats=InterviewStats(
                total_interviews=_number(interviews.get("totalInterviews"), "interviewStats.totalInterviews", warnings),
                upcoming=_number(interviews.get("upcoming"), "interviewStats.upcoming", warnings),
                past=_number(interviews.get("past"), "interviewStats.past", warnings),
                conversion_rate=_number(interviews.get("conversionRate"), "interviewStats.conversionRate", warnings),
                average_per_application=_number(
                    interviews.get("averagePerApplication"),
                    "interviewStats.averagePerApplication",
                    warnings,
                ),
            ),
            by_month=tuple(
                (str(month), _number(count, f"byMonth.{month}", warnings))
                for month, count in _mapping(payload.get("byMonth")).items()
            ),
            success_rate=_number(payload.get("successRate"), "successRate", warnings),
            average_response_time=_number(
                payload.get("averageResponseTime"), "averageResponseTime", warnings
            ),
            warnings=tuple(warnings),
        )
        for warning in stats.warnings:
            report_data_shape_warning(warning)
        return stats

    def status_distribution(self) -> list[CategoricalDatum]:
        return self.current_status.as_data()

    def cumulative_distribution(self) -> list[CategoricalDatum]:
        return self.by_status.as_data()

    def offer_distribution(self) -> list[CategoricalDatum]:
        return [
            CategoricalDatum(label="Accepted", value=self.offer_outcomes.accepted, color="#51cf66"),
            CategoricalDatum(label="Declined", value=self.offer_outcomes.declined, color="#ff6b6b"),
            CategoricalDatum(label="Pending", value=self.offer_outcomes.pending, color="#fcd34d"),
        ]

    def monthly(self) -> list[CategoricalDatum]:
        return [CategoricalDatum(label=month, value=count) for month, count in self.by_month]


def report_data_shape_warning(warning: DataShapeWarning) -> None:
    get_logging_controller().log(
        key=f"stats.shape.{warning.field}",
        logger=logger,
        level=logging.WARNING,
        msg="Data shape warning for %s: %s",
        args=(warning.field, warning.message),
        extra={"field": warning.field, "fallback": warning.fallback},
    )


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _number(value: Any, name: str, warnings: list[DataShapeWarning]) -> float:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        warnings.append(
            DataShapeWarning(
                field=name,
                fallback="0",
                message=f"expected a number, got {type(value).__name__}",
            )
        )
        return 0
    if math.isnan(value) or value < 0:
        warnings.append(
            DataShapeWarning(field=name, fallback="0", message=f"invalid count {value!r}")
        )
        return 0
    return value


def _status_counts(
    raw: Any, name: str, warnings: list[DataShapeWarning]
) -> StatusCounts:
    counts = _mapping(raw)
    return StatusCounts(
        applied=_number(counts.get("Applied"), f"{name}.Applied", warnings),
        interviewing=_number(counts.get("Interviewing"), f"{name}.Interviewing", warnings),
        offered=_number(counts.get("Offered"), f"{name}.Offered", warnings),
        rejected=_number(counts.get("Rejected"), f"{name}.Rejected", warnings),
    )
