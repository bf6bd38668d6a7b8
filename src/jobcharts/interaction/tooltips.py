from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from jobcharts.interaction.elements import ElementKind, ElementRef
from jobcharts.layout.types import LinkKind


@dataclass(frozen=True)
class TooltipContent:
    title: str
    lines: tuple[str, ...] = ()

    def text(self) -> str:
        return "\n".join((self.title, *self.lines))


def format_count(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def format_percentage(value: float, total: float) -> str:
    if total <= 0:
        return "0"
    return f"{value / total * 100:.1f}"


def fallback_content(title: str, value: float, total: float) -> TooltipContent:
    return TooltipContent(
        title=title,
        lines=(f"{format_count(value)} items ({format_percentage(value, total)}%)",),
    )


def link_content(kind: LinkKind, value: float, total: float, *, title: str) -> TooltipContent:
    count = format_count(value)
    pct = format_percentage(value, total)
    match kind:
        case LinkKind.APPLICATIONS_REJECTED:
            return TooltipContent(
                "Applications → Rejected",
                (
                    f"{count} applications ({pct}%) were rejected",
                    "Applications that didn't make it past initial screening",
                ),
            )
        case LinkKind.APPLICATIONS_PENDING:
            return TooltipContent(
                "Applications → Pending",
                (
                    f"{count} applications ({pct}%) are awaiting response",
                    "Applications submitted but no response yet",
                ),
            )
        case LinkKind.APPLICATIONS_INTERVIEWING:
            return TooltipContent(
                "Applications → Interviewing",
                (
                    f"{count} applications ({pct}%) entered interview process",
                    "Applications that progressed to interview stage",
                ),
            )
        case LinkKind.APPLICATIONS_OFFERS:
            return TooltipContent(
                "Applications → Offers",
                (
                    f"{count} applications ({pct}%) resulted in job offers",
                    "Direct conversion from application to offer",
                ),
            )
        case LinkKind.INTERVIEWING_RECORDS:
            return TooltipContent(
                "Interviewing → Interview Records",
                (
                    f"{count} total interviews scheduled",
                    "Actual interview sessions for applications in interview process",
                ),
            )
        case LinkKind.OFFERS_DECLINED:
            return TooltipContent(
                "Offers → Declined",
                (f"{count} offers were declined", "Job offers that were turned down"),
            )
        case LinkKind.OFFERS_ACCEPTED:
            return TooltipContent(
                "Offers → Accepted",
                (f"{count} offers were accepted", "Job offers that resulted in employment"),
            )
        case LinkKind.FALLBACK:
            return fallback_content(title, value, total)
        case _:
            assert_never(kind)


def tooltip_for(element: ElementRef, total: float) -> TooltipContent | None:
    """Tooltip content for ``element``; legend entries only highlight."""

    match element.kind:
        case ElementKind.WEDGE:
            pct = (
                f"{element.percentage:.1f}"
                if element.percentage is not None
                else format_percentage(element.value, total)
            )
            return TooltipContent(f"{element.label}: {format_count(element.value)} ({pct}%)")
        case ElementKind.LINK:
            title = f"{element.source_id} → {element.target_id}"
            return link_content(
                element.link_kind or LinkKind.FALLBACK,
                element.value,
                total,
                title=title,
            )
        case ElementKind.NODE:
            return TooltipContent(element.label, (format_count(element.value),))
        case ElementKind.BAR:
            return TooltipContent(element.label, (f"{format_count(element.value)} applications",))
        case ElementKind.LEGEND:
            return None
        case _:
            assert_never(element.kind)
