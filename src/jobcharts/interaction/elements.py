from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from jobcharts.layout.types import (Bar, FlowLink, FlowNode, LegendEntry,
                                    LinkKind, Wedge)


class ElementKind(StrEnum):
    WEDGE = "wedge"
    LINK = "link"
    NODE = "node"
    LEGEND = "legend"
    BAR = "bar"


@dataclass(frozen=True)
class ElementRef:
    """Identity of an interactive element plus what its tooltip needs.

    Only ``kind`` and ``key`` take part in equality.
    """

    kind: ElementKind
    key: str
    value: float = field(default=0.0, compare=False)
    label: str = field(default="", compare=False)
    percentage: float | None = field(default=None, compare=False)
    link_kind: LinkKind | None = field(default=None, compare=False)
    source_id: str | None = field(default=None, compare=False)
    target_id: str | None = field(default=None, compare=False)

    @classmethod
    def for_wedge(cls, wedge: Wedge) -> "ElementRef":
        return cls(
            kind=ElementKind.WEDGE,
            key=wedge.key,
            value=wedge.value,
            label=wedge.key,
            percentage=wedge.percentage,
        )

    @classmethod
    def for_legend(cls, entry: LegendEntry) -> "ElementRef":
        return cls(
            kind=ElementKind.LEGEND,
            key=entry.key,
            label=entry.label,
            percentage=entry.percentage,
        )

    @classmethod
    def for_link(cls, link: FlowLink) -> "ElementRef":
        return cls(
            kind=ElementKind.LINK,
            key=link.key,
            value=link.value,
            label=link.key,
            link_kind=link.kind,
            source_id=link.source_id,
            target_id=link.target_id,
        )

    @classmethod
    def for_node(cls, node: FlowNode) -> "ElementRef":
        return cls(kind=ElementKind.NODE, key=node.id, value=node.value, label=node.name)

    @classmethod
    def for_bar(cls, bar: Bar) -> "ElementRef":
        return cls(kind=ElementKind.BAR, key=bar.key, value=bar.value, label=bar.label)

    @property
    def animation_key(self) -> str:
        return f"{self.kind.value}:{self.key}"
