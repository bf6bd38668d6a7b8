from jobcharts.interaction.controller import (Emphasis, HoverState,
                                              HoverTransition,
                                              InteractionController, Tooltip)
from jobcharts.interaction.elements import ElementKind, ElementRef
from jobcharts.interaction.tooltips import TooltipContent, tooltip_for

__all__ = [
    "ElementKind",
    "ElementRef",
    "Emphasis",
    "HoverState",
    "HoverTransition",
    "InteractionController",
    "Tooltip",
    "TooltipContent",
    "tooltip_for",
]
