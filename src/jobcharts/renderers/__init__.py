from jobcharts.renderers.animation import (AnimationScheduler, AnimationSpec,
                                           animation_key)
from jobcharts.renderers.bars.renderer import BarChartRenderer
from jobcharts.renderers.base import ChartRenderer
from jobcharts.renderers.donut.renderer import DonutChartRenderer
from jobcharts.renderers.flow.renderer import FlowChartRenderer

__all__ = [
    "AnimationScheduler",
    "AnimationSpec",
    "BarChartRenderer",
    "ChartRenderer",
    "DonutChartRenderer",
    "FlowChartRenderer",
    "animation_key",
]
