from jobcharts.utilities.env.layout import LayoutConfiguration
from jobcharts.utilities.env.rendering import RenderingConfiguration


class Configuration(
    RenderingConfiguration,
    LayoutConfiguration,
):
    """Aggregate environment configuration helpers."""
