from jobcharts.utilities.env.parsing import _env_float, _env_int

DEFAULT_LEGEND_THRESHOLD = 4
DEFAULT_STROKE_CAP_VALUE = 500_000.0


class LayoutConfiguration:
    @classmethod
    def legend_threshold(cls) -> int:
        """Slice count above which dashboards switch from labels to a legend."""
        return _env_int(
            "JOBCHARTS_LEGEND_THRESHOLD",
            default=DEFAULT_LEGEND_THRESHOLD,
            minimum=1,
        )

    @classmethod
    def stroke_cap_value(cls) -> float:
        return _env_float(
            "JOBCHARTS_STROKE_CAP_VALUE",
            default=DEFAULT_STROKE_CAP_VALUE,
            minimum=1.0,
        )
