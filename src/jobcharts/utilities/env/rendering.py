from jobcharts.utilities.env.parsing import (_env_float, _env_int,
                                             _env_optional_str)

DEFAULT_FRAME_INTERVAL_MS = 16
DEFAULT_MAX_FPS = 60
DEFAULT_ANIMATION_DURATION_MS = 750
DEFAULT_TOOLTIP_OFFSET = 15.0


class RenderingConfiguration:
    @classmethod
    def frame_interval_ms(cls) -> int:
        """Tick period used by the animation scheduler."""
        return _env_int(
            "JOBCHARTS_FRAME_INTERVAL_MS",
            default=DEFAULT_FRAME_INTERVAL_MS,
            minimum=1,
        )

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("JOBCHARTS_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def animation_duration_ms(cls) -> int:
        return _env_int(
            "JOBCHARTS_ANIMATION_DURATION_MS",
            default=DEFAULT_ANIMATION_DURATION_MS,
            minimum=0,
        )

    @classmethod
    def font_name(cls) -> str | None:
        """System font used for chart text; ``None`` selects pygame's default."""
        return _env_optional_str("JOBCHARTS_FONT")

    @classmethod
    def tooltip_offset(cls) -> float:
        return _env_float(
            "JOBCHARTS_TOOLTIP_OFFSET",
            default=DEFAULT_TOOLTIP_OFFSET,
            minimum=0.0,
        )
