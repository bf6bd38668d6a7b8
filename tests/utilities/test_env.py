"""Tests for :mod:`jobcharts.utilities.env`."""

from __future__ import annotations

import pytest

from jobcharts.utilities.env import Configuration
from jobcharts.utilities.env.parsing import (_env_flag, _env_float, _env_int,
                                             _env_optional_str)


class TestEnvParsingHelpers:
    """Group env parsing helper tests so configuration parsing stays predictable."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("true", True),
            ("  YES ", True),
            ("1", True),
            ("on", True),
            ("false", False),
            ("0", False),
        ],
    )
    def test_env_flag_recognizes_truthy_tokens(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str,
        expected: bool,
    ) -> None:
        """Confirm _env_flag recognizes truthy tokens so feature flags read naturally."""
        monkeypatch.setenv("JOBCHARTS_TEST_FLAG", value)

        assert _env_flag("JOBCHARTS_TEST_FLAG") is expected

    def test_env_flag_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JOBCHARTS_TEST_FLAG", raising=False)

        assert _env_flag("JOBCHARTS_TEST_FLAG", default=True) is True

    def test_env_int_rejects_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify _env_int names the variable so misconfiguration is easy to trace."""
        monkeypatch.setenv("JOBCHARTS_TEST_INT", "abc")

        with pytest.raises(ValueError, match="JOBCHARTS_TEST_INT"):
            _env_int("JOBCHARTS_TEST_INT", default=0)

    def test_env_float_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBCHARTS_TEST_FLOAT", "1.5")

        assert _env_float("JOBCHARTS_TEST_FLOAT", default=0.0, maximum=2.0) == 1.5
        with pytest.raises(ValueError):
            _env_float("JOBCHARTS_TEST_FLOAT", default=0.0, maximum=1.0)
        with pytest.raises(ValueError):
            _env_float("JOBCHARTS_TEST_FLOAT", default=0.0, minimum=2.0)

    def test_env_optional_str_blank_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBCHARTS_TEST_STR", "   ")

        assert _env_optional_str("JOBCHARTS_TEST_STR") is None


class TestConfiguration:
    """Verify configuration defaults and overrides so dashboards can be tuned without code changes."""

    def test_defaults(self) -> None:
        assert Configuration.legend_threshold() == 4
        assert Configuration.frame_interval_ms() == 16
        assert Configuration.max_fps() == 60
        assert Configuration.animation_duration_ms() == 750
        assert Configuration.font_name() is None
        assert Configuration.tooltip_offset() == 15.0

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBCHARTS_LEGEND_THRESHOLD", "7")
        monkeypatch.setenv("JOBCHARTS_STROKE_CAP_VALUE", "100")
        monkeypatch.setenv("JOBCHARTS_FONT", " dejavusans ")

        assert Configuration.legend_threshold() == 7
        assert Configuration.stroke_cap_value() == 100.0
        assert Configuration.font_name() == "dejavusans"

    def test_rejects_zero_frame_interval(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBCHARTS_FRAME_INTERVAL_MS", "0")

        with pytest.raises(ValueError):
            Configuration.frame_interval_ms()
