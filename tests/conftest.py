import os

# Loggers attach their handlers at import time; keep test runs off the disk.
os.environ.setdefault("JOBCHARTS_LOG_TO_FILE", "0")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import json
from pathlib import Path
from typing import Any, Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings
from reactivex.testing import TestScheduler

from jobcharts.layout import CategoricalDatum
from jobcharts.utilities import logging_control

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


STATISTICS_PAYLOAD: dict[str, Any] = {
    "total": 25,
    "byStatus": {"Applied": 10, "Interviewing": 8, "Offered": 5, "Rejected": 2},
    "currentStatusDistribution": {
        "Applied": 10,
        "Interviewing": 8,
        "Offered": 5,
        "Rejected": 2,
    },
    "offerStatusDistribution": {"ACCEPTED": 2, "DECLINED": 1, "PENDING": 2},
    "interviewStats": {
        "totalInterviews": 12,
        "upcoming": 2,
        "past": 10,
        "conversionRate": 41.7,
        "averagePerApplication": 0.48,
    },
    "byMonth": {"Jan 2024": 5, "Feb 2024": 8, "Mar 2024": 12},
    "successRate": 8,
    "averageResponseTime": 7,
}


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def reset_logging_controller_cache() -> None:
    """Give every test fresh sampling history so repeated warnings are not demoted."""

    logging_control.get_logging_controller.cache_clear()
    yield
    logging_control.get_logging_controller.cache_clear()


@pytest.fixture(autouse=True)
def isolate_chart_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "JOBCHARTS_FRAME_INTERVAL_MS",
        "JOBCHARTS_LEGEND_THRESHOLD",
        "JOBCHARTS_FONT",
        "JOBCHARTS_ANIMATION_DURATION_MS",
        "JOBCHARTS_MAX_FPS",
        "JOBCHARTS_STROKE_CAP_VALUE",
        "JOBCHARTS_TOOLTIP_OFFSET",
        "JOBCHARTS_LOG_RULES",
        "JOBCHARTS_LOG_DEFAULT_INTERVAL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def statistics_payload() -> dict[str, Any]:
    return json.loads(json.dumps(STATISTICS_PAYLOAD))


@pytest.fixture
def statistics_file(tmp_path: Path, statistics_payload: dict[str, Any]) -> Path:
    path = tmp_path / "stats.json"
    path.write_text(json.dumps(statistics_payload), encoding="utf-8")
    return path


@pytest.fixture
def status_data() -> list[CategoricalDatum]:
    return [
        CategoricalDatum("Applied", 10),
        CategoricalDatum("Interviewing", 8),
        CategoricalDatum("Offered", 5),
        CategoricalDatum("Rejected", 2),
    ]


@pytest.fixture
def test_scheduler() -> TestScheduler:
    return TestScheduler()


@pytest.fixture
def surface_factory() -> Callable[[int, int], pygame.Surface]:
    def _factory(width: int, height: int) -> pygame.Surface:
        surface = pygame.Surface((width, height))
        surface.fill((255, 255, 255))
        return surface

    return _factory
