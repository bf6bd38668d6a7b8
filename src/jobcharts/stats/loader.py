from __future__ import annotations

import json
from pathlib import Path

from jobcharts.providers import LatestValueProvider
from jobcharts.stats.model import ApplicationStatistics


def load_statistics(path: str | Path) -> ApplicationStatistics:
    with Path(path).open("r", encoding="utf-8") as fp:
        payload = json.load(fp)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(payload).__name__}")
    return ApplicationStatistics.from_mapping(payload)


class StatisticsProvider(LatestValueProvider[ApplicationStatistics]):
    """Source of statistics snapshots for chart state providers."""

    @classmethod
    def from_file(cls, path: str | Path) -> "StatisticsProvider":
        return cls(load_statistics(path))

    def reload(self, path: str | Path) -> None:
        self.publish(load_statistics(path))
