from jobcharts.stats.loader import StatisticsProvider, load_statistics
from jobcharts.stats.model import (ApplicationStatistics, DataShapeWarning,
                                   InterviewStats, OfferOutcomes, StatusCounts)

__all__ = [
    "ApplicationStatistics",
    "DataShapeWarning",
    "InterviewStats",
    "OfferOutcomes",
    "StatisticsProvider",
    "StatusCounts",
    "load_statistics",
]
