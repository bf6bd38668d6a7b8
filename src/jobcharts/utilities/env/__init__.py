"""Environment configuration helpers."""

from jobcharts.utilities.env.config import Configuration as Configuration
