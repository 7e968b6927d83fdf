"""Shared utilities"""

from .logging import get_logger
from .analytics import AnalyticsSink, LoggingAnalyticsSink, RecordingAnalyticsSink
from .seeding import stable_int, day_of_year
from .tags import parse_tag, parse_tags

__all__ = [
    "get_logger",
    "AnalyticsSink",
    "LoggingAnalyticsSink",
    "RecordingAnalyticsSink",
    "stable_int",
    "day_of_year",
    "parse_tag",
    "parse_tags",
]
