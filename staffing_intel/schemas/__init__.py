"""Schema exports."""

from .posting import ApplyLink, NewsItem, NormalizedPosting, SignalItem
from .raw_result import RawJobResult, RawNewsResult, parse_raw_items
from .report import (
    ConfidenceIndicators,
    HiringActivity,
    HiringSummary,
    IntelligenceReport,
    Recommendation,
    SignalsSummary,
)

__all__ = [
    "ApplyLink",
    "NewsItem",
    "NormalizedPosting",
    "SignalItem",
    "RawJobResult",
    "RawNewsResult",
    "parse_raw_items",
    "ConfidenceIndicators",
    "HiringActivity",
    "HiringSummary",
    "IntelligenceReport",
    "Recommendation",
    "SignalsSummary",
]
