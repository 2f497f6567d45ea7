"""Service exports."""

from .aggregator import aggregate_intelligence, calculate_overall_score, priority_for_score
from .serp_service import SearchEngine, SerpAPIError, search_serp

__all__ = [
    "aggregate_intelligence",
    "calculate_overall_score",
    "priority_for_score",
    "SearchEngine",
    "SerpAPIError",
    "search_serp",
]
