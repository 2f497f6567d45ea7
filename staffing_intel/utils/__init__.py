"""Utility exports."""

from .date_parser import parse_posted_days_ago
from .helpers import classifier_text, normalize_query_param, unique_in_order
from .logger import get_logger

__all__ = [
    "get_logger",
    "classifier_text",
    "normalize_query_param",
    "parse_posted_days_ago",
    "unique_in_order",
]
