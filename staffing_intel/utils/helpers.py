"""Helper utilities for the staffing intelligence service."""

from typing import Iterable, List, Optional


def unique_in_order(values: Iterable[Optional[str]]) -> List[str]:
    """Drop empty values and duplicates, keeping first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


def classifier_text(*parts: Optional[str]) -> str:
    """Join text fields with single spaces for keyword classification; missing parts are skipped."""
    return " ".join(p for p in parts if p)


def normalize_query_param(value: Optional[str]) -> Optional[str]:
    """Strip a query-string value; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
