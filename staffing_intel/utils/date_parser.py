"""Parse provider posting times ("3 days ago", "30+ days ago", "Jan 12, 2025") into an age in days."""

import re
from datetime import datetime, timezone
from typing import Optional

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

# unit -> days per unit; hours and minutes round down to the same day
_RELATIVE_UNITS = {
    "minute": 0,
    "min": 0,
    "hour": 0,
    "h": 0,
    "day": 1,
    "week": 7,
    "month": 30,
}

_RELATIVE_RE = re.compile(r"(\d+)\+?\s*(minute|min|hour|h|day|week|month)s?\s+ago")
_DAY_MONTH_YEAR_RE = re.compile(r"(\d{1,2})\s+([a-z]{3,9})\.?\s*,?\s*(\d{4})")
_MONTH_DAY_YEAR_RE = re.compile(r"([a-z]{3,9})\.?\s+(\d{1,2})\s*,?\s*(\d{4})")
_ISO_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _month_num(mon_str: str) -> Optional[int]:
    prefix = mon_str.lower()[:3]
    if prefix in _MONTHS:
        return _MONTHS.index(prefix) + 1
    return None


def _days_since(year: int, month: Optional[int], day: int, now: datetime) -> Optional[int]:
    if month is None:
        return None
    try:
        posted = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return None
    if posted > now:
        return None
    return (now - posted).days


def parse_posted_days_ago(raw_text: Optional[str], now: Optional[datetime] = None) -> Optional[int]:
    """
    Return how many days ago a posting was published, or None if unknown.
    Handles relative ("17 hours ago", "2 weeks ago", "30+ days ago"),
    "12 Jan 2025", "Jan 12, 2025" and ISO dates.
    """
    if not raw_text or not raw_text.strip():
        return None
    text = raw_text.strip().lower()
    now = now or datetime.now(timezone.utc)

    m = _RELATIVE_RE.search(text)
    if m:
        return int(m.group(1)) * _RELATIVE_UNITS[m.group(2)]
    if "today" in text or "just posted" in text:
        return 0
    if "yesterday" in text:
        return 1

    m = _DAY_MONTH_YEAR_RE.search(text)
    if m:
        days = _days_since(int(m.group(3)), _month_num(m.group(2)), int(m.group(1)), now)
        if days is not None:
            return days

    m = _MONTH_DAY_YEAR_RE.search(text)
    if m:
        days = _days_since(int(m.group(3)), _month_num(m.group(1)), int(m.group(2)), now)
        if days is not None:
            return days

    m = _ISO_RE.search(text)
    if m:
        return _days_since(int(m.group(1)), int(m.group(2)), int(m.group(3)), now)

    return None
