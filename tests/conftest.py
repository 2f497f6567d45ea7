"""
Root pytest configuration and shared fixtures.

Raw provider documents below mirror the SerpAPI google_jobs / google_news
shapes, including the partial and oddly-typed fields the provider returns.
"""

import pytest

from staffing_intel.schemas.posting import NewsItem, NormalizedPosting, SignalItem


@pytest.fixture
def raw_job():
    """A complete google_jobs result."""
    return {
        "title": "Travel MRI Technologist - ASAP Start",
        "company_name": "Acme Health",
        "location": "Austin, TX",
        "description": "  Urgent need for an MRI tech, 13 week travel contract.  ",
        "share_link": "https://www.aya.healthcare/jobs/123",
        "detected_extensions": {"posted_at": "3 days ago", "schedule_type": "Contractor"},
        "apply_options": [
            {"title": "Aya Healthcare", "link": "https://www.aya.healthcare/apply/123"},
            {"title": "LinkedIn", "link": "https://linkedin.com/jobs/view/1"},
        ],
    }


@pytest.fixture
def raw_news():
    """A google_news result with the object-form source."""
    return {
        "title": " Acme Health appointed new CEO ",
        "source": {"name": "Healthcare Dive", "icon": "https://example.com/icon.png"},
        "date": "10/14/2026, 07:00 AM, +0000 UTC",
        "snippet": "Acme Health hospital leadership change announced.",
        "link": "https://example.com/acme-ceo",
        "thumbnail": "https://example.com/thumb.jpg",
    }


@pytest.fixture
def make_posting():
    """Factory for classified postings."""

    def _make(index: int = 0, **overrides) -> NormalizedPosting:
        fields = {"title": f"Posting {index}", "company": "Acme Health"}
        fields.update(overrides)
        return NormalizedPosting(**fields)

    return _make


@pytest.fixture
def make_news():
    def _make(index: int = 0, **overrides) -> NewsItem:
        fields = {"headline": f"News {index}"}
        fields.update(overrides)
        return NewsItem(**fields)

    return _make


@pytest.fixture
def make_signal():
    def _make(signal_type: str = "other", **overrides) -> SignalItem:
        fields = {"headline": f"{signal_type} signal", "signal_type": signal_type}
        fields.update(overrides)
        return SignalItem(**fields)

    return _make


@pytest.fixture
def fake_serp():
    """
    Build an async stand-in for search_serp.

    ``responses`` maps SearchEngine -> document (or an Exception instance to raise).
    Every call is recorded in ``fake.calls`` as (engine, query, params).
    """

    def _build(responses):
        async def fake(engine, query, params=None, api_key=None, client=None):
            fake.calls.append((engine, query, params))
            result = responses.get(engine, {})
            if isinstance(result, Exception):
                raise result
            return result

        fake.calls = []
        return fake

    return _build
