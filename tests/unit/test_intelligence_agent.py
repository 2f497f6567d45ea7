"""Unit tests for the fan-out/fan-in orchestration."""

import asyncio
from unittest.mock import patch

import pytest

from staffing_intel.agents.intelligence_agent import IntelligenceError, run_intelligence_agent
from staffing_intel.schemas.report import HiringSummary, SignalsSummary
from staffing_intel.services.serp_service import SearchEngine, SerpAPIError

AGENTS = "staffing_intel.agents"


@pytest.mark.asyncio
async def test_all_collectors_empty(fake_serp):
    fake = fake_serp({})
    with patch(f"{AGENTS}.hiring_agent.search_serp", new=fake), patch(
        f"{AGENTS}.signals_agent.search_serp", new=fake
    ), patch(f"{AGENTS}.news_agent.search_serp", new=fake):
        report = await run_intelligence_agent("Acme Health")

    assert report.overall_score == 0
    assert report.priority_level == "LOW"
    assert report.actionable_timeline == "within_month"
    assert report.confidence_indicators.multiple_signals is False
    assert len(fake.calls) == 3


@pytest.mark.asyncio
async def test_hiring_failure_keeps_other_results(fake_serp):
    fake = fake_serp({
        SearchEngine.JOBS: SerpAPIError("SerpAPI returned HTTP 500"),
        SearchEngine.NEWS: {"news_results": [{"title": "Acme Health names new CEO"}]},
    })
    with patch(f"{AGENTS}.hiring_agent.search_serp", new=fake), patch(
        f"{AGENTS}.signals_agent.search_serp", new=fake
    ), patch(f"{AGENTS}.news_agent.search_serp", new=fake):
        report = await run_intelligence_agent("Acme Health", "Texas")

    assert report.hiring_activity.recent_postings_count == 0
    assert len(report.supplementary_signals.executive_changes) == 1
    assert len(report.recent_news) == 1
    assert report.actionable_timeline == "within_week"


@pytest.mark.asyncio
async def test_collectors_run_concurrently():
    """Each collector waits for the others to start; a sequential run would deadlock."""
    started = asyncio.Event()
    running = {"n": 0}

    async def wait_for_all(result):
        running["n"] += 1
        if running["n"] == 3:
            started.set()
        await asyncio.wait_for(started.wait(), timeout=1)
        return result

    async def hiring(company, location=None):
        return await wait_for_all(HiringSummary())

    async def signals(company, location=None):
        return await wait_for_all(SignalsSummary())

    async def news(company, location=None):
        return await wait_for_all([])

    with patch(f"{AGENTS}.intelligence_agent.run_hiring_agent", new=hiring), patch(
        f"{AGENTS}.intelligence_agent.run_signals_agent", new=signals
    ), patch(f"{AGENTS}.intelligence_agent.run_news_agent", new=news):
        report = await run_intelligence_agent("Acme Health")

    assert report.overall_score == 0


@pytest.mark.asyncio
async def test_aggregation_failure_raises_intelligence_error(fake_serp):
    fake = fake_serp({})
    with patch(f"{AGENTS}.hiring_agent.search_serp", new=fake), patch(
        f"{AGENTS}.signals_agent.search_serp", new=fake
    ), patch(f"{AGENTS}.news_agent.search_serp", new=fake), patch(
        f"{AGENTS}.intelligence_agent.aggregate_intelligence", side_effect=ValueError("bad data")
    ):
        with pytest.raises(IntelligenceError, match="bad data"):
            await run_intelligence_agent("Acme Health")
