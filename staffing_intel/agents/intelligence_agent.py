"""Intelligence Agent: runs the three collectors concurrently, then aggregates their results."""

import asyncio
from typing import Optional

from staffing_intel.agents.hiring_agent import run_hiring_agent
from staffing_intel.agents.news_agent import run_news_agent
from staffing_intel.agents.signals_agent import run_signals_agent
from staffing_intel.schemas.report import IntelligenceReport
from staffing_intel.services.aggregator import aggregate_intelligence
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


class IntelligenceError(Exception):
    """Raised when collector results cannot be aggregated into a report."""


async def run_intelligence_agent(company: str, location: Optional[str] = None) -> IntelligenceReport:
    """
    Gather hiring, signal and news activity for a company and score it.

    The collectors never raise (each returns its empty value on failure), so
    the join always completes with whatever partial data is available.
    """
    location = location or None
    hiring, signals, news = await asyncio.gather(
        run_hiring_agent(company, location),
        run_signals_agent(company, location),
        run_news_agent(company, location),
    )

    try:
        report = aggregate_intelligence(hiring, signals, news, company, location)
    except Exception as e:
        raise IntelligenceError(f"Intelligence gathering failed: {e}") from e

    logger.info(
        "Intelligence Agent finished: company=%s location=%s score=%s priority=%s",
        company,
        location,
        report.overall_score,
        report.priority_level,
    )
    return report
