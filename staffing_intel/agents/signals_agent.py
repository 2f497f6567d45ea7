"""Signals Agent: news about leadership changes, expansion and research activity."""

from typing import List, Optional

from staffing_intel.agents.query_strategies import SignalsQueryStrategy
from staffing_intel.schemas.posting import SignalItem
from staffing_intel.schemas.raw_result import RawNewsResult, parse_raw_items
from staffing_intel.schemas.report import SignalsSummary
from staffing_intel.services.classifiers import calculate_relevance_score, detect_signal_type
from staffing_intel.services.serp_service import search_serp
from staffing_intel.utils.helpers import classifier_text
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_signal(item: RawNewsResult, company: str) -> SignalItem:
    headline = (item.title or "").strip()
    snippet = item.snippet or item.description or ""
    # description only backfills the displayed snippet; it is never classified
    text = classifier_text(headline, item.snippet)
    return SignalItem(
        headline=headline,
        source=item.source,
        date=item.date or "N/A",
        snippet=snippet,
        link=item.link,
        signal_type=detect_signal_type(text),
        relevance_score=calculate_relevance_score(text, company),
    )


def partition_signals(signals: List[SignalItem]) -> SignalsSummary:
    """Split signals into the four signal_type buckets, keeping provider order."""
    return SignalsSummary(
        executive_changes=[s for s in signals if s.signal_type == "executive"],
        expansion_activity=[s for s in signals if s.signal_type == "expansion"],
        fda_activity=[s for s in signals if s.signal_type == "fda"],
        other_signals=[s for s in signals if s.signal_type == "other"],
    )


async def run_signals_agent(company: str, location: Optional[str] = None) -> SignalsSummary:
    """Run the Signals Agent over the last two weeks of news; failures yield empty buckets."""
    engine, query, params = SignalsQueryStrategy(company, location).build_query()
    try:
        data = await search_serp(engine, query, params)
        items = parse_raw_items(data.get("news_results"), RawNewsResult)
        summary = partition_signals([normalize_signal(item, company) for item in items])
    except Exception as e:
        logger.exception("Signals search failed for '%s': %s", company, e)
        return SignalsSummary()

    logger.info(
        "Signals Agent finished: company=%s executive=%s expansion=%s fda=%s other=%s",
        company,
        len(summary.executive_changes),
        len(summary.expansion_activity),
        len(summary.fda_activity),
        len(summary.other_signals),
    )
    return summary
