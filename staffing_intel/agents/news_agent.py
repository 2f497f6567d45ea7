"""News Agent: last week's business news for a company, scored for relevance."""

from typing import List, Optional

from staffing_intel.agents.query_strategies import NewsQueryStrategy
from staffing_intel.schemas.posting import NewsItem
from staffing_intel.schemas.raw_result import RawNewsResult, parse_raw_items
from staffing_intel.services.classifiers import calculate_relevance_score
from staffing_intel.services.serp_service import search_serp
from staffing_intel.utils.helpers import classifier_text
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_news(item: RawNewsResult, company: str) -> NewsItem:
    headline = (item.title or "").strip()
    snippet = item.snippet or item.description or ""
    return NewsItem(
        headline=headline,
        source=item.source,
        date=item.date or "N/A",
        snippet=snippet,
        link=item.link,
        relevance_score=calculate_relevance_score(classifier_text(headline, item.snippet), company),
    )


async def run_news_agent(company: str, location: Optional[str] = None) -> List[NewsItem]:
    """Run the News Agent; results stay in provider order. Failures yield an empty list."""
    engine, query, params = NewsQueryStrategy(company, location).build_query()
    try:
        data = await search_serp(engine, query, params)
        items = parse_raw_items(data.get("news_results"), RawNewsResult)
        news = [normalize_news(item, company) for item in items]
    except Exception as e:
        logger.exception("News search failed for '%s': %s", company, e)
        return []

    logger.info("News Agent finished: company=%s items=%s", company, len(news))
    return news
