"""Query strategy layer: one SerpAPI query per collector, built from the classifier vocabularies."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Tuple

from staffing_intel.config import HIRING_WINDOW, NEWS_WINDOW, SIGNALS_WINDOW
from staffing_intel.services.classifiers import (
    CONTRACT_KEYWORDS,
    EXECUTIVE_KEYWORDS,
    EXPANSION_KEYWORDS,
    MODALITY_KEYWORDS,
    NEWS_KEYWORDS,
    RESEARCH_KEYWORDS,
)
from staffing_intel.services.serp_service import SearchEngine
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)

# (engine, query, extra params)
QueryTuple = Tuple[SearchEngine, str, Dict[str, Any]]


def _build_or_query_part(terms: Iterable[str]) -> str:
    """Build (\"A\" OR \"B\" OR \"C\") for search query."""
    escaped = [f'"{t}"' for t in terms if t and str(t).strip()]
    return "(" + " OR ".join(escaped) + ")" if escaped else ""


class BaseQueryStrategy(ABC):
    """Company-scoped query with an optional trailing location clause."""

    engine: SearchEngine = SearchEngine.NEWS
    window: str = ""

    def __init__(self, company: str, location: Optional[str] = None) -> None:
        self._company = (company or "").strip()
        self._location = (location or "").strip() or None

    @abstractmethod
    def topic_clause(self) -> str:
        """Return the parenthesized OR clause that follows the company."""

    def build_query(self) -> QueryTuple:
        query = f'"{self._company}" AND {self.topic_clause()}'
        if self._location:
            query += f' AND "{self._location}"'
        logger.info("%s: company=%s location=%s", type(self).__name__, self._company, self._location)
        return (self.engine, query, {"tbs": self.window})


class HiringQueryStrategy(BaseQueryStrategy):
    """Contract-type AND modality job search."""

    engine = SearchEngine.JOBS
    window = HIRING_WINDOW

    def topic_clause(self) -> str:
        contract_part = _build_or_query_part(CONTRACT_KEYWORDS)
        modality_part = _build_or_query_part(MODALITY_KEYWORDS.keys())
        return f"{contract_part} AND {modality_part}"


class SignalsQueryStrategy(BaseQueryStrategy):
    """Executive change, expansion and research news."""

    engine = SearchEngine.NEWS
    window = SIGNALS_WINDOW

    def topic_clause(self) -> str:
        return _build_or_query_part(EXECUTIVE_KEYWORDS + EXPANSION_KEYWORDS + RESEARCH_KEYWORDS)


class NewsQueryStrategy(BaseQueryStrategy):
    """General business news for the past week."""

    engine = SearchEngine.NEWS
    window = NEWS_WINDOW

    def topic_clause(self) -> str:
        return _build_or_query_part(NEWS_KEYWORDS)
