"""Query building and field reshaping for the plain jobs/news/web search endpoints (no classification)."""

from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from staffing_intel.schemas.raw_result import RawJobResult, RawNewsResult, parse_raw_items


def _present(*parts: Optional[str]) -> List[str]:
    return [p for p in parts if p]


def build_jobs_query(company: str = "", industry: str = "") -> str:
    return " ".join(_present(company, industry))


def build_web_query(company: str = "", city: str = "", industry: str = "") -> str:
    return " ".join(_present(company, city, industry))


def build_news_query(
    company: str = "",
    city: str = "",
    industry: str = "",
    signals: Optional[List[str]] = None,
) -> str:
    """Quoted company/city/industry, plus ("a b" OR ...) from snake_case signal names."""
    query = " ".join(f'"{p}"' for p in _present(company, city, industry))
    signal_terms = [s.replace("_", " ") for s in (signals or []) if s]
    if signal_terms:
        signal_query = "(" + " OR ".join(f'"{s}"' for s in signal_terms) + ")"
        query = f"{query} {signal_query}" if query else signal_query
    return query


def news_date_range(days: int, today: Optional[date] = None) -> str:
    """Google custom date range covering the last ``days`` days."""
    today = today or date.today()
    start = today - timedelta(days=days)
    return f"cdr:1,cd_min:{start.isoformat()},cd_max:{today.isoformat()}"


def reshape_jobs(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    results = []
    for job in parse_raw_items(data.get("jobs_results"), RawJobResult):
        results.append({
            "title": job.title or "N/A",
            "company": job.company_name or "N/A",
            "location": job.location or "N/A",
            "posted_at": job.detected_extensions.posted_at or "N/A",
            "description": (job.description or "").strip(),
            "share_link": job.share_link or "",
            "apply_links": [{"title": opt.title, "link": opt.link} for opt in job.apply_options],
        })
    return results


def reshape_news(data: Dict[str, Any]) -> List[Dict[str, Any]]:
    results = []
    for item in parse_raw_items(data.get("news_results"), RawNewsResult):
        results.append({
            "title": (item.title or "").strip(),
            "source": item.source,
            "published_date": item.date or "N/A",
            "snippet": item.snippet or item.description or "",
            "link": item.link,
            "thumbnail": item.thumbnail or "",
        })
    return results
