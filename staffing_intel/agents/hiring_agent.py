"""Hiring Agent: searches recent contract imaging jobs for a company and classifies each posting."""

from typing import List, Optional

from staffing_intel.agents.query_strategies import HiringQueryStrategy
from staffing_intel.schemas.posting import ApplyLink, NormalizedPosting
from staffing_intel.schemas.raw_result import RawJobResult, parse_raw_items
from staffing_intel.schemas.report import HiringSummary
from staffing_intel.services.classifiers import (
    calculate_urgency,
    detect_contract_type,
    detect_modality,
    detect_platform,
)
from staffing_intel.services.serp_service import search_serp
from staffing_intel.utils.date_parser import parse_posted_days_ago
from staffing_intel.utils.helpers import classifier_text, unique_in_order
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_posting(job: RawJobResult, company: str) -> NormalizedPosting:
    """Map one raw google_jobs result to a classified posting."""
    title = job.title or "N/A"
    description = (job.description or "").strip()
    text = classifier_text(job.title, description)
    share_link = job.share_link or ""
    posted_at = job.detected_extensions.posted_at or "N/A"
    return NormalizedPosting(
        title=title,
        company=job.company_name or company,
        location=job.location or "N/A",
        posted_at=posted_at,
        posted_days_ago=parse_posted_days_ago(posted_at),
        description=description,
        share_link=share_link,
        modality=detect_modality(text),
        urgency=calculate_urgency(text),
        contract_type=detect_contract_type(text),
        platform=detect_platform(share_link),
        apply_links=[ApplyLink(title=opt.title, link=opt.link) for opt in job.apply_options],
    )


def summarize_postings(postings: List[NormalizedPosting]) -> HiringSummary:
    return HiringSummary(
        total_postings=len(postings),
        urgent_count=sum(1 for p in postings if p.urgency == "high"),
        modalities=unique_in_order(p.modality for p in postings),
        contract_types=unique_in_order(p.contract_type for p in postings),
        postings=postings,
    )


async def run_hiring_agent(company: str, location: Optional[str] = None) -> HiringSummary:
    """
    Run the Hiring Agent: one google_jobs query over the last two weeks.
    Any failure is logged and yields an empty HiringSummary.
    """
    engine, query, params = HiringQueryStrategy(company, location).build_query()
    try:
        data = await search_serp(engine, query, params)
        jobs = parse_raw_items(data.get("jobs_results"), RawJobResult)
        summary = summarize_postings([normalize_posting(job, company) for job in jobs])
    except Exception as e:
        logger.exception("Hiring search failed for '%s': %s", company, e)
        return HiringSummary()

    logger.info(
        "Hiring Agent finished: company=%s postings=%s urgent=%s modalities=%s",
        company,
        summary.total_postings,
        summary.urgent_count,
        summary.modalities,
    )
    return summary
