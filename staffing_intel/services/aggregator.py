"""Combine collector outputs into a scored, prioritized intelligence report. No I/O."""

import math
from datetime import datetime, timezone
from typing import List, Optional

from staffing_intel.config import REPORT_MAX_NEWS, REPORT_MAX_POSTINGS
from staffing_intel.schemas.posting import NewsItem
from staffing_intel.schemas.report import (
    ConfidenceIndicators,
    HiringActivity,
    HiringSummary,
    IntelligenceReport,
    Recommendation,
    SignalsSummary,
)

# Heuristic weights
POSTING_WEIGHT = 0.5
POSTING_SCORE_CAP = 3
URGENT_WEIGHT = 1
MODALITY_WEIGHT = 0.5
EXECUTIVE_WEIGHT = 1.5
EXPANSION_WEIGHT = 1
FDA_WEIGHT = 0.5
RELEVANT_NEWS_WEIGHT = 0.5
RELEVANT_NEWS_THRESHOLD = 6
MAX_SCORE = 10

HIGH_PRIORITY_SCORE = 7
MEDIUM_PRIORITY_SCORE = 4


def priority_for_score(score: int) -> str:
    if score >= HIGH_PRIORITY_SCORE:
        return "HIGH"
    if score >= MEDIUM_PRIORITY_SCORE:
        return "MEDIUM"
    return "LOW"


def calculate_overall_score(
    hiring: HiringSummary,
    signals: SignalsSummary,
    news: List[NewsItem],
) -> int:
    """Weighted sum of hiring, signal and news evidence, rounded half up and clamped to 0-10."""
    score = min(hiring.total_postings * POSTING_WEIGHT, POSTING_SCORE_CAP)
    score += hiring.urgent_count * URGENT_WEIGHT
    score += len(hiring.modalities) * MODALITY_WEIGHT

    score += len(signals.executive_changes) * EXECUTIVE_WEIGHT
    score += len(signals.expansion_activity) * EXPANSION_WEIGHT
    score += len(signals.fda_activity) * FDA_WEIGHT

    relevant_news = sum(1 for n in news if n.relevance_score >= RELEVANT_NEWS_THRESHOLD)
    score += relevant_news * RELEVANT_NEWS_WEIGHT

    # round() would send 6.5 to 6
    rounded = math.floor(score + 0.5)
    return max(0, min(int(rounded), MAX_SCORE))


def _has_recent_activity(hiring: HiringSummary, signals: SignalsSummary) -> bool:
    has_urgent_hiring = hiring.urgent_count > 0
    has_recent_signals = (len(signals.executive_changes) + len(signals.expansion_activity)) > 0
    return has_urgent_hiring or has_recent_signals


def generate_recommendations(
    hiring: HiringSummary,
    signals: SignalsSummary,
    overall_score: int,
) -> Recommendation:
    reasoning: List[str] = []
    if hiring.urgent_count > 0:
        reasoning.append(f"{hiring.urgent_count} urgent hiring needs detected")
    if signals.executive_changes:
        reasoning.append("Recent executive changes indicate organizational shifts")
    if signals.expansion_activity:
        reasoning.append("Expansion activity suggests growing staffing needs")

    if overall_score >= HIGH_PRIORITY_SCORE:
        next_actions = [
            "Contact directly within 24-48 hours",
            "Reference specific urgent openings in outreach",
        ]
    elif overall_score >= MEDIUM_PRIORITY_SCORE:
        next_actions = [
            "Add to priority follow-up list",
            "Monitor for additional signals",
        ]
    else:
        next_actions = ["Add to general monitoring list"]

    talking_points: List[str] = []
    if hiring.modalities:
        talking_points.append(f"Immediate availability for {', '.join(hiring.modalities)} positions")
    if signals.expansion_activity:
        talking_points.append("Experience supporting rapid deployment for expanding facilities")

    return Recommendation(
        priority=priority_for_score(overall_score),
        reasoning=" + ".join(reasoning),
        next_actions=next_actions,
        talking_points=talking_points,
    )


def aggregate_intelligence(
    hiring: HiringSummary,
    signals: SignalsSummary,
    news: List[NewsItem],
    company: str,
    location: Optional[str] = None,
) -> IntelligenceReport:
    """Build the intelligence report from the three collector results."""
    overall_score = calculate_overall_score(hiring, signals, news)
    recent_activity = _has_recent_activity(hiring, signals)
    multiple_signals = (
        hiring.total_postings + len(signals.executive_changes) + len(signals.expansion_activity)
    ) > 2

    return IntelligenceReport(
        company=company,
        location=location or None,
        search_timestamp=datetime.now(timezone.utc).isoformat(),
        overall_score=overall_score,
        priority_level=priority_for_score(overall_score),
        actionable_timeline="within_week" if recent_activity else "within_month",
        hiring_activity=HiringActivity(
            recent_postings_count=hiring.total_postings,
            urgent_needs=hiring.urgent_count,
            modalities_hiring=list(hiring.modalities),
            contract_types=list(hiring.contract_types),
            postings=hiring.postings[:REPORT_MAX_POSTINGS],
        ),
        supplementary_signals=signals,
        recent_news=news[:REPORT_MAX_NEWS],
        confidence_indicators=ConfidenceIndicators(
            multiple_signals=multiple_signals,
            verified_sources=True,  # single provider: SerpAPI
            recent_activity=recent_activity,
            contact_info_available=any(p.apply_links for p in hiring.postings),
        ),
        recommendations=generate_recommendations(hiring, signals, overall_score),
    )
