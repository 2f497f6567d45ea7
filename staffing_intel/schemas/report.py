"""Collector summaries and the aggregated intelligence report."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from staffing_intel.schemas.posting import NewsItem, NormalizedPosting, SignalItem

PriorityLevel = Literal["HIGH", "MEDIUM", "LOW"]
Timeline = Literal["within_week", "within_month"]


class HiringSummary(BaseModel):
    """Output of the hiring collector; the empty instance is its failure value."""

    total_postings: int = 0
    urgent_count: int = 0
    modalities: List[str] = Field(default_factory=list, description="Distinct modalities, first-seen order")
    contract_types: List[str] = Field(default_factory=list)
    postings: List[NormalizedPosting] = Field(default_factory=list)


class SignalsSummary(BaseModel):
    """Signal items partitioned by signal_type."""

    executive_changes: List[SignalItem] = Field(default_factory=list)
    expansion_activity: List[SignalItem] = Field(default_factory=list)
    fda_activity: List[SignalItem] = Field(default_factory=list)
    other_signals: List[SignalItem] = Field(default_factory=list)


class HiringActivity(BaseModel):
    recent_postings_count: int
    urgent_needs: int
    modalities_hiring: List[str]
    contract_types: List[str]
    postings: List[NormalizedPosting]


class ConfidenceIndicators(BaseModel):
    multiple_signals: bool
    verified_sources: bool = True
    recent_activity: bool
    contact_info_available: bool


class Recommendation(BaseModel):
    priority: PriorityLevel
    reasoning: str = ""
    next_actions: List[str] = Field(default_factory=list)
    talking_points: List[str] = Field(default_factory=list)


class IntelligenceReport(BaseModel):
    """Scored, prioritized view of one company's staffing activity."""

    company: str
    location: Optional[str] = None
    search_timestamp: str = Field(..., description="ISO-8601 UTC time the report was built")
    overall_score: int = Field(..., ge=0, le=10)
    priority_level: PriorityLevel
    actionable_timeline: Timeline
    hiring_activity: HiringActivity
    supplementary_signals: SignalsSummary
    recent_news: List[NewsItem]
    confidence_indicators: ConfidenceIndicators
    recommendations: Recommendation
