"""Normalized job posting and news/signal items after classification."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Modality = Literal["radiology", "mri", "ct", "echo", "cath_lab", "interventional"]
Urgency = Literal["low", "medium", "high"]
SignalType = Literal["executive", "expansion", "fda", "other"]


class ApplyLink(BaseModel):
    title: Optional[str] = None
    link: Optional[str] = None


class NormalizedPosting(BaseModel):
    """A job posting annotated with classifier outputs."""

    title: str = Field(default="N/A", description="Job title")
    company: str = Field(..., description="Employer name (falls back to the queried company)")
    location: str = Field(default="N/A")
    posted_at: str = Field(default="N/A", description="Provider's relative posting time, e.g. '3 days ago'")
    posted_days_ago: Optional[int] = Field(default=None, description="Parsed from posted_at when possible")
    description: str = ""
    share_link: str = ""
    modality: Optional[Modality] = None
    urgency: Urgency = "low"
    contract_type: Optional[str] = None
    platform: Optional[str] = None
    apply_links: List[ApplyLink] = Field(default_factory=list)


class NewsItem(BaseModel):
    """A news result scored for relevance to the queried company."""

    headline: str = ""
    source: Optional[str] = None
    date: str = "N/A"
    snippet: str = ""
    link: Optional[str] = None
    relevance_score: int = Field(default=0, ge=0, le=10)


class SignalItem(NewsItem):
    """A news result classified as a staffing-demand signal."""

    signal_type: SignalType = "other"
