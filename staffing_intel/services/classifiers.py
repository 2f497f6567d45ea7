"""Keyword classifiers for healthcare staffing text. Pure, case-insensitive substring matching."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Table order matters: the first matching entry wins.
MODALITY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "radiology": ("radiology", "x-ray", "imaging", "radiologic", "diagnostic imaging"),
    "mri": ("MRI", "magnetic resonance", "mr tech", "mr technologist"),
    "ct": ("CT", "computed tomography", "cat scan", "ct tech"),
    "echo": ("echo", "echocardiography", "cardiac ultrasound", "echo tech"),
    "cath_lab": ("cath lab", "catheterization", "interventional cardiology", "cardiac cath"),
    "interventional": ("interventional", "IR", "vascular", "interventional radiology"),
})

URGENCY_KEYWORDS: Tuple[str, ...] = (
    "immediate", "ASAP", "urgent", "stat", "emergency coverage", "rush", "critical need",
)

CONTRACT_KEYWORDS: Tuple[str, ...] = ("travel", "contract", "locum", "temporary", "per diem", "interim")

EXECUTIVE_KEYWORDS: Tuple[str, ...] = (
    "new COO", "new CMO", "new CEO", "appointed", "joins as", "leadership change", "promoted to",
)

EXPANSION_KEYWORDS: Tuple[str, ...] = (
    "expanding", "new department", "service line", "lab space", "facility expansion", "opening new",
)

RESEARCH_KEYWORDS: Tuple[str, ...] = ("FDA approval", "trial site", "new program", "research initiative")

FDA_TERMS: Tuple[str, ...] = ("fda", "trial", "approval")

NEWS_KEYWORDS: Tuple[str, ...] = ("hiring", "expansion", "acquisition", "partnership", "contract")

STAFFING_PLATFORMS: Tuple[str, ...] = (
    "aya.healthcare",
    "amnhealthcare.com",
    "vivian.com",
    "totalmed.com",
    "crosscountrynurses.com",
    "medicaltravelers.com",
)

HEALTHCARE_KEYWORDS: Tuple[str, ...] = ("healthcare", "hospital", "medical", "clinical", "patient")

HIRING_KEYWORDS: Tuple[str, ...] = ("hiring", "staffing", "recruitment", "positions", "jobs")

MAX_RELEVANCE_SCORE = 10


def _contains_any(lower_text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k.lower() in lower_text for k in keywords)


def detect_modality(text: str) -> Optional[str]:
    """Return the first modality whose keywords appear in text, or None."""
    lower_text = (text or "").lower()
    for modality, keywords in MODALITY_KEYWORDS.items():
        if _contains_any(lower_text, keywords):
            return modality
    return None


def calculate_urgency(text: str) -> str:
    """Map the number of distinct urgency keywords found to low / medium / high."""
    lower_text = (text or "").lower()
    matches = sum(1 for k in URGENCY_KEYWORDS if k.lower() in lower_text)
    if matches >= 2:
        return "high"
    if matches == 1:
        return "medium"
    return "low"


def detect_contract_type(text: str) -> Optional[str]:
    lower_text = (text or "").lower()
    for keyword in CONTRACT_KEYWORDS:
        if keyword.lower() in lower_text:
            return keyword
    return None


def detect_platform(url: str) -> str:
    """Known staffing platform domain contained in url, else 'other'."""
    for platform in STAFFING_PLATFORMS:
        if platform in (url or ""):
            return platform
    return "other"


def detect_signal_type(text: str) -> str:
    """Classify news text as executive, expansion, fda or other (checked in that order)."""
    lower_text = (text or "").lower()
    if _contains_any(lower_text, EXECUTIVE_KEYWORDS):
        return "executive"
    if _contains_any(lower_text, EXPANSION_KEYWORDS):
        return "expansion"
    if _contains_any(lower_text, FDA_TERMS):
        return "fda"
    return "other"


def calculate_relevance_score(text: str, company: str) -> int:
    """
    Score 0-10: two points per literal mention of the company, one per
    healthcare keyword present, two per hiring keyword present.
    """
    lower_text = (text or "").lower()
    lower_company = (company or "").lower()

    score = 0
    if lower_company:
        # literal, non-overlapping count; the name is never treated as a pattern
        score += lower_text.count(lower_company) * 2
    score += sum(1 for k in HEALTHCARE_KEYWORDS if k in lower_text)
    score += sum(2 for k in HIRING_KEYWORDS if k in lower_text)
    return min(score, MAX_RELEVANCE_SCORE)
