"""Raw SerpAPI result items. Every field is optional; provider documents are partial and loosely typed."""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, field_validator

from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


def _text_or_none(value: Any) -> Optional[str]:
    """Scalars become strings (a numeric date stays usable); lists, dicts and None become None."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


LenientStr = Annotated[Optional[str], BeforeValidator(_text_or_none)]


class _RawItem(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RawApplyOption(_RawItem):
    title: LenientStr = None
    link: LenientStr = None


class RawDetectedExtensions(_RawItem):
    posted_at: LenientStr = None


class RawJobResult(_RawItem):
    """One entry of ``jobs_results`` from the google_jobs engine."""

    title: LenientStr = Field(default=None, description="Job title")
    company_name: LenientStr = Field(default=None, description="Employer as shown by the provider")
    location: LenientStr = None
    description: LenientStr = None
    share_link: LenientStr = None
    detected_extensions: RawDetectedExtensions = Field(default_factory=RawDetectedExtensions)
    apply_options: List[RawApplyOption] = Field(default_factory=list)

    @field_validator("detected_extensions", mode="before")
    @classmethod
    def _extensions_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("apply_options", mode="before")
    @classmethod
    def _options_or_empty(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [opt for opt in value if isinstance(opt, dict)]


class RawNewsResult(_RawItem):
    """One entry of ``news_results`` from the google_news engine."""

    title: LenientStr = None
    source: Optional[str] = Field(default=None, description="Publisher name")
    date: LenientStr = None
    snippet: LenientStr = None
    description: LenientStr = None
    link: LenientStr = None
    thumbnail: LenientStr = None

    @field_validator("source", mode="before")
    @classmethod
    def _source_name(cls, value: Any) -> Any:
        # google_news returns either a plain string or {"name": ..., "icon": ...}
        if isinstance(value, dict):
            value = value.get("name")
        return _text_or_none(value)


def parse_raw_items(items: Any, model: type[_RawItem]) -> list:
    """Parse a provider result list into raw models; entries that still fail validation are skipped."""
    if not isinstance(items, list):
        return []
    parsed = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping malformed %s: %s", model.__name__, e.errors()[:1])
    return parsed
