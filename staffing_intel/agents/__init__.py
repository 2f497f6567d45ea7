"""Agent exports."""

from .hiring_agent import run_hiring_agent
from .intelligence_agent import IntelligenceError, run_intelligence_agent
from .news_agent import run_news_agent
from .signals_agent import run_signals_agent

__all__ = [
    "IntelligenceError",
    "run_hiring_agent",
    "run_intelligence_agent",
    "run_news_agent",
    "run_signals_agent",
]
