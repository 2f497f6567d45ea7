"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
SERPAPI_KEY: str = os.getenv("SERPAPI_KEY", "")
SERPAPI_BASE_URL: str = os.getenv("SERPAPI_BASE_URL", "https://serpapi.com/search")

# HTTP settings
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
HTTP_MAX_RETRIES: int = int(os.getenv("HTTP_MAX_RETRIES", "3"))

# Inbound API server
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("PORT", "3000"))

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# SerpAPI "tbs" time windows per collector
HIRING_WINDOW: str = "qdr:w2"  # last 2 weeks
SIGNALS_WINDOW: str = "qdr:w2"
NEWS_WINDOW: str = "qdr:w1"  # last week
LEGACY_NEWS_DAYS: int = 7

# Report truncation
REPORT_MAX_POSTINGS: int = 10
REPORT_MAX_NEWS: int = 5
