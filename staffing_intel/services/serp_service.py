"""SerpAPI gateway: one parameterized search call per invocation, credential attached."""

import asyncio
from enum import Enum
from typing import Any, Optional

import httpx

from staffing_intel import config
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)


class SearchEngine(str, Enum):
    """Supported SerpAPI engines."""

    WEB = "google"
    NEWS = "google_news"
    JOBS = "google_jobs"


class SerpAPIError(Exception):
    """Raised when a SerpAPI call cannot produce a result document."""


async def _get_with_retries(client: httpx.AsyncClient, params: dict[str, Any]) -> httpx.Response:
    """GET the search endpoint, retrying timeouts and connection errors with backoff."""
    last_error: Optional[Exception] = None
    for attempt in range(config.HTTP_MAX_RETRIES):
        try:
            response = await client.get(config.SERPAPI_BASE_URL, params=params)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.error("SerpAPI HTTP error: %s %s", e.response.status_code, e.response.text[:200])
            raise SerpAPIError(f"SerpAPI returned HTTP {e.response.status_code}") from e
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            last_error = e
            logger.warning("SerpAPI request failed (attempt %s): %s", attempt + 1, str(e))
        except httpx.HTTPError as e:
            raise SerpAPIError(f"SerpAPI request failed: {e}") from e
        if attempt + 1 < config.HTTP_MAX_RETRIES:
            await asyncio.sleep(1.0 * (attempt + 1))  # Backoff
    raise SerpAPIError(
        f"SerpAPI request failed after {config.HTTP_MAX_RETRIES} attempts: {last_error}"
    )


async def search_serp(
    engine: SearchEngine,
    query: str,
    params: Optional[dict[str, Any]] = None,
    api_key: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[str, Any]:
    """
    Run a single SerpAPI search and return the raw result document.

    ``params`` carries engine extras such as ``tbs`` (time window) or
    ``location``. Raises SerpAPIError on missing credentials, HTTP errors,
    exhausted retries or a non-JSON body.
    """
    key = api_key if api_key is not None else config.SERPAPI_KEY
    if not key:
        logger.error("SERPAPI_KEY is not set")
        raise SerpAPIError("SERPAPI_KEY is not set")

    request_params: dict[str, Any] = {"engine": SearchEngine(engine).value, "q": query}
    for name, value in (params or {}).items():
        if value not in (None, ""):
            request_params[name] = value
    request_params["api_key"] = key

    if client is not None:
        response = await _get_with_retries(client, request_params)
    else:
        async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT_SECONDS) as own_client:
            response = await _get_with_retries(own_client, request_params)

    try:
        data = response.json()
    except ValueError as e:
        raise SerpAPIError("SerpAPI returned a non-JSON body") from e
    if not isinstance(data, dict):
        raise SerpAPIError("SerpAPI returned an unexpected document")
    if data.get("error") and not any(k.endswith("_results") for k in data):
        # SerpAPI reports "no results" as an error string alongside an empty document
        logger.info("SerpAPI %s query '%s' reported: %s", request_params["engine"], query[:50], data["error"])
    logger.info("SerpAPI %s query '%s' completed", request_params["engine"], query[:50])
    return data
