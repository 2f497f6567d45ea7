"""
FastAPI surface: the intelligence report endpoint, its health check, and the
plain jobs/news/web search pass-throughs.

Run with: uvicorn staffing_intel.api:app
"""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Query
from fastapi.responses import JSONResponse

from staffing_intel import config
from staffing_intel.agents.intelligence_agent import IntelligenceError, run_intelligence_agent
from staffing_intel.services.passthrough import (
    build_jobs_query,
    build_news_query,
    build_web_query,
    news_date_range,
    reshape_jobs,
    reshape_news,
)
from staffing_intel.services.serp_service import SearchEngine, SerpAPIError, search_serp
from staffing_intel.utils.helpers import normalize_query_param
from staffing_intel.utils.logger import get_logger

logger = get_logger(__name__)

USAGE_HINT = "GET /intelligence?company=HCA&location=Texas (location optional)"

intelligence_router = APIRouter(prefix="/intelligence", tags=["intelligence"])
search_router = APIRouter(tags=["search"])


@intelligence_router.get("")
async def get_intelligence(
    company: Optional[str] = Query(default=None),
    location: Optional[str] = Query(default=None),
):
    """
    Healthcare staffing intelligence for one company.

    GET /intelligence?company=HCA&location=Texas
    GET /intelligence?company=Mayo+Clinic
    """
    company = normalize_query_param(company)
    location = normalize_query_param(location)
    if not company:
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Company name is required", "usage": USAGE_HINT},
        )

    logger.info("Gathering intelligence for: %s%s", company, f" in {location}" if location else "")
    try:
        report = await run_intelligence_agent(company, location)
    except IntelligenceError as e:
        logger.error("Intelligence gathering failed for %s: %s", company, e)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Failed to gather intelligence",
                "details": str(e),
                "company": company,
                "location": location,
            },
        )

    logger.info(
        "Intelligence gathered - Score: %s/10, Priority: %s",
        report.overall_score,
        report.priority_level,
    )
    return {"success": True, "data": report.model_dump(mode="json")}


@intelligence_router.get("/health")
async def intelligence_health():
    return {
        "success": True,
        "service": "Healthcare Staffing Intelligence API",
        "status": "operational",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": {
            "main": "GET /intelligence?company=<name>&location=<optional>",
            "health": "GET /intelligence/health",
        },
    }


def _gateway_error(e: SerpAPIError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "error": str(e)})


@search_router.get("/jobs")
async def search_jobs(company: str = "", city: str = "", industry: str = ""):
    try:
        data = await search_serp(
            SearchEngine.JOBS,
            build_jobs_query(company, industry),
            {"location": city},
        )
    except SerpAPIError as e:
        return _gateway_error(e)
    return {"success": True, "results": reshape_jobs(data)}


@search_router.get("/news")
async def search_news(
    company: str = "",
    city: str = "",
    industry: str = "",
    signals: List[str] = Query(default=[]),
):
    try:
        data = await search_serp(
            SearchEngine.NEWS,
            build_news_query(company, city, industry, signals),
            {"tbs": news_date_range(config.LEGACY_NEWS_DAYS)},
        )
    except SerpAPIError as e:
        return _gateway_error(e)
    return {"success": True, "results": reshape_news(data)}


@search_router.get("/search")
async def search_web(company: str = "", city: str = "", industry: str = ""):
    try:
        data = await search_serp(SearchEngine.WEB, build_web_query(company, city, industry))
    except SerpAPIError as e:
        return _gateway_error(e)
    return {"success": True, "results": data.get("organic_results") or []}


def create_app() -> FastAPI:
    """Application factory."""
    application = FastAPI(title="Healthcare Staffing Intelligence API")
    application.include_router(intelligence_router)
    application.include_router(search_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
