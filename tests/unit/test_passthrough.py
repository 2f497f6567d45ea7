"""Unit tests for pass-through query building and reshaping."""

from datetime import date

from staffing_intel.services.passthrough import (
    build_jobs_query,
    build_news_query,
    build_web_query,
    news_date_range,
    reshape_jobs,
    reshape_news,
)


def test_build_jobs_query_skips_blank_parts():
    assert build_jobs_query("HCA", "") == "HCA"
    assert build_jobs_query("HCA", "radiology") == "HCA radiology"


def test_build_web_query():
    assert build_web_query("HCA", "Dallas", "imaging") == "HCA Dallas imaging"


def test_build_news_query_with_signals():
    query = build_news_query("HCA", "Dallas", "", ["new_ceo", "facility_expansion"])
    assert query == '"HCA" "Dallas" ("new ceo" OR "facility expansion")'


def test_build_news_query_signals_only():
    assert build_news_query(signals=["layoffs"]) == '("layoffs")'


def test_news_date_range():
    assert news_date_range(7, today=date(2026, 10, 19)) == "cdr:1,cd_min:2026-10-12,cd_max:2026-10-19"


def test_reshape_jobs(raw_job):
    results = reshape_jobs({"jobs_results": [raw_job, {}]})
    assert results[0]["company"] == "Acme Health"
    assert results[0]["posted_at"] == "3 days ago"
    assert results[0]["apply_links"][0] == {"title": "Aya Healthcare", "link": "https://www.aya.healthcare/apply/123"}
    assert "modality" not in results[0]
    assert results[1] == {
        "title": "N/A",
        "company": "N/A",
        "location": "N/A",
        "posted_at": "N/A",
        "description": "",
        "share_link": "",
        "apply_links": [],
    }


def test_reshape_news(raw_news):
    results = reshape_news({"news_results": [raw_news, {"title": "x", "source": "Plain", "description": "d"}]})
    assert results[0]["title"] == "Acme Health appointed new CEO"
    assert results[0]["source"] == "Healthcare Dive"
    assert results[0]["thumbnail"] == "https://example.com/thumb.jpg"
    assert results[1]["source"] == "Plain"
    assert results[1]["published_date"] == "N/A"
    assert results[1]["snippet"] == "d"


def test_reshape_ignores_missing_or_malformed_lists():
    assert reshape_jobs({}) == []
    assert reshape_news({"news_results": "none"}) == []
