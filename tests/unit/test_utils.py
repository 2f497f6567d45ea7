"""Unit tests for date parsing and small helpers."""

import logging
from datetime import datetime, timezone

import pytest

from staffing_intel.utils.date_parser import parse_posted_days_ago
from staffing_intel.utils.helpers import classifier_text, normalize_query_param, unique_in_order
from staffing_intel.utils.logger import LOG_FORMAT, get_logger

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class TestParsePostedDaysAgo:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("17 hours ago", 0),
            ("Posted 3h ago", 0),
            ("1 day ago", 1),
            ("3 days ago", 3),
            ("30+ days ago", 30),
            ("2 weeks ago", 14),
            ("1 month ago", 30),
            ("Today", 0),
            ("yesterday", 1),
            ("Oct 12, 2026", 7),
            ("12 October 2026", 7),
            ("2026-10-09", 10),
        ],
    )
    def test_known_formats(self, raw, expected):
        assert parse_posted_days_ago(raw, now=NOW) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "N/A", "Full-time", "Dec 1, 2030", "Foo 12, 2025"])
    def test_unknown_or_future(self, raw):
        assert parse_posted_days_ago(raw, now=NOW) is None


def test_unique_in_order_drops_empty_and_duplicates():
    assert unique_in_order(["mri", None, "ct", "mri", ""]) == ["mri", "ct"]


def test_classifier_text_skips_missing_parts():
    assert classifier_text("Title", None, "") == "Title"
    assert classifier_text("Title", "Body") == "Title Body"


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("  ", None), (" HCA ", "HCA")])
def test_normalize_query_param(raw, expected):
    assert normalize_query_param(raw) == expected


class TestGetLogger:
    def test_module_loggers_share_package_handler(self):
        logger = get_logger("staffing_intel.agents.hiring_agent")
        package_logger = logging.getLogger("staffing_intel")

        assert logger.name == "staffing_intel.agents.hiring_agent"
        assert logger.handlers == []
        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_foreign_names_are_rerooted(self):
        assert get_logger("__main__").name == "staffing_intel.__main__"

    def test_repeated_calls_do_not_add_handlers(self):
        get_logger("staffing_intel.api")
        get_logger("staffing_intel.api")
        assert len(logging.getLogger("staffing_intel").handlers) == 1

    def test_records_reach_caplog(self, caplog):
        with caplog.at_level(logging.WARNING, logger="staffing_intel"):
            get_logger("staffing_intel.schemas.raw_result").warning("Skipping malformed RawNewsResult")
        assert "Skipping malformed RawNewsResult" in caplog.text
