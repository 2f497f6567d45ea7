"""Unit tests for collector query construction."""

from staffing_intel.agents.query_strategies import (
    HiringQueryStrategy,
    NewsQueryStrategy,
    SignalsQueryStrategy,
    _build_or_query_part,
)
from staffing_intel.services.serp_service import SearchEngine


def test_build_or_query_part_quotes_terms():
    assert _build_or_query_part(["a", "b c"]) == '("a" OR "b c")'


def test_build_or_query_part_skips_blank_terms():
    assert _build_or_query_part(["", " ", "x"]) == '("x")'
    assert _build_or_query_part([]) == ""


class TestHiringQueryStrategy:
    def test_query_without_location(self):
        engine, query, params = HiringQueryStrategy("HCA", None).build_query()
        assert engine == SearchEngine.JOBS
        assert params == {"tbs": "qdr:w2"}
        assert query == (
            '"HCA" AND ("travel" OR "contract" OR "locum" OR "temporary" OR "per diem" OR "interim")'
            ' AND ("radiology" OR "mri" OR "ct" OR "echo" OR "cath_lab" OR "interventional")'
        )

    def test_location_appended(self):
        _, query, _ = HiringQueryStrategy("HCA", "Texas").build_query()
        assert query.endswith(' AND "Texas"')

    def test_blank_location_ignored(self):
        _, query, _ = HiringQueryStrategy("HCA", "   ").build_query()
        assert "AND \"\"" not in query
        assert query.endswith('"interventional")')


class TestSignalsQueryStrategy:
    def test_query_covers_all_signal_vocabularies(self):
        engine, query, params = SignalsQueryStrategy("Mayo Clinic").build_query()
        assert engine == SearchEngine.NEWS
        assert params == {"tbs": "qdr:w2"}
        assert query.startswith('"Mayo Clinic" AND ("new COO"')
        for term in ("leadership change", "facility expansion", "FDA approval", "research initiative"):
            assert f'"{term}"' in query


class TestNewsQueryStrategy:
    def test_query(self):
        engine, query, params = NewsQueryStrategy("Mayo Clinic", "Rochester").build_query()
        assert engine == SearchEngine.NEWS
        assert params == {"tbs": "qdr:w1"}
        assert query == (
            '"Mayo Clinic" AND ("hiring" OR "expansion" OR "acquisition" OR "partnership" OR "contract")'
            ' AND "Rochester"'
        )
