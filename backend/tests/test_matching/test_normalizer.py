"""Tests for SkillSet normalization."""

from services.matching.normalizer import normalize, normalize_token


class TestNormalize:
    def test_lowercases_and_trims(self):
        assert normalize(["  React ", "PYTHON"]) == ["react", "python"]

    def test_drops_empty_tokens(self):
        assert normalize(["", "   ", "sql"]) == ["sql"]

    def test_deduplicates_keeping_first_seen_order(self):
        assert normalize(["SQL", "Python", "sql ", "python"]) == ["sql", "python"]

    def test_empty_and_none(self):
        assert normalize([]) == []
        assert normalize(None) == []

    def test_none_tokens_are_dropped(self):
        assert normalize([None, "Go"]) == ["go"]


def test_normalize_token():
    assert normalize_token("  Data Analyst ") == "data analyst"
    assert normalize_token(None) == ""
