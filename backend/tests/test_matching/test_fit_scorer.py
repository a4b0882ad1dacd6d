"""Tests for the Fit Scorer and its ranking policy."""

import pytest

from models.schemas.match_result import MatchResult
from models.schemas.profiles import ActorProfile, Requirement
from services.matching.fit_scorer import (
    exact_match,
    match_label,
    preference_matches,
    quality_bonus,
    rank_candidates,
    rank_fits,
    score_fit,
    substring_match,
)


def _actor(skills=(), roles=(), cgpa=None, actor_id="s1"):
    return ActorProfile(
        id=actor_id,
        name="Asha",
        skills=list(skills),
        preferred_roles=list(roles),
        quality_metric=cgpa,
    )


def _job(skills=(), title="Software Engineer", job_id="j1"):
    return Requirement(id=job_id, title=title, company="Acme", required_skills=list(skills))


def _result(score, requirement_id="j1", actor_id="s1"):
    return MatchResult(actor_id=actor_id, requirement_id=requirement_id, score=score)


class TestScoreFit:
    def test_partial_skill_overlap(self):
        result = score_fit(_actor(["React", "Python"]), _job(["React", "Node.js", "SQL"]))
        assert result.skill_score == pytest.approx(16.67, abs=0.01)
        assert result.preference_score == 0
        assert result.quality_bonus == 0
        assert result.score == 17
        assert result.matched_skills == ["react"]
        assert result.missing_skills == ["node.js", "sql"]

    def test_no_required_skills_scores_zero_skill_term(self):
        result = score_fit(_actor(["Python"]), _job([]))
        assert result.skill_score == 0.0
        assert result.score == 0
        assert result.matched_skills == []

    def test_no_required_skills_keeps_other_terms(self):
        result = score_fit(_actor(["Python"], roles=["Software Engineer"], cgpa=9.0), _job([]))
        assert result.skill_score == 0.0
        assert result.score == 50

    def test_perfect_fit(self):
        actor = _actor(["Python", "Django", "SQL"], roles=["Backend Developer"], cgpa=9.1)
        job = _job(["python", "django"], title="Backend Developer")
        result = score_fit(actor, job)
        assert result.score == 100
        assert result.label == "strong"

    def test_case_and_whitespace_insensitive(self):
        result = score_fit(_actor(["  REACT "]), _job(["react"]))
        assert result.matched_skills == ["react"]
        assert result.skill_score == 50

    def test_substring_heuristic_both_directions(self):
        # "java" is contained in "javascript": counted as a match by design of the heuristic
        assert score_fit(_actor(["Java"]), _job(["JavaScript"])).matched_skills == ["javascript"]
        assert score_fit(_actor(["ReactJS"]), _job(["React"])).matched_skills == ["react"]

    def test_exact_matcher_extension_point(self):
        result = score_fit(_actor(["Java"]), _job(["JavaScript"]), matcher=exact_match)
        assert result.matched_skills == []
        assert result.skill_score == 0

    def test_custom_tiers(self):
        result = score_fit(_actor(cgpa=3.6), _job(), tiers=[(3.5, 20), (3.0, 10)])
        assert result.quality_bonus == 20

    def test_reasoning_mentions_coverage(self):
        result = score_fit(_actor(["React"]), _job(["React", "SQL"]))
        assert "1 of 2" in result.reasoning

    def test_deterministic(self):
        actor = _actor(["React", "SQL"], roles=["Frontend"], cgpa=7.9)
        job = _job(["React", "TypeScript"], title="Frontend Engineer")
        assert score_fit(actor, job) == score_fit(actor, job)

    def test_adding_matching_skill_never_decreases_score(self):
        job = _job(["React", "Node.js", "SQL", "Docker"])
        skills = ["React"]
        previous = score_fit(_actor(skills), job).score
        for extra in ["SQL", "Go", "Docker", "Node.js"]:
            skills = skills + [extra]
            current = score_fit(_actor(skills), job).score
            assert current >= previous
            previous = current

    @pytest.mark.parametrize(
        "skills, required, roles, title, cgpa",
        [
            ([], [], [], "", None),
            (["python"], [], [], "Engineer", 10.0),
            ([], ["python", "sql"], ["Engineer"], "Engineer", 0.0),
            (["a", "b", "c"], ["a"], ["x"], "x", 8.5),
        ],
    )
    def test_score_bounds(self, skills, required, roles, title, cgpa):
        result = score_fit(_actor(skills, roles, cgpa), _job(required, title))
        assert 0 <= result.score <= 100
        assert 0 <= result.skill_score <= 50
        assert result.preference_score in (0, 30)
        assert 0 <= result.quality_bonus <= 20


class TestTerms:
    @pytest.mark.parametrize(
        "cgpa, bonus",
        [(9.5, 20), (8.5, 20), (8.4, 15), (7.5, 15), (7.0, 10), (6.5, 10), (6.4, 0), (None, 0)],
    )
    def test_default_quality_tiers(self, cgpa, bonus):
        assert quality_bonus(cgpa) == bonus

    def test_preference_substring_either_direction(self):
        assert preference_matches(["Frontend Developer"], "Senior Frontend Developer")
        assert preference_matches(["Senior Data Analyst"], "data analyst")
        assert not preference_matches(["Data Analyst"], "Backend Developer")

    def test_preference_ignores_blank_roles_and_titles(self):
        assert not preference_matches(["", "  "], "Backend Developer")
        assert not preference_matches(["Backend Developer"], "")

    def test_substring_match(self):
        assert substring_match("sql", "postgresql")
        assert substring_match("postgresql", "sql")
        assert not substring_match("go", "rust")

    def test_labels(self):
        assert match_label(70) == "strong"
        assert match_label(69) == "moderate"
        assert match_label(40) == "moderate"
        assert match_label(39) == "weak"


class TestRankFits:
    def test_threshold_and_order(self):
        results = [_result(35, "j1"), _result(80, "j2"), _result(40, "j3"), _result(55, "j4")]
        ranked = rank_fits(results, min_score=40, top_k=10)
        assert [r.requirement_id for r in ranked] == ["j2", "j4", "j3"]

    def test_keeps_top_k(self):
        results = [_result(s, f"j{s}") for s in (90, 80, 70, 60, 50)]
        assert len(rank_fits(results, top_k=3)) == 3

    def test_ties_broken_by_requirement_id(self):
        results = [_result(60, "j9"), _result(60, "j2"), _result(60, "j5")]
        ranked = rank_fits(results)
        assert [r.requirement_id for r in ranked] == ["j2", "j5", "j9"]

    def test_empty_is_valid(self):
        assert rank_fits([_result(10)]) == []
        assert rank_fits([]) == []

    def test_candidates_ties_broken_by_actor_id(self):
        results = [_result(75, actor_id="s3"), _result(75, actor_id="s1"), _result(90, actor_id="s2")]
        ranked = rank_candidates(results)
        assert [r.actor_id for r in ranked] == ["s2", "s1", "s3"]
