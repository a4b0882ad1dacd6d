"""Fit Scorer: weighted 0-100 score of how well an actor satisfies a requirement.

    skill overlap    0-50   share of required skills the actor covers
    preference       0/30   a preferred role overlaps the posting title
    quality bonus    0-20   tiered bonus from the actor's CGPA

Skill and role matching use the dashboard's containment heuristic: two
normalized tokens match when they are equal or one is a substring of the
other. It is imprecise ("java" matches "javascript"); pass a different
``matcher`` to score_fit() to use exact or alias-table matching instead.
"""

import logging
from collections.abc import Callable, Iterable

from models.schemas.match_result import MatchResult
from models.schemas.matching_config import DEFAULT_QUALITY_BONUS_TIERS, MAX_QUALITY_BONUS
from models.schemas.profiles import ActorProfile, Requirement
from services.matching.normalizer import normalize, normalize_token
from services.matching.numeric import clamp, round_half_up, safe_ratio

logger = logging.getLogger(__name__)

SkillMatcher = Callable[[str, str], bool]

SKILL_WEIGHT = 50
PREFERENCE_WEIGHT = 30

STRONG_MATCH = 70
MODERATE_MATCH = 40


def substring_match(actor_skill: str, required_skill: str) -> bool:
    """Equality or substring containment in either direction."""
    return actor_skill in required_skill or required_skill in actor_skill


def exact_match(actor_skill: str, required_skill: str) -> bool:
    return actor_skill == required_skill


def quality_bonus(
    metric: float | None,
    tiers: Iterable[tuple[float, int]] = DEFAULT_QUALITY_BONUS_TIERS,
) -> int:
    """Bonus of the first tier whose threshold the metric reaches, else 0."""
    if metric is None:
        return 0
    for threshold, bonus in tiers:
        if metric >= threshold:
            return int(clamp(bonus, 0, MAX_QUALITY_BONUS))
    return 0


def preference_matches(preferred_roles: Iterable[str], title: str) -> bool:
    title_norm = normalize_token(title)
    if not title_norm:
        return False
    return any(substring_match(role, title_norm) for role in normalize(preferred_roles))


def match_label(score: int) -> str:
    if score >= STRONG_MATCH:
        return "strong"
    if score >= MODERATE_MATCH:
        return "moderate"
    return "weak"


def score_fit(
    actor: ActorProfile,
    requirement: Requirement,
    tiers: Iterable[tuple[float, int]] = DEFAULT_QUALITY_BONUS_TIERS,
    matcher: SkillMatcher = substring_match,
) -> MatchResult:
    """Score one actor against one requirement. Total over well-typed input."""
    actor_skills = actor.skill_set
    required = requirement.skill_set

    matched: list[str] = []
    missing: list[str] = []
    for skill in required:
        if any(matcher(own, skill) for own in actor_skills):
            matched.append(skill)
        else:
            missing.append(skill)

    # No required skills -> 0, not a division by zero
    skill_score = clamp(safe_ratio(len(matched), len(required)) * SKILL_WEIGHT, 0, SKILL_WEIGHT)
    preference_score = (
        PREFERENCE_WEIGHT if preference_matches(actor.preferred_roles, requirement.title) else 0
    )
    bonus = quality_bonus(actor.quality_metric, tiers)

    score = int(clamp(round_half_up(skill_score + preference_score + bonus), 0, 100))

    return MatchResult(
        actor_id=actor.id,
        requirement_id=requirement.id,
        requirement_title=requirement.title,
        company=requirement.company,
        score=score,
        skill_score=round(skill_score, 2),
        preference_score=float(preference_score),
        quality_bonus=float(bonus),
        matched_skills=matched,
        missing_skills=missing,
        label=match_label(score),
        reasoning=_build_reasoning(matched, required, preference_score > 0, bonus),
    )


def _build_reasoning(
    matched: list[str],
    required: list[str],
    role_match: bool,
    bonus: int,
) -> str:
    parts: list[str] = []
    if required:
        parts.append(f"Covers {len(matched)} of {len(required)} required skills")
    else:
        parts.append("Posting lists no required skills")
    parts.append("preferred role matches the title" if role_match else "no preferred role match")
    parts.append(f"academic bonus {bonus}" if bonus else "no academic bonus")
    return "; ".join(parts) + "."


def rank_fits(
    results: Iterable[MatchResult],
    min_score: int = MODERATE_MATCH,
    top_k: int = 3,
) -> list[MatchResult]:
    """Apply the threshold policy: drop below min_score, sort, keep top_k.

    Ties on score are broken by requirement id, then actor id.
    """
    kept = [r for r in results if r.score >= min_score]
    kept.sort(key=lambda r: (-r.score, r.requirement_id, r.actor_id))
    return kept[:top_k]


def rank_candidates(
    results: Iterable[MatchResult],
    min_score: int = MODERATE_MATCH,
    top_n: int = 100,
) -> list[MatchResult]:
    """Threshold policy for one requirement against many actors (ties by actor id)."""
    kept = [r for r in results if r.score >= min_score]
    kept.sort(key=lambda r: (-r.score, r.actor_id, r.requirement_id))
    logger.debug("Kept %d of candidate fits at min_score=%d", len(kept), min_score)
    return kept[:top_n]
