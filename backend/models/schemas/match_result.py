"""Fit Scorer and Peer Ranker outputs."""

from pydantic import BaseModel, ConfigDict

from models.schemas.profiles import ActorProfile


class MatchResult(BaseModel):
    """Weighted fit of one actor against one requirement.

    score = skill_score (0-50) + preference_score (0 or 30) + quality_bonus (0-20),
    rounded half-up and bounded to 0-100.
    """
    model_config = ConfigDict(frozen=True)

    actor_id: str
    requirement_id: str
    requirement_title: str = ""
    company: str = ""
    score: int = 0  # 0-100
    skill_score: float = 0.0  # 0-50
    preference_score: float = 0.0  # 0 or 30
    quality_bonus: float = 0.0  # 0-20
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    label: str = "weak"  # strong, moderate, weak
    reasoning: str = ""


class PeerMatch(BaseModel):
    """A pool member together with its Jaccard similarity to the actor."""
    model_config = ConfigDict(frozen=True)

    peer: ActorProfile
    similarity: float = 0.0  # 0.0-1.0


class StudentJobMatches(BaseModel):
    """Batch view: one actor and its top fitting requirements."""
    model_config = ConfigDict(frozen=True)

    actor: ActorProfile
    matches: list[MatchResult] = []
