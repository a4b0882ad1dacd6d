"""Pydantic contracts for the matching engine's records and results."""

from models.schemas.career_graph import SkillEdge, TransitionRecord
from models.schemas.match_result import MatchResult, PeerMatch, StudentJobMatches
from models.schemas.matching_config import MatchingConfig
from models.schemas.profiles import ActorProfile, Requirement
from models.schemas.recommendation import (
    LearningPathItem,
    RecommendationBundle,
    RecommendedPath,
    SimilarStudent,
    TimelineEstimate,
    TransitionSummary,
)

__all__ = [
    "ActorProfile",
    "Requirement",
    "TransitionRecord",
    "SkillEdge",
    "MatchingConfig",
    "MatchResult",
    "PeerMatch",
    "StudentJobMatches",
    "SimilarStudent",
    "RecommendedPath",
    "LearningPathItem",
    "TransitionSummary",
    "TimelineEstimate",
    "RecommendationBundle",
]
