"""Recommendation pipeline outputs: learning path, timeline and the aggregate bundle."""

from pydantic import BaseModel, ConfigDict

from models.schemas.match_result import PeerMatch


class SimilarStudent(BaseModel):
    """Presentation view of a ranked peer."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    skills: list[str] = []
    role: str | None = None
    similarity: int = 0  # percent


class RecommendedPath(BaseModel):
    """A placed peer's outcome, offered as a career path to follow."""
    model_config = ConfigDict(frozen=True)

    role: str
    company: str | None = None
    skills: list[str] = []
    package_lpa: float | None = None
    similarity: float = 0.0


class LearningPathItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    prerequisites: list[str] = []
    priority: str = "high"  # high, medium


class TransitionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_role: str
    to_role: str
    required_skills: list[str] = []
    success_rate: int = 0  # percent
    avg_time_months: float | None = None
    salary_change_percent: float | None = None


class TimelineEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    timeline_months: int
    confidence: int  # 0-100


class RecommendationBundle(BaseModel):
    """Aggregate output of the full recommendation pipeline.

    An empty bundle is a valid answer ("no matches found"), not a failure.
    """
    model_config = ConfigDict(frozen=True)

    actor_id: str
    ranked_peers: list[PeerMatch] = []
    similar_students: list[SimilarStudent] = []
    recommended_paths: list[RecommendedPath] = []
    recommended_skills: list[str] = []
    learning_path: list[LearningPathItem] = []
    career_transitions: list[TransitionSummary] = []
    timeline_months: int = 12
    confidence: int = 50
    diagnostics: list[str] = []  # skipped or capped input records

    @property
    def is_empty(self) -> bool:
        return not (self.ranked_peers or self.recommended_paths or self.recommended_skills)
