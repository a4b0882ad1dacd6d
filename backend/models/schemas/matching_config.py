"""Explicit scoring options passed to every engine entry point."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# CGPA (10-point scale) breakpoints -> bonus points, highest threshold first
DEFAULT_QUALITY_BONUS_TIERS: list[tuple[float, int]] = [
    (8.5, 20),
    (7.5, 15),
    (6.5, 10),
]

MAX_QUALITY_BONUS = 20


class MatchingConfig(BaseModel):
    """Recognized scoring options. Defaults reproduce the dashboard's behaviour."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    min_similarity: float = Field(default=0.25, ge=0, le=1)
    min_fit_score: int = Field(default=40, ge=0, le=100)
    top_n_peers: int = Field(default=10, ge=0)
    top_k_jobs: int = Field(default=3, ge=0)
    top_n_candidates: int = Field(default=100, ge=0)
    similar_students_limit: int = Field(default=5, ge=0)
    recommended_paths_limit: int = Field(default=5, ge=0)
    transitions_summary_limit: int = Field(default=5, ge=0)
    max_learning_path_skills: int = Field(default=10, ge=0)
    quality_bonus_tiers: list[tuple[float, int]] = Field(
        default_factory=lambda: list(DEFAULT_QUALITY_BONUS_TIERS)
    )
    default_timeline_months: int = Field(default=12, ge=0)
    default_confidence: int = Field(default=50, ge=0, le=100)

    # Pool caps: bound the O(pool size x skill set size) cost of one call
    max_peer_pool: int = Field(default=100, ge=0)
    max_transitions: int = Field(default=20, ge=0)
    max_skill_edges: int = Field(default=50, ge=0)
    max_requirements: int = Field(default=100, ge=0)

    @field_validator("quality_bonus_tiers")
    @classmethod
    def _check_tiers(cls, tiers: list[tuple[float, int]]) -> list[tuple[float, int]]:
        previous = None
        for threshold, bonus in tiers:
            if not 0 <= bonus <= MAX_QUALITY_BONUS:
                raise ValueError(f"tier bonus must be within 0-{MAX_QUALITY_BONUS}, got {bonus}")
            if previous is not None and threshold >= previous:
                raise ValueError("tier thresholds must be strictly descending")
            previous = threshold
        return tiers
