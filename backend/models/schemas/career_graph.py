"""Reference data: historical role transitions and the skill prerequisite graph."""

from pydantic import BaseModel, ConfigDict, Field

PREREQUISITE = "prerequisite"


class TransitionRecord(BaseModel):
    """Historical from-role -> to-role statistic."""
    model_config = ConfigDict(frozen=True)

    from_role: str = ""
    to_role: str = ""
    required_skills: list[str] = []
    success_rate: float | None = Field(default=None, ge=0, le=1, allow_inf_nan=False)
    avg_time_months: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    salary_change_percent: float | None = Field(default=None, allow_inf_nan=False)
    sample_size: int | None = None


class SkillEdge(BaseModel):
    """Directed relation between two skills. Only prerequisite edges affect ordering."""
    model_config = ConfigDict(frozen=True)

    source: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    relation_kind: str = PREREQUISITE  # prerequisite, related, ...
    strength: float | None = Field(default=None, allow_inf_nan=False)
