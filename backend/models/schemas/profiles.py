"""Input records: skill-bearing actors and the requirements they are matched against."""

from pydantic import BaseModel, ConfigDict, Field

from services.matching.normalizer import normalize


class ActorProfile(BaseModel):
    """A student (or any skill-bearing entity), snapshotted for one scoring pass."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = ""
    skills: list[str] = []
    preferred_roles: list[str] = []
    quality_metric: float | None = Field(default=None, ge=0, allow_inf_nan=False)  # CGPA, 10-point scale
    placement_status: str = "not_placed"  # placed, not_placed, ...
    placed_role: str | None = None
    placed_company: str | None = None
    package_lpa: float | None = Field(default=None, allow_inf_nan=False)

    @property
    def skill_set(self) -> list[str]:
        return normalize(self.skills)

    @property
    def is_placed(self) -> bool:
        """True when the actor has a recorded successful outcome."""
        return self.placement_status == "placed" and bool(self.placed_role)


class Requirement(BaseModel):
    """A job posting or target role."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = ""
    company: str = ""
    required_skills: list[str] = []
    preferred_skills: list[str] = []  # carried for display, not scored
    experience_level: str = ""  # Entry, Junior, Mid, Senior, ...

    @property
    def skill_set(self) -> list[str]:
        return normalize(self.required_skills)
