"""Learning Path Builder: skills to learn toward a target role, prerequisite-aware.

Flow:
    transitions.required_skills  (first-encounter order)
      - actor skill set           -> candidate skills
      [:max_skills]
      + incoming prerequisite edges per skill
      -> priority: high (no prerequisites) / medium
      -> stable partition, high before medium

This is an ordering hint, not a DAG solver. Prerequisites are one level deep
(no transitive chaining) and cycles in the edge list are not detected.
"""

import logging
from collections.abc import Iterable, Sequence

from models.schemas.career_graph import PREREQUISITE, SkillEdge, TransitionRecord
from models.schemas.profiles import ActorProfile
from models.schemas.recommendation import LearningPathItem
from services.matching.normalizer import normalize, normalize_token

logger = logging.getLogger(__name__)

HIGH = "high"
MEDIUM = "medium"


def recommended_skills(
    actor: ActorProfile,
    transitions: Iterable[TransitionRecord],
) -> list[str]:
    """Union of required skills across transitions minus what the actor already has.

    Order is the order in which each skill is first encountered.
    """
    owned = set(actor.skill_set)
    candidates: list[str] = []
    seen: set[str] = set()
    for transition in transitions:
        for skill in normalize(transition.required_skills):
            if skill in owned or skill in seen:
                continue
            seen.add(skill)
            candidates.append(skill)
    return candidates


def prerequisite_index(edges: Iterable[SkillEdge]) -> dict[str, list[str]]:
    """Map target skill -> prerequisite source skills, in edge order."""
    index: dict[str, list[str]] = {}
    for edge in edges:
        if normalize_token(edge.relation_kind) != PREREQUISITE:
            continue
        source = normalize_token(edge.source)
        target = normalize_token(edge.target)
        if not source or not target:
            continue
        sources = index.setdefault(target, [])
        if source not in sources:
            sources.append(source)
    return index


def build_learning_path(
    actor: ActorProfile,
    transitions: Sequence[TransitionRecord],
    edges: Sequence[SkillEdge],
    max_skills: int = 10,
) -> list[LearningPathItem]:
    candidates = recommended_skills(actor, transitions)[:max_skills]
    prerequisites = prerequisite_index(edges)

    items = [
        LearningPathItem(
            skill=skill,
            prerequisites=list(prerequisites.get(skill, [])),
            priority=MEDIUM if prerequisites.get(skill) else HIGH,
        )
        for skill in candidates
    ]
    # sorted() is stable: within-tier order is preserved
    items = sorted(items, key=lambda item: item.priority != HIGH)

    logger.debug(
        "Learning path for %s: %d skills (%d high priority)",
        actor.id, len(items), sum(1 for i in items if i.priority == HIGH),
    )
    return items
