"""Matching engine entry points: wires the scoring stages together.

Flow (build_recommendation_bundle):
    actor + peer_pool + transitions + skill_edges
      ├─ resolve_config()                          → MatchingConfig (or ConfigurationError)
      ├─ _require_record(actor)                    → ActorProfile (or InvalidInputError)
      ├─ _coerce_pool(...)                         → valid records, diagnostics for the rest
      │       ↓
      ├─ rank_peers(actor, pool)                   → [PeerMatch]
      │       ├─ recommended_paths(peers)          → [RecommendedPath]
      │       └─ similar_students(peers)           → [SimilarStudent]
      ├─ build_learning_path(actor, transitions, edges)  → [LearningPathItem]
      └─ estimate(transitions, peers)              → TimelineEstimate
                       ↓
         RecommendationBundle

Every entry point is synchronous and pure: no I/O, no shared state. Records
may be passed as schema instances or plain mappings; a malformed pool record
is skipped and described in ``diagnostics`` instead of aborting the call.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from models.schemas.career_graph import SkillEdge, TransitionRecord
from models.schemas.match_result import MatchResult, PeerMatch, StudentJobMatches
from models.schemas.matching_config import MatchingConfig
from models.schemas.profiles import ActorProfile, Requirement
from models.schemas.recommendation import RecommendationBundle
from services.matching import fit_scorer, learning_path, peer_ranker, timeline
from services.matching.errors import ConfigurationError, InvalidInputError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
ConfigLike = MatchingConfig | Mapping[str, Any] | None


def resolve_config(config: ConfigLike = None) -> MatchingConfig:
    """Validate caller options. Raises ConfigurationError on any out-of-range value."""
    if config is None:
        return MatchingConfig()
    raw = config.model_dump() if isinstance(config, MatchingConfig) else config
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"config must be a mapping, got {type(raw).__name__}")
    try:
        return MatchingConfig.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid matching config: {_describe(e)}") from e


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
        for err in error.errors()
    )


def _require_record(model: type[RecordT], record: Any, label: str) -> RecordT:
    """Validate a primary input record; malformed input is reported, never defaulted."""
    if isinstance(record, model):
        return record
    if record is None:
        raise InvalidInputError(f"{label} is required")
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid {label}: {_describe(e)}") from e


def _coerce_pool(
    model: type[RecordT],
    records: Iterable[Any] | None,
    cap: int,
    label: str,
    diagnostics: list[str],
) -> list[RecordT]:
    """Validate pool records, skipping bad ones and dropping anything past ``cap``."""
    items = list(records or [])
    if len(items) > cap:
        message = f"{label}: {len(items)} records exceed the limit of {cap}; extra records ignored"
        logger.warning(message)
        diagnostics.append(message)
        items = items[:cap]

    valid: list[RecordT] = []
    for i, record in enumerate(items):
        if isinstance(record, model):
            valid.append(record)
            continue
        try:
            valid.append(model.model_validate(record))
        except ValidationError as e:
            message = f"{label}[{i}] skipped: {_describe(e)}"
            logger.warning(message)
            diagnostics.append(message)
    return valid


def _sink(diagnostics: list[str] | None) -> list[str]:
    return diagnostics if diagnostics is not None else []


# ---------------------------------------------------------------------------
# Fit scoring call sites
# ---------------------------------------------------------------------------

def score_job_fit(
    actor: ActorProfile | Mapping[str, Any],
    requirement: Requirement | Mapping[str, Any],
    config: ConfigLike = None,
) -> MatchResult:
    """Score one student against one job posting."""
    cfg = resolve_config(config)
    actor = _require_record(ActorProfile, actor, "actor")
    requirement = _require_record(Requirement, requirement, "requirement")
    return fit_scorer.score_fit(actor, requirement, cfg.quality_bonus_tiers)


def match_jobs_for_actor(
    actor: ActorProfile | Mapping[str, Any],
    requirements: Iterable[Requirement | Mapping[str, Any]],
    config: ConfigLike = None,
    diagnostics: list[str] | None = None,
) -> list[MatchResult]:
    """Top-K postings an actor fits, above the minimum fit score."""
    cfg = resolve_config(config)
    diagnostics = _sink(diagnostics)
    actor = _require_record(ActorProfile, actor, "actor")
    postings = _coerce_pool(Requirement, requirements, cfg.max_requirements, "requirements", diagnostics)

    results = (fit_scorer.score_fit(actor, r, cfg.quality_bonus_tiers) for r in postings)
    return fit_scorer.rank_fits(results, cfg.min_fit_score, cfg.top_k_jobs)


def match_students_to_jobs(
    actors: Iterable[ActorProfile | Mapping[str, Any]],
    requirements: Iterable[Requirement | Mapping[str, Any]],
    config: ConfigLike = None,
    diagnostics: list[str] | None = None,
) -> list[StudentJobMatches]:
    """Batch matching: each actor's top-K postings; actors with none are left out."""
    cfg = resolve_config(config)
    diagnostics = _sink(diagnostics)
    students = _coerce_pool(ActorProfile, actors, cfg.max_peer_pool, "actors", diagnostics)
    postings = _coerce_pool(Requirement, requirements, cfg.max_requirements, "requirements", diagnostics)

    batch: list[StudentJobMatches] = []
    for student in students:
        ranked = fit_scorer.rank_fits(
            (fit_scorer.score_fit(student, r, cfg.quality_bonus_tiers) for r in postings),
            cfg.min_fit_score,
            cfg.top_k_jobs,
        )
        if ranked:
            batch.append(StudentJobMatches(actor=student, matches=ranked))

    logger.info(
        "Batch matching: %d students, %d postings, %d students with matches",
        len(students), len(postings), len(batch),
    )
    return batch


def rank_candidates_for_job(
    requirement: Requirement | Mapping[str, Any],
    actors: Iterable[ActorProfile | Mapping[str, Any]],
    config: ConfigLike = None,
    diagnostics: list[str] | None = None,
) -> list[MatchResult]:
    """Rank students against a single posting, best fit first."""
    cfg = resolve_config(config)
    diagnostics = _sink(diagnostics)
    requirement = _require_record(Requirement, requirement, "requirement")
    students = _coerce_pool(ActorProfile, actors, cfg.max_peer_pool, "actors", diagnostics)

    results = (fit_scorer.score_fit(s, requirement, cfg.quality_bonus_tiers) for s in students)
    return fit_scorer.rank_candidates(results, cfg.min_fit_score, cfg.top_n_candidates)


# ---------------------------------------------------------------------------
# Peer ranking and recommendations
# ---------------------------------------------------------------------------

def rank_peers(
    actor: ActorProfile | Mapping[str, Any],
    pool: Iterable[ActorProfile | Mapping[str, Any]],
    config: ConfigLike = None,
    diagnostics: list[str] | None = None,
) -> list[PeerMatch]:
    """Most similar pool members above the similarity threshold, best first."""
    cfg = resolve_config(config)
    diagnostics = _sink(diagnostics)
    actor = _require_record(ActorProfile, actor, "actor")
    peers = _coerce_pool(ActorProfile, pool, cfg.max_peer_pool, "pool", diagnostics)
    return peer_ranker.rank_peers(actor, peers, cfg.min_similarity, cfg.top_n_peers)


def build_recommendation_bundle(
    actor: ActorProfile | Mapping[str, Any],
    peer_pool: Iterable[ActorProfile | Mapping[str, Any]],
    transitions: Iterable[TransitionRecord | Mapping[str, Any]],
    skill_edges: Iterable[SkillEdge | Mapping[str, Any]],
    config: ConfigLike = None,
) -> RecommendationBundle:
    """Run the full recommendation pipeline for one actor.

    ``transitions`` are used in the order given; the data layer is expected to
    pass them sorted by success rate.
    """
    # --- Stage 0: Boundary validation ---
    cfg = resolve_config(config)
    actor = _require_record(ActorProfile, actor, "actor")
    diagnostics: list[str] = []
    pool = _coerce_pool(ActorProfile, peer_pool, cfg.max_peer_pool, "peer_pool", diagnostics)
    records: Sequence[TransitionRecord] = _coerce_pool(
        TransitionRecord, transitions, cfg.max_transitions, "transitions", diagnostics
    )
    edges: Sequence[SkillEdge] = _coerce_pool(
        SkillEdge, skill_edges, cfg.max_skill_edges, "skill_edges", diagnostics
    )

    # --- Stage 1: Peer ranking ---
    peers = peer_ranker.rank_peers(actor, pool, cfg.min_similarity, cfg.top_n_peers)
    paths = peer_ranker.recommended_paths(peers, cfg.recommended_paths_limit)

    # --- Stage 2: Learning path ---
    skills = learning_path.recommended_skills(actor, records)
    path = learning_path.build_learning_path(actor, records, edges, cfg.max_learning_path_skills)

    # --- Stage 3: Timeline and confidence ---
    estimate = timeline.estimate(
        records, peers, cfg.default_timeline_months, cfg.default_confidence
    )

    logger.info(
        "Recommendations for %s: %d peers, %d paths, %d skills, timeline=%d months, confidence=%d",
        actor.id, len(peers), len(paths), len(skills), estimate.timeline_months, estimate.confidence,
    )

    return RecommendationBundle(
        actor_id=actor.id,
        ranked_peers=peers,
        similar_students=peer_ranker.similar_students(peers, cfg.similar_students_limit),
        recommended_paths=paths,
        recommended_skills=skills,
        learning_path=path,
        career_transitions=timeline.summarize_transitions(records, cfg.transitions_summary_limit),
        timeline_months=estimate.timeline_months,
        confidence=estimate.confidence,
        diagnostics=diagnostics,
    )
