"""Timeline/Confidence Estimator and the transition summary view."""

from collections.abc import Iterable, Sequence

import numpy as np

from models.schemas.career_graph import TransitionRecord
from models.schemas.match_result import PeerMatch
from models.schemas.recommendation import TimelineEstimate, TransitionSummary
from services.matching.numeric import round_half_up

DEFAULT_TIMELINE_MONTHS = 12
DEFAULT_CONFIDENCE = 50


def estimate(
    transitions: Sequence[TransitionRecord],
    peers: Sequence[PeerMatch],
    default_timeline_months: int = DEFAULT_TIMELINE_MONTHS,
    default_confidence: int = DEFAULT_CONFIDENCE,
) -> TimelineEstimate:
    """Expected months to transition and confidence in the recommendation.

    Timeline is the mean transition duration over all transitions, a missing
    duration counting as zero; with no transitions (or a mean of zero) the
    default applies. Confidence is the top peer's similarity as a percentage,
    or the default when no peer passed the ranker's threshold.
    """
    durations = [t.avg_time_months or 0.0 for t in transitions]
    mean_months = float(np.mean(durations)) if durations else 0.0
    timeline = round_half_up(mean_months) if mean_months > 0 else default_timeline_months

    confidence = round_half_up(peers[0].similarity * 100) if peers else default_confidence

    return TimelineEstimate(timeline_months=timeline, confidence=confidence)


def summarize_transitions(
    transitions: Iterable[TransitionRecord],
    limit: int = 5,
) -> list[TransitionSummary]:
    return [
        TransitionSummary(
            from_role=t.from_role,
            to_role=t.to_role,
            required_skills=list(t.required_skills),
            success_rate=round_half_up((t.success_rate or 0.0) * 100),
            avg_time_months=t.avg_time_months,
            salary_change_percent=t.salary_change_percent,
        )
        for t in list(transitions)[:limit]
    ]
