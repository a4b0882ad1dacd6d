"""Peer Ranker: similarity-ranked peers and the career paths of placed peers."""

import logging
from collections.abc import Iterable

from models.schemas.match_result import PeerMatch
from models.schemas.profiles import ActorProfile
from models.schemas.recommendation import RecommendedPath, SimilarStudent
from services.matching.numeric import round_half_up
from services.matching.similarity import jaccard_similarity

logger = logging.getLogger(__name__)


def rank_peers(
    actor: ActorProfile,
    pool: Iterable[ActorProfile],
    min_similarity: float = 0.25,
    top_n: int = 10,
) -> list[PeerMatch]:
    """Rank pool members by Jaccard similarity to ``actor``.

    The actor itself is excluded, peers below ``min_similarity`` are dropped,
    and the result is sorted by similarity descending (ties by peer id) and
    truncated to ``top_n``.
    """
    actor_skills = actor.skill_set
    scored: list[PeerMatch] = []
    for peer in pool:
        if peer.id == actor.id:
            continue
        similarity = jaccard_similarity(actor_skills, peer.skill_set)
        if similarity < min_similarity:
            continue
        scored.append(PeerMatch(peer=peer, similarity=similarity))

    scored.sort(key=lambda m: (-m.similarity, m.peer.id))
    logger.debug(
        "Peers above %.2f for actor %s: %d (keeping %d)",
        min_similarity, actor.id, len(scored), min(len(scored), top_n),
    )
    return scored[:top_n]


def recommended_paths(peers: Iterable[PeerMatch], limit: int = 5) -> list[RecommendedPath]:
    """Outcomes of placed peers, in the peers' similarity order."""
    paths = [
        RecommendedPath(
            role=m.peer.placed_role,
            company=m.peer.placed_company,
            skills=list(m.peer.skills),
            package_lpa=m.peer.package_lpa,
            similarity=m.similarity,
        )
        for m in peers
        if m.peer.is_placed
    ]
    return paths[:limit]


def similar_students(peers: Iterable[PeerMatch], limit: int = 5) -> list[SimilarStudent]:
    """Presentation view of the top peers with similarity as a percentage."""
    return [
        SimilarStudent(
            id=m.peer.id,
            name=m.peer.name,
            skills=list(m.peer.skills),
            role=m.peer.placed_role,
            similarity=round_half_up(m.similarity * 100),
        )
        for m in list(peers)[:limit]
    ]
