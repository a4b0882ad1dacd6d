"""Jaccard similarity between two skill sets."""

from collections.abc import Iterable

from services.matching.normalizer import normalize
from services.matching.numeric import safe_ratio


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Return |a ∩ b| / |a ∪ b| on normalized tokens.

    Symmetric, always within 0.0-1.0. An empty set on either side gives 0.0.
    """
    set_a = set(normalize(a))
    set_b = set(normalize(b))
    if not set_a or not set_b:
        return 0.0
    return safe_ratio(len(set_a & set_b), len(set_a | set_b))
