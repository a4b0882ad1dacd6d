"""SkillSet normalization shared by every matching stage."""

from collections.abc import Iterable


def normalize_token(token: object) -> str:
    """Lower-case and trim a single skill or role token."""
    if token is None:
        return ""
    return str(token).strip().lower()


def normalize(raw_tokens: Iterable[object] | None) -> list[str]:
    """Canonicalize raw skill tokens into a SkillSet.

    Tokens are trimmed and lower-cased, empty strings are dropped and
    duplicates removed. First-seen order is kept so downstream output is
    deterministic. Never raises: ``None`` or an empty sequence gives ``[]``.
    """
    if raw_tokens is None:
        return []

    seen: set[str] = set()
    skills: list[str] = []
    for token in raw_tokens:
        norm = normalize_token(token)
        if norm and norm not in seen:
            seen.add(norm)
            skills.append(norm)
    return skills
