"""Suggestions for mistyped animal keys."""

import logging
from typing import Optional, Sequence

from animal_age.models.conversion import Suggestion

logger = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """Compute Levenshtein edit distance between two strings."""
    if len(a) < len(b):
        return levenshtein(b, a)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        curr = [i + 1]
        for j, cb in enumerate(b):
            cost = 0 if ca == cb else 1
            curr.append(min(prev[j + 1] + 1, curr[j] + 1, prev[j] + cost))
        prev = curr
    return prev[-1]


def suggest(
    invalid_key: str,
    candidates: Sequence[str],
    limit: int = 3,
    max_distance: Optional[int] = None,
) -> list[Suggestion]:
    """Rank ``candidates`` by edit distance to ``invalid_key``.

    Ties keep the order of ``candidates`` (registry declaration order).
    Candidates farther than ``max_distance`` are dropped when a cutoff is
    given. At most ``limit`` suggestions are returned.
    """
    if not candidates:
        raise ValueError("suggest() needs at least one candidate")
    scored = [
        Suggestion(candidate_key=candidate, distance=levenshtein(invalid_key, candidate))
        for candidate in candidates
    ]
    # sorted() is stable, so equal distances stay in declaration order
    ranked = sorted(scored, key=lambda s: s.distance)
    if max_distance is not None:
        ranked = [s for s in ranked if s.distance <= max_distance]
    logger.debug("Suggestions for %r: %s", invalid_key, [(s.candidate_key, s.distance) for s in ranked[:limit]])
    return ranked[: max(limit, 0)]
