"""Fuzzy ranking and the filter stage.

``fuzzy_rank`` keeps every candidate that contains the query as a
case-insensitive subsequence and scores it by edit distance.
``filter_candidates`` turns a ranking into the ordered list the prompt
displays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True)
class RankedMatch:
    """One candidate matched by a query.

    Attributes:
        target: The candidate's display text.
        distance: Edit distance between query and candidate (lower is closer).
        index: Position of the candidate in the original list.
    """

    target: str
    distance: int
    index: int


Ranker = Callable[[str, Sequence[str]], list[RankedMatch]]


def _fold(text: str) -> str:
    return text.casefold()


def is_subsequence(query: str, candidate: str) -> bool:
    """Check that every character of query appears in candidate, in order."""
    remaining = iter(candidate)
    return all(char in remaining for char in query)


def fuzzy_rank(query: str, candidates: Sequence[str]) -> list[RankedMatch]:
    """Rank candidates against query, ignoring case.

    Returns matches in candidate order; callers sort by distance.
    """
    folded_query = _fold(query)
    matches = []
    for index, candidate in enumerate(candidates):
        folded = _fold(candidate)
        if is_subsequence(folded_query, folded):
            distance = Levenshtein.distance(folded_query, folded)
            matches.append(RankedMatch(target=candidate, distance=distance, index=index))
    return matches


def filter_candidates(
    query: str,
    candidates: Sequence[str],
    ranker: Ranker = fuzzy_rank,
) -> list[str]:
    """Return the candidates matching query, best first.

    An empty query returns the candidates unchanged. When every candidate
    matches, the original order is kept instead of sorting by rank.
    """
    if not query:
        return list(candidates)

    ranked = ranker(query, candidates)
    if len(ranked) != len(candidates):
        ranked = sorted(ranked, key=lambda match: match.distance)
    return [match.target for match in ranked]
