"""Fuzzy matching of free-text questions against neighborhood names.

A name scores above zero only when its characters appear in the query in
order. Among the alignments that achieve this, the one with the fewest breaks
and the tightest span wins, so a name quoted verbatim scores 1.0 while a name
whose letters are scattered across the sentence scores low.
"""

from collections.abc import Iterable, Sequence

from aquaqual.neighborhoods.schemas import MatchResult, NeighborhoodRecord


def _align_from(pattern: str, text: str, start: int) -> list[int] | None:
    """Greedily match ``pattern`` in ``text`` starting at ``start``.

    Returns the matched positions, or None if the pattern runs past the end.
    """
    positions = [start]
    j = 1
    for k in range(start + 1, len(text)):
        if j == len(pattern):
            break
        if text[k] == pattern[j]:
            positions.append(k)
            j += 1
    return positions if j == len(pattern) else None


def _alignment_score(positions: Sequence[int]) -> float:
    m = len(positions)
    if m == 1:
        return 1.0
    runs = 1 + sum(1 for a, b in zip(positions, positions[1:]) if b != a + 1)
    contiguity = (m - runs) / (m - 1)
    compactness = m / (positions[-1] - positions[0] + 1)
    return (contiguity + compactness) / 2


def fuzzy_score(pattern: str, text: str) -> float:
    """Score how well ``pattern`` occurs in ``text``, in [0, 1].

    Both strings are compared as given; callers lower-case them first.
    """
    if not pattern or not text:
        return 0.0

    best = 0.0
    for start, char in enumerate(text):
        if char != pattern[0]:
            continue
        positions = _align_from(pattern, text, start)
        if positions is None:
            # Later starts have even less text left to match against
            break
        best = max(best, _alignment_score(positions))
        if best == 1.0:
            break
    return best


def find_best_match(
    query: str, neighborhoods: Iterable[NeighborhoodRecord]
) -> MatchResult:
    """Find the neighborhood whose name best matches ``query``.

    The first record to reach the highest score wins ties. The result carries
    the best record even when its score is below the confidence threshold;
    use ``MatchResult.neighborhood`` to get only confident matches.

    Raises:
        ValueError: If ``query`` is empty
    """
    if not query:
        raise ValueError("query must be a non-empty string")

    lowered = query.lower()
    best = MatchResult()
    for record in neighborhoods:
        score = fuzzy_score(record.name.lower(), lowered)
        if score > best.score:
            best = MatchResult(record=record, score=score)
    return best
