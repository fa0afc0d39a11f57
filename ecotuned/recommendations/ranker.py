"""
Ranking and category-diversity selection.

Usage flow
----------
1. sort_recommendations(recs)
   -> stable sort by priority, then impact (missing impact counts as medium).

2. apply_category_diversity(sorted_recs, category_cap=2, target=4)
   -> greedy re-selection in four passes:
        a. every high-priority, high-impact, personalised item (never capped,
           but counted against its category);
        b. remaining personalised items while their category has < cap;
        c. remaining items (non-personalised) under the same cap;
        d. if fewer than ``target`` were taken, fill from what is left in
           sorted order, ignoring the cap.

3. select_recommendations(recs, limit=4)
   -> sort, diversify, keep the first ``limit``.

The greedy passes are a heuristic, not an optimal cover: pass (a) can already
place more than ``category_cap`` items of one category, and the final slice
keeps whatever order the passes produced.
"""

from __future__ import annotations

from collections import defaultdict

from ecotuned.models.recommendation import IMPACT_RANK, PRIORITY_RANK, Recommendation

DEFAULT_LIMIT = 4
DEFAULT_CATEGORY_CAP = 2


def sort_recommendations(recs: list[Recommendation]) -> list[Recommendation]:
    """Return ``recs`` ordered by priority then impact; ties keep input order."""
    return sorted(
        recs,
        key=lambda r: (PRIORITY_RANK[r.priority], IMPACT_RANK[r.effective_impact]),
    )


def apply_category_diversity(
    recs: list[Recommendation],
    category_cap: int = DEFAULT_CATEGORY_CAP,
    target: int = DEFAULT_LIMIT,
) -> list[Recommendation]:
    """Re-select already-sorted recommendations for a mix of categories.

    Args:
        recs:         Recommendations in ranked order.
        category_cap: Max items per category in passes (b) and (c).
        target:       Minimum result size the relaxed fill tries to reach.

    Returns:
        The selected items in pass order. May be longer than ``target``.
    """
    result: list[Recommendation] = []
    taken: set[int] = set()
    per_category: dict[str, int] = defaultdict(int)

    def _take(idx: int, rec: Recommendation) -> None:
        result.append(rec)
        taken.add(idx)
        per_category[rec.category] += 1

    for idx, rec in enumerate(recs):
        if rec.priority == "high" and rec.impact == "high" and rec.is_personalised:
            _take(idx, rec)

    for idx, rec in enumerate(recs):
        if idx in taken or not rec.is_personalised:
            continue
        if per_category[rec.category] < category_cap:
            _take(idx, rec)

    for idx, rec in enumerate(recs):
        if idx in taken:
            continue
        if per_category[rec.category] < category_cap:
            _take(idx, rec)

    if len(result) < target:
        for idx, rec in enumerate(recs):
            if len(result) >= target:
                break
            if idx not in taken:
                _take(idx, rec)

    return result


def select_recommendations(
    recs: list[Recommendation],
    limit: int = DEFAULT_LIMIT,
    category_cap: int = DEFAULT_CATEGORY_CAP,
) -> list[Recommendation]:
    """Sort, apply category diversity, and keep the top ``limit``."""
    ranked = sort_recommendations(recs)
    diverse = apply_category_diversity(ranked, category_cap=category_cap, target=limit)
    return diverse[:limit]
