from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from clauselens.utils.types import AnalysisResult, FlatClause, CATEGORY_KEYS, CATEGORY_TIERS

FILTER_OPTIONS = ["all", "safe", "warning", "danger"]


@dataclass(frozen=True)
class ClauseCounts:
    safe: int = 0
    warning: int = 0
    danger: int = 0

    @property
    def total(self) -> int:
        return self.safe + self.warning + self.danger


def flatten_clauses(result: Optional[AnalysisResult]) -> List[FlatClause]:
    """Flatten the three clause groups into one list with sequential ids.

    Order is safe, then doubtful (warning), then needs_attention (danger),
    each group in source order; ids run 1..n without gaps.
    """
    if result is None:
        return []
    items: List[FlatClause] = []
    next_id = 1
    for key in CATEGORY_KEYS:
        for c in getattr(result.clauses, key):
            items.append(FlatClause(id=next_id, category=CATEGORY_TIERS[key], original_text=c.original, explanation=c.explanation))
            next_id += 1
    return items


def clause_counts(result: Optional[AnalysisResult]) -> ClauseCounts:
    if result is None:
        return ClauseCounts()
    return ClauseCounts(
        safe=len(result.clauses.safe),
        warning=len(result.clauses.doubtful),
        danger=len(result.clauses.needs_attention),
    )


def overall_risk(result: Optional[AnalysisResult]) -> str:
    # precedence, not a weighted score: one danger clause makes the document High
    counts = clause_counts(result)
    if counts.danger > 0:
        return "High"
    if counts.warning > 0:
        return "Medium"
    return "Low"


def filter_clauses(clauses: List[FlatClause], category: str = "all", query: str = "") -> List[FlatClause]:
    """Apply the category filter AND a case-insensitive text search.

    The search matches when either the original text or the explanation
    contains the query; an empty query matches everything.
    """
    if category not in FILTER_OPTIONS:
        raise ValueError(f"unknown category filter: {category!r}")
    needle = (query or "").lower()
    out: List[FlatClause] = []
    for c in clauses:
        if category != "all" and c.category != category:
            continue
        if needle and needle not in c.original_text.lower() and needle not in c.explanation.lower():
            continue
        out.append(c)
    return out
