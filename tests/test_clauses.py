import pytest
from clauselens.utils.types import AnalysisResult, ClauseGroups, ClauseItem, FlatClause
from clauselens.analysis.clauses import (
    flatten_clauses,
    clause_counts,
    overall_risk,
    filter_clauses,
)


def item(label: str) -> ClauseItem:
    return ClauseItem(original=f"{label} original", explanation=f"{label} explained")


def make_result(safe=(), doubtful=(), needs=()):
    return AnalysisResult(
        summary="s",
        clauses=ClauseGroups(
            safe=[item(x) for x in safe],
            doubtful=[item(x) for x in doubtful],
            needs_attention=[item(x) for x in needs],
        ),
        risks=[],
    )


def test_flatten_orders_groups_and_numbers_contiguously():
    result = make_result(safe=["S1", "S2"], doubtful=["D1"], needs=["N1", "N2", "N3"])
    flat = flatten_clauses(result)
    assert [c.id for c in flat] == [1, 2, 3, 4, 5, 6]
    assert [c.category for c in flat] == ["safe", "safe", "warning", "danger", "danger", "danger"]
    assert [c.original_text for c in flat] == [
        "S1 original", "S2 original", "D1 original", "N1 original", "N2 original", "N3 original",
    ]
    assert flat[2].explanation == "D1 explained"


def test_flatten_is_deterministic():
    result = make_result(safe=["A"], doubtful=["B", "C"])
    assert flatten_clauses(result) == flatten_clauses(result)


def test_flatten_skips_empty_groups():
    flat = flatten_clauses(make_result(needs=["X"]))
    assert flat == [FlatClause(id=1, category="danger", original_text="X original", explanation="X explained")]


@pytest.mark.parametrize("safe,doubtful,needs,tier", [
    (["A", "B"], [], ["C"], "High"),
    ([], ["A", "B", "C"], ["D"], "High"),
    (["A"], ["B"], [], "Medium"),
    (["A", "B"], [], [], "Low"),
    ([], [], [], "Low"),
])
def test_overall_risk_precedence(safe, doubtful, needs, tier):
    assert overall_risk(make_result(safe, doubtful, needs)) == tier


def test_counts():
    counts = clause_counts(make_result(safe=["A"], doubtful=["B", "C"], needs=["D"]))
    assert (counts.safe, counts.warning, counts.danger, counts.total) == (1, 2, 1, 4)


CLAUSES = [
    FlatClause(id=1, category="safe", original_text="Payment due", explanation="Rent is due monthly."),
    FlatClause(id=2, category="danger", original_text="Liability capped", explanation="Your claims are limited."),
]


def test_filter_category_and_search_compose():
    assert [c.id for c in filter_clauses(CLAUSES, "danger", "liability")] == [2]
    assert filter_clauses(CLAUSES, "safe", "liability") == []


def test_search_matches_explanation_case_insensitively():
    assert [c.id for c in filter_clauses(CLAUSES, "all", "MONTHLY")] == [1]


def test_empty_query_and_all_is_identity():
    assert filter_clauses(CLAUSES) == CLAUSES
    assert filter_clauses(CLAUSES, "all", "") == CLAUSES


def test_unknown_category_rejected():
    with pytest.raises(ValueError):
        filter_clauses(CLAUSES, "doubtful")
