"""Tests for ranking and extreme markers."""

from __future__ import annotations

from decorum.engine import rank_class, rank_passed, rank_rejected
from decorum.model import AttributeResult
from decorum.types import MarkerSet


def _result(name: str, score: float, *, rejected: bool = False) -> AttributeResult:
    return AttributeResult(name=name, score=score, rejected=rejected, marker="FAIL" if rejected else "PASS")


def test_rank_sorts_descending() -> None:
    ranked = rank_class([_result("a", 0.2), _result("b", 0.6), _result("c", 0.4)], "HI", "LO")

    assert [r.name for r in ranked] == ["b", "c", "a"]


def test_rank_marks_first_and_last_only() -> None:
    ranked = rank_class([_result("a", 0.2), _result("b", 0.6), _result("c", 0.4)], "HI", "LO")

    assert [r.marker for r in ranked] == ["HI", "PASS", "LO"]


def test_rank_two_entries_get_both_extremes() -> None:
    ranked = rank_class([_result("a", 0.1), _result("b", 0.3)], "HI", "LO")

    assert [(r.name, r.marker) for r in ranked] == [("b", "HI"), ("a", "LO")]


def test_rank_singleton_keeps_plain_marker() -> None:
    ranked = rank_class([_result("only", 0.9, rejected=True)], "HI", "LO")

    assert len(ranked) == 1
    assert ranked[0].marker == "FAIL"


def test_rank_empty_is_noop() -> None:
    assert rank_class([], "HI", "LO") == ()


def test_rank_ties_preserve_insertion_order() -> None:
    ranked = rank_class([_result("x", 0.5), _result("y", 0.5), _result("z", 0.5)], "HI", "LO")

    assert [r.name for r in ranked] == ["x", "y", "z"]
    assert [r.marker for r in ranked] == ["HI", "PASS", "LO"]


def test_rank_does_not_mutate_input() -> None:
    original = [_result("a", 0.2), _result("b", 0.6)]
    snapshot = list(original)

    rank_class(original, "HI", "LO")

    assert original == snapshot
    assert [r.marker for r in original] == ["PASS", "PASS"]


def test_rank_rejected_and_passed_use_class_markers(markers: MarkerSet) -> None:
    failed = rank_rejected([_result("a", 0.8, rejected=True), _result("b", 0.9, rejected=True)], markers)
    passed = rank_passed([_result("c", 0.1), _result("d", 0.3)], markers)

    assert [r.marker for r in failed] == ["FAIL_HI", "FAIL_LO"]
    assert [r.marker for r in passed] == ["PASS_HI", "PASS_LO"]
