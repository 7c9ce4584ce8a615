"""End-to-end tests for the pure evaluation entry point."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from decorum.config import DecorumConfig
from decorum.engine import evaluate, missing_attributes
from decorum.exceptions import ConfigMismatch, EmptyScoreSet

ConfigFactory = Callable[[dict[str, float]], DecorumConfig]


def test_scenario_single_failure_and_single_pass(make_config: ConfigFactory) -> None:
    config = make_config({"toxicity": 0.7, "insult": 0.5})

    evaluation = evaluate({"toxicity": 0.9, "insult": 0.3}, config)

    assert evaluation.verdict is True
    assert evaluation.report_lines == ("FAIL toxicity - 90.0%", "PASS insult - 30.0%")
    assert evaluation.stats.minimum == pytest.approx(0.3)
    assert evaluation.stats.maximum == pytest.approx(0.9)
    assert evaluation.stats.mean == pytest.approx(0.6)
    assert evaluation.stats_summary == "Min: 30.0%\nMax: 90.0%\nAvg: 60.0%"


def test_scenario_equal_thresholds_with_boundary_score(make_config: ConfigFactory) -> None:
    config = make_config({"a": 0.5, "b": 0.5, "c": 0.5})

    evaluation = evaluate({"a": 0.9, "b": 0.1, "c": 0.5}, config)

    assert evaluation.verdict is True
    assert [(r.name, r.marker) for r in evaluation.failed] == [("a", "FAIL")]
    assert [(r.name, r.marker) for r in evaluation.passed] == [("c", "PASS_HI"), ("b", "PASS_LO")]
    assert evaluation.report_lines == (
        "FAIL a - 90.0%",
        "PASS_HI c - 50.0%",
        "PASS_LO b - 10.0%",
    )
    assert evaluation.stats.mean == pytest.approx(0.5)


def test_all_passing_yields_false_verdict(make_config: ConfigFactory) -> None:
    config = make_config({"a": 0.5, "b": 0.5})

    evaluation = evaluate({"a": 0.5, "b": 0.49}, config)

    assert evaluation.verdict is False
    assert evaluation.failed == ()


def test_rejected_precede_passed_regardless_of_score(make_config: ConfigFactory) -> None:
    config = make_config({"strict": 0.1, "lenient": 0.99})

    evaluation = evaluate({"lenient": 0.95, "strict": 0.2}, config)

    assert [r.name for r in evaluation.results] == ["strict", "lenient"]


def test_evaluate_is_idempotent(make_config: ConfigFactory) -> None:
    config = make_config({"a": 0.3, "b": 0.6, "c": 0.2})
    scores = {"a": 0.7, "b": 0.4, "c": 0.1}

    assert evaluate(scores, config) == evaluate(scores, config)


def test_evaluate_empty_scores_raises(make_config: ConfigFactory) -> None:
    with pytest.raises(EmptyScoreSet):
        evaluate({}, make_config({"a": 0.5}))


def test_evaluate_unknown_attribute_raises(make_config: ConfigFactory) -> None:
    with pytest.raises(ConfigMismatch):
        evaluate({"a": 0.1, "zzz": 0.2}, make_config({"a": 0.5}))


def test_missing_attributes_lists_unscored_names(make_config: ConfigFactory) -> None:
    config = make_config({"b": 0.5, "a": 0.5, "c": 0.5})

    assert missing_attributes({"c": 0.1}, config) == ("a", "b")
    assert missing_attributes({"a": 0.1, "b": 0.1, "c": 0.1}, config) == ()


@pytest.mark.parametrize("seed", range(25))
def test_evaluate_properties_hold_for_random_inputs(make_config: ConfigFactory, seed: int) -> None:
    rng = random.Random(seed)
    names = [f"attr{i}" for i in range(rng.randint(1, 8))]
    thresholds = {name: round(rng.random(), 2) for name in names}
    scores = {name: round(rng.random(), 2) for name in names}

    evaluation = evaluate(scores, make_config(thresholds))

    # One line per attribute.
    assert len(evaluation.results) == len(scores)
    assert len(evaluation.report_lines) == len(scores)

    # Verdict law.
    assert evaluation.verdict == any(scores[n] > thresholds[n] for n in names)

    # Ordering law.
    flags = [r.rejected for r in evaluation.results]
    assert flags == sorted(flags, reverse=True)
    for group in (evaluation.failed, evaluation.passed):
        group_scores = [r.score for r in group]
        assert group_scores == sorted(group_scores, reverse=True)

    # Extremes law.
    for group, plain, high, low in (
        (evaluation.failed, "FAIL", "FAIL_HI", "FAIL_LO"),
        (evaluation.passed, "PASS", "PASS_HI", "PASS_LO"),
    ):
        group_markers = [r.marker for r in group]
        if len(group) >= 2:
            assert group_markers.count(high) == 1
            assert group_markers.count(low) == 1
            assert group[0].marker == high
            assert group[-1].marker == low
            assert group[0].score == max(r.score for r in group)
            assert group[-1].score == min(r.score for r in group)
        else:
            assert group_markers in ([], [plain])

    # Stats sanity.
    stats = evaluation.stats
    assert stats.minimum == min(scores.values())
    assert stats.maximum == max(scores.values())
    assert stats.minimum - 1e-9 <= stats.mean <= stats.maximum + 1e-9
