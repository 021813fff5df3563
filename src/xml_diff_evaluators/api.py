"""Public API functions for xml-diff-evaluators.

This module provides the four user-facing functions: evaluate, evaluate_all,
has_differences and qualify.  Each accepts an optional ``EvaluationConfig``;
when omitted a fresh ``EvaluationConfig()`` is used, so no call depends on
global state.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from xml_diff_evaluators.comparison import Comparison, Outcome
from xml_diff_evaluators.config import EvaluationConfig
from xml_diff_evaluators.result import EvaluatedDifference

__all__ = ["evaluate", "evaluate_all", "has_differences", "qualify"]


def _initial_outcome(comparison: Comparison) -> Outcome:
    if comparison.control.value == comparison.test.value:
        return Outcome.EQUAL
    return Outcome.DIFFERENT


def evaluate(
    comparison: Comparison,
    outcome: Outcome | None = None,
    config: EvaluationConfig | None = None,
) -> Outcome:
    """Return the final outcome of a single comparison.

    Args:
        comparison: The comparison to score.
        outcome:    Outcome computed by the traversal engine.  When None, it
                    is EQUAL if control and test values are equal and
                    DIFFERENT otherwise.
        config:     Evaluation settings. Defaults to ``EvaluationConfig()``.

    Returns:
        The outcome returned by ``config.evaluator``.
    """
    config = config if config is not None else EvaluationConfig()
    incoming = outcome if outcome is not None else _initial_outcome(comparison)
    return config.evaluator(comparison, incoming)


def evaluate_all(
    comparisons: Iterable[Comparison],
    config: EvaluationConfig | None = None,
) -> list[EvaluatedDifference]:
    """Score every comparison, preserving input order.

    Initial outcomes are derived from value equality as in ``evaluate``.

    Args:
        comparisons: Comparisons in the order the traversal engine found them.
        config:      Evaluation settings. Defaults to ``EvaluationConfig()``.

    Returns:
        One ``EvaluatedDifference`` per input comparison.
    """
    config = config if config is not None else EvaluationConfig()
    return [
        EvaluatedDifference(comparison=c, outcome=evaluate(c, config=config))
        for c in comparisons
    ]


def has_differences(
    comparisons: Iterable[Comparison],
    config: EvaluationConfig | None = None,
) -> bool:
    """Return True if any comparison ends up as a counted difference.

    With ``config.check_for_similar`` True every outcome other than EQUAL
    counts; with it False only DIFFERENT outcomes count.
    """
    config = config if config is not None else EvaluationConfig()
    counted = (
        {Outcome.SIMILAR, Outcome.DIFFERENT}
        if config.check_for_similar
        else {Outcome.DIFFERENT}
    )
    return any(
        evaluated.outcome in counted
        for evaluated in evaluate_all(comparisons, config=config)
    )


def qualify(control: Any, test: Any, config: EvaluationConfig | None = None) -> bool:
    """Return True if ``control`` and ``test`` elements may be compared.

    Delegates to ``config.element_qualifier``, which defaults to
    ``ElementNameQualifier()``.
    """
    config = config if config is not None else EvaluationConfig()
    return bool(config.element_qualifier(control, test))
