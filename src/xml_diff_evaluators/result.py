"""EvaluatedDifference dataclass pairing a comparison with its final outcome."""

from __future__ import annotations

from dataclasses import dataclass

from xml_diff_evaluators.comparison import Comparison, Outcome

__all__ = ["EvaluatedDifference"]


@dataclass(frozen=True, slots=True)
class EvaluatedDifference:
    """A comparison together with the outcome the evaluator assigned to it.

    Attributes:
        comparison: The comparison as produced by the traversal engine.
        outcome:    Final outcome after the configured evaluator ran.
    """

    comparison: Comparison
    outcome: Outcome
