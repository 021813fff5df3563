"""EvaluationConfig: which evaluator and qualifier a comparison run uses.

EvaluationConfig is a frozen (immutable) dataclass.  The traversal engine
reads the element qualifier from it while reconciling node lists and the
difference evaluator while scoring each difference; ``check_for_similar``
decides whether SIMILAR outcomes still count as differences.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from xml_diff_evaluators.evaluators import default
from xml_diff_evaluators.qualifiers import ElementNameQualifier

if TYPE_CHECKING:
    from xml_diff_evaluators.protocols import DifferenceEvaluator, ElementQualifier

__all__ = ["EvaluationConfig"]


@dataclass(frozen=True, slots=True)
class EvaluationConfig:
    """Immutable configuration for scoring differences.

    Attributes:
        evaluator: Difference evaluator applied to every comparison.
            Defaults to ``default``.
        element_qualifier: Qualifier used to pair sibling elements.
            Defaults to ``ElementNameQualifier()``.
        check_for_similar: When True, SIMILAR outcomes count as differences
            in ``has_differences``; when False only DIFFERENT ones do.
            Default True.
    """

    evaluator: DifferenceEvaluator = default
    element_qualifier: ElementQualifier = field(default_factory=ElementNameQualifier)
    check_for_similar: bool = True

    def __post_init__(self) -> None:
        if not callable(self.evaluator):
            msg = (
                "evaluator must be callable, "
                f"got {type(self.evaluator).__name__}"
            )
            raise TypeError(msg)
        if not callable(self.element_qualifier):
            msg = (
                "element_qualifier must be callable, "
                f"got {type(self.element_qualifier).__name__}"
            )
            raise TypeError(msg)
        if not isinstance(self.check_for_similar, bool):
            msg = (
                "check_for_similar must be a bool, "
                f"got {type(self.check_for_similar).__name__}"
            )
            raise TypeError(msg)
