"""xml-diff-evaluators - outcome evaluation for XML document differences."""

from __future__ import annotations

from xml_diff_evaluators.api import evaluate, evaluate_all, has_differences, qualify
from xml_diff_evaluators.comparison import Comparison, ComparisonType, Detail, Outcome
from xml_diff_evaluators.config import EvaluationConfig
from xml_diff_evaluators.evaluators import (
    accept,
    chain,
    default,
    downgrade_differences_to_equal,
    downgrade_differences_to_similar,
    first,
    upgrade_differences_to_different,
)
from xml_diff_evaluators.nodes import NodeKind
from xml_diff_evaluators.protocols import DifferenceEvaluator, ElementQualifier
from xml_diff_evaluators.qualifiers import (
    ElementNameAndAttributeQualifier,
    ElementNameAndTextQualifier,
    ElementNameQualifier,
    qualify_all,
    qualify_none,
)
from xml_diff_evaluators.result import EvaluatedDifference

__version__: str = "0.1.0"
__all__: list[str] = [
    "Comparison",
    "ComparisonType",
    "Detail",
    "DifferenceEvaluator",
    "ElementNameAndAttributeQualifier",
    "ElementNameAndTextQualifier",
    "ElementNameQualifier",
    "ElementQualifier",
    "EvaluatedDifference",
    "EvaluationConfig",
    "NodeKind",
    "Outcome",
    "accept",
    "chain",
    "default",
    "downgrade_differences_to_equal",
    "downgrade_differences_to_similar",
    "evaluate",
    "evaluate_all",
    "first",
    "has_differences",
    "qualify",
    "qualify_all",
    "qualify_none",
    "upgrade_differences_to_different",
]
