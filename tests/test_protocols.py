"""Tests for DifferenceEvaluator and ElementQualifier Protocol conformance.

Verifies that:
- Plain functions, closures and callable objects satisfy the Protocols.
- Stock evaluators, combinator results and qualifiers satisfy them without inheritance.
- Non-callables do not satisfy them.
"""

from __future__ import annotations

from typing import Any

from xml_diff_evaluators.comparison import Comparison, Outcome
from xml_diff_evaluators.evaluators import (
    accept,
    chain,
    default,
    downgrade_differences_to_similar,
    first,
)
from xml_diff_evaluators.protocols import DifferenceEvaluator, ElementQualifier
from xml_diff_evaluators.qualifiers import (
    ElementNameAndAttributeQualifier,
    ElementNameAndTextQualifier,
    ElementNameQualifier,
    qualify_all,
)


class _UserEvaluator:
    """Minimal user-defined evaluator object."""

    def __call__(self, comparison: Comparison, outcome: Outcome) -> Outcome:
        return outcome


class _NotCallable:
    def evaluate(self, comparison: Comparison, outcome: Outcome) -> Outcome:
        return outcome


def _user_qualifier(control: Any, test: Any) -> bool:
    return control.tag == test.tag


# ---------------------------------------------------------------------------
# Positive conformance tests
# ---------------------------------------------------------------------------


def test_user_defined_evaluator_object_passes_isinstance():
    assert isinstance(_UserEvaluator(), DifferenceEvaluator) is True


def test_stock_evaluators_satisfy_protocol():
    for evaluator in (accept, default):
        assert isinstance(evaluator, DifferenceEvaluator) is True


def test_combinator_results_satisfy_protocol():
    assert isinstance(first(accept), DifferenceEvaluator) is True
    assert isinstance(chain(default), DifferenceEvaluator) is True
    assert isinstance(downgrade_differences_to_similar(), DifferenceEvaluator) is True


def test_user_defined_function_is_qualifier():
    assert isinstance(_user_qualifier, ElementQualifier) is True


def test_stock_qualifiers_satisfy_protocol():
    for qualifier in (
        ElementNameQualifier(),
        ElementNameAndAttributeQualifier(),
        ElementNameAndTextQualifier(),
        qualify_all,
    ):
        assert isinstance(qualifier, ElementQualifier) is True


def test_protocol_does_not_require_inheritance():
    assert ElementQualifier not in type(ElementNameQualifier()).__mro__


# ---------------------------------------------------------------------------
# Negative conformance tests
# ---------------------------------------------------------------------------


def test_object_with_evaluate_method_only_fails_isinstance():
    assert isinstance(_NotCallable(), DifferenceEvaluator) is False


def test_string_fails_isinstance():
    assert isinstance("default", ElementQualifier) is False
