"""Integration tests for the public API surface.

All imports are from the top-level ``xml_diff_evaluators`` package, never from
internal submodules.  Walks through the ways a caller customises the default
rule table: overriding with first(), stacking with chain(), and scoring a
batch of comparisons from a traversal run.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import xml_diff_evaluators
from xml_diff_evaluators import (
    Comparison,
    ComparisonType,
    Detail,
    ElementNameAndAttributeQualifier,
    EvaluationConfig,
    Outcome,
    chain,
    default,
    downgrade_differences_to_equal,
    evaluate,
    evaluate_all,
    first,
    has_differences,
    qualify,
    upgrade_differences_to_different,
)


def comparison_of(kind: ComparisonType, control: object, test: object) -> Comparison:
    return Comparison(
        type=kind,
        control=Detail(locator=None, value=control, xpath="/doc[1]"),
        test=Detail(locator=None, value=test, xpath="/doc[1]"),
    )


PREFIX_DIFF = comparison_of(ComparisonType.NAMESPACE_PREFIX, "a", "b")
ORDER_DIFF = comparison_of(ComparisonType.CHILD_NODELIST_SEQUENCE, 0, 1)
TEXT_DIFF = comparison_of(ComparisonType.TEXT_VALUE, "x", "y")


class TestExports:
    def test_all_names_resolve(self) -> None:
        for name in xml_diff_evaluators.__all__:
            assert hasattr(xml_diff_evaluators, name), name

    def test_all_is_sorted(self) -> None:
        assert xml_diff_evaluators.__all__ == sorted(xml_diff_evaluators.__all__)


class TestOverridingDefaults:
    def test_ignore_prefixes_entirely(self) -> None:
        evaluator = first(
            downgrade_differences_to_equal(ComparisonType.NAMESPACE_PREFIX), default
        )
        config = EvaluationConfig(evaluator=evaluator)
        assert evaluate(PREFIX_DIFF, config=config) is Outcome.EQUAL
        assert evaluate(ORDER_DIFF, config=config) is Outcome.SIMILAR
        assert evaluate(TEXT_DIFF, config=config) is Outcome.DIFFERENT

    def test_make_child_order_significant(self) -> None:
        evaluator = chain(
            default,
            upgrade_differences_to_different(ComparisonType.CHILD_NODELIST_SEQUENCE),
        )
        config = EvaluationConfig(evaluator=evaluator, check_for_similar=False)
        assert has_differences([PREFIX_DIFF], config=config) is False
        assert has_differences([PREFIX_DIFF, ORDER_DIFF], config=config) is True


class TestBatch:
    def test_evaluate_all_outcomes(self) -> None:
        results = evaluate_all([PREFIX_DIFF, ORDER_DIFF, TEXT_DIFF])
        assert [r.outcome for r in results] == [
            Outcome.SIMILAR,
            Outcome.SIMILAR,
            Outcome.DIFFERENT,
        ]


class TestPairing:
    def test_attribute_qualifier_pairs_rows(self) -> None:
        config = EvaluationConfig(
            element_qualifier=ElementNameAndAttributeQualifier(["id"])
        )
        control = ET.fromstring('<rows><row id="1"/><row id="2"/></rows>')
        test = ET.fromstring('<rows><row id="2"/><row id="1"/></rows>')
        pairs = [
            (i, j)
            for i, c in enumerate(control)
            for j, t in enumerate(test)
            if qualify(c, t, config)
        ]
        assert pairs == [(0, 1), (1, 0)]
