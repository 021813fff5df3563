"""Stock difference evaluators and the combinators that compose them.

- ``accept``:  echoes the outcome it receives.
- ``default``: decides which differences leave two XML documents similar.
- ``first``:   the first evaluator that changes the outcome wins.
- ``chain``:   each evaluator sees the outcome of the previous one.

The ``downgrade_*``/``upgrade_*`` builders return evaluators that move the
outcome of a fixed set of comparison types up or down one severity.

``first`` and ``chain`` differ on purpose.  Given ``a`` mapping
DIFFERENT -> SIMILAR and ``b`` mapping SIMILAR -> EQUAL::

    chain(a, b)(c, Outcome.DIFFERENT)   # EQUAL   (b sees a's SIMILAR)
    first(a, b)(c, Outcome.DIFFERENT)   # SIMILAR (b only sees DIFFERENT)
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from xml_diff_evaluators.comparison import Comparison, ComparisonType, Outcome
from xml_diff_evaluators.nodes import NodeKind

if TYPE_CHECKING:
    from xml_diff_evaluators.protocols import DifferenceEvaluator

__all__ = [
    "accept",
    "chain",
    "default",
    "downgrade_differences_to_equal",
    "downgrade_differences_to_similar",
    "first",
    "upgrade_differences_to_different",
]

# Comparison types whose differences are cosmetic unless told otherwise.
_SIMILAR_BY_DEFAULT: frozenset[ComparisonType] = frozenset(
    {
        ComparisonType.HAS_DOCTYPE_DECLARATION,
        ComparisonType.DOCTYPE_SYSTEM_ID,
        ComparisonType.SCHEMA_LOCATION,
        ComparisonType.NO_NAMESPACE_SCHEMA_LOCATION,
        ComparisonType.NAMESPACE_PREFIX,
        ComparisonType.ATTR_VALUE_EXPLICITLY_SPECIFIED,
        ComparisonType.CHILD_NODELIST_SEQUENCE,
        ComparisonType.XML_ENCODING,
    }
)

# Text and CDATA are two encodings of the same character content.
_TEXT_CDATA_PAIRS: tuple[tuple[NodeKind, NodeKind], ...] = (
    (NodeKind.TEXT, NodeKind.CDATA_SECTION),
    (NodeKind.CDATA_SECTION, NodeKind.TEXT),
)


def accept(comparison: Comparison, outcome: Outcome) -> Outcome:
    """Return ``outcome`` unchanged."""
    return outcome


def default(comparison: Comparison, outcome: Outcome) -> Outcome:
    """The standard evaluator deciding which differences are only similar.

    Only ever downgrades: outcomes other than DIFFERENT are returned as is.
    A DIFFERENT outcome becomes SIMILAR when

    - the comparison is NODE_TYPE and one side is a text node while the other
      is a CDATA section (in either direction), or
    - the comparison type is one of the cosmetic properties (doctype presence
      and system id, schema locations, namespace prefix, explicitly specified
      attribute values, child order, document encoding).

    Any other comparison type, known or not, keeps its DIFFERENT outcome.
    """
    if outcome is not Outcome.DIFFERENT:
        return outcome

    if comparison.type == ComparisonType.NODE_TYPE:
        # Tuple membership compares with ==, so unhashable payloads are safe
        pair = (comparison.control.value, comparison.test.value)
        if pair in _TEXT_CDATA_PAIRS:
            return Outcome.SIMILAR
        return outcome

    if _is_one_of(comparison.type, _SIMILAR_BY_DEFAULT):
        return Outcome.SIMILAR
    return outcome


def first(*evaluators: DifferenceEvaluator) -> DifferenceEvaluator:
    """Combine evaluators so that the first one changing the outcome wins.

    Every evaluator is called with the *original* outcome, in order.  The
    first result that differs from it is returned immediately; when none
    differs the original outcome is returned.  With no evaluators the result
    behaves like ``accept``.

    Args:
        evaluators: Difference evaluators, most specific first.

    Returns:
        A new difference evaluator.

    Raises:
        TypeError: If any of ``evaluators`` is not callable.
    """
    members = _validated(evaluators, "first")

    def _first(comparison: Comparison, outcome: Outcome) -> Outcome:
        for evaluator in members:
            evaluated = evaluator(comparison, outcome)
            if evaluated != outcome:
                return evaluated
        return outcome

    return _first


def chain(*evaluators: DifferenceEvaluator) -> DifferenceEvaluator:
    """Combine evaluators so that each one receives the previous result.

    The original outcome goes into the first evaluator, its result into the
    second and so on; the last result is returned.  With no evaluators the
    result behaves like ``accept``.

    Args:
        evaluators: Difference evaluators, in application order.

    Returns:
        A new difference evaluator.

    Raises:
        TypeError: If any of ``evaluators`` is not callable.
    """
    members = _validated(evaluators, "chain")

    def _chain(comparison: Comparison, outcome: Outcome) -> Outcome:
        result = outcome
        for evaluator in members:
            result = evaluator(comparison, result)
        return result

    return _chain


def downgrade_differences_to_equal(*types: Hashable) -> DifferenceEvaluator:
    """Evaluator turning DIFFERENT into EQUAL for the given comparison types."""
    return _mapping(frozenset(types), Outcome.DIFFERENT, Outcome.EQUAL)


def downgrade_differences_to_similar(*types: Hashable) -> DifferenceEvaluator:
    """Evaluator turning DIFFERENT into SIMILAR for the given comparison types."""
    return _mapping(frozenset(types), Outcome.DIFFERENT, Outcome.SIMILAR)


def upgrade_differences_to_different(*types: Hashable) -> DifferenceEvaluator:
    """Evaluator turning SIMILAR into DIFFERENT for the given comparison types."""
    return _mapping(frozenset(types), Outcome.SIMILAR, Outcome.DIFFERENT)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mapping(
    types: frozenset[Hashable],
    source: Outcome,
    target: Outcome,
) -> DifferenceEvaluator:
    """Build an evaluator that maps ``source`` to ``target`` for ``types``."""

    def _evaluate(comparison: Comparison, outcome: Outcome) -> Outcome:
        if outcome is source and _is_one_of(comparison.type, types):
            return target
        return outcome

    return _evaluate


def _is_one_of(value: object, types: frozenset[Hashable]) -> bool:
    """Set membership that treats unhashable comparison types as unknown."""
    try:
        return value in types
    except TypeError:
        return False


def _validated(
    evaluators: tuple[DifferenceEvaluator, ...],
    combinator: str,
) -> tuple[DifferenceEvaluator, ...]:
    """Check that every evaluator is callable; return them as a tuple."""
    for index, evaluator in enumerate(evaluators):
        if not callable(evaluator):
            msg = (
                f"{combinator}() argument {index} must be a callable evaluator, "
                f"got {type(evaluator).__name__}"
            )
            raise TypeError(msg)
    return tuple(evaluators)
