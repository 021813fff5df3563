"""DifferenceEvaluator and ElementQualifier Protocols.

Both extension points are plain callables.  Users can pass a function, a
closure or any object with a conformant ``__call__`` without inheriting from
any base class; all of them pass ``isinstance`` checks.

Example::

    from xml_diff_evaluators import ComparisonType, Outcome, chain, default

    def ignore_text(comparison, outcome):
        if comparison.type is ComparisonType.TEXT_VALUE:
            return Outcome.EQUAL
        return outcome

    evaluator = chain(default, ignore_text)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xml_diff_evaluators.comparison import Comparison, Outcome

__all__ = ["DifferenceEvaluator", "ElementQualifier"]


@runtime_checkable
class DifferenceEvaluator(Protocol):
    """Structural protocol for difference evaluators.

    An evaluator receives a ``Comparison`` and the outcome computed so far and
    returns the (possibly revised) outcome.  It must:
    - be deterministic and free of side effects;
    - never mutate the comparison;
    - return the incoming outcome for comparison types it does not know.
    """

    def __call__(self, comparison: Comparison, outcome: Outcome) -> Outcome: ...


@runtime_checkable
class ElementQualifier(Protocol):
    """Structural protocol for element qualifiers.

    Called by the node-list reconciliation of the traversal engine to decide
    whether an element of the control list and an element of the test list
    are counterparts.  ``control`` and ``test`` are
    ``xml.etree.ElementTree.Element``-compatible objects.  Must return a bool
    for any pair of elements, including elements with different names.
    """

    def __call__(self, control: Any, test: Any) -> bool: ...
