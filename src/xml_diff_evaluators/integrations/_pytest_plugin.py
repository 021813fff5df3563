"""pytest plugin for xml-diff-evaluators.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from xml_diff_evaluators import Comparison, EvaluationConfig, Outcome, evaluate


@pytest.fixture(scope="session")
def assert_outcome() -> Any:
    """Fixture that returns a callable outcome asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to evaluate(), which holds no state between calls).

    Usage in tests::

        def test_cdata_is_similar(assert_outcome):
            assert_outcome(node_type_comparison, Outcome.SIMILAR)

        def test_custom_evaluator(assert_outcome):
            assert_outcome(c, Outcome.EQUAL, evaluator=chain(default, mine))

    Returns:
        A callable
        ``_assert(comparison, expected, outcome=None, evaluator=None, config=None)``
        that raises ``AssertionError`` when the evaluated outcome differs from
        ``expected``.
    """

    def _assert(
        comparison: Comparison,
        expected: Outcome,
        outcome: Outcome | None = None,
        evaluator: Any = None,
        config: EvaluationConfig | None = None,
    ) -> None:
        """Assert that ``comparison`` evaluates to ``expected``.

        Args:
            comparison: The comparison to evaluate.
            expected:   The outcome the evaluator must return.
            outcome:    Incoming outcome.  Derived from value equality when None.
            evaluator:  Optional evaluator; overrides ``config.evaluator``.
            config:     Optional EvaluationConfig.  Defaults to
                        ``EvaluationConfig()``.

        Raises:
            AssertionError: When the evaluated outcome is not ``expected``,
                with a message naming the comparison type, both values, the
                incoming and the actual outcome.
        """
        if evaluator is not None:
            base = config if config is not None else EvaluationConfig()
            config = EvaluationConfig(
                evaluator=evaluator,
                element_qualifier=base.element_qualifier,
                check_for_similar=base.check_for_similar,
            )
        actual = evaluate(comparison, outcome, config=config)
        if actual != expected:
            raise AssertionError(
                f"Unexpected outcome: "
                f"actual={actual} != expected={expected}\n"
                f"  type:     {comparison.type}\n"
                f"  control:  {comparison.control.value!r}\n"
                f"  test:     {comparison.test.value!r}\n"
                f"  incoming: {outcome}"
            )

    return _assert
