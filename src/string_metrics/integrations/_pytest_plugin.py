"""pytest plugin for string-metrics.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically, with no conftest.py changes.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from string_metrics.api import compare
from string_metrics.protocols import Metric


@pytest.fixture(scope="session")
def assert_similar() -> Any:
    """Fixture that returns a callable string similarity asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_typo(assert_similar):
            assert_similar("receive", "recieve")

        def test_unrelated(assert_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_similar("apple", "orange")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, metric=None) -> None``
        that raises ``AssertionError`` when the similarity is below threshold.
    """

    def _assert(
        actual: Any,
        expected: Any,
        threshold: float = 0.85,
        metric: Metric[Any] | None = None,
    ) -> None:
        """Assert that two values are similar.

        Args:
            actual:    The value produced by the code under test.
            expected:  The reference value.
            threshold: Minimum similarity.  Defaults to 0.85.
            metric:    Metric to use.  Defaults to Damerau-Levenshtein.

        Raises:
            AssertionError: When the similarity is below threshold, with a
                message including the score, threshold, values and metric.
        """
        score = compare(actual, expected, metric=metric)
        if score < threshold:
            raise AssertionError(
                f"values not similar: "
                f"similarity={score:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  metric:   {metric if metric is not None else 'DamerauLevenshtein()'}"
            )

    return _assert
