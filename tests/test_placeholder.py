"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import xml_diff_evaluators

    assert xml_diff_evaluators.__version__ is not None
    assert xml_diff_evaluators.__version__ == "0.1.0"
