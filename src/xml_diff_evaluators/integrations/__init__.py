"""Integrations subpackage for xml-diff-evaluators.

Contains the pytest plugin, auto-discovered via the pytest11 entry point
declared in pyproject.toml.  Nothing is re-exported here so that importing
the package never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
