"""Shared pytest configuration.

Loads the package's pytest plugin explicitly so the ``assert_outcome``
fixture is available when running from a source checkout that was not
installed.  The plugin is registered under its module name, which is also the
pytest11 entry-point name, so an installed copy is not registered twice.
"""

pytest_plugins = ["xml_diff_evaluators.integrations._pytest_plugin"]
