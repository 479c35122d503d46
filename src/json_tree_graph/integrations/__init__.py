"""Integrations with third-party tooling.

- ``_pytest_plugin``: pytest fixture ``assert_json_path``, registered through
  the ``pytest11`` entry point.
"""
