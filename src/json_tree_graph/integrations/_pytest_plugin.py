"""pytest plugin for json-tree-graph.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_graph import build_tree, find_node


def check_json_path(
    document: Any, query: str, expected_path: str | None = None
) -> None:
    """Assert that ``query`` locates a node in ``document``'s tree.

    Args:
        document:      Parsed JSON value to build a tree from.
        query:         Path query as a user would type it.
        expected_path: When given, the matched node's path must equal it.

    Raises:
        AssertionError: When nothing matches, or the match is a different
            node than ``expected_path``.  The message lists the tree's paths.
    """
    graph = build_tree(document)
    found = find_node(graph.nodes, query)
    paths = [node.json_path for node in graph.nodes]
    if found is None:
        raise AssertionError(
            f"No node matches path query {query!r}\n  available paths: {paths}"
        )
    if expected_path is not None and found.json_path != expected_path:
        raise AssertionError(
            f"Path query {query!r} matched {found.json_path!r}, "
            f"expected {expected_path!r}\n  available paths: {paths}"
        )


@pytest.fixture(scope="session")
def assert_json_path() -> Any:
    """Fixture that returns ``check_json_path``.

    Session-scoped because the callable is stateless.

    Usage in tests::

        def test_city(assert_json_path):
            assert_json_path({"user": {"city": "NYC"}}, "user.city", "$.user.city")
    """
    return check_json_path
