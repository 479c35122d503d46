"""Public API functions for json-tree-graph.

This module provides the user-facing functions: parse_json_input,
build_tree, find_node and highlight_node.  Each call creates a fresh
TreeBuilder, and a fresh PathMatcher unless the caller passes one to reuse
across searches of the same tree.  Nothing is shared between calls otherwise.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_tree_graph.errors import JsonInputError
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.paths.matcher import PathMatcher
from json_tree_graph.tree.builder import TreeBuilder
from json_tree_graph.tree.nodes import TreeGraph, TreeNode

__all__ = ["build_tree", "find_node", "highlight_node", "parse_json_input"]


def parse_json_input(text: str) -> Any:
    """Parse user-supplied text into a JSON value.

    Args:
        text: Raw text from an input field.

    Returns:
        The parsed JSON value.

    Raises:
        JsonInputError: If ``text`` is blank ("JSON input cannot be empty")
            or malformed (the parser's own message, with the
            ``json.JSONDecodeError`` chained as the cause).
    """
    if not text.strip():
        raise JsonInputError("JSON input cannot be empty")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonInputError(str(exc)) from exc


def build_tree(value: Any, config: LayoutConfig | None = None) -> TreeGraph:
    """Build a positioned tree graph from a parsed JSON value.

    Args:
        value:  Any JSON value (dict, list, str, int, float, bool, None).
        config: Layout geometry.  Defaults to ``LayoutConfig()`` when None.

    Returns:
        A new TreeGraph; nothing from earlier builds is reused.
    """
    builder = TreeBuilder(config=config if config is not None else LayoutConfig())
    return builder.build(value)


def find_node(
    nodes: Sequence[TreeNode],
    query: str,
    matcher: PathMatcher | None = None,
) -> TreeNode | None:
    """Return the node best matching ``query``, or None.

    See ``PathMatcher`` for the exact / containment / substring tiers.  Pass
    the same ``matcher`` for repeated searches of one tree so node paths are
    normalized only once.
    """
    matcher = matcher if matcher is not None else PathMatcher()
    return matcher.find(nodes, query)


def highlight_node(
    nodes: Sequence[TreeNode],
    query: str,
    matcher: PathMatcher | None = None,
) -> TreeNode | None:
    """Run a search and move the highlight to the matched node.

    Every node's ``highlighted`` flag is cleared first.  A blank query stops
    there and returns None.  Otherwise the matched node, if any, is flagged
    and returned.

    Args:
        nodes: The current node list, e.g. ``graph.nodes``.  Mutated in place.
        query: Raw text from a search field.
        matcher: Matcher to reuse across searches of the same tree.  A fresh
            one is created when None.

    Returns:
        The highlighted node, or None when the query is blank or unmatched.
    """
    for node in nodes:
        node.highlighted = False
    if not query.strip():
        return None
    matcher = matcher if matcher is not None else PathMatcher()
    found = matcher.find(nodes, query)
    if found is not None:
        found.highlighted = True
    return found
