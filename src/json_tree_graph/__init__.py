"""JSON tree graph - positioned tree layouts and path search for JSON documents."""

from __future__ import annotations

from json_tree_graph.api import (
    build_tree,
    find_node,
    highlight_node,
    parse_json_input,
)
from json_tree_graph.errors import JsonInputError
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.paths.matcher import MatchTier, PathMatcher
from json_tree_graph.paths.normalizer import normalize_path
from json_tree_graph.samples import SAMPLE_JSON
from json_tree_graph.tree.builder import TreeBuilder
from json_tree_graph.tree.nodes import NodeKind, TreeEdge, TreeGraph, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "SAMPLE_JSON",
    "JsonInputError",
    "LayoutConfig",
    "MatchTier",
    "NodeKind",
    "PathMatcher",
    "TreeBuilder",
    "TreeEdge",
    "TreeGraph",
    "TreeNode",
    "build_tree",
    "find_node",
    "highlight_node",
    "normalize_path",
    "parse_json_input",
]
