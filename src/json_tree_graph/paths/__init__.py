"""paths subpackage: JSON-path normalization and node search."""

from __future__ import annotations

from json_tree_graph.paths.matcher import (
    MatchTier,
    PathMatch,
    PathMatcher,
    find_node_by_path,
)
from json_tree_graph.paths.normalizer import PathNormalizer, normalize_path

__all__ = [
    "MatchTier",
    "PathMatch",
    "PathMatcher",
    "PathNormalizer",
    "find_node_by_path",
    "normalize_path",
]
