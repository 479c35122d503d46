"""PathMatcher: locate a node by a user-typed JSON path.

Three tiers are tried in strict priority order.  Each tier scans the whole
node list (in list order) before the next tier is considered:

1. EXACT:       normalized node path == normalized query
2. CONTAINMENT: node path ends with the query, or the query ends with the
                node path
3. SUBSTRING:   lower-cased node path contains the lower-cased query

Both sides are normalized first, so ``"user.name"`` is compared as
``"$.user.name"``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto

from loguru import logger

from json_tree_graph.paths.normalizer import PathNormalizer
from json_tree_graph.tree.nodes import TreeNode


class MatchTier(StrEnum):
    """Which rule produced a match, from strongest to weakest."""

    EXACT = auto()
    CONTAINMENT = auto()
    SUBSTRING = auto()


@dataclass(frozen=True, slots=True)
class PathMatch:
    """A matched node and the tier that matched it."""

    node: TreeNode
    tier: MatchTier


class PathMatcher:
    """Find the best node for a query string.

    Keep one matcher per tree that is searched repeatedly: normalized node
    paths are cached on its PathNormalizer, so later searches only normalize
    the query.

    Example::

        matcher = PathMatcher()
        match = matcher.match(graph.nodes, "USER.NAME")
        match.node.json_path   # "$.user.name"
        match.tier             # MatchTier.SUBSTRING
    """

    def __init__(self, normalizer: PathNormalizer | None = None) -> None:
        self._normalizer = normalizer if normalizer is not None else PathNormalizer()

    def match(self, nodes: Sequence[TreeNode], query: str) -> PathMatch | None:
        """Return the first node matched by the highest tier, or None."""
        # Node paths plus the query must fit, or a large tree evicts itself.
        self._normalizer.reserve(len(nodes) + 1)
        target = self._normalizer.normalize(query)
        paths = [self._normalizer.normalize(node.json_path) for node in nodes]

        for node, path in zip(nodes, paths, strict=True):
            if path == target:
                return self._found(query, node, MatchTier.EXACT)

        for node, path in zip(nodes, paths, strict=True):
            if path.endswith(target) or target.endswith(path):
                return self._found(query, node, MatchTier.CONTAINMENT)

        target_lower = target.lower()
        for node, path in zip(nodes, paths, strict=True):
            if target_lower in path.lower():
                return self._found(query, node, MatchTier.SUBSTRING)

        logger.debug("No node matches path query {!r}", query)
        return None

    def find(self, nodes: Sequence[TreeNode], query: str) -> TreeNode | None:
        match = self.match(nodes, query)
        return match.node if match is not None else None

    @staticmethod
    def _found(query: str, node: TreeNode, tier: MatchTier) -> PathMatch:
        logger.debug("Path query {!r} matched {} ({})", query, node.json_path, tier)
        return PathMatch(node=node, tier=tier)


def find_node_by_path(nodes: Sequence[TreeNode], query: str) -> TreeNode | None:
    """Stateless form of ``PathMatcher().find``."""
    return PathMatcher().find(nodes, query)
