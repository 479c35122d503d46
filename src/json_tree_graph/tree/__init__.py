"""Tree subpackage for JSON-to-graph conversion.

Re-exports the public API for the tree module:
- TreeNode / TreeEdge / TreeGraph: positioned output of a build
- NodeKind: StrEnum of the three node kinds (OBJECT, ARRAY, PRIMITIVE)
- TreeBuilder: converts any JSON value into a positioned TreeGraph
- UNDEFINED: sentinel for a missing value, labelled ``undefined``
"""

from json_tree_graph.tree.builder import TreeBuilder
from json_tree_graph.tree.nodes import (
    UNDEFINED,
    NodeKind,
    Position,
    TreeEdge,
    TreeGraph,
    TreeNode,
)

__all__ = [
    "UNDEFINED",
    "NodeKind",
    "Position",
    "TreeBuilder",
    "TreeEdge",
    "TreeGraph",
    "TreeNode",
]
