"""TreeBuilder: converts any JSON value into a positioned TreeGraph.

Traversal is depth-first pre-order from the root (path ``"$"``, key
``"root"``).  Object properties are visited in insertion order and produce
``parent.key`` paths (``$.key`` directly under the root); array elements are
visited by ascending index and produce ``parent[i]`` paths.

The walk uses an explicit stack, so nesting depth is not limited by the
interpreter recursion limit.  While walking, the builder records a children
table keyed by arena index; TidyLayout turns that table into coordinates
without any id lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.layout.tidy import TidyLayout
from json_tree_graph.tree.labels import classify, make_label
from json_tree_graph.tree.nodes import (
    NodeKind,
    Position,
    TreeEdge,
    TreeGraph,
    TreeNode,
)

ROOT_PATH = "$"
ROOT_KEY = "root"


def child_path(parent_path: str, key: str | int) -> str:
    """Return the path of ``key`` under ``parent_path``.

    Integer keys are array indices and use bracket syntax.
    """
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    if parent_path == ROOT_PATH:
        return f"$.{key}"
    return f"{parent_path}.{key}"


@dataclass
class TreeBuilder:
    """Builds a fresh TreeGraph from a parsed JSON value.

    ``build`` is total: every JSON value, including ``None``, empty
    containers and scalars at the root, yields a graph with at least the root
    node.  Each call allocates its own id counter and output lists, so one
    builder can be shared between threads.

    Example::

        builder = TreeBuilder()
        graph = builder.build({"name": "John", "age": 30})
        [n.json_path for n in graph.nodes]   # ["$", "$.name", "$.age"]
        [n.label for n in graph.nodes]       # ["root {2}", 'name: "John"', "age: 30"]
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def build(self, value: Any) -> TreeGraph:
        """Convert a JSON value to a positioned TreeGraph.

        Args:
            value: Any parsed JSON value (dict, list, str, int, float, bool,
                None).  Mappings and tuples are accepted as objects/arrays.

        Returns:
            A TreeGraph whose first node is the root.
        """
        nodes: list[TreeNode] = []
        edges: list[TreeEdge] = []
        children: list[list[int]] = []

        # (value, key, path, parent arena index or -1)
        stack: list[tuple[Any, str | int, str, int]] = [
            (value, ROOT_KEY, ROOT_PATH, -1)
        ]
        while stack:
            current, key, path, parent = stack.pop()
            index = len(nodes)
            kind = classify(current)
            node = TreeNode(
                id=f"node-{index}",
                kind=kind,
                label=make_label(key, current, kind),
                json_path=path,
                value=current,
            )
            nodes.append(node)
            children.append([])

            if parent >= 0:
                parent_id = nodes[parent].id
                edges.append(
                    TreeEdge(
                        id=f"edge-{parent_id}-{node.id}",
                        source_id=parent_id,
                        target_id=node.id,
                    )
                )
                children[parent].append(index)

            # Pushed in reverse so the first child is popped first.
            items: list[tuple[str | int, Any]]
            if kind is NodeKind.OBJECT:
                items = [(str(k), v) for k, v in current.items()]
            elif kind is NodeKind.ARRAY:
                items = list(enumerate(current))
            else:
                continue
            for child_key, child_value in reversed(items):
                stack.append(
                    (child_value, child_key, child_path(path, child_key), index)
                )

        self._apply_layout(nodes, children)
        logger.debug(
            "Built JSON tree: {} nodes, {} edges", len(nodes), len(edges)
        )
        return TreeGraph(nodes=nodes, edges=edges, config=self.config)

    def _apply_layout(self, nodes: list[TreeNode], children: list[list[int]]) -> None:
        xs, ys = TidyLayout(self.config).compute(children)
        for node, x, y in zip(nodes, xs, ys, strict=True):
            node.position = Position(x=float(x), y=float(y))
