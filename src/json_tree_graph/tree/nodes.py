"""TreeNode, TreeEdge and TreeGraph dataclasses for the positioned JSON tree.

Provides the output types produced by TreeBuilder and consumed by renderers
and by the path matcher.  A TreeGraph is created fresh on every build; nothing
here is shared between builds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_tree_graph.layout.config import LayoutConfig


class NodeKind(StrEnum):
    """Classification of the JSON value behind a node.

    - OBJECT    -> "object"    : JSON object {} (empty or not)
    - ARRAY     -> "array"     : JSON array [] (empty or not)
    - PRIMITIVE -> "primitive" : string, number, bool, null or undefined
    """

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()


class _Undefined:
    """Marker for a missing value, rendered as ``undefined``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass(slots=True)
class Position:
    """2D coordinates assigned by the layout pass."""

    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class TreeNode:
    """A node in the positioned JSON tree.

    Attributes:
        id:          Synthetic id ``node-<n>``, assigned in pre-order.
        kind:        Classification of ``value`` (see NodeKind).
        label:       ``"<key> {n}"``, ``"<key> [n]"`` or ``"<key>: <value>"``.
        json_path:   Path from the document root, e.g. ``"$.items[0].id"``.
        value:       The raw JSON value at this node.  Never copied.
        highlighted: Search highlight flag.  Only callers change it.
        position:    Layout coordinates; ``(0, 0)`` until layout runs.
    """

    id: str
    kind: NodeKind
    label: str
    json_path: str
    value: Any = None
    highlighted: bool = False
    position: Position = field(default_factory=Position)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": str(self.kind),
            "data": {
                "label": self.label,
                "value": self.value,
                "path": self.json_path,
                "isHighlighted": self.highlighted,
            },
            "position": {"x": self.position.x, "y": self.position.y},
        }


@dataclass(frozen=True, slots=True)
class TreeEdge:
    """A directed parent -> child connector."""

    id: str
    source_id: str
    target_id: str
    type: str = "smoothstep"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source_id,
            "target": self.target_id,
            "type": self.type,
        }


@dataclass(slots=True)
class TreeGraph:
    """Result of one TreeBuilder.build() call.

    Attributes:
        nodes:  All nodes in pre-order; ``nodes[0]`` is the root (path ``"$"``).
        edges:  One edge per parent/child pair, in the order children were met.
        config: The LayoutConfig the positions were computed with.
    """

    nodes: list[TreeNode]
    edges: list[TreeEdge]
    config: LayoutConfig
    _index: dict[str, int] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._index = {node.id: i for i, node in enumerate(self.nodes)}

    @property
    def root(self) -> TreeNode:
        return self.nodes[0]

    def node_by_id(self, node_id: str) -> TreeNode:
        """Return the node with ``node_id``.

        Raises:
            KeyError: If no node in this graph has that id.
        """
        return self.nodes[self._index[node_id]]

    def children_of(self, node_id: str) -> list[TreeNode]:
        """Return the direct children of ``node_id`` in edge order."""
        return [
            self.node_by_id(edge.target_id)
            for edge in self.edges
            if edge.source_id == node_id
        ]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Renderer-facing form: ``{"nodes": [...], "edges": [...]}``."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
