"""LayoutConfig: immutable geometry parameters for the tidy-tree layout.

The defaults reproduce the reference viewer: 200x60 nodes, 100 units of
horizontal spacing between sibling subtrees and 100 units between levels.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable configuration for TidyLayout.

    Attributes:
        node_width: Notional width of one node; also the minimum subtree width.
        node_height: Height of one node.  Not used for placement, carried for
            renderers.
        horizontal_spacing: Gap between adjacent sibling subtrees.
        vertical_spacing: Distance between a parent's y and its children's y.
    """

    node_width: float = 200.0
    node_height: float = 60.0
    horizontal_spacing: float = 100.0
    vertical_spacing: float = 100.0

    def __post_init__(self) -> None:
        if self.node_width <= 0.0:
            msg = f"node_width must be > 0, got {self.node_width}"
            raise ValueError(msg)
        if self.node_height <= 0.0:
            msg = f"node_height must be > 0, got {self.node_height}"
            raise ValueError(msg)
        if self.horizontal_spacing < 0.0:
            msg = f"horizontal_spacing must be >= 0, got {self.horizontal_spacing}"
            raise ValueError(msg)
        if self.vertical_spacing < 0.0:
            msg = f"vertical_spacing must be >= 0, got {self.vertical_spacing}"
            raise ValueError(msg)
