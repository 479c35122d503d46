"""layout subpackage: tidy-tree placement of the node arena.

Example::

    from json_tree_graph.layout import LayoutConfig, TidyLayout

    layout = TidyLayout(LayoutConfig(node_width=120.0))
    xs, ys = layout.compute([[1, 2], [], []])
"""

from __future__ import annotations

from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.layout.tidy import TidyLayout

__all__ = ["LayoutConfig", "TidyLayout"]
