"""TidyLayout: subtree-width tree layout over an index arena.

The tree is given as a children table: ``children[i]`` lists the arena
indices of node ``i``'s children, left to right.  Node 0 is the root and
every child index is greater than its parent's index (pre-order numbering),
which lets both passes run as flat loops instead of recursion.

Placement rules::

    width(leaf)   = W
    width(parent) = max(W, sum(width(child)) + (k - 1) * H)

    first child x = x - width(parent) / 2 + width(first) / 2
    next child x  = previous child x + width(previous) + H
    child y       = y + V
    parent x      = (x(first child) + x(last child)) / 2

The parent is centred on the midpoint of its first and last child, not on
the mean of all children.  Leaves keep the x handed down by their parent.
A child sitting at exactly x == 0 is used as is; there is no fallback to the
parent's handed-down x for falsy coordinates.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from json_tree_graph.layout.config import LayoutConfig


class TidyLayout:
    """Compute node coordinates for a pre-order children table.

    Example::

        layout = TidyLayout()
        xs, ys = layout.compute([[1, 2, 3], [], [], []])
        # xs -> [0.0, -300.0, 0.0, 300.0]; ys -> [0.0, 100.0, 100.0, 100.0]
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config: LayoutConfig = config if config is not None else LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def subtree_widths(self, children: Sequence[Sequence[int]]) -> np.ndarray:
        """Return the subtree width of every node, shape ``(N,)``.

        Children always carry larger indices than their parent, so a single
        pass from the last index down sees every child before its parent.
        """
        node_width = self._config.node_width
        spacing = self._config.horizontal_spacing
        widths = np.full(len(children), node_width, dtype=float)
        for i in range(len(children) - 1, -1, -1):
            kids = children[i]
            if not kids:
                continue
            total = float(widths[list(kids)].sum()) + (len(kids) - 1) * spacing
            widths[i] = max(node_width, total)
        return widths

    def compute(
        self, children: Sequence[Sequence[int]]
    ) -> tuple[np.ndarray, np.ndarray]:
        """Assign coordinates to every node, with the root at ``(0, 0)``.

        Args:
            children: Pre-order children table (see module docstring).

        Returns:
            Tuple ``(xs, ys)`` of float arrays of shape ``(N,)``.
        """
        n = len(children)
        if n == 0:
            return np.zeros(0, dtype=float), np.zeros(0, dtype=float)

        spacing = self._config.horizontal_spacing
        level_gap = self._config.vertical_spacing
        widths = self.subtree_widths(children)

        # Top-down: the x each node is handed by its parent.
        xs = np.zeros(n, dtype=float)
        ys = np.zeros(n, dtype=float)
        for i in range(n):
            kids = children[i]
            if not kids:
                continue
            cursor = xs[i] - widths[i] / 2.0 + widths[kids[0]] / 2.0
            for kid in kids:
                xs[kid] = cursor
                ys[kid] = ys[i] + level_gap
                cursor += widths[kid] + spacing

        # Bottom-up: parents move over the midpoint of first and last child.
        for i in range(n - 1, -1, -1):
            kids = children[i]
            if kids:
                xs[i] = (xs[kids[0]] + xs[kids[-1]]) / 2.0

        return xs, ys
