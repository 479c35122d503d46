"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents.  No random values.
Three tiers: wide (one flat array), deep (long single chain) and bushy
(balanced nesting).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_wide(num_items: int) -> dict[str, Any]:
    """One array of small records: 2 + 4 * num_items nodes."""
    return {
        "items": [
            {"id": i, "name": f"Item {i}", "active": i % 2 == 0}
            for i in range(num_items)
        ]
    }


def generate_deep(depth: int) -> dict[str, Any]:
    """A single chain of nested objects ``depth`` levels deep."""
    doc: dict[str, Any] = {"leaf": True}
    for level in range(depth):
        doc = {f"level_{level}": doc}
    return doc


def generate_bushy(fanout: int, depth: int) -> Any:
    """A balanced tree with ``fanout`` children per object."""
    if depth == 0:
        return "leaf"
    return {f"k{i}": generate_bushy(fanout, depth - 1) for i in range(fanout)}


@pytest.fixture(scope="session")
def wide_doc() -> dict[str, Any]:
    return generate_wide(5000)


@pytest.fixture(scope="session")
def deep_doc() -> dict[str, Any]:
    return generate_deep(3000)


@pytest.fixture(scope="session")
def bushy_doc() -> Any:
    # 1 + 6 + 36 + 216 + 1296 + 7776 nodes
    return generate_bushy(6, 5)
