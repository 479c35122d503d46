"""Packaging correctness checks for json-tree-graph.

Inspects the installed distribution rather than building a wheel.
"""

from __future__ import annotations

from importlib.metadata import distribution, requires
from importlib.resources import files


class TestInstalledDistribution:
    def test_py_typed_marker(self) -> None:
        assert files("json_tree_graph").joinpath("py.typed").is_file()

    def test_metadata_version(self) -> None:
        assert distribution("json-tree-graph").version == "0.1.0"

    def test_runtime_requirements(self) -> None:
        reqs = [r.split(";")[0] for r in requires("json-tree-graph") or []]
        names = {r.split(">")[0].split("=")[0].strip().lower() for r in reqs}
        assert {"numpy", "cachetools", "loguru"} <= names
