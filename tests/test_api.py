"""Tests for the public API functions in json_tree_graph.api."""

from __future__ import annotations

import json

import pytest

from json_tree_graph.api import (
    build_tree,
    find_node,
    highlight_node,
    parse_json_input,
)
from json_tree_graph.errors import JsonInputError
from json_tree_graph.layout.config import LayoutConfig
from json_tree_graph.paths.matcher import PathMatcher
from json_tree_graph.paths.normalizer import PathNormalizer
from json_tree_graph.tree.nodes import NodeKind


class TestParseJsonInput:
    def test_object(self) -> None:
        assert parse_json_input('{"a": [1, null]}') == {"a": [1, None]}

    def test_scalar(self) -> None:
        assert parse_json_input(" 42 ") == 42

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank(self, text: str) -> None:
        with pytest.raises(JsonInputError, match="JSON input cannot be empty"):
            parse_json_input(text)

    def test_malformed(self) -> None:
        with pytest.raises(JsonInputError) as info:
            parse_json_input('{"a": }')
        assert isinstance(info.value.__cause__, json.JSONDecodeError)
        assert str(info.value) == str(info.value.__cause__)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_json_input("[1,")


class TestBuildTree:
    def test_default_config(self) -> None:
        graph = build_tree({"name": "John", "age": 30})
        assert [n.json_path for n in graph.nodes] == ["$", "$.name", "$.age"]
        assert graph.config == LayoutConfig()

    def test_custom_config(self) -> None:
        config = LayoutConfig(vertical_spacing=50.0)
        graph = build_tree([1], config=config)
        assert graph.nodes[1].position.y == 50.0

    def test_null(self) -> None:
        graph = build_tree(None)
        assert len(graph.nodes) == 1
        assert graph.nodes[0].kind == NodeKind.PRIMITIVE


class TestFindNode:
    def test_found(self) -> None:
        graph = build_tree({"user": {"name": "John"}})
        found = find_node(graph.nodes, "user.name")
        assert found is not None
        assert found.label == 'name: "John"'

    def test_missing(self) -> None:
        graph = build_tree({"user": {"name": "John"}})
        assert find_node(graph.nodes, "$.nonexistent.path") is None


class TestHighlightNode:
    def test_highlights_only_match(self) -> None:
        graph = build_tree({"a": 1, "b": 2})
        found = highlight_node(graph.nodes, "b")
        assert found is graph.nodes[2]
        assert [n.highlighted for n in graph.nodes] == [False, False, True]

    def test_moves_highlight(self) -> None:
        graph = build_tree({"a": 1, "b": 2})
        highlight_node(graph.nodes, "a")
        highlight_node(graph.nodes, "b")
        assert [n.highlighted for n in graph.nodes] == [False, False, True]

    def test_blank_query_clears(self) -> None:
        graph = build_tree({"a": 1})
        highlight_node(graph.nodes, "a")
        assert highlight_node(graph.nodes, "   ") is None
        assert not any(n.highlighted for n in graph.nodes)

    def test_miss_clears(self) -> None:
        graph = build_tree({"a": 1})
        highlight_node(graph.nodes, "a")
        assert highlight_node(graph.nodes, "$.zzz") is None
        assert not any(n.highlighted for n in graph.nodes)


class TestSharedMatcher:
    def test_find_node_reuses_matcher(self) -> None:
        graph = build_tree({"items": list(range(1500))})
        normalizer = PathNormalizer()
        matcher = PathMatcher(normalizer=normalizer)
        find_node(graph.nodes, "items[0]", matcher=matcher)
        cached = normalizer.curr_size
        found = find_node(graph.nodes, "items[0]", matcher=matcher)
        assert found is not None
        assert found.value == 0
        assert normalizer.curr_size == cached == len(graph.nodes) + 1

    def test_highlight_node_uses_matcher(self) -> None:
        graph = build_tree({"a": 1, "b": 2})
        normalizer = PathNormalizer()
        found = highlight_node(
            graph.nodes, "b", matcher=PathMatcher(normalizer=normalizer)
        )
        assert found is graph.nodes[2]
        assert normalizer.curr_size == len(graph.nodes) + 1
