from __future__ import annotations

"""
Unit tests for the domain data models (categories, tree nodes, results).
"""

import dataclasses
import json

import pytest

from symbolanalyzer.domain.pipeline_models import (
    HierarchyBuild,
    create_error_result,
    create_success_result,
)
from symbolanalyzer.domain.tree_models import (
    Category,
    TreeNode,
    freeze_children,
    node_to_dict,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("cpp", Category.CPP),
        ("C++", Category.CPP),
        (" rust ", Category.RUST),
        ("SYS-V", Category.SYSV),
        ("sysv", Category.SYSV),
        ("other", Category.OTHER),
    ],
)
def test_category_parse(text, expected):
    assert Category.parse(text) is expected


def test_category_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        Category.parse("go")


def _small_tree() -> TreeNode:
    leaf_a = TreeNode("a", own_size=3, aggregated_size=3, full_path_key="root::a")
    leaf_b = TreeNode("b", own_size=2, aggregated_size=2, full_path_key="root::b")
    mid = TreeNode("root", aggregated_size=5, children=freeze_children({"a": leaf_a, "b": leaf_b}))
    return TreeNode("", aggregated_size=5, children=freeze_children({"root": mid}))


def test_tree_nodes_are_immutable():
    root = _small_tree()

    with pytest.raises(dataclasses.FrozenInstanceError):
        root.aggregated_size = 0  # type: ignore[misc]
    with pytest.raises(TypeError):
        root.children["x"] = TreeNode("x")  # type: ignore[index]


def test_leaf_defaults_to_empty_read_only_children():
    leaf = TreeNode("leaf")

    assert leaf.is_leaf
    assert dict(leaf.children) == {}
    with pytest.raises(TypeError):
        leaf.children["x"] = TreeNode("x")  # type: ignore[index]


def test_frozen_children_are_detached_from_source():
    source = {"a": TreeNode("a")}
    frozen = freeze_children(source)

    source["b"] = TreeNode("b")

    assert list(frozen) == ["a"]


def test_iteration_orders():
    root = _small_tree()

    assert [n.segment_name for n in root.iter_nodes()] == ["", "root", "a", "b"]
    assert [n.segment_name for n in root.iter_leaves()] == ["a", "b"]
    assert root.children["root"].is_leaf is False
    assert root.size == 5


def test_node_to_dict_is_json_serializable():
    payload = node_to_dict(_small_tree())

    assert payload["children"][0]["name"] == "root"
    assert payload["children"][0]["children"][1]["full_path"] == "root::b"
    json.dumps(payload)


def test_error_result_factory():
    result = create_error_result("boom", "/tmp/x.csv", {"stage": "decode"})

    assert result.ok is False
    assert result.error == "boom"
    assert result.tree is None
    assert result.summary == {"stage": "decode"}
    assert result.to_dict()["tree"] is None


def test_success_result_factory_merges_counters():
    build = HierarchyBuild(tree=_small_tree(), max_size=3, rows_in=4, rows_kept=2, records=2)

    result = create_success_result("/tmp/x.csv", build, stats={"total_size": 5}, summary_extra={"rows_in": 9})

    assert result.ok is True
    assert result.max_size == 3
    assert result.record_count == 2
    assert result.summary["total_size"] == 5
    assert result.summary["rows_in"] == 9
    assert result.to_dict()["tree"]["size"] == 5
