from __future__ import annotations

"""
Unit tests for the Instantiation Collapser.

Verifies suffix stripping for the three compiler shapes and the merge
arithmetic of sizes and instantiation counters.
"""

import pytest

from symbolanalyzer.core.pipeline.collapser import canonical_name, collapse_instantiations
from symbolanalyzer.domain.tree_models import SymbolRecord


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foo__anon_1", "foo"),
        ("bar__struct_3", "bar"),
        ("baz__anon_1__struct_2", "baz"),
        ("q__anon_1__anon_2", "q"),
        ("mod.fn__struct_9__anon_4", "mod.fn"),
        ("plain::name", "plain::name"),
        ("__anon_5", ""),
        ("keep__anon_x", "keep__anon_x"),
    ],
)
def test_canonical_name_strips_suffixes(raw, expected):
    assert canonical_name(raw) == expected


def test_two_anonymous_variants_collapse_into_one_record():
    """Each merged row adds its own counter plus one."""
    records = [
        SymbolRecord("foo__anon_2", 20, 0),
        SymbolRecord("foo__anon_1", 10, 0),
    ]

    result = collapse_instantiations(records)

    assert result == [SymbolRecord("foo", 30, 2)]


def test_counters_accumulate_across_many_variants():
    records = [
        SymbolRecord("a__anon_1", 5, 1),
        SymbolRecord("a__anon_2", 5, 0),
        SymbolRecord("a__anon_3", 5, 2),
    ]

    result = collapse_instantiations(records)

    assert result == [SymbolRecord("a", 15, 6)]


def test_singleton_keeps_its_own_counter():
    result = collapse_instantiations([SymbolRecord("solo__struct_1", 7, 3)])

    assert result == [SymbolRecord("solo", 7, 3)]


def test_empty_canonical_names_are_dropped():
    records = [SymbolRecord("__anon_1", 50, 0), SymbolRecord("kept", 1, 0)]

    result = collapse_instantiations(records)

    assert [r.qualified_name for r in result] == ["kept"]


def test_first_seen_order_is_preserved():
    records = [
        SymbolRecord("big", 100, 0),
        SymbolRecord("mid__anon_1", 50, 0),
        SymbolRecord("low", 10, 0),
        SymbolRecord("mid__anon_2", 5, 0),
    ]

    result = collapse_instantiations(records)

    assert [r.qualified_name for r in result] == ["big", "mid", "low"]
    assert result[1].size_bytes == 55
