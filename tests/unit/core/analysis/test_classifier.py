from __future__ import annotations

"""
Unit tests for the Symbol Origin Classifier.

Verifies every rung of the classification ladder, its precedence, and
that unexpected inputs fall back to 'Other' without raising.
"""

import pytest

from symbolanalyzer.core.analysis.classifier import CLASSIFICATION_LADDER, classify
from symbolanalyzer.domain.tree_models import Category


@pytest.mark.parametrize(
    "name",
    [
        "[anon_symbol]",
        "[section .text]",
        "std::__1::basic_string",
        "__libc_start_main",
        "_ZN3foo3barEv",
        "_GLOBAL_OFFSET_TABLE_",
        "symbols.dynsym",
        "Array_Prototype__get",
    ],
)
def test_sysv_symbols(name):
    assert classify(name) is Category.SYSV


@pytest.mark.parametrize(
    "name",
    [
        "core::fmt::write::h0123456789abcdef",
        "serde_rs::de::Visitor",
        "rust_begin_unwind",
        "alloc::vec::Vec$LT$u8$GT$::push",
        "impl$u20$Display",
        "lol_html::rewriter::Rewriter",
    ],
)
def test_rust_symbols(name):
    assert classify(name) is Category.RUST


@pytest.mark.parametrize(
    "name",
    [
        "Namespace::Class::method",
        "std::vector<int>::push_back",
        "Widget<float>",
        "anonymous namespace",
        "Size_t",
    ],
)
def test_cpp_symbols(name):
    assert classify(name) is Category.CPP


@pytest.mark.parametrize("name", ["foo.bar", "std.fmt.format", "main.main"])
def test_zig_symbols(name):
    assert classify(name) is Category.ZIG


@pytest.mark.parametrize("name", [None, "", 42, 3.5, object(), b"std::vector", "main", "memcpy"])
def test_other_and_invalid_inputs(name):
    assert classify(name) is Category.OTHER


def test_classify_without_argument_is_other():
    assert classify() is Category.OTHER


def test_ladder_precedence_is_explicit():
    assert [category for _, category in CLASSIFICATION_LADDER] == [
        Category.SYSV, Category.RUST, Category.CPP, Category.ZIG,
    ]


def test_earlier_rungs_win():
    # Rust hash beats the C++ scope operator
    assert classify("a::b::h0123456789abcdef") is Category.RUST
    # Reserved identifiers beat the Zig dot rule
    assert classify("std.__anon.data") is Category.SYSV
