from __future__ import annotations

"""
Symbol Origin Classifier.

Best-effort heuristic mapping a symbol name to the toolchain that most
probably produced it. The checks form an ordered ladder: the first
category whose predicate matches wins, and names matching nothing fall
back to 'Other'. Classification is total and never raises.
"""

import re
from typing import Any, Callable, List, Tuple

from symbolanalyzer.domain.tree_models import Category

Predicate = Callable[[str], bool]

# -----------------------------------------------------------------------------
# PATTERN CONSTANTS
# -----------------------------------------------------------------------------

_SYSV_PATTERNS: List[re.Pattern] = [
    re.compile(r"^\[.*\]"),          # [section], [vtable], synthetic entries
    re.compile(r"__"),               # reserved identifiers
    re.compile(r"\.dynsym$"),
    re.compile(r"^_[A-Z_]"),
    re.compile(r"_Prototype__"),
]

_RUST_PATTERNS: List[re.Pattern] = [
    re.compile(r"h[0-9a-f]{16}"),    # legacy mangling hash
    re.compile(r"_rs::"),
    re.compile(r"^rust_"),
    re.compile(r"::_\$|::[a-z0-9]{2}_"),
    re.compile(r"\$u20\$"),
    re.compile(r"\$LT\$|\$GT\$"),
    re.compile(r"lol_html"),
]

_CPP_PATTERNS: List[re.Pattern] = [
    re.compile(r"::"),
    re.compile(r"<.*>"),
    re.compile(r"namespace"),
    re.compile(r"^[A-Z][^.]*_t$"),
]

_ZIG_PATTERNS: List[re.Pattern] = [
    re.compile(r"\."),
]

# -----------------------------------------------------------------------------
# CLASSIFICATION LADDER
# -----------------------------------------------------------------------------

def _any_of(patterns: List[re.Pattern]) -> Predicate:
    """Build a predicate matching when at least one pattern is found."""
    return lambda name: any(rx.search(name) for rx in patterns)


is_sysv_symbol: Predicate = _any_of(_SYSV_PATTERNS)
is_rust_symbol: Predicate = _any_of(_RUST_PATTERNS)
is_cpp_symbol: Predicate = _any_of(_CPP_PATTERNS)
is_zig_symbol: Predicate = _any_of(_ZIG_PATTERNS)

CLASSIFICATION_LADDER: Tuple[Tuple[Predicate, Category], ...] = (
    (is_sysv_symbol, Category.SYSV),
    (is_rust_symbol, Category.RUST),
    (is_cpp_symbol, Category.CPP),
    (is_zig_symbol, Category.ZIG),
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify(name: Any = None) -> Category:
    """
    Classify a symbol name by probable origin.

    Args:
        name: Qualified symbol name. Absent or non-string values are accepted.

    Returns:
        Category: First matching category of the ladder, or Category.OTHER.
    """
    if not name or not isinstance(name, str):
        return Category.OTHER

    for predicate, category in CLASSIFICATION_LADDER:
        if predicate(name):
            return category
    return Category.OTHER
