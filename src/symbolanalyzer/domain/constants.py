from __future__ import annotations

"""
Domain Constants.

Centralizes the column names of the profiler export, the suffix shapes
produced by compilers for anonymous instantiations, the keyword list used
during path segmentation and the application defaults.
"""

import re
from typing import List, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"
APP_NAME = "symbolanalyzer"

# -----------------------------------------------------------------------------
# PROFILER EXPORT SCHEMA
# -----------------------------------------------------------------------------

# bloaty -d symbols --demangle=full --domain=file -n 0 --csv
COLUMN_SYMBOL = "symbols"
COLUMN_SIZE = "vmsize"
COLUMN_INSTANTIATIONS = "instantiations"

# -----------------------------------------------------------------------------
# INSTANTIATION SUFFIXES
# -----------------------------------------------------------------------------

ANON_STRUCT_SUFFIX = re.compile(r"__anon_[0-9]+__struct_[0-9]+$")
STRUCT_SUFFIX = re.compile(r"__struct_[0-9]+$")
ANON_SUFFIX = re.compile(r"__anon_[0-9]+$")

# Row deduplication recognizes all three shapes
ROW_SUFFIX_PATTERNS: Tuple[re.Pattern, ...] = (
    ANON_STRUCT_SUFFIX,
    STRUCT_SUFFIX,
    ANON_SUFFIX,
)

# Tree annotation only recognizes the anonymous shapes
NODE_SUFFIX_PATTERNS: Tuple[re.Pattern, ...] = (
    ANON_STRUCT_SUFFIX,
    ANON_SUFFIX,
)

# -----------------------------------------------------------------------------
# SEGMENTATION
# -----------------------------------------------------------------------------

LEADING_KEYWORDS: List[str] = [
    "void", "auto", "int", "char", "long", "short", "unsigned",
    "float", "double", "bool", "void*", "char*",
    "const", "volatile", "restrict",
]

PATH_SEPARATOR = "::"

# -----------------------------------------------------------------------------
# UI DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_MIN_SIZE = 10 * 1024
