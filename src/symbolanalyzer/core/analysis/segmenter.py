from __future__ import annotations

"""
Symbol Path Segmenter.

Splits a canonical symbol name into the ordered path components used as
keys of the size hierarchy (module, namespace, type, function).
"""

from typing import List

from symbolanalyzer.domain.constants import LEADING_KEYWORDS, PATH_SEPARATOR

# Pointer types ('char* foo') are only a return type when they open the name
_POINTER_PREFIXES: List[str] = [kw + " " for kw in LEADING_KEYWORDS if kw.endswith("*")]
_WORD_PREFIXES: List[str] = [kw + " " for kw in LEADING_KEYWORDS if not kw.endswith("*")]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_leading_keywords(symbol: str) -> str:
    """
    Drop return-type and qualifier tokens that prefix demangled signatures.

    A pointer type is removed only when it is the first token of the name.
    Word keywords are then consumed one at a time, restarting from the
    top of the list after each removal, until none matches.
    """
    for prefix in _POINTER_PREFIXES:
        if symbol.startswith(prefix):
            symbol = symbol[len(prefix):]
            break

    stripped = True
    while stripped:
        stripped = False
        for prefix in _WORD_PREFIXES:
            if symbol.startswith(prefix):
                symbol = symbol[len(prefix):]
                stripped = True
                break
    return symbol


def segment_symbol(symbol: str) -> List[str]:
    """
    Convert a symbol name into hierarchy segments, coarsest first.

    Strategy, by priority:
    1. '[...]' synthetic symbols stay a single opaque segment.
    2. Dotted names (Zig, sections) split on '.'.
    3. Scoped names (C++, Rust) split on '::'.
    4. Anything else is a single segment.

    Args:
        symbol: Canonical qualified name.

    Returns:
        List[str]: Non-empty, trimmed segments (possibly empty).
    """
    text = strip_leading_keywords(symbol)

    if text.startswith("["):
        pieces = [text]
    elif "." in text:
        pieces = text.split(".")
    elif PATH_SEPARATOR in text:
        pieces = text.split(PATH_SEPARATOR)
    else:
        pieces = [text]

    return [p.strip() for p in pieces if p.strip()]
