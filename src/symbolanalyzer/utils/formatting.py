from __future__ import annotations

"""
Human readable size formatting.
"""

_UNITS = ["B", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    """
    Render a byte count with a base-1024 unit (e.g. 1536 -> '1.5 KB').

    Args:
        size: Number of bytes.

    Returns:
        str: Value rounded to two decimals without trailing zeros.
    """
    if size <= 0:
        return "0 B"
    exponent = 0
    while exponent < len(_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size / (1024 ** exponent), 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[exponent]}"


def format_percentage(part: int, total: int) -> str:
    """Share of part in total with one decimal ('' when total is zero)."""
    if total <= 0:
        return ""
    return f"{(part / total) * 100:.1f}%"
