from __future__ import annotations

"""
Configuration Validation Service.

Normalizes session configuration coming from disk or from the command
line into strictly typed values, injecting defaults for anything missing
and reporting every correction as a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from symbolanalyzer.domain.config import get_default_config
from symbolanalyzer.domain.tree_models import Category

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "search_term"]
_BOOL_FIELDS = ["show_stats", "remember_recent"]
_INT_FIELDS = ["min_size", "max_depth"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a session configuration.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: Raise on invalid values instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, when a field has the wrong type.
        ValueError: In strict mode, when a value is out of range or unknown.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for name in _STRING_FIELDS:
        merged[name] = _as_str(merged.get(name), defaults[name], name, warnings, strict)

    for name in _BOOL_FIELDS:
        merged[name] = _as_bool(merged.get(name), defaults[name], name, warnings, strict)

    for name in _INT_FIELDS:
        merged[name] = _as_non_negative_int(merged.get(name), defaults[name], name, warnings, strict)

    merged["categories"] = _as_categories(merged.get("categories"), warnings, strict)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false", "1", "0", "yes", "no"):
        return value.strip().lower() in ("true", "1", "yes")
    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback
    if isinstance(value, bool):
        _reject(f"Invalid field '{field}': expected int, received bool.", warnings, strict)
        return fallback
    try:
        number = int(value)
    except (TypeError, ValueError):
        _reject(f"Invalid field '{field}': expected int, received {value!r}.", warnings, strict)
        return fallback
    if number < 0:
        _reject(f"Invalid field '{field}': must be >= 0, received {number}.", warnings, strict, ValueError)
        return fallback
    return number


def _as_categories(value: Any, warnings: List[str], strict: bool) -> List[str]:
    """Normalize category identifiers to their display labels."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [v for v in value.split(",") if v.strip()]
    if not isinstance(value, (list, tuple, set)):
        _reject(f"Invalid field 'categories': expected list, received {type(value).__name__}.", warnings, strict)
        return []

    labels: List[str] = []
    for item in value:
        try:
            label = Category.parse(str(item)).value
        except ValueError as e:
            if strict:
                raise
            warnings.append(f"{e}. Ignored.")
            continue
        if label not in labels:
            labels.append(label)
    return labels
