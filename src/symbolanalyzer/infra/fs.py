from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application data directory and normalizes user
supplied paths so that every interface sees the same locations on Windows
and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SymbolAnalyzer"
UNIX_APP_DIR_NAME = ".symbolanalyzer"
DATA_DIR_ENV = "SYMBOLANALYZER_HOME"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the directory holding configuration, logs and recent files.

    Resolution order:
    - $SYMBOLANALYZER_HOME when set
    - Windows: %LOCALAPPDATA%/SymbolAnalyzer
    - Linux/Mac: ~/.symbolanalyzer

    The directory is created on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = os.environ.get(DATA_DIR_ENV, "").strip()

    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Expand '~' and environment variables and make a path absolute.

    Args:
        path: Raw input path string.
        fallback: Value used when the input is empty.

    Returns:
        str: Normalized absolute path, or '' if both inputs are empty.
    """
    p = (path or "").strip() or fallback
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))
